"""User service - business logic for user management."""

from typing import List, Optional

from userstore.models.domain import User
from userstore.models.dto import (
    UserDTO,
    UserCreateRequest,
    UserUpdateRequest,
    UserListResponse,
)
from userstore.repositories.base import Repository


class UserService:
    """
    Service for user management.

    Responsibilities:
    - Turn validated requests into User entities
    - Orchestrate repository operations
    - Convert entities to DTOs

    Repository errors (EntityNotFoundError, BatchSizeMismatchError)
    propagate to the caller.
    """

    def __init__(self, user_repo: Repository[int, User]):
        self.user_repo = user_repo

    def create_user(self, request: UserCreateRequest) -> UserDTO:
        """Save a new user."""
        user = self.user_repo.save(self._to_entity(request))
        return self._to_dto(user)

    def save_batch(self, requests: List[UserCreateRequest]) -> bool:
        """Save users as one declared-size batch."""
        users = [self._to_entity(r) for r in requests]
        return self.user_repo.save_batch(len(users), *users)

    def save_all(self, requests: List[UserCreateRequest]) -> bool:
        """Save users in order."""
        return self.user_repo.save_all(self._to_entity(r) for r in requests)

    def list_users(self) -> UserListResponse:
        """List all users in insertion order."""
        users = self.user_repo.find_all()

        return UserListResponse(
            users=[self._to_dto(u) for u in users],
            total=len(users),
        )

    def find_user(self, user_id: int) -> Optional[UserDTO]:
        """Get first user with the given id."""
        user = self.user_repo.find(lambda u: u.id == user_id)

        if not user:
            return None

        return self._to_dto(user)

    def update_user(self, user_id: int, request: UserUpdateRequest) -> UserDTO:
        """Replace a user; the replacement moves to the end of the listing."""
        updated = User(id=user_id, name=request.name, age=request.age)
        return self._to_dto(self.user_repo.update(user_id, updated))

    def delete_user(self, request: UserCreateRequest) -> bool:
        """Delete the first user equal to the request in every field."""
        return self.user_repo.delete(self._to_entity(request))

    def count(self) -> int:
        """Number of stored users."""
        return self.user_repo.count()

    def all_users(self) -> List[User]:
        """Raw entities, for helpers that only need ids."""
        return self.user_repo.find_all()

    @staticmethod
    def _to_entity(request: UserCreateRequest) -> User:
        """Convert request to domain entity."""
        return User(id=request.id, name=request.name, age=request.age)

    @staticmethod
    def _to_dto(user: User) -> UserDTO:
        """Convert domain entity to DTO."""
        return UserDTO.model_validate(user)
