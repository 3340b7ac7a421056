"""User repository - in-memory implementation."""

from typing import List, Optional

from userstore.models.domain import User
from userstore.repositories.memory_repository import InMemoryRepository


class UserRepository(InMemoryRepository[int, User]):
    """Repository for user data."""

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Get first user with the given id."""
        return self.find(lambda user: user.id == user_id)

    def find_by_name(self, name: str) -> List[User]:
        """Get all users with the given name, in insertion order."""
        return [user for user in self.find_all() if user.name == name]
