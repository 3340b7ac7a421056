"""
Repository layer for data access.

Repositories hide how entities are stored behind a small CRUD contract.
"""

from userstore.repositories.base import Repository, add_integers, copy, print_ids
from userstore.repositories.errors import (
    BatchSizeMismatchError,
    EntityNotFoundError,
    RepositoryError,
)
from userstore.repositories.memory_repository import InMemoryRepository
from userstore.repositories.user_repository import UserRepository

__all__ = [
    'BatchSizeMismatchError',
    'EntityNotFoundError',
    'InMemoryRepository',
    'Repository',
    'RepositoryError',
    'UserRepository',
    'add_integers',
    'copy',
    'print_ids',
]
