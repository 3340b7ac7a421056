"""Generic in-memory user store.

A small repository layer with a list-backed implementation and an
interactive menu that drives it:
- Generic repository contract over any entity with an ``id``
- In-memory implementation preserving insertion order
- Service layer converting between entities and DTOs
- Text menu for manual exploration

Usage:
    ./start_cli.py  # From repo root
"""

from .repositories import InMemoryRepository, Repository, UserRepository

__all__ = ['InMemoryRepository', 'Repository', 'UserRepository']
