"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

ID_co = TypeVar('ID_co', covariant=True)


@runtime_checkable
class Identifiable(Protocol[ID_co]):
    """Anything exposing a stable identifier can live in a repository."""

    @property
    def id(self) -> ID_co:
        ...


@dataclass
class User:
    """User domain entity."""
    id: int
    name: str
    age: int
