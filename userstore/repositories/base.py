"""Base repository interface and generic collection helpers."""

from abc import ABC, abstractmethod
from typing import (
    Any, Callable, Generic, Iterable, List, MutableSequence, Optional,
    Sequence, TextIO, TypeVar,
)

from userstore.models.domain import Identifiable

ID = TypeVar('ID')
T = TypeVar('T', bound=Identifiable)
E = TypeVar('E')


class Repository(ABC, Generic[ID, T]):
    """
    Base repository interface.

    Abstracts data access for any entity exposing an ``id``.
    Entities are kept in insertion order and duplicate keys are tolerated;
    key lookups always resolve to the first match.
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Append entity and return it."""
        pass

    @abstractmethod
    def save_batch(self, expected_count: int, *entities: T) -> bool:
        """Append a declared-size batch. Returns True if the store changed."""
        pass

    @abstractmethod
    def save_all(self, entities: Iterable[T]) -> bool:
        """Append every entity in order. Returns True if the store changed."""
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """Snapshot of all entities in insertion order."""
        pass

    @abstractmethod
    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First entity matching predicate, or None."""
        pass

    @abstractmethod
    def update(self, id: ID, entity: T) -> T:
        """
        Replace the first entity keyed by id with entity.

        The replacement moves to the end of the store.

        Raises:
            EntityNotFoundError: If no entity has the given id
        """
        pass

    @abstractmethod
    def delete(self, entity: T) -> bool:
        """Delete first entity equal to entity. Returns True if deleted, False if not found."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored entities."""
        pass

    def __len__(self) -> int:
        return self.count()


def print_ids(items: Iterable[Identifiable], file: Optional[TextIO] = None) -> None:
    """Print the id of each item, one per line, between a header and footer."""
    print("--- Printing IDs ---", file=file)
    for item in items:
        print(item.id, file=file)
    print("--------------------", file=file)


def add_integers(target: MutableSequence[Any]) -> MutableSequence[Any]:
    """Append 1, 2 and 3 to target and return the same sequence.

    Works for any sequence whose elements may be ints (list of numbers,
    list of objects, ...).
    """
    target.append(1)
    target.append(2)
    target.append(3)
    return target


def copy(source: Sequence[E], destination: MutableSequence[E]) -> MutableSequence[E]:
    """Append every element of source to destination, in order.

    Args:
        source: Elements to copy (left untouched)
        destination: Sequence receiving the elements

    Returns:
        destination
    """
    for item in source:
        destination.append(item)
    return destination
