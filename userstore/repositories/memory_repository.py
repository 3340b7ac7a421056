"""In-memory repository - list-backed implementation."""

from typing import Callable, Iterable, List, Optional

from userstore.repositories.base import ID, Repository, T
from userstore.repositories.errors import BatchSizeMismatchError, EntityNotFoundError
from userstore.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryRepository(Repository[ID, T]):
    """
    Repository holding entities in a process-local list.

    Current implementation: In-memory (list)
    Rationale: Insertion order matters and duplicate keys are allowed
    Not safe for concurrent mutation; callers must serialize access.
    """

    def __init__(self, strict_batch_size: bool = True):
        self._items: List[T] = []
        self.strict_batch_size = strict_batch_size

    def save(self, entity: T) -> T:
        """Append entity to memory."""
        self._items.append(entity)
        return entity

    def save_batch(self, expected_count: int, *entities: T) -> bool:
        """Append a batch, checking its declared size when strict."""
        logger.info("Saving batch of %d items.", expected_count)
        if self.strict_batch_size and expected_count != len(entities):
            raise BatchSizeMismatchError(expected_count, len(entities))
        return self._extend(entities)

    def save_all(self, entities: Iterable[T]) -> bool:
        """Append all entities from any iterable."""
        return self._extend(entities)

    def find_all(self) -> List[T]:
        """List all entities."""
        return list(self._items)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity matching predicate."""
        return next((item for item in self._items if predicate(item)), None)

    def update(self, id: ID, entity: T) -> T:
        """Remove the entity keyed by id and append its replacement."""
        index = self._index_of_id(id)
        if index is None:
            raise EntityNotFoundError(id)

        del self._items[index]
        self._items.append(entity)
        logger.debug("Updated entity %r", id)
        return entity

    def delete(self, entity: T) -> bool:
        """Delete the first entity equal to the given one."""
        try:
            self._items.remove(entity)
        except ValueError:
            return False
        return True

    def count(self) -> int:
        return len(self._items)

    def _extend(self, entities: Iterable[T]) -> bool:
        before = len(self._items)
        self._items.extend(entities)
        return len(self._items) != before

    def _index_of_id(self, id: ID) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == id:
                return index
        return None
