"""Repository error types."""


class RepositoryError(Exception):
    """Base class for repository failures."""


class EntityNotFoundError(RepositoryError, LookupError):
    """Raised when no entity matches the requested key."""

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"ID not found: {entity_id}")


class BatchSizeMismatchError(RepositoryError, ValueError):
    """Raised when a batch does not hold the number of entities it declared."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Batch declared {expected} items but received {actual}")
