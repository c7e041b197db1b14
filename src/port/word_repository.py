"""Port for word collection persistence."""

from typing import Protocol

from domain.model.word import WordEntry


class WordRepository(Protocol):
    """Protocol for the persisted word collection.

    The collection is treated as a single resource: callers load a snapshot,
    compute the next full state and replace it (last writer wins).
    """

    def load(self) -> list[WordEntry]:
        """Return every stored entry, in insertion order.

        Raises PersistenceError when the collection cannot be read.
        """
        ...

    def replace(self, entries: list[WordEntry]) -> bool:
        """Replace the stored collection. Returns False on failure."""
        ...
