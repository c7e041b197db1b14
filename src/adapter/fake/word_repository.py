"""In-memory implementation of WordRepository for testing."""

from dataclasses import replace

from domain.model.errors import PersistenceError
from domain.model.word import WordEntry


class FakeWordRepository:
    def __init__(self, entries: list[WordEntry] | None = None):
        self.entries: list[WordEntry] = list(entries or [])
        self.replace_calls = 0
        self.fail_reads = False
        self.fail_writes = False

    def load(self) -> list[WordEntry]:
        if self.fail_reads:
            raise PersistenceError("Failed to load word collection")
        return [replace(e, inflections=list(e.inflections)) for e in self.entries]

    def replace(self, entries: list[WordEntry]) -> bool:
        self.replace_calls += 1
        if self.fail_writes:
            return False
        self.entries = list(entries)
        return True

    def get_by_id(self, entry_id: str) -> WordEntry | None:
        return next((e for e in self.entries if e.id == entry_id), None)
