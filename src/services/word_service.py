"""Word service: business logic for the user's word book.

Runs the add/import pipeline (resolve → admit → persist) and applies the
deletion and move rules to the persisted collection.
"""

import asyncio
import logging
import os
from dataclasses import dataclass, field

from domain.model.errors import PersistenceError, ResolutionEmptyError
from domain.model.word import AdmissionTally, WordCategory, WordEntry, WordEntryDraft
from port.word_repository import WordRepository
from services.category_service import (
    AdmissionBatch,
    DeletionResult,
    batch_move,
    delete_entries,
    edit_entry,
)
from services.dictionary_service import DictionaryResolver

logger = logging.getLogger(__name__)

DEFAULT_SCENARIO_ID = os.getenv('DEFAULT_SCENARIO_ID', '1')


@dataclass(frozen=True)
class WordCandidate:
    """A word to add, with an optional translation hint."""
    text: str
    translation: str | None = None


@dataclass
class WordBatchReport:
    """Outcome of one add/import batch."""
    tally: AdmissionTally
    added: list[WordEntry] = field(default_factory=list)
    promoted: list[WordEntry] = field(default_factory=list)


def _save(repo: WordRepository, entries: list[WordEntry]) -> None:
    if not repo.replace(entries):
        raise PersistenceError("Failed to save word collection")


async def add_words(
    resolver: DictionaryResolver,
    repo: WordRepository,
    candidates: list[WordCandidate],
    target: WordCategory,
    scenario_id: str | None = None,
    timestamp: int | None = None,
) -> WordBatchReport:
    """Resolve candidates and admit them into ``target``.

    Lookups run concurrently; admission happens afterwards in input order
    against the cumulative batch state. Raises ConfigurationError before
    any lookup when no dictionary source is enabled.
    """
    resolver.ensure_configured()

    valid = [c for c in candidates if c.text and c.text.strip()]
    lookups = await asyncio.gather(
        *(resolver.lookup(c.text.strip(), c.translation) for c in valid),
        return_exceptions=True,
    )

    batch = AdmissionBatch(
        repo.load(),
        target,
        scenario_id=scenario_id or DEFAULT_SCENARIO_ID,
        timestamp=timestamp,
    )
    for candidate, drafts in zip(valid, lookups):
        if isinstance(drafts, Exception):
            logger.error("Word lookup failed", extra={
                "word": candidate.text, "error": str(drafts),
            })
            batch.tally.failed += 1
            continue
        if drafts is None:
            batch.tally.failed += 1
            continue
        batch.admit_all(drafts)

    result = batch.result()
    if result.tally.changed:
        _save(repo, result.entries)

    logger.info("Word batch finished", extra={
        "category": batch.target.value,
        "candidates": len(valid),
        "new": result.tally.new,
        "promoted": result.tally.promoted,
        "duplicate": result.tally.duplicate,
        "conflict": result.tally.conflict,
        "failed": result.tally.failed,
    })
    return WordBatchReport(tally=result.tally, added=result.added, promoted=result.promoted)


async def preview_word(
    resolver: DictionaryResolver,
    text: str,
    hint: str | None = None,
) -> list[WordEntryDraft]:
    """Look a word up without admitting it. Raises ResolutionEmptyError if no source knows it."""
    resolver.ensure_configured()
    drafts = await resolver.lookup(text.strip(), hint)
    if drafts is None:
        raise ResolutionEmptyError(text)
    return drafts


def remove_words(
    repo: WordRepository,
    ids: list[str],
    from_category: WordCategory | None = None,
) -> DeletionResult:
    """Delete (or demote, from Learning) the given entries and persist."""
    result = delete_entries(repo.load(), ids, from_category)
    if result.removed or result.demoted:
        _save(repo, result.entries)
    return result


def move_words(repo: WordRepository, ids: list[str], target: WordCategory) -> int:
    """Batch-move entries to ``target`` and persist. Returns the moved count."""
    entries, moved = batch_move(repo.load(), ids, target)
    if moved:
        _save(repo, entries)
    return moved


def update_word(repo: WordRepository, entry_id: str, changes: dict) -> WordEntry:
    """Edit descriptive fields of one entry and persist."""
    entries = edit_entry(repo.load(), entry_id, changes)
    _save(repo, entries)
    return next(e for e in entries if e.id == entry_id)
