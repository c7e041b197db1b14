"""Category state machine: admission, deletion and moves between learning states.

Rules, per identity key (headword lower-cased, translation trimmed):

- Known is exclusive with WantToLearn/Learning.
- Learning is a subset of WantToLearn: adding to Learning promotes an
  existing WantToLearn record, deleting from Learning demotes it back,
  deleting from WantToLearn also removes the Learning record.
- A key appears at most once per category.

Every function takes the current snapshot and returns the next one; the
input list and its entries are never mutated.
"""

import logging
import time
from dataclasses import dataclass, field, fields

from domain.model.errors import NotFoundError, ValidationError
from domain.model.word import (
    AdmissionOutcome,
    AdmissionTally,
    WordCategory,
    WordEntry,
    WordEntryDraft,
)

logger = logging.getLogger(__name__)

ACTIVE_CATEGORIES = (WordCategory.WANT_TO_LEARN, WordCategory.LEARNING)


def now_millis() -> int:
    return int(time.time() * 1000)


# ── Admission ─────────────────────────────────────────────────


@dataclass
class AdmissionResult:
    """Next snapshot plus what changed."""
    entries: list[WordEntry]
    tally: AdmissionTally
    added: list[WordEntry] = field(default_factory=list)
    promoted: list[WordEntry] = field(default_factory=list)


class AdmissionBatch:
    """Admits drafts one at a time into a target category.

    Each decision sees the snapshot plus everything admitted or promoted
    earlier in the same batch, so drafts must be fed in input order.
    """

    def __init__(
        self,
        entries: list[WordEntry],
        target: WordCategory,
        scenario_id: str | None = None,
        timestamp: int | None = None,
    ):
        self.target = WordCategory(target)
        self.scenario_id = scenario_id
        self.timestamp = now_millis() if timestamp is None else timestamp
        self.tally = AdmissionTally()
        self._entries = list(entries)
        self._promoted: dict[str, WordEntry] = {}
        self._added: list[WordEntry] = []

    # ── lookups over the cumulative state ──

    def _current(self) -> list[WordEntry]:
        return [self._promoted.get(e.id, e) for e in self._entries] + self._added

    def _find(self, key: tuple[str, str], *categories: WordCategory) -> WordEntry | None:
        for entry in self._current():
            if entry.category in categories and entry.key == key:
                return entry
        return None

    # ── decision procedure ──

    def classify(self, draft: WordEntryDraft) -> AdmissionOutcome:
        """Decide what admitting ``draft`` would do, without changing anything."""
        key = draft.key

        if self.target in ACTIVE_CATEGORIES:
            if self._find(key, WordCategory.KNOWN):
                return AdmissionOutcome.CONFLICT
        elif self._find(key, *ACTIVE_CATEGORIES):
            return AdmissionOutcome.CONFLICT

        if self.target is WordCategory.LEARNING and self._find(key, WordCategory.WANT_TO_LEARN):
            return AdmissionOutcome.PROMOTED

        if self.target is WordCategory.WANT_TO_LEARN and self._find(key, WordCategory.LEARNING):
            return AdmissionOutcome.DUPLICATE

        if self._find(key, self.target):
            return AdmissionOutcome.DUPLICATE

        return AdmissionOutcome.NEW

    def admit(self, draft: WordEntryDraft) -> AdmissionOutcome | None:
        """Apply the decision for one draft. Incomplete drafts are skipped (None)."""
        if not draft.is_complete:
            logger.debug("Skipping incomplete draft", extra={
                "headword": draft.headword, "translation": draft.translation,
            })
            return None

        outcome = self.classify(draft)

        if outcome is AdmissionOutcome.PROMOTED:
            existing = self._find(draft.key, WordCategory.WANT_TO_LEARN)
            self._promoted[existing.id] = existing.with_category(WordCategory.LEARNING)
        elif outcome is AdmissionOutcome.NEW:
            self._added.append(WordEntry.create(
                draft,
                category=self.target,
                added_at=self.timestamp + len(self._added),
                scenario_id=self.scenario_id,
            ))

        self.tally.record(outcome)
        return outcome

    def admit_all(self, drafts: list[WordEntryDraft]) -> None:
        for draft in drafts:
            self.admit(draft)

    def result(self) -> AdmissionResult:
        return AdmissionResult(
            entries=self._current(),
            tally=self.tally,
            added=list(self._added),
            promoted=list(self._promoted.values()),
        )


def admit_drafts(
    entries: list[WordEntry],
    drafts: list[WordEntryDraft],
    target: WordCategory,
    scenario_id: str | None = None,
    timestamp: int | None = None,
) -> AdmissionResult:
    """Admit a batch of drafts in order and return the next snapshot."""
    batch = AdmissionBatch(entries, target, scenario_id=scenario_id, timestamp=timestamp)
    batch.admit_all(drafts)
    return batch.result()


# ── Deletion ──────────────────────────────────────────────────


@dataclass
class DeletionResult:
    entries: list[WordEntry]
    removed: list[WordEntry] = field(default_factory=list)
    demoted: list[WordEntry] = field(default_factory=list)


def delete_entries(
    entries: list[WordEntry],
    ids: set[str] | list[str],
    from_category: WordCategory | None = None,
) -> DeletionResult:
    """Delete ``ids`` as seen from one category's list.

    - Learning: demote to WantToLearn, nothing is destroyed.
    - WantToLearn: delete, and cascade to Learning entries with the same key.
    - Known: plain delete.
    - None (unfiltered view): delete; removed WantToLearn records still cascade.
    """
    ids = set(ids)

    if from_category is WordCategory.LEARNING:
        demoted: list[WordEntry] = []
        next_entries: list[WordEntry] = []
        for entry in entries:
            if entry.id in ids and entry.category is WordCategory.LEARNING:
                entry = entry.with_category(WordCategory.WANT_TO_LEARN)
                demoted.append(entry)
            next_entries.append(entry)
        logger.info("Learning entries demoted", extra={"count": len(demoted)})
        return DeletionResult(entries=next_entries, demoted=demoted)

    selected = [e for e in entries if e.id in ids]
    cascade_keys = {
        e.key for e in selected
        if e.category is WordCategory.WANT_TO_LEARN
        and from_category in (WordCategory.WANT_TO_LEARN, None)
    }

    removed: list[WordEntry] = []
    kept: list[WordEntry] = []
    for entry in entries:
        cascades = entry.category is WordCategory.LEARNING and entry.key in cascade_keys
        if entry.id in ids or cascades:
            removed.append(entry)
        else:
            kept.append(entry)

    logger.info("Entries deleted", extra={
        "count": len(removed),
        "category": from_category.value if from_category else None,
    })
    return DeletionResult(entries=kept, removed=removed)


# ── Explicit moves and edits ──────────────────────────────────


def batch_move(
    entries: list[WordEntry],
    ids: set[str] | list[str],
    target: WordCategory,
) -> tuple[list[WordEntry], int]:
    """Unconditionally reassign the category of ``ids``.

    A user override: no exclusivity or duplicate checks run here.
    """
    ids = set(ids)
    target = WordCategory(target)
    moved = 0
    next_entries: list[WordEntry] = []
    for entry in entries:
        if entry.id in ids:
            entry = entry.with_category(target)
            moved += 1
        next_entries.append(entry)
    logger.info("Entries moved", extra={"count": moved, "category": target.value})
    return next_entries, moved


_READONLY_FIELDS = {"id", "category", "added_at"}
_EDITABLE_FIELDS = {f.name for f in fields(WordEntry)} - _READONLY_FIELDS
_NULLABLE_FIELDS = {"scenario_id", "source_url"}
_IDENTITY_FIELDS = {"headword", "translation"}


def _check_changes(changes: dict) -> None:
    invalid = set(changes) - _EDITABLE_FIELDS
    if invalid:
        raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(invalid))}")

    nulls = {k for k, v in changes.items() if v is None} - _NULLABLE_FIELDS
    if nulls:
        raise ValidationError(f"Fields cannot be null: {', '.join(sorted(nulls))}")

    blank = {k for k in _IDENTITY_FIELDS & set(changes) if not str(changes[k]).strip()}
    if blank:
        raise ValidationError(f"Fields cannot be blank: {', '.join(sorted(blank))}")


def edit_entry(
    entries: list[WordEntry],
    entry_id: str,
    changes: dict,
) -> list[WordEntry]:
    """Update descriptive fields of one entry. Category changes go through moves.

    Headword and translation form the identity key, so they must stay
    non-blank strings; only scenario_id and source_url may be cleared.
    """
    _check_changes(changes)

    found = False
    next_entries: list[WordEntry] = []
    for entry in entries:
        if entry.id == entry_id:
            entry = WordEntry(**{**entry.__dict__, **changes})
            found = True
        next_entries.append(entry)

    if not found:
        raise NotFoundError(f"Word entry {entry_id} not found")
    return next_entries
