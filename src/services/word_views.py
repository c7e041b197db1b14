"""Read-side views over the word collection: tab filtering and merge strategies."""

from enum import Enum

from domain.model.word import WordCategory, WordEntry


class MergeStrategy(str, Enum):
    """How entries are grouped for display."""
    BY_WORD = 'by_word'
    BY_WORD_AND_MEANING = 'by_word_and_meaning'


def filter_entries(
    entries: list[WordEntry],
    tab: WordCategory | None = None,
    scenario_id: str | None = None,
    query: str | None = None,
) -> list[WordEntry]:
    """Entries visible in a tab (None = all).

    The WantToLearn tab also lists Learning entries, which are a subset of it.
    Search matches headword case-insensitively and translation literally.
    """
    visible = []
    for entry in entries:
        if tab is WordCategory.WANT_TO_LEARN:
            if entry.category not in (WordCategory.WANT_TO_LEARN, WordCategory.LEARNING):
                continue
        elif tab is not None and entry.category is not tab:
            continue

        if scenario_id and entry.scenario_id != scenario_id:
            continue

        if query:
            lowered = query.lower()
            if lowered not in entry.headword.lower() and lowered not in entry.translation:
                continue

        visible.append(entry)
    return visible


def group_entries(
    entries: list[WordEntry],
    strategy: MergeStrategy = MergeStrategy.BY_WORD,
) -> list[list[WordEntry]]:
    """Group entries and order groups (and members) newest first."""
    groups: dict[str, list[WordEntry]] = {}
    for entry in entries:
        key = entry.headword.lower().strip()
        if strategy is MergeStrategy.BY_WORD_AND_MEANING:
            key = f"{key}::{entry.translation.strip()}"
        groups.setdefault(key, []).append(entry)

    ordered = [sorted(group, key=lambda e: e.added_at, reverse=True) for group in groups.values()]
    ordered.sort(key=lambda group: group[0].added_at, reverse=True)
    return ordered
