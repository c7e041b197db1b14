"""Word domain models: dictionary results, drafts and persisted entries."""

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum


class WordCategory(str, Enum):
    """Learning state of a word entry. Exactly one per entry."""
    KNOWN = 'known'
    WANT_TO_LEARN = 'want_to_learn'
    LEARNING = 'learning'


# ── Dictionary value objects ─────────────────────────────


@dataclass(frozen=True)
class ExampleSentence:
    """Bilingual example sentence pair."""
    original: str = ""
    translation: str = ""

    def __bool__(self) -> bool:
        return bool(self.original or self.translation)


@dataclass(frozen=True)
class DictionarySense:
    """One grammatical/semantic reading of a headword."""
    part_of_speech: str
    meanings: tuple[str, ...] = ()
    example: ExampleSentence = field(default_factory=ExampleSentence)

    @property
    def formatted_translation(self) -> str:
        """'n. meaning; meaning', the string stored as an entry's translation."""
        joined = "; ".join(self.meanings)
        if self.part_of_speech:
            return f"{self.part_of_speech} {joined}".strip()
        return joined.strip()


@dataclass(frozen=True)
class DictionaryResult:
    """Source-agnostic dictionary lookup result.

    ``senses`` keeps the order of the originating source. ``sentences`` holds
    the filtered example candidates later distributed over the senses.
    """
    headword: str
    phonetic_us: str = ""
    phonetic_uk: str = ""
    inflections: frozenset[str] = frozenset()
    senses: tuple[DictionarySense, ...] = ()
    sentences: tuple[ExampleSentence, ...] = ()
    source_id: str = ""

    @property
    def is_usable(self) -> bool:
        """A result counts only if it carries a phonetic or at least one sense."""
        return bool(self.phonetic_us or self.phonetic_uk or self.senses)


# ── Entries ──────────────────────────────────────────────


def identity_key(headword: str, translation: str) -> tuple[str, str]:
    """Equivalence key shared by drafts and entries."""
    return headword.strip().lower(), translation.strip()


@dataclass(frozen=True)
class WordEntryDraft:
    """A resolved word sense awaiting category admission."""
    headword: str
    translation: str
    phonetic_us: str = ""
    phonetic_uk: str = ""
    context_sentence: str = ""
    mixed_sentence: str = ""
    dictionary_example: str = ""
    dictionary_example_translation: str = ""
    inflections: tuple[str, ...] = ()

    @property
    def key(self) -> tuple[str, str]:
        return identity_key(self.headword, self.translation)

    @property
    def is_complete(self) -> bool:
        return bool(self.headword and self.headword.strip()
                    and self.translation and self.translation.strip())


@dataclass
class WordEntry:
    """A persisted word entry."""
    id: str
    headword: str
    translation: str
    category: WordCategory
    added_at: int
    scenario_id: str | None = None
    phonetic_us: str = ""
    phonetic_uk: str = ""
    context_sentence: str = ""
    context_sentence_translation: str = ""
    mixed_sentence: str = ""
    dictionary_example: str = ""
    dictionary_example_translation: str = ""
    inflections: list[str] = field(default_factory=list)
    source_url: str | None = None

    @staticmethod
    def create(
        draft: WordEntryDraft,
        category: WordCategory,
        added_at: int,
        scenario_id: str | None = None,
    ) -> 'WordEntry':
        """Materialize a draft with a fresh identity."""
        return WordEntry(
            id=str(uuid.uuid4()),
            headword=draft.headword,
            translation=draft.translation,
            category=category,
            added_at=added_at,
            scenario_id=scenario_id,
            phonetic_us=draft.phonetic_us,
            phonetic_uk=draft.phonetic_uk,
            context_sentence=draft.context_sentence,
            mixed_sentence=draft.mixed_sentence,
            dictionary_example=draft.dictionary_example,
            dictionary_example_translation=draft.dictionary_example_translation,
            inflections=list(draft.inflections),
        )

    @property
    def key(self) -> tuple[str, str]:
        return identity_key(self.headword, self.translation)

    def with_category(self, category: WordCategory) -> 'WordEntry':
        return replace(self, category=category)


# ── Admission outcomes ───────────────────────────────────


class AdmissionOutcome(str, Enum):
    """Classification of a draft by the category state machine."""
    NEW = 'new'
    PROMOTED = 'promoted'
    DUPLICATE = 'duplicate'
    CONFLICT = 'conflict'


@dataclass
class AdmissionTally:
    """End-of-batch summary shown to the user."""
    new: int = 0
    promoted: int = 0
    duplicate: int = 0
    conflict: int = 0
    failed: int = 0

    def record(self, outcome: AdmissionOutcome | None) -> None:
        if outcome is AdmissionOutcome.NEW:
            self.new += 1
        elif outcome is AdmissionOutcome.PROMOTED:
            self.promoted += 1
        elif outcome is AdmissionOutcome.DUPLICATE:
            self.duplicate += 1
        elif outcome is AdmissionOutcome.CONFLICT:
            self.conflict += 1

    @property
    def changed(self) -> bool:
        return bool(self.new or self.promoted)
