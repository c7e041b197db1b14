"""Pydantic models for API request/response."""

from typing import Optional

from pydantic import BaseModel, Field

from domain.model.word import AdmissionTally, WordCategory, WordEntry, WordEntryDraft


class WordEntryResponse(BaseModel):
    """Response model for a stored word entry."""
    id: str
    headword: str
    translation: str
    category: WordCategory
    added_at: int = Field(..., description="Milliseconds since epoch, offset per batch")
    scenario_id: Optional[str] = None
    phonetic_us: str = ""
    phonetic_uk: str = ""
    context_sentence: str = ""
    context_sentence_translation: str = ""
    mixed_sentence: str = ""
    dictionary_example: str = ""
    dictionary_example_translation: str = ""
    inflections: list[str] = Field(default_factory=list)
    source_url: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: WordEntry) -> 'WordEntryResponse':
        return cls(**entry.__dict__)


class WordDraftResponse(BaseModel):
    """A dictionary lookup result that has not been admitted."""
    headword: str
    translation: str
    phonetic_us: str = ""
    phonetic_uk: str = ""
    dictionary_example: str = ""
    dictionary_example_translation: str = ""
    inflections: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, draft: WordEntryDraft) -> 'WordDraftResponse':
        return cls(
            headword=draft.headword,
            translation=draft.translation,
            phonetic_us=draft.phonetic_us,
            phonetic_uk=draft.phonetic_uk,
            dictionary_example=draft.dictionary_example,
            dictionary_example_translation=draft.dictionary_example_translation,
            inflections=list(draft.inflections),
        )


class TallyResponse(BaseModel):
    """End-of-batch counts."""
    new: int = 0
    promoted: int = 0
    duplicate: int = 0
    conflict: int = 0
    failed: int = 0

    @classmethod
    def from_domain(cls, tally: AdmissionTally) -> 'TallyResponse':
        return cls(**tally.__dict__)


class AddWordRequest(BaseModel):
    """Request model for adding a single word."""
    text: str = Field(..., min_length=1, max_length=100, description="Word to look up")
    translation: Optional[str] = Field(None, max_length=200, description="Preferred translation hint")
    category: WordCategory = WordCategory.WANT_TO_LEARN
    scenario_id: Optional[str] = None


class ImportRequest(BaseModel):
    """Request model for importing a word list (JSON array or plain text)."""
    content: str = Field(..., min_length=1, description="File content to import")
    category: Optional[WordCategory] = Field(None, description="Target list; defaults to want_to_learn")
    scenario_id: Optional[str] = None


class WordBatchResponse(BaseModel):
    """Response model for add/import batches."""
    tally: TallyResponse
    added: list[WordEntryResponse] = Field(default_factory=list)
    promoted: list[WordEntryResponse] = Field(default_factory=list)


class DeleteWordsRequest(BaseModel):
    ids: list[str] = Field(..., min_length=1)
    tab: Optional[WordCategory] = Field(None, description="List the deletion is made from; null for all words")


class DeleteWordsResponse(BaseModel):
    removed: int
    demoted: int


class MoveWordsRequest(BaseModel):
    ids: list[str] = Field(..., min_length=1)
    category: WordCategory


class MoveWordsResponse(BaseModel):
    moved: int


class UpdateWordRequest(BaseModel):
    """Editable descriptive fields; omitted fields are left unchanged."""
    headword: Optional[str] = Field(None, min_length=1)
    translation: Optional[str] = Field(None, min_length=1)
    scenario_id: Optional[str] = None
    phonetic_us: Optional[str] = None
    phonetic_uk: Optional[str] = None
    context_sentence: Optional[str] = None
    context_sentence_translation: Optional[str] = None
    mixed_sentence: Optional[str] = None
    dictionary_example: Optional[str] = None
    dictionary_example_translation: Optional[str] = None
    source_url: Optional[str] = None


class WordGroupResponse(BaseModel):
    """Entries merged under one display key, newest first."""
    headword: str
    count: int
    entries: list[WordEntryResponse]
