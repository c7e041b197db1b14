"""Dictionary port: outbound interface for dictionary data sources."""

from typing import Protocol

from domain.model.word import DictionaryResult


class SourceAdapter(Protocol):
    """Port for one external dictionary.

    Each provider has its own response shape; the adapter owns all of that
    knowledge and returns the source-agnostic DictionaryResult. Returning
    None means "no usable data here" and lets the resolver fail over.
    """

    source_id: str

    async def resolve(self, headword: str) -> DictionaryResult | None: ...
