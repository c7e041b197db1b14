"""Dictionary lookup service: multi-source resolution with failover.

Pipeline: sources in priority order → first usable DictionaryResult →
sentence assignment → optional sense selection → WordEntryDraft list.
"""

import logging
from dataclasses import replace

from domain.model.errors import ConfigurationError, SourceUnavailableError
from domain.model.word import DictionaryResult, WordEntryDraft
from port.dictionary import SourceAdapter
from services.sense_selection import select_senses
from services.sentence_assignment import assign_sentences

logger = logging.getLogger(__name__)


class DictionaryResolver:
    """Tries dictionary sources in order until one yields usable data.

    ``adapters`` must already be filtered to enabled sources and sorted by
    priority (see adapter.external.registry.build_source_adapters).
    """

    def __init__(self, adapters: list[SourceAdapter]):
        self.adapters = list(adapters)

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when there is nothing to resolve with."""
        if not self.adapters:
            raise ConfigurationError("No dictionary source is enabled")

    async def resolve(self, headword: str) -> DictionaryResult | None:
        """Return the first usable result, or None once every source is exhausted.

        A misbehaving source never aborts the lookup; its error is logged
        and the next source is tried.
        """
        for adapter in self.adapters:
            try:
                result = await adapter.resolve(headword)
            except Exception as e:
                failure = SourceUnavailableError(adapter.source_id, str(e))
                logger.warning(
                    "Dictionary source failed, trying next",
                    extra={"source": failure.source_id, "word": headword, "error": failure.reason},
                    exc_info=True,
                )
                continue

            if result is None or not result.is_usable:
                logger.debug(
                    "Dictionary source empty, trying next",
                    extra={"source": adapter.source_id, "word": headword},
                )
                continue

            logger.info("Dictionary lookup resolved", extra={
                "word": headword,
                "source": adapter.source_id,
                "sense_count": len(result.senses),
            })
            return result

        logger.info("Dictionary lookup exhausted all sources", extra={
            "word": headword,
            "source_count": len(self.adapters),
        })
        return None

    async def lookup(
        self, headword: str, hint: str | None = None,
    ) -> list[WordEntryDraft] | None:
        """Resolve ``headword`` into drafts. None means no source had data."""
        result = await self.resolve(headword)
        if result is None:
            return None
        return build_drafts(result, hint)


def build_drafts(result: DictionaryResult, hint: str | None = None) -> list[WordEntryDraft]:
    """One draft per sense, after sentence assignment and hint filtering.

    Sentences are assigned over all senses in source order before the hint
    narrows them, so the chosen sense keeps the example it would get anyway.
    """
    examples = assign_sentences(result.senses, result.sentences)
    senses = [
        replace(sense, example=example)
        for sense, example in zip(result.senses, examples)
    ]
    inflections = tuple(sorted(result.inflections))

    return [
        WordEntryDraft(
            headword=result.headword,
            translation=sense.formatted_translation,
            phonetic_us=result.phonetic_us,
            phonetic_uk=result.phonetic_uk,
            dictionary_example=sense.example.original,
            dictionary_example_translation=sense.example.translation,
            inflections=inflections,
        )
        for sense in select_senses(senses, hint)
    ]
