"""Free Dictionary API adapter.

Monolingual English source: definitions are English, examples carry no
translation. Used as the last-resort source when the bilingual ones fail.

API Documentation: https://dictionaryapi.dev
"""

from typing import Any
from urllib.parse import quote

from adapter.external.common import (
    HttpSourceAdapter,
    filter_sentences,
    format_phonetic,
    normalize_part_of_speech,
)
from domain.model.word import DictionaryResult, DictionarySense

FREE_DICTIONARY_API_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"


class FreeDictionaryAdapter(HttpSourceAdapter):
    """Adapter that maps Free Dictionary API entries into a DictionaryResult."""

    source_id = "free-dict"

    def build_request(self, headword: str) -> tuple[str, dict[str, str] | None]:
        base = self.config.endpoint or FREE_DICTIONARY_API_BASE_URL
        return f"{base}{quote(headword, safe='')}", None

    def parse(self, payload: Any, headword: str) -> DictionaryResult | None:
        if not isinstance(payload, list) or not payload:
            return None
        entry = payload[0]
        meanings = entry.get("meanings") or []

        senses = tuple(
            DictionarySense(
                part_of_speech=normalize_part_of_speech(meaning.get("partOfSpeech")),
                meanings=tuple(
                    d["definition"].strip()
                    for d in meaning.get("definitions") or []
                    if d.get("definition")
                ),
            )
            for meaning in meanings
        )

        examples = [
            (d.get("example"), "")
            for meaning in meanings
            for d in meaning.get("definitions") or []
            if d.get("example")
        ]

        phonetic_us, phonetic_uk = _extract_phonetics(entry)
        return DictionaryResult(
            headword=entry.get("word") or headword,
            phonetic_us=phonetic_us,
            phonetic_uk=phonetic_uk,
            senses=senses,
            sentences=filter_sentences(examples, require_translation=False),
            source_id=self.source_id,
        )


# ── Phonetics extraction ─────────────────────────────────────


def _extract_phonetics(entry: dict[str, Any]) -> tuple[str, str]:
    """Pick US/UK IPA by the accent tag in the audio file name.

    US falls back to any phonetic with text, then to the entry-level phonetic.
    """
    phonetics = entry.get("phonetics") or []

    us = next(
        (p.get("text") for p in phonetics
         if "-us.mp3" in (p.get("audio") or "") and p.get("text")),
        None,
    )
    if not us:
        us = next((p.get("text") for p in phonetics if p.get("text")), None)
    if not us:
        us = entry.get("phonetic")

    uk = next(
        (p.get("text") for p in phonetics
         if "-uk.mp3" in (p.get("audio") or "") and p.get("text")),
        None,
    )
    return format_phonetic(us), format_phonetic(uk)
