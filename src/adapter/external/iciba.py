"""iCIBA (Kingsoft) dictionary adapter.

Bilingual English-Chinese source. Response shape (abridged):

    {"word_name": "book",
     "symbols": [{"ph_am": "bʊk", "ph_en": "bʊk",
                  "parts": [{"part": "n", "means": ["书籍", "本子"]}]}],
     "sent": [{"orig": "...", "trans": "..."}],
     "exchange": {"word_pl": ["books"], "word_past": ["booked"]}}
"""

import os
from typing import Any

from adapter.external.common import (
    HttpSourceAdapter,
    collect_inflections,
    filter_sentences,
    format_phonetic,
    normalize_part_of_speech,
)
from domain.model.word import DictionaryResult, DictionarySense

ICIBA_API_KEY = os.getenv('ICIBA_API_KEY', 'D2AE3342306915865405466432026857')


class IcibaAdapter(HttpSourceAdapter):
    source_id = "iciba"

    def build_request(self, headword: str) -> tuple[str, dict[str, str] | None]:
        return self.config.endpoint, {"w": headword, "type": "json", "key": ICIBA_API_KEY}

    def parse(self, payload: Any, headword: str) -> DictionaryResult | None:
        if not isinstance(payload, dict):
            return None
        symbols = payload.get("symbols") or []
        if not symbols:
            return None
        symbol = symbols[0]

        senses = tuple(
            DictionarySense(
                part_of_speech=normalize_part_of_speech(part.get("part")),
                meanings=tuple(_mean_text(m) for m in part.get("means") or [] if _mean_text(m)),
            )
            for part in symbol.get("parts") or []
        )
        sentences = filter_sentences(
            [(s.get("orig"), s.get("trans")) for s in payload.get("sent") or []],
            require_translation=True,
        )

        return DictionaryResult(
            headword=payload.get("word_name") or headword,
            phonetic_us=format_phonetic(symbol.get("ph_am")),
            phonetic_uk=format_phonetic(symbol.get("ph_en")),
            inflections=collect_inflections(payload.get("exchange")),
            senses=senses,
            sentences=sentences,
            source_id=self.source_id,
        )


def _mean_text(mean: Any) -> str:
    """Meanings are plain strings, occasionally {"word_mean": ...} objects."""
    if isinstance(mean, dict):
        mean = mean.get("word_mean", "")
    return str(mean or "").strip()
