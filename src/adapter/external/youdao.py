"""Youdao (NetEase) dictionary adapter, backed by the ``jsonapi`` endpoint."""

import re
from typing import Any

from adapter.external.common import (
    HttpSourceAdapter,
    collect_inflections,
    filter_sentences,
    format_phonetic,
    normalize_part_of_speech,
)
from domain.model.word import DictionaryResult, DictionarySense

# Nested translations come as "n. 书籍" or just "书籍".
_RAW_TRANSLATION = re.compile(r"^([a-z]+\.)\s*(.*)")


class YoudaoAdapter(HttpSourceAdapter):
    source_id = "youdao"

    def build_request(self, headword: str) -> tuple[str, dict[str, str] | None]:
        return self.config.endpoint, {"q": headword}

    def parse(self, payload: Any, headword: str) -> DictionaryResult | None:
        if not isinstance(payload, dict):
            return None

        simple_word = _first_word(payload.get("simple"))
        ec_word = _first_word(payload.get("ec"))

        phonetic_us, phonetic_uk = _phonetics(simple_word)
        if not phonetic_us:
            phonetic_us, phonetic_uk = _phonetics(ec_word)

        senses = tuple(
            sense for sense in (_parse_translation(tr) for tr in ec_word.get("trs") or [])
            if sense is not None
        )

        pairs = (payload.get("blng_sents_part") or {}).get("sentence-pair") or []
        sentences = filter_sentences(
            [(p.get("sentence"), p.get("sentence-translation")) for p in pairs],
            require_translation=True,
        )

        simple = payload.get("simple") or {}
        return DictionaryResult(
            headword=simple.get("query") or headword,
            phonetic_us=phonetic_us,
            phonetic_uk=phonetic_uk,
            inflections=collect_inflections(simple_word.get("exchange")),
            senses=senses,
            sentences=sentences,
            source_id=self.source_id,
        )


def _first_word(section: Any) -> dict[str, Any]:
    if not isinstance(section, dict):
        return {}
    words = section.get("word") or []
    return words[0] if words and isinstance(words[0], dict) else {}


def _phonetics(word: dict[str, Any]) -> tuple[str, str]:
    return format_phonetic(word.get("usphone")), format_phonetic(word.get("ukphone"))


def _parse_translation(item: dict[str, Any]) -> DictionarySense | None:
    """Read one ``trs`` item in either its flat or its nested form."""
    if item.get("pos") or item.get("tran"):
        return DictionarySense(
            part_of_speech=normalize_part_of_speech(item.get("pos")),
            meanings=(str(item.get("tran") or "").strip(),),
        )

    try:
        raw = item["tr"][0]["l"]["i"][0]
    except (KeyError, IndexError, TypeError):
        return None
    raw = str(raw).strip()
    match = _RAW_TRANSLATION.match(raw)
    if match:
        return DictionarySense(part_of_speech=match.group(1), meanings=(match.group(2),))
    return DictionarySense(part_of_speech="", meanings=(raw,))
