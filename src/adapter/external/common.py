"""Shared plumbing for HTTP dictionary adapters.

Provides the retrying GET, the soft-failure handling every source shares,
and the normalization rules applied to all provider payloads.
"""

import logging
import re
from typing import Any

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.dictionary_source import DictionarySourceConfig
from domain.model.word import DictionaryResult, ExampleSentence

logger = logging.getLogger(__name__)

# Examples shorter than this are fragments, not sentences.
MIN_SENTENCE_LENGTH = 9

_WHITESPACE = re.compile(r"\s")


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _fetch_with_retry(
    client: httpx.AsyncClient, url: str, params: dict[str, str] | None = None,
) -> httpx.Response:
    """Fetch URL with automatic retry on transient failures."""
    return await client.get(url, params=params)


class HttpSourceAdapter:
    """Base for adapters that GET one JSON document per headword.

    Transport errors and non-success statuses are soft failures (None).
    Anything raised while decoding or parsing propagates to the resolver.
    """

    source_id = ""

    def __init__(self, config: DictionarySourceConfig, client: httpx.AsyncClient):
        self.config = config
        self.client = client

    def build_request(self, headword: str) -> tuple[str, dict[str, str] | None]:
        raise NotImplementedError

    def parse(self, payload: Any, headword: str) -> DictionaryResult | None:
        raise NotImplementedError

    async def resolve(self, headword: str) -> DictionaryResult | None:
        payload = await self.fetch(headword)
        if payload is None:
            return None
        result = self.parse(payload, headword)
        if result is None or not result.is_usable:
            logger.debug(
                "Dictionary source returned no usable data",
                extra={"source": self.source_id, "word": headword},
            )
            return None
        return result

    async def fetch(self, headword: str) -> Any | None:
        url, params = self.build_request(headword)
        try:
            response = await _fetch_with_retry(self.client, url, params)
        except httpx.RequestError as e:
            logger.warning(
                "Dictionary source request error",
                extra={"source": self.source_id, "word": headword, "error_type": type(e).__name__},
            )
            return None

        if response.status_code == 404:
            logger.debug(
                "Word not found in dictionary source",
                extra={"source": self.source_id, "word": headword},
            )
            return None

        if not response.is_success:
            logger.warning(
                "Dictionary source HTTP error",
                extra={"source": self.source_id, "word": headword, "status_code": response.status_code},
            )
            return None

        return response.json()


# ── Normalization rules ──────────────────────────────────────


def normalize_part_of_speech(pos: str | None) -> str:
    """'n' -> 'n.', 'noun' -> 'noun.'; empty stays empty."""
    pos = (pos or "").strip()
    if pos and not pos.endswith("."):
        pos += "."
    return pos


def format_phonetic(symbol: str | None) -> str:
    """Wrap a bare IPA string in slashes."""
    symbol = (symbol or "").strip()
    if not symbol:
        return ""
    if symbol.startswith("/") or symbol.startswith("["):
        return symbol
    return f"/{symbol}/"


def is_usable_sentence(sentence: ExampleSentence, require_translation: bool) -> bool:
    """Reject fragments, single words and (for bilingual sources) untranslated examples."""
    if len(sentence.original) < MIN_SENTENCE_LENGTH:
        return False
    if not _WHITESPACE.search(sentence.original):
        return False
    if require_translation and not sentence.translation:
        return False
    return True


def filter_sentences(
    pairs: list[tuple[Any, Any]], require_translation: bool,
) -> tuple[ExampleSentence, ...]:
    """Build trimmed sentence pairs and drop the unusable ones."""
    sentences = (
        ExampleSentence(
            original=str(original or "").strip(),
            translation=str(translation or "").strip(),
        )
        for original, translation in pairs
    )
    return tuple(s for s in sentences if is_usable_sentence(s, require_translation))


def collect_inflections(exchange: Any) -> frozenset[str]:
    """Flatten an inflection map whose values are strings or lists of strings."""
    if not isinstance(exchange, dict):
        return frozenset()
    forms: set[str] = set()
    for value in exchange.values():
        if isinstance(value, list):
            forms.update(str(v).strip() for v in value if v and str(v).strip())
        elif isinstance(value, str) and value.strip():
            forms.add(value.strip())
    return frozenset(forms)
