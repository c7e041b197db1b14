"""Dictionary source registry: config loading and adapter construction."""

import json
import logging
import os

import httpx

from adapter.external.common import HttpSourceAdapter
from adapter.external.free_dictionary import FREE_DICTIONARY_API_BASE_URL, FreeDictionaryAdapter
from adapter.external.iciba import IcibaAdapter
from adapter.external.youdao import YoudaoAdapter
from domain.model.dictionary_source import DictionarySourceConfig, enabled_in_priority_order

logger = logging.getLogger(__name__)

DICTIONARY_SOURCES = os.getenv('DICTIONARY_SOURCES', '')
DICTIONARY_TIMEOUT_SECONDS = float(os.getenv('DICTIONARY_TIMEOUT_SECONDS', '5.0'))

DEFAULT_DICTIONARY_SOURCES = [
    DictionarySourceConfig(
        id="iciba",
        name="iCIBA",
        endpoint="https://dict-co.iciba.com/api/dictionary.php",
        link="https://www.iciba.com",
        priority=1,
        description="Kingsoft bilingual dictionary",
    ),
    DictionarySourceConfig(
        id="youdao",
        name="Youdao",
        endpoint="https://dict.youdao.com/jsonapi",
        link="https://dict.youdao.com",
        priority=2,
        description="NetEase bilingual dictionary",
    ),
    DictionarySourceConfig(
        id="free-dict",
        name="Free Dictionary API",
        endpoint=FREE_DICTIONARY_API_BASE_URL,
        link="https://dictionaryapi.dev",
        priority=3,
        description="Monolingual English definitions",
    ),
    DictionarySourceConfig(
        id="wiktionary",
        name="Wiktionary",
        endpoint="https://en.wiktionary.org/api/rest_v1/page/definition/",
        link="https://en.wiktionary.org",
        is_enabled=False,
        priority=4,
    ),
]

ADAPTER_TYPES: dict[str, type[HttpSourceAdapter]] = {
    IcibaAdapter.source_id: IcibaAdapter,
    YoudaoAdapter.source_id: YoudaoAdapter,
    FreeDictionaryAdapter.source_id: FreeDictionaryAdapter,
}


def load_source_configs(raw: str | None = None) -> list[DictionarySourceConfig]:
    """Source list from a JSON array (DICTIONARY_SOURCES), else the defaults."""
    raw = DICTIONARY_SOURCES if raw is None else raw
    if not raw.strip():
        return list(DEFAULT_DICTIONARY_SOURCES)
    try:
        items = json.loads(raw)
        return [DictionarySourceConfig.from_dict(item) for item in items]
    except (ValueError, TypeError, KeyError) as e:
        logger.error(
            "Invalid DICTIONARY_SOURCES, using defaults",
            extra={"error": str(e)},
        )
        return list(DEFAULT_DICTIONARY_SOURCES)


def build_source_adapters(
    configs: list[DictionarySourceConfig],
    client: httpx.AsyncClient,
) -> list[HttpSourceAdapter]:
    """Adapters for enabled sources, in priority order.

    Sources without an adapter implementation are skipped.
    """
    adapters: list[HttpSourceAdapter] = []
    for config in enabled_in_priority_order(configs):
        adapter_type = ADAPTER_TYPES.get(config.id)
        if adapter_type is None:
            logger.warning("No adapter for dictionary source", extra={"source": config.id})
            continue
        adapters.append(adapter_type(config, client))
    return adapters


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=DICTIONARY_TIMEOUT_SECONDS, follow_redirects=True)
