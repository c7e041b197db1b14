"""Tests for dictionary source config loading and adapter construction."""

import json
import unittest

import httpx

from adapter.external.free_dictionary import FreeDictionaryAdapter
from adapter.external.iciba import IcibaAdapter
from adapter.external.registry import (
    DEFAULT_DICTIONARY_SOURCES,
    build_source_adapters,
    load_source_configs,
)
from adapter.external.youdao import YoudaoAdapter
from domain.model.dictionary_source import DictionarySourceConfig


class TestLoadSourceConfigs(unittest.TestCase):

    def test_blank_uses_defaults(self):
        self.assertEqual(load_source_configs(""), DEFAULT_DICTIONARY_SOURCES)

    def test_invalid_json_uses_defaults(self):
        with self.assertLogs("adapter.external.registry", level="ERROR"):
            configs = load_source_configs("[{not json")

        self.assertEqual(configs, DEFAULT_DICTIONARY_SOURCES)

    def test_parses_json_array(self):
        raw = json.dumps([
            {"id": "youdao", "endpoint": "https://youdao.test", "priority": 1},
            {"id": "iciba", "name": "iCIBA", "endpoint": "https://iciba.test", "isEnabled": False},
        ])

        configs = load_source_configs(raw)

        self.assertEqual([c.id for c in configs], ["youdao", "iciba"])
        self.assertEqual(configs[0].name, "youdao")
        self.assertFalse(configs[1].is_enabled)
        self.assertEqual(configs[1].priority, 100)

    def test_defaults_order_bilingual_sources_first(self):
        enabled = [c.id for c in DEFAULT_DICTIONARY_SOURCES if c.is_enabled]

        self.assertEqual(enabled, ["iciba", "youdao", "free-dict"])


class TestBuildSourceAdapters(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.client = httpx.AsyncClient()

    async def asyncTearDown(self):
        await self.client.aclose()

    async def test_enabled_sources_in_priority_order(self):
        configs = [
            DictionarySourceConfig(id="iciba", name="iCIBA", endpoint="", priority=2),
            DictionarySourceConfig(id="youdao", name="Youdao", endpoint="", priority=1),
            DictionarySourceConfig(id="free-dict", name="Free", endpoint="", priority=3, is_enabled=False),
        ]

        adapters = build_source_adapters(configs, self.client)

        self.assertEqual([type(a) for a in adapters], [YoudaoAdapter, IcibaAdapter])
        self.assertIs(adapters[0].client, self.client)

    async def test_source_without_adapter_is_skipped(self):
        configs = [
            DictionarySourceConfig(id="wiktionary", name="Wiktionary", endpoint="", priority=1),
            DictionarySourceConfig(id="free-dict", name="Free", endpoint="", priority=2),
        ]

        with self.assertLogs("adapter.external.registry", level="WARNING"):
            adapters = build_source_adapters(configs, self.client)

        self.assertEqual([type(a) for a in adapters], [FreeDictionaryAdapter])

    async def test_all_disabled_yields_nothing(self):
        configs = [DictionarySourceConfig(id="iciba", name="iCIBA", endpoint="", is_enabled=False)]

        self.assertEqual(build_source_adapters(configs, self.client), [])


if __name__ == '__main__':
    unittest.main()
