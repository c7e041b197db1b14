"""Tests for the HTTP dictionary adapters, driven through httpx.MockTransport."""

import unittest

import httpx

from adapter.external.common import (
    collect_inflections,
    format_phonetic,
    is_usable_sentence,
    normalize_part_of_speech,
)
from adapter.external.free_dictionary import FreeDictionaryAdapter
from adapter.external.iciba import IcibaAdapter
from adapter.external.youdao import YoudaoAdapter
from domain.model.dictionary_source import DictionarySourceConfig
from domain.model.word import DictionarySense, ExampleSentence
from services.dictionary_service import DictionaryResolver

ICIBA_CONFIG = DictionarySourceConfig(id="iciba", name="iCIBA", endpoint="https://iciba.test/api")
YOUDAO_CONFIG = DictionarySourceConfig(id="youdao", name="Youdao", endpoint="https://youdao.test/jsonapi")
FREE_DICT_CONFIG = DictionarySourceConfig(id="free-dict", name="Free", endpoint="https://free.test/en/")

ICIBA_BOOK = {
    "word_name": "book",
    "symbols": [{
        "ph_am": "bʊk",
        "ph_en": "bʊk",
        "parts": [
            {"part": "n", "means": ["书籍", "本子"]},
            {"part": "v.", "means": [{"word_mean": "预订"}, ""]},
        ],
    }],
    "sent": [
        {"orig": " She reads a book about history. ", "trans": "她读一本关于历史的书籍。"},
        {"orig": "Book", "trans": "书"},
        {"orig": "I need to book a flight.", "trans": ""},
    ],
    "exchange": {
        "word_pl": ["books"],
        "word_past": ["booked"],
        "word_done": ["booked"],
        "word_ing": "booking",
        "word_er": "",
    },
}

YOUDAO_BOOK = {
    "simple": {
        "query": "book",
        "word": [{"usphone": "bʊk", "ukphone": "bʊk", "exchange": {"pl": ["books"]}}],
    },
    "ec": {
        "word": [{
            "trs": [
                {"pos": "n", "tran": "书籍"},
                {"tr": [{"l": {"i": ["v. 预订"]}}]},
                {"tr": []},
            ],
        }],
    },
    "blng_sents_part": {
        "sentence-pair": [
            {"sentence": "I need to book a flight.", "sentence-translation": "我需要预订一张机票。"},
        ],
    },
}

FREE_DICT_BOOK = [{
    "word": "book",
    "phonetic": "/bʊk/",
    "phonetics": [
        {"text": "/bʊk/", "audio": "https://audio.test/book-uk.mp3"},
        {"text": "/bʊːk/", "audio": "https://audio.test/book-us.mp3"},
    ],
    "meanings": [
        {
            "partOfSpeech": "noun",
            "definitions": [
                {"definition": "A collection of sheets of paper.", "example": "She wrote a book."},
                {"definition": "A ledger."},
            ],
        },
        {
            "partOfSpeech": "verb",
            "definitions": [{"definition": "To reserve.", "example": "book"}],
        },
    ],
}]


class _AdapterTestCase(unittest.IsolatedAsyncioTestCase):

    def _client(self, handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        self.addAsyncCleanup(client.aclose)
        return client


class TestIcibaAdapter(_AdapterTestCase):

    async def test_parses_payload(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=ICIBA_BOOK)

        adapter = IcibaAdapter(ICIBA_CONFIG, self._client(handler))

        result = await adapter.resolve("book")

        self.assertEqual(seen[0].url.params["w"], "book")
        self.assertEqual(seen[0].url.params["type"], "json")
        self.assertEqual(result.headword, "book")
        self.assertEqual(result.source_id, "iciba")
        self.assertEqual(result.phonetic_us, "/bʊk/")
        self.assertEqual(result.phonetic_uk, "/bʊk/")
        self.assertEqual(result.senses, (
            DictionarySense("n.", ("书籍", "本子")),
            DictionarySense("v.", ("预订",)),
        ))
        self.assertEqual(result.sentences, (
            ExampleSentence("She reads a book about history.", "她读一本关于历史的书籍。"),
        ))
        self.assertEqual(result.inflections, frozenset({"books", "booked", "booking"}))

    async def test_empty_symbols_is_no_result(self):
        adapter = IcibaAdapter(ICIBA_CONFIG, self._client(
            lambda request: httpx.Response(200, json={"word_name": "qwertyuiop", "symbols": []})
        ))

        self.assertIsNone(await adapter.resolve("qwertyuiop"))

    async def test_server_error_is_no_result(self):
        adapter = IcibaAdapter(ICIBA_CONFIG, self._client(lambda request: httpx.Response(500)))

        self.assertIsNone(await adapter.resolve("book"))

    async def test_transport_error_is_no_result(self):
        def handler(request):
            raise httpx.ReadError("connection reset", request=request)

        adapter = IcibaAdapter(ICIBA_CONFIG, self._client(handler))

        self.assertIsNone(await adapter.resolve("book"))

    async def test_malformed_json_raises(self):
        adapter = IcibaAdapter(ICIBA_CONFIG, self._client(
            lambda request: httpx.Response(200, content=b"<html>not json</html>")
        ))

        with self.assertRaises(ValueError):
            await adapter.resolve("book")

    async def test_resolver_fails_over_malformed_source(self):
        broken = IcibaAdapter(ICIBA_CONFIG, self._client(
            lambda request: httpx.Response(200, content=b"{broken")
        ))
        youdao = YoudaoAdapter(YOUDAO_CONFIG, self._client(
            lambda request: httpx.Response(200, json=YOUDAO_BOOK)
        ))

        result = await DictionaryResolver([broken, youdao]).resolve("book")

        self.assertEqual(result.source_id, "youdao")


class TestYoudaoAdapter(_AdapterTestCase):

    async def test_parses_payload(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=YOUDAO_BOOK)

        adapter = YoudaoAdapter(YOUDAO_CONFIG, self._client(handler))

        result = await adapter.resolve("book")

        self.assertEqual(seen[0].url.params["q"], "book")
        self.assertEqual(result.phonetic_us, "/bʊk/")
        self.assertEqual(result.senses, (
            DictionarySense("n.", ("书籍",)),
            DictionarySense("v.", ("预订",)),
        ))
        self.assertEqual(len(result.sentences), 1)
        self.assertEqual(result.inflections, frozenset({"books"}))

    async def test_phonetic_falls_back_to_ec_section(self):
        payload = {"ec": {"word": [{"usphone": "bæŋk", "trs": [{"pos": "n", "tran": "银行"}]}]}}
        adapter = YoudaoAdapter(YOUDAO_CONFIG, self._client(
            lambda request: httpx.Response(200, json=payload)
        ))

        result = await adapter.resolve("bank")

        self.assertEqual(result.headword, "bank")
        self.assertEqual(result.phonetic_us, "/bæŋk/")

    async def test_empty_payload_is_no_result(self):
        adapter = YoudaoAdapter(YOUDAO_CONFIG, self._client(
            lambda request: httpx.Response(200, json={})
        ))

        self.assertIsNone(await adapter.resolve("qwertyuiop"))


class TestFreeDictionaryAdapter(_AdapterTestCase):

    async def test_parses_payload(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=FREE_DICT_BOOK)

        adapter = FreeDictionaryAdapter(FREE_DICT_CONFIG, self._client(handler))

        result = await adapter.resolve("book")

        self.assertEqual(str(seen[0].url), "https://free.test/en/book")
        self.assertEqual(result.phonetic_us, "/bʊːk/")
        self.assertEqual(result.phonetic_uk, "/bʊk/")
        self.assertEqual([s.part_of_speech for s in result.senses], ["noun.", "verb."])
        self.assertEqual(result.senses[0].meanings, ("A collection of sheets of paper.", "A ledger."))
        self.assertEqual(result.sentences, (ExampleSentence("She wrote a book.", ""),))

    async def test_not_found_is_no_result(self):
        adapter = FreeDictionaryAdapter(FREE_DICT_CONFIG, self._client(
            lambda request: httpx.Response(404, json={"title": "No Definitions Found"})
        ))

        self.assertIsNone(await adapter.resolve("qwertyuiop"))

    async def test_phonetic_falls_back_to_entry_level(self):
        payload = [{"word": "bank", "phonetic": "bæŋk", "meanings": []}]
        adapter = FreeDictionaryAdapter(FREE_DICT_CONFIG, self._client(
            lambda request: httpx.Response(200, json=payload)
        ))

        result = await adapter.resolve("bank")

        self.assertEqual(result.phonetic_us, "/bæŋk/")
        self.assertEqual(result.phonetic_uk, "")
        self.assertEqual(result.senses, ())


class TestNormalization(unittest.TestCase):

    def test_normalize_part_of_speech(self):
        self.assertEqual(normalize_part_of_speech("n"), "n.")
        self.assertEqual(normalize_part_of_speech("vt."), "vt.")
        self.assertEqual(normalize_part_of_speech(None), "")

    def test_format_phonetic(self):
        self.assertEqual(format_phonetic("bʊk"), "/bʊk/")
        self.assertEqual(format_phonetic("/bʊk/"), "/bʊk/")
        self.assertEqual(format_phonetic("[bʊk]"), "[bʊk]")
        self.assertEqual(format_phonetic("  "), "")

    def test_is_usable_sentence(self):
        self.assertTrue(is_usable_sentence(ExampleSentence("Book a room.", "订个房间。"), True))
        self.assertFalse(is_usable_sentence(ExampleSentence("Book now", "现在订"), True))
        self.assertFalse(is_usable_sentence(ExampleSentence("Bookkeeping", "记账"), True))
        self.assertFalse(is_usable_sentence(ExampleSentence("Book a room.", ""), True))
        self.assertTrue(is_usable_sentence(ExampleSentence("Book a room.", ""), False))

    def test_collect_inflections(self):
        self.assertEqual(
            collect_inflections({"pl": ["books", ""], "ing": "booking", "er": None}),
            frozenset({"books", "booking"}),
        )
        self.assertEqual(collect_inflections(None), frozenset())


if __name__ == '__main__':
    unittest.main()
