"""
End-to-end tests for the SlangBridge facade with fake network sources.
"""

import json
from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from conftest import FakeLlama, FakeUrbanDictionary
from errors import MissingCredential
from llama_client import LlamaTranslator
from settings import Settings
from slang_lookup import SlangDictionary
from slang_types import ERROR_LABEL, GENERATIVE_LABEL, LOCAL_LABEL
from slangbridge import DEFAULT_WORD_OF_THE_DAY, SlangBridge
from urban_dictionary import UrbanDictionaryClient


@pytest.fixture
def bridge(dictionary, urban, llama):
    return SlangBridge(dictionary, urban, llama)


class TestTranslate:
    @pytest.mark.asyncio
    async def test_dictionary_path(self, bridge, llama):
        outcome = await bridge.translate("bro said that's cap")

        assert outcome.translated_text == "He said that's lying"
        assert outcome.source_label == LOCAL_LABEL
        assert llama.calls == []

    @pytest.mark.asyncio
    async def test_no_match_calls_generative_once(self, bridge, urban, llama):
        outcome = await bridge.translate("where are you going")

        assert outcome.source_label == GENERATIVE_LABEL
        assert outcome.translated_text == "I am going to leave now"
        assert outcome.tone_label == "Used to say goodbye casually"
        assert llama.calls == ["where are you going"]
        # only the phrase's own tokens were looked up
        assert urban.calls == ["where", "are", "you", "going"]

    @pytest.mark.asyncio
    async def test_dictionary_outage_falls_through_to_generative(self, dictionary, llama):
        urban = FakeUrbanDictionary(fail=True)
        bridge = SlangBridge(dictionary, urban, llama)

        outcome = await bridge.translate("skibidi toilet")

        assert outcome.source_label == GENERATIVE_LABEL
        assert llama.calls == ["skibidi toilet"]

    @pytest.mark.asyncio
    async def test_malformed_dictionary_reply_falls_through_to_generative(self, dictionary, llama):
        session = MagicMock()
        session.get.return_value.json.return_value = {"list": [None]}
        bridge = SlangBridge(dictionary, UrbanDictionaryClient(session=session), llama)

        outcome = await bridge.translate("skibidi toilet")

        assert outcome.source_label == GENERATIVE_LABEL
        assert llama.calls == ["skibidi toilet"]

    @pytest.mark.asyncio
    async def test_missing_key_gives_error_outcome(self, dictionary, urban):
        bridge = SlangBridge(dictionary, urban, FakeLlama(error=MissingCredential()))

        outcome = await bridge.translate("skibidi toilet")

        assert outcome.source_label == ERROR_LABEL
        assert outcome.translated_text == "❌ No Llama API key found"
        assert outcome.tone_label == "Please check your .env file configuration"

    @pytest.mark.asyncio
    async def test_missing_key_makes_no_request(self, dictionary, urban):
        with patch("llama_client.AsyncLlamaAPIClient") as client_cls:
            bridge = SlangBridge(dictionary, urban, LlamaTranslator(api_key=None))
            outcome = await bridge.translate("skibidi toilet")

        assert outcome.is_error
        client_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_phrase(self, bridge):
        with pytest.raises(ValueError):
            await bridge.translate("  ")


class TestLookups:
    @pytest.mark.asyncio
    async def test_resolve(self, bridge, urban):
        entry = await bridge.resolve("rizz")
        assert entry.translation == "charisma or charm"
        assert urban.calls == []

    @pytest.mark.asyncio
    async def test_resolve_unknown(self, bridge):
        assert await bridge.resolve("zzzzqqq") is None

    @pytest.mark.asyncio
    async def test_resolve_many(self, bridge):
        results = await bridge.resolve_many(["cap", "zzzzqqq"])
        assert [r.success for r in results] == [True, False]

    def test_search(self, bridge):
        assert [e.term for e in bridge.search("cap")] == ["no cap", "cap"]


class TestWordOfTheDay:
    @pytest.mark.asyncio
    async def test_same_word_all_day(self, bridge, sample_entries):
        today = date(2026, 10, 19)
        expected = sample_entries[today.toordinal() % len(sample_entries)]

        first = await bridge.word_of_the_day(today)
        second = await bridge.word_of_the_day(today)

        assert first == second == expected

    @pytest.mark.asyncio
    async def test_changes_day_to_day(self, bridge):
        words = {(await bridge.word_of_the_day(date(2026, 1, day))).term for day in range(1, 7)}
        assert len(words) == 6

    @pytest.mark.asyncio
    async def test_empty_dictionary_uses_default(self, urban, llama):
        bridge = SlangBridge(SlangDictionary(), urban, llama)
        assert await bridge.word_of_the_day() == DEFAULT_WORD_OF_THE_DAY


def test_from_settings(tmp_path):
    path = tmp_path / "slang.json"
    path.write_text(json.dumps([{"term": "bet", "translation": "okay"}]), encoding="utf-8")
    settings = Settings(llama_api_key="secret", llama_model="test-model",
                        urban_dictionary_url="https://example.test/v0", dataset_path=path)

    with patch("llama_client.AsyncLlamaAPIClient") as client_cls:
        bridge = SlangBridge.from_settings(settings)
    client_cls.assert_not_called()

    assert len(bridge.dictionary) == 1
    assert isinstance(bridge.resolver.external, UrbanDictionaryClient)
    assert bridge.resolver.external.base_url == "https://example.test/v0"
    assert bridge.fallback.generative.model == "test-model"
