"""
Shared fixtures and fakes for SlangBridge tests.
"""

import pytest

from errors import SourceUnavailable
from slang_lookup import SlangDictionary
from slang_types import GenerativeResult, SlangEntry, Source


class FakeUrbanDictionary:
    """Stands in for UrbanDictionaryClient and records every term asked for."""

    def __init__(self, definitions=None, fail=False):
        self.definitions = definitions or {}
        self.fail = fail
        self.calls = []

    async def lookup(self, term):
        self.calls.append(term)
        if self.fail:
            raise SourceUnavailable("Urban Dictionary is down")
        return self.definitions.get(term)


class FakeLlama:
    """Stands in for LlamaTranslator."""

    def __init__(self, result=None, error=None):
        self.result = result or GenerativeResult(
            translation="I am going to leave now",
            context="Used to say goodbye casually",
            example="I'm going to head out now.",
        )
        self.error = error
        self.calls = []

    async def translate(self, phrase):
        self.calls.append(phrase)
        if self.error is not None:
            raise self.error
        return self.result


def external_entry(term, translation, context="casual", example=""):
    return SlangEntry(term=term, translation=translation, context=context,
                      example=example, source=Source.EXTERNAL)


@pytest.fixture
def sample_entries():
    return (
        SlangEntry(term="rizz", translation="charisma or charm", context="positive",
                   example="He has mad rizz!"),
        SlangEntry(term="no cap", translation="no lie"),
        SlangEntry(term="cap", translation="lying", context="warning",
                   example="Stop the cap."),
        SlangEntry(term="bro", translation="friend"),
        SlangEntry(term="ghosted", translation="stopped replying", context="negative"),
        SlangEntry(term="lowkey", translation="secretly"),
    )


@pytest.fixture
def dictionary(sample_entries):
    return SlangDictionary(sample_entries)


@pytest.fixture
def urban():
    return FakeUrbanDictionary()


@pytest.fixture
def llama():
    return FakeLlama()
