import logging
from datetime import date
from typing import Iterable, List, Optional

from fallback import FallbackOrchestrator
from llama_client import LlamaTranslator
from phrase_translator import PhraseTranslator
from settings import Settings
from slang_lookup import SlangDictionary
from slang_resolver import SlangResolver
from slang_types import BatchLookup, SlangEntry, TranslationOutcome
from urban_dictionary import UrbanDictionaryClient

logger = logging.getLogger("slangbridge")

DEFAULT_WORD_OF_THE_DAY = SlangEntry(
    term='rizz',
    translation='Charisma or charm, especially with romantic appeal',
    context='positive',
    example='He has mad rizz!',
)


class SlangBridge:
    """Entry point for hosts: phrase translation and single-term lookups."""

    def __init__(self, dictionary: SlangDictionary,
                 external: Optional[UrbanDictionaryClient],
                 generative: LlamaTranslator):
        self.dictionary = dictionary
        self.resolver = SlangResolver(dictionary, external)
        self.phrase_translator = PhraseTranslator(self.resolver)
        self.fallback = FallbackOrchestrator(generative)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'SlangBridge':
        return cls(
            dictionary=SlangDictionary.from_file(settings.dataset_path),
            external=UrbanDictionaryClient(settings.urban_dictionary_url),
            generative=LlamaTranslator(settings.llama_api_key, settings.llama_model),
        )

    async def translate(self, phrase: str) -> TranslationOutcome:
        if not phrase or not phrase.strip():
            raise ValueError("Nothing to translate")

        outcome = await self.phrase_translator.translate(phrase)
        if outcome is not None:
            return outcome

        logger.info("No dictionary match, asking the AI to translate %r", phrase)
        return await self.fallback.handle_no_match(phrase)

    async def resolve(self, term: str) -> Optional[SlangEntry]:
        return await self.resolver.resolve(term)

    async def resolve_many(self, terms: Iterable[str]) -> List[BatchLookup]:
        return await self.resolver.resolve_many(terms)

    def search(self, query: str, limit: int = 10) -> List[SlangEntry]:
        return self.dictionary.search(query, limit)

    async def word_of_the_day(self, today: Optional[date] = None) -> SlangEntry:
        """Pick a dictionary term by date so it stays the same all day."""
        entries = self.dictionary.entries
        if not entries:
            return DEFAULT_WORD_OF_THE_DAY

        today = today or date.today()
        term = entries[today.toordinal() % len(entries)].term
        return await self.resolve(term) or DEFAULT_WORD_OF_THE_DAY
