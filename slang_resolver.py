import logging
from typing import Iterable, List, Optional

from errors import SourceUnavailable
from slang_lookup import SlangDictionary
from slang_types import BatchLookup, SlangEntry
from urban_dictionary import UrbanDictionaryClient

logger = logging.getLogger("slangbridge")


class SlangResolver:
    """Look a single term up locally first, then in Urban Dictionary."""

    def __init__(self, dictionary: SlangDictionary, external: Optional[UrbanDictionaryClient] = None):
        self.dictionary = dictionary
        self.external = external

    async def resolve(self, term: str) -> Optional[SlangEntry]:
        if not term or not term.strip():
            raise ValueError("Invalid term provided")

        normalized = term.lower().strip()
        entry = self.dictionary.lookup(normalized)
        if entry is not None:
            logger.debug("Local hit for %r: %s", normalized, entry.term)
            return entry

        if self.external is None:
            return None

        try:
            return await self.external.lookup(normalized)
        except SourceUnavailable as e:
            logger.warning("Urban Dictionary lookup failed: %s", e)
            return None

    async def resolve_many(self, terms: Iterable[str]) -> List[BatchLookup]:
        results = []
        for term in terms:
            try:
                entry = await self.resolve(term)
            except ValueError as e:
                results.append(BatchLookup(term=term, entry=None, success=False, error=str(e)))
                continue
            results.append(BatchLookup(term=term, entry=entry, success=entry is not None))
        return results
