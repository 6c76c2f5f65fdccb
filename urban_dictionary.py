# Urban Dictionary lookup for terms missing from the local dataset

import asyncio
import logging
import re
from typing import Dict, List, Optional

import requests

from errors import SourceUnavailable
from slang_types import SlangEntry, Source

logger = logging.getLogger("slangbridge")

DEFAULT_BASE_URL = "https://api.urbandictionary.com/v0"
NSFW_KEYWORDS = ['nsfw', 'adult', 'explicit', 'sexual', 'vulgar', 'profanity']
NO_DEFINITION = "No clear definition available."

CONTEXT_KEYWORDS = [
    ('positive', ['cool', 'awesome']),
    ('negative', ['bad', 'terrible']),
    ('warning', ['warning', 'careful']),
]


def clean_markup(text: str) -> str:
    """Turn Urban Dictionary [linked words] into plain words and tidy whitespace."""
    text = re.sub(r'\[([^\]]+)\]', r'\1', text or '')
    return re.sub(r'\s+', ' ', text).strip()


def is_unsafe(*texts: str) -> bool:
    lowered = [text.lower() for text in texts]
    return any(keyword in text for keyword in NSFW_KEYWORDS for text in lowered)


def first_sentences(definition: str, count: int = 2) -> str:
    sentences = [s.strip() for s in re.split(r'[.!?]+', definition) if s.strip()]
    limited = '. '.join(sentences[:count]).strip()
    if limited and not limited.endswith('.'):
        limited += '.'
    return limited


def guess_context(definition: str) -> str:
    lowered = definition.lower()
    for context, keywords in CONTEXT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return context
    return 'casual'


def normalize_definition(raw: Dict, term: str) -> Optional[SlangEntry]:
    """Clean one raw Urban Dictionary definition, or drop it if it is unsafe."""
    definition = clean_markup(raw.get('definition', ''))
    example = clean_markup(raw.get('example', ''))

    if is_unsafe(definition, example):
        logger.debug("Discarding unsafe Urban Dictionary definition for %r", term)
        return None

    return SlangEntry(
        term=term,
        translation=first_sentences(definition) or NO_DEFINITION,
        context=guess_context(definition),
        example=example,
        source=Source.EXTERNAL,
    )


class UrbanDictionaryClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def get_definitions(self, term: str) -> List[Dict]:
        """Get raw definitions for a term. Raises SourceUnavailable on any failure."""
        url = f"{self.base_url}/define"
        params = {'term': term}

        try:
            response = self.session.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise SourceUnavailable(f"Urban Dictionary request for {term!r} failed: {e}") from e
        except ValueError as e:
            raise SourceUnavailable(f"Urban Dictionary sent an unreadable reply for {term!r}") from e

        if not isinstance(data, dict):
            raise SourceUnavailable(f"Urban Dictionary sent an unexpected reply for {term!r}")
        definitions = data.get('list') or []
        if not isinstance(definitions, list):
            raise SourceUnavailable(f"Urban Dictionary sent an unexpected reply for {term!r}")
        return definitions

    @staticmethod
    def check_definition(raw, term: str) -> Dict:
        """Make sure a raw definition is an object with text fields before it is cleaned."""
        if not isinstance(raw, dict):
            raise SourceUnavailable(f"Urban Dictionary sent a malformed definition for {term!r}")
        for field in ('definition', 'example'):
            value = raw.get(field)
            if value is not None and not isinstance(value, str):
                raise SourceUnavailable(f"Urban Dictionary sent a malformed {field} for {term!r}")
        return raw

    async def lookup(self, term: str) -> Optional[SlangEntry]:
        normalized = term.lower().strip()
        definitions = await asyncio.to_thread(self.get_definitions, normalized)
        if not definitions:
            return None
        return normalize_definition(self.check_definition(definitions[0], normalized), normalized)

    def close(self):
        self.session.close()
