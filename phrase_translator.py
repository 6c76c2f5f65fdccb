import logging
import re
import string
from typing import List, Optional

from slang_resolver import SlangResolver
from slang_types import EXTERNAL_LABEL, LOCAL_LABEL, SlangEntry, Source, TranslationOutcome
from tone_classifier import classify

logger = logging.getLogger("slangbridge")

MIN_TOKEN_LENGTH = 3
# left in place by substitution, rewritten by CLEANUP_RULES instead
PRONOUN_TERMS = ('bro', 'bruh')

CLEANUP_RULES = [
    (re.compile(r'^\s*(?:bro|bruh)\b[,!]?', re.IGNORECASE), 'He'),
    (re.compile(r',?\s*\b(?:bro|bruh)\b', re.IGNORECASE), ''),
    (re.compile(r'\s+([.,!?])'), r'\1'),
    (re.compile(r'([!?])\1+'), r'\1'),
    (re.compile(r'\.{2,}'), '.'),
    (re.compile(r'\s+'), ' '),
]


def candidate_tokens(phrase: str) -> List[str]:
    """Lower-cased tokens worth looking up, in first-occurrence order."""
    seen = set()
    tokens = []
    for raw in phrase.split():
        token = raw.strip(string.punctuation).lower()
        if len(token) < MIN_TOKEN_LENGTH or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens


def substitute(text: str, entry: SlangEntry) -> str:
    pattern = re.compile(r'\b' + re.escape(entry.term) + r'\b', re.IGNORECASE)
    return pattern.sub(lambda _: entry.translation, text)


def clean_up(text: str) -> str:
    for pattern, replacement in CLEANUP_RULES:
        text = pattern.sub(replacement, text)
    text = text.strip()
    if text:
        text = text[0].upper() + text[1:]
    return text


class PhraseTranslator:
    def __init__(self, resolver: SlangResolver):
        self.resolver = resolver

    async def find_matches(self, phrase: str) -> List[SlangEntry]:
        matches: List[SlangEntry] = []
        seen_terms = set()
        for token in candidate_tokens(phrase):
            entry = await self.resolver.resolve(token)
            if entry is None:
                continue
            key = entry.term.lower()
            if key in seen_terms:
                continue
            seen_terms.add(key)
            matches.append(entry)
        return matches

    async def translate(self, phrase: str) -> Optional[TranslationOutcome]:
        """
        Translate a phrase term by term.

        Returns None when no token resolved, so the caller can hand the
        whole phrase to the generative fallback.
        """
        matches = await self.find_matches(phrase)
        if not matches:
            logger.debug("No local or external match in %r", phrase)
            return None

        text = phrase
        for entry in matches:
            if entry.term.lower() in PRONOUN_TERMS:
                continue
            text = substitute(text, entry)
        text = clean_up(text)

        if any(entry.source == Source.EXTERNAL for entry in matches):
            source_label = EXTERNAL_LABEL
        else:
            source_label = LOCAL_LABEL

        return TranslationOutcome(
            translated_text=text,
            tone_label=classify(text),
            source_label=source_label,
            matched_entries=tuple(matches),
            example_text=matches[0].example,
        )
