import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from errors import DatasetError
from slang_types import SlangEntry, Source

logger = logging.getLogger("slangbridge")

TERM_KEYS = ('term', 'phrase', 'slang_term')
TRANSLATION_KEYS = ('translation', 'meaning', 'standard_translation')
CONTEXT_KEYS = ('context', 'context_category')
# endings that turn a slang term into a variant of itself: ghost/ghosted, rizz/rizzler
INFLECTION_SUFFIXES = ('s', 'es', 'ed', 'er', 'ers', 'in', 'ing', 'ler')


def is_inflection(word: str, base: str) -> bool:
    """True when word is base plus one of INFLECTION_SUFFIXES."""
    if not word.startswith(base):
        return False
    return word[len(base):] in INFLECTION_SUFFIXES


def _first_value(row: Dict, keys: Tuple[str, ...]) -> str:
    for key in keys:
        value = row.get(key)
        # pandas hands back NaN for empty CSV cells
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ''


def _unwrap_rows(raw: Union[List, Dict]) -> List:
    """Accept either a bare list of rows or an object wrapping them under 'slang'."""
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict) and isinstance(raw.get('slang'), list):
        return raw['slang']
    raise DatasetError("Slang dataset must be a list or an object with a 'slang' list")


def normalize_row(row) -> Optional[SlangEntry]:
    if not isinstance(row, dict):
        return None

    term = _first_value(row, TERM_KEYS)
    translation = _first_value(row, TRANSLATION_KEYS)
    if not term or not translation:
        return None

    return SlangEntry(
        term=term,
        translation=translation,
        context=_first_value(row, CONTEXT_KEYS) or 'casual',
        example=_first_value(row, ('example',)),
        source=Source.LOCAL,
    )


def normalize_rows(raw: Union[List, Dict]) -> Tuple[SlangEntry, ...]:
    entries = []
    for row in _unwrap_rows(raw):
        entry = normalize_row(row)
        if entry is None:
            logger.debug("Dropping slang row without term or translation: %r", row)
            continue
        entries.append(entry)
    return tuple(entries)


def load_dataset(path: Union[str, Path]) -> Tuple[SlangEntry, ...]:
    """Load slang entries from a JSON file or a CSV export."""
    path = Path(path)
    try:
        if path.suffix.lower() == '.csv':
            df = pd.read_csv(path)
            raw = df.to_dict(orient='records')
        else:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
    except (OSError, ValueError) as e:
        raise DatasetError(f"Could not read slang dataset {path}: {e}") from e

    entries = normalize_rows(raw)
    logger.info("Loaded %d slang entries from %s", len(entries), path)
    return entries


class SlangDictionary:
    def __init__(self, entries: Iterable[SlangEntry] = ()):
        self._entries = tuple(entries)
        self._keys = tuple(entry.term.lower().strip() for entry in self._entries)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'SlangDictionary':
        return cls(load_dataset(path))

    @property
    def entries(self) -> Tuple[SlangEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, term: str) -> Optional[SlangEntry]:
        """
        Find a slang term in the local dataset.

        Exact matches win. Otherwise an entry matches when the input is its
        term plus an inflection ending ("rizzler" finds "rizz") or the other
        way round ("ghost" finds "ghosted"). Ties go to dataset order.
        Ordinary words that merely contain a term ("better", "understand")
        do not match.
        """
        term_lower = term.lower().strip()
        if not term_lower:
            return None

        for key, entry in zip(self._keys, self._entries):
            if key == term_lower:
                return entry

        for key, entry in zip(self._keys, self._entries):
            if is_inflection(term_lower, key) or is_inflection(key, term_lower):
                return entry

        return None

    def search(self, query: str, limit: int = 10) -> List[SlangEntry]:
        """Entries whose term or translation contains the query."""
        query = query.lower().strip()
        if not query:
            return []

        matches = [
            entry for entry in self._entries
            if query in entry.term.lower() or query in entry.translation.lower()
        ]
        return matches[:limit]
