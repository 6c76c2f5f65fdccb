from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import List

from slang_types import TranslationOutcome

MAX_HISTORY = 10


@dataclass(frozen=True)
class HistoryItem:
    id: int
    original: str
    translation: str
    tone: str
    timestamp: str


class TranslationHistory:
    """The most recent translations, newest first."""

    def __init__(self, limit: int = MAX_HISTORY):
        self._items = deque(maxlen=limit)
        self._next_id = 1

    def add(self, original: str, outcome: TranslationOutcome) -> HistoryItem:
        item = HistoryItem(
            id=self._next_id,
            original=original,
            translation=outcome.translated_text,
            tone=outcome.tone_label,
            timestamp=datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
        )
        self._next_id += 1
        self._items.appendleft(item)
        return item

    def items(self) -> List[HistoryItem]:
        return list(self._items)

    def clear(self):
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
