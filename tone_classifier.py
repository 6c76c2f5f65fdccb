"""Keyword-count tone labels for translated phrases."""

POSITIVE_WORDS = (
    'fire', 'lit', 'slay', 'goat', 'bussin', 'love', 'amazing', 'awesome',
    'great', 'cool', 'hype', 'vibing', 'excited', 'happy', 'glow up',
)
NEGATIVE_WORDS = (
    'mid', 'trash', 'cringe', 'salty', 'hate', 'bad', 'terrible', 'ugh',
    'annoying', 'angry', 'upset', 'pressed', 'toxic', 'ratio',
)
WARNING_WORDS = (
    'sus', 'dipped', 'bounce', 'sketchy', 'shady', 'careful', 'suspicious',
    'risky', 'warning', 'ghosted', 'red flag', 'cap',
)
CASUAL_WORDS = (
    'ngl', 'lowkey', 'highkey', 'tbh', 'bro', 'bruh', 'fr', 'vibe', 'chill',
    'tho', 'bet', 'deadass',
)
CAUTION_TRIGGERS = ('sus', 'dipped', 'bounce')

WARNING_CAUTIOUS = "Warning / cautious situation"
POSITIVE = "Positive, excited"
NEGATIVE = "Negative, frustrated"
WARNING_SKEPTICAL = "Warning, skeptical"
NEUTRAL = "Neutral, casual"


def count_keywords(text: str, words) -> int:
    return sum(text.count(word) for word in words)


def classify(text: str) -> str:
    lowered = text.lower()
    positive = count_keywords(lowered, POSITIVE_WORDS)
    negative = count_keywords(lowered, NEGATIVE_WORDS)
    warning = count_keywords(lowered, WARNING_WORDS)

    if warning > 0 and any(trigger in lowered for trigger in CAUTION_TRIGGERS):
        return WARNING_CAUTIOUS
    if positive > negative and positive > warning:
        return POSITIVE
    if negative > positive and negative > warning:
        return NEGATIVE
    if warning > positive and warning > negative:
        return WARNING_SKEPTICAL
    # casual words and ties read the same
    return NEUTRAL
