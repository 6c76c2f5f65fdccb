from history import MAX_HISTORY, TranslationHistory
from slang_types import ERROR_LABEL, LOCAL_LABEL, TranslationOutcome


def outcome(text, tone="Neutral, casual", source=LOCAL_LABEL):
    return TranslationOutcome(translated_text=text, tone_label=tone, source_label=source)


def test_newest_first():
    history = TranslationHistory()
    history.add("no cap", outcome("no lie"))
    history.add("he has rizz", outcome("He has charm"))

    items = history.items()
    assert [i.original for i in items] == ["he has rizz", "no cap"]
    assert items[0].translation == "He has charm"
    assert items[0].id == 2


def test_keeps_most_recent_ten():
    history = TranslationHistory()
    for i in range(15):
        history.add(f"phrase {i}", outcome(f"translation {i}"))

    assert len(history) == MAX_HISTORY == 10
    assert history.items()[0].original == "phrase 14"
    assert history.items()[-1].original == "phrase 5"


def test_failed_translations_are_recorded():
    history = TranslationHistory()
    item = history.add("skibidi", outcome("❌ No Llama API key found",
                                          tone="Please check your .env file configuration",
                                          source=ERROR_LABEL))
    assert item.tone == "Please check your .env file configuration"
    assert len(history) == 1


def test_clear():
    history = TranslationHistory(limit=3)
    history.add("bet", outcome("okay"))
    history.clear()
    assert history.items() == []
