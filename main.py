import asyncio
import logging

from history import TranslationHistory
from settings import load_settings
from slangbridge import SlangBridge

FALLBACK_RESPONSE = "Sorry, seems like I'm still learning more and more everyday! Check back soon and I'll have an answer to your question."
PROMPT = "What teen language can I translate for you?: "


def show_outcome(outcome):
    icon = "⚠️" if outcome.is_error else "🟢"
    print(f"{icon} {outcome.translated_text}")
    print(f"   Context & tone: {outcome.tone_label}")
    print(f"   📚 Source: {outcome.source_label}")
    if outcome.example_text:
        print(f"   ✏️ Example: \"{outcome.example_text}\"")


def show_entry(entry):
    print(f"📘 {entry.term}: {entry.translation} ({entry.context})")
    if entry.example:
        print(f"   ✏️ Example: \"{entry.example}\"")


def show_history(history):
    if not len(history):
        print("No translations yet. Start translating to see your history!")
        return
    for item in history.items():
        print(f"[{item.timestamp}] {item.original}\n   → {item.translation} ({item.tone})")


async def run(bridge, history):
    """Read commands until 'exit'. Everything runs on one event loop."""
    while True:
        user_input = (await asyncio.to_thread(input, PROMPT)).strip()
        if not user_input:
            continue
        command, _, argument = user_input.partition(' ')
        command = command.lower()
        argument = argument.strip()

        if command == 'exit':
            print("Goodbye!")
            break
        elif command == 'history':
            show_history(history)
        elif command == 'clear':
            history.clear()
            print("History cleared.")
        elif command == 'word':
            show_entry(await bridge.word_of_the_day())
        elif command == 'define':
            if not argument:
                print("Usage: define <term>")
                continue
            entry = await bridge.resolve(argument)
            if entry:
                show_entry(entry)
            else:
                print("⚠️", FALLBACK_RESPONSE)
        elif command == 'search':
            if not argument:
                print("Usage: search <text>")
                continue
            matches = bridge.search(argument)
            if not matches:
                print("⚠️", FALLBACK_RESPONSE)
            for entry in matches:
                show_entry(entry)
        else:
            outcome = await bridge.translate(user_input)
            history.add(user_input, outcome)
            show_outcome(outcome)


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    bridge = SlangBridge.from_settings(settings)

    print("Welcome to the SlangBridge translator! (Type 'exit' to quit)")
    print("Commands: history, clear, word, define <term>, search <text>\n")
    asyncio.run(run(bridge, TranslationHistory()))


if __name__ == "__main__":
    main()
