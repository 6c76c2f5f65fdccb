import logging

from errors import GenerativeFallbackError
from llama_client import LlamaTranslator
from slang_types import ERROR_LABEL, GENERATIVE_LABEL, TranslationOutcome

logger = logging.getLogger("slangbridge")


class FallbackOrchestrator:
    """Hands whole phrases to the generative model when the dictionaries come up empty."""

    def __init__(self, generative: LlamaTranslator):
        self.generative = generative

    async def handle_no_match(self, phrase: str) -> TranslationOutcome:
        try:
            result = await self.generative.translate(phrase)
        except GenerativeFallbackError as e:
            logger.error("AI translation failed (%s): %s", type(e).__name__, e)
            return TranslationOutcome(
                translated_text=f"❌ {e.message}",
                tone_label=e.hint,
                source_label=ERROR_LABEL,
            )

        return TranslationOutcome(
            translated_text=result.translation,
            tone_label=result.context,
            source_label=GENERATIVE_LABEL,
            example_text=result.example,
        )
