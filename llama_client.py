import logging
import re
from typing import List, Optional

import llama_api_client
from llama_api_client import AsyncLlamaAPIClient

from errors import (
    AuthFailed,
    GenerativeFallbackError,
    MissingCredential,
    QuotaExceeded,
    RateLimited,
    Unavailable,
)
from settings import DEFAULT_MODEL
from slang_types import GenerativeResult

logger = logging.getLogger("slangbridge")

SYSTEM_PROMPT = (
    "You are a helpful translator that converts teen slang into clear, parent-friendly English. "
    "Format your response exactly like this:\n\n"
    "Teen phrase: [original phrase]\n"
    "Parent translation: [clear parent-friendly translation]\n"
    "Context: [brief explanation of the situation/tone]\n"
    "Example in use:\n"
    "Teen: \"[example with teen phrase]\"\n"
    "Parent: \"[example with parent translation]\"\n\n"
    "Keep translations natural, positive, and easy for parents to understand."
)
MAX_COMPLETION_TOKENS = 200
TEMPERATURE = 0.7
DEFAULT_CONTEXT = "AI translation provided"


def _strip_label(line: str, label: str) -> str:
    return line[len(label):].strip()


def parse_translation(text: str) -> GenerativeResult:
    """
    Pull translation, context and example out of the model's reply.

    The labelled format from SYSTEM_PROMPT is tried first. When the model
    ignores it, the first line mentioning a translation (or simply the first
    line) becomes the translation and a line about context or usage becomes
    the context.
    """
    lines: List[str] = [line.strip() for line in text.split('\n') if line.strip()]
    translation = ''
    context = ''
    example = ''

    for line in lines:
        if line.startswith('Parent translation:'):
            translation = _strip_label(line, 'Parent translation:')
        elif line.startswith('Context:'):
            context = _strip_label(line, 'Context:')
        elif line.startswith('Parent:') and not example:
            example = _strip_label(line, 'Parent:').replace('"', '')

    if not translation:
        guess = next((line for line in lines if 'translation:' in line or 'means:' in line), None)
        if guess is None:
            guess = lines[0] if lines else text
        guess = re.sub(r'.*translation:\s*', '', guess, flags=re.IGNORECASE)
        translation = re.sub(r'.*means:\s*', '', guess, flags=re.IGNORECASE).strip()

    if not context:
        guess = next((line for line in lines if 'Context:' in line or 'Used to' in line), None)
        if guess is None:
            context = DEFAULT_CONTEXT
        else:
            guess = re.sub(r'.*Context:\s*', '', guess)
            context = re.sub(r'.*Used to\s*', 'Used to ', guess).strip()

    return GenerativeResult(translation=translation, context=context, example=example)


def map_api_error(error: Exception) -> GenerativeFallbackError:
    """Translate a Llama SDK exception into one of our fallback failures."""
    detail = str(error)
    if isinstance(error, llama_api_client.APIStatusError):
        body = f"{detail} {error.body}"
        if 'insufficient_quota' in body:
            return QuotaExceeded(detail)
        if error.status_code in (401, 403):
            return AuthFailed(detail)
        if error.status_code == 429:
            return RateLimited(detail)
        return Unavailable(f"AI translation failed: {error.status_code}")
    return Unavailable(detail)


class LlamaTranslator:
    """Whole-phrase translation through the Llama API, used when no term resolves."""

    def __init__(self, api_key: Optional[str], model: str = DEFAULT_MODEL,
                 client: Optional[AsyncLlamaAPIClient] = None):
        self.api_key = api_key
        self.model = model
        self._client = client

    async def _complete(self, client: AsyncLlamaAPIClient, phrase: str) -> str:
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": f'Translate this teen language: "{phrase}"'},
                ],
                max_completion_tokens=MAX_COMPLETION_TOKENS,
                temperature=TEMPERATURE,
            )
        except llama_api_client.APIError as e:
            logger.error("Llama API error: %s", e)
            raise map_api_error(e) from e

        try:
            return response.completion_message.content.text.strip()
        except AttributeError as e:
            raise Unavailable("Llama API returned a reply without text") from e

    async def translate(self, phrase: str) -> GenerativeResult:
        if not self.api_key:
            raise MissingCredential()

        if self._client is not None:
            reply = await self._complete(self._client, phrase)
        else:
            # one client per call: its connection pool belongs to the running event loop.
            # retries stay off, so the pipeline makes exactly one attempt
            async with AsyncLlamaAPIClient(api_key=self.api_key, max_retries=0) as client:
                reply = await self._complete(client, phrase)

        if not reply:
            raise Unavailable("Llama API returned an empty reply")
        return parse_translation(reply)
