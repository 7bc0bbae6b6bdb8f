# src/english_words/core/lookup.py
"""
Look up one word: fetch a token, ask the chat model, parse the reply.
"""

import json
import logging

from english_words.core.auth import TokenProvider
from english_words.core.errors import WordLookupError
from english_words.core.parse import parse_response
from english_words.core.prompts import CHAT_URL, MODEL, SYSTEM_PROMPT, TEMPERATURE, build_prompt
from english_words.core.record import WordResult
from english_words.core.transport import Transport


logger = logging.getLogger(__name__)


def build_chat_body(word: str, model: str = MODEL, temperature: float = TEMPERATURE) -> dict:
    return {
        "model": model,
        "temperature": temperature,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(word)},
        ],
    }


def extract_content(body: str) -> str:
    """
    Pull choices[0].message.content out of a chat completion reply.

    Raises WordLookupError naming the first missing piece.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        raise WordLookupError(f"GigaChat chat response is not valid JSON: {body}")

    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        raise WordLookupError(f"GigaChat returned no completions: {body}")

    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(message, dict):
        raise WordLookupError("GigaChat completion has no message")

    content = message.get("content")
    if not isinstance(content, str):
        raise WordLookupError("GigaChat completion message has no content")

    return content


class LookupService:
    def __init__(
        self,
        transport: Transport,
        token_provider: TokenProvider | None = None,
        url: str = CHAT_URL,
        model: str = MODEL,
        temperature: float = TEMPERATURE,
    ):
        self.transport = transport
        self.token_provider = token_provider or TokenProvider(transport)
        self.url = url
        self.model = model
        self.temperature = temperature

    async def lookup_word(self, word: str, credentials: str) -> WordResult:
        logger.info("Looking up '%s'", word)
        token = await self.token_provider.get_access_token(credentials)

        response = await self.transport.request(
            url=self.url,
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "Authorization": f"Bearer {token}",
            },
            body=json.dumps(build_chat_body(word, self.model, self.temperature)),
        )

        try:
            content = extract_content(response.body)
        except WordLookupError:
            logger.warning("Chat request for '%s' returned status %d without a completion", word, response.status)
            raise

        logger.debug("Raw reply for '%s': %s", word, content)
        result = parse_response(content)
        logger.info("Looked up '%s' -> '%s'", word, result.translation)
        return result


def create_service(verify_server_certificate: bool = False) -> LookupService:
    """Service wired for the public GigaChat endpoints."""
    return LookupService(Transport(verify_server_certificate=verify_server_certificate))
