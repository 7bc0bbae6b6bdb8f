# src/english_words/core/auth.py
"""
Exchange the static GigaChat credentials for a short-lived bearer token.

Tokens are never cached: every lookup asks for a new one.
"""

import json
import logging
import uuid

from english_words.core.errors import AuthError
from english_words.core.prompts import OAUTH_URL, SCOPE
from english_words.core.transport import Transport


logger = logging.getLogger(__name__)


def generate_rq_uid() -> str:
    """Correlation id for the token request. Not a secret."""
    return str(uuid.uuid4())


class TokenProvider:
    def __init__(self, transport: Transport, url: str = OAUTH_URL, scope: str = SCOPE):
        self.transport = transport
        self.url = url
        self.scope = scope

    async def get_access_token(self, credentials: str) -> str:
        rq_uid = generate_rq_uid()
        logger.debug("Requesting access token (RqUID=%s)", rq_uid)

        try:
            response = await self.transport.request(
                url=self.url,
                method="POST",
                headers={
                    "Content-Type": "application/x-www-form-urlencoded",
                    "Accept": "application/json",
                    "Authorization": f"Basic {credentials}",
                    "RqUID": rq_uid,
                },
                body=f"scope={self.scope}",
            )
        except UnicodeEncodeError:
            # HTTP header values are ASCII only.
            raise AuthError(
                "GigaChat auth failed: credentials must be ASCII "
                "(use the base64 authorization key from developers.sber.ru)"
            ) from None

        try:
            data = json.loads(response.body)
        except json.JSONDecodeError:
            data = None

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            logger.warning("GigaChat auth failed with status %d", response.status)
            raise AuthError(f"GigaChat auth failed: {response.body}", body=response.body)

        return token
