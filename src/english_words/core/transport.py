# src/english_words/core/transport.py
"""
Outbound HTTPS requests.

One attempt per call, no timeout, no retry. Status codes are returned as-is;
only connection-level failures raise.

The GigaChat endpoints present certificates signed by a CA that most default
trust stores do not include, so callers talking to them pass
verify_server_certificate=False. The default stays strict.
"""

import logging
from dataclasses import dataclass

import httpx

from english_words.core.errors import NetworkError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    status: int
    body: str


class Transport:
    def __init__(
        self,
        verify_server_certificate: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.verify_server_certificate = verify_server_certificate
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self.verify_server_certificate,
            timeout=None,
            transport=self._transport,
        )

    async def request(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: str | None = None,
    ) -> Response:
        content = body.encode("utf-8") if body is not None else None
        logger.debug("%s %s (verify=%s)", method, url, self.verify_server_certificate)

        try:
            async with self._client() as client:
                r = await client.request(method, url, headers=headers, content=content)
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise NetworkError(f"Request to {url} failed: {e}") from e

        logger.debug("%s %s -> %d", method, url, r.status_code)
        return Response(status=r.status_code, body=r.content.decode("utf-8", errors="replace"))
