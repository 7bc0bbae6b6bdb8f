"""Check that the configured GigaChat credentials work and show raw replies."""

import asyncio
import json
import sys

from english_words.core.auth import TokenProvider
from english_words.core.lookup import build_chat_body
from english_words.core.prompts import CHAT_URL
from english_words.core.settings import load_settings
from english_words.core.transport import Transport

words_to_try = sys.argv[1:] or ["run", "serendipity", "привет"]


async def check():
    settings = load_settings()
    if not settings.gigachat_credentials:
        print("✗ No credentials (set GIGACHAT_CREDENTIALS or run `english-words config set`)")
        return

    transport = Transport(verify_server_certificate=False)
    token = await TokenProvider(transport).get_access_token(settings.gigachat_credentials)
    print(f"✓ token: {token[:12]}...")
    print()

    for word in words_to_try:
        r = await transport.request(
            url=CHAT_URL,
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "Authorization": f"Bearer {token}",
            },
            body=json.dumps(build_chat_body(word)),
        )
        print(f"{word} [{r.status}]")
        try:
            print(json.loads(r.body)["choices"][0]["message"]["content"])
        except (json.JSONDecodeError, KeyError, IndexError, TypeError):
            print(r.body)
        print()


asyncio.run(check())
