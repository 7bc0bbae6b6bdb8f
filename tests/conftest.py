# tests/conftest.py
"""Shared fixtures: a fake GigaChat behind httpx.MockTransport."""

import json

import httpx
import pytest

from english_words.core.lookup import LookupService
from english_words.core.settings import Settings
from english_words.core.store import FileDocumentStore
from english_words.core.transport import Transport


RUN_REPLY = (
    "word: run\n"
    "translation: бежать\n"
    "transcription: /rʌn/\n"
    "pronunciation: ран\n"
    "example1_en: I run every day.\n"
    "example1_ru: Я бегаю каждый день.\n"
    "example2_en: She runs a small shop.\n"
    "example2_ru: Она управляет маленьким магазином.\n"
    "example3_en: Let's run to the bus.\n"
    "example3_ru: Давай побежим к автобусу."
)


def completion(content: str) -> dict:
    return {
        "choices": [
            {"message": {"role": "assistant", "content": content}, "index": 0, "finish_reason": "stop"}
        ],
        "model": "GigaChat-Pro",
        "object": "chat.completion",
    }


class FakeGigaChat:
    """Answers token and chat requests, remembering every request it saw."""

    def __init__(self, token_reply=None, chat_reply=None):
        self.token_reply = {"access_token": "T1", "expires_at": 1706026848841} if token_reply is None else token_reply
        self.chat_reply = completion(RUN_REPLY) if chat_reply is None else chat_reply
        self.requests: list[httpx.Request] = []

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def _reply(self, body) -> httpx.Response:
        if isinstance(body, str):
            return httpx.Response(200, content=body.encode("utf-8"))
        return httpx.Response(200, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/v2/oauth":
            return self._reply(self.token_reply)
        if request.url.path == "/api/v1/chat/completions":
            if request.headers.get("Authorization") != "Bearer T1":
                return httpx.Response(401, json={"status": 401, "message": "Unauthorized"})
            return self._reply(self.chat_reply)
        return httpx.Response(404, json={"message": "not found"})

    def chat_body(self) -> dict:
        chat = [r for r in self.requests if r.url.path == "/api/v1/chat/completions"]
        return json.loads(chat[-1].content)


@pytest.fixture
def gigachat():
    return FakeGigaChat()


@pytest.fixture
def transport(gigachat):
    return Transport(transport=httpx.MockTransport(gigachat))


@pytest.fixture
def service(transport):
    return LookupService(transport)


@pytest.fixture
def settings():
    return Settings(gigachat_credentials="Y2xpZW50OnNlY3JldA==", file_path="English Words.md")


@pytest.fixture
def store(tmp_path):
    return FileDocumentStore(tmp_path)
