# src/english_words/core/pipeline.py
"""
Look up a word and append it to the word list.

The document is only touched after the lookup has fully succeeded.
"""

import logging
from dataclasses import dataclass

from english_words.core.errors import InvalidWordError, MissingCredentialsError
from english_words.core.format import format_markdown
from english_words.core.lookup import LookupService
from english_words.core.record import WordResult
from english_words.core.settings import Settings
from english_words.core.store import DocumentStore, append_to_document


logger = logging.getLogger(__name__)


@dataclass
class AddedWord:
    result: WordResult
    block: str
    path: str


def check_request(word: str, settings: Settings) -> str:
    word = word.strip()
    if not word:
        raise InvalidWordError("Please enter a word.")
    if not settings.gigachat_credentials:
        raise MissingCredentialsError("GigaChat credentials not set. Check your settings.")
    return word


async def lookup_block(word: str, settings: Settings, service: LookupService) -> tuple[WordResult, str]:
    """Lookup + format, without saving."""
    word = check_request(word, settings)
    result = await service.lookup_word(word, settings.gigachat_credentials)
    return result, format_markdown(result)


async def add_word(
    word: str,
    settings: Settings,
    service: LookupService,
    store: DocumentStore,
) -> AddedWord:
    result, block = await lookup_block(word, settings, service)
    append_to_document(store, settings.file_path, block)
    logger.info("'%s' saved to %s", result.word, settings.file_path)
    return AddedWord(result=result, block=block, path=settings.file_path)
