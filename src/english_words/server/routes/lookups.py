"""
Lookup routes: /api/lookups
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from english_words.core.errors import (
    AuthError,
    EnglishWordsError,
    InvalidWordError,
    MissingCredentialsError,
)
from english_words.core.lookup import LookupService
from english_words.core.pipeline import add_word, lookup_block
from english_words.core.settings import Settings
from english_words.core.store import DocumentStore
from english_words.server.deps import get_service, get_settings, get_store


router = APIRouter(prefix="/api/lookups", tags=["lookups"])


class LookupRequest(BaseModel):
    word: str
    dry_run: bool = False


def status_for(e: EnglishWordsError) -> int:
    if isinstance(e, (InvalidWordError, MissingCredentialsError)):
        return 400
    if isinstance(e, AuthError):
        return 401
    return 502


@router.post("")
async def create_lookup(
    req: LookupRequest,
    settings: Settings = Depends(get_settings),
    service: LookupService = Depends(get_service),
    store: DocumentStore = Depends(get_store),
):
    """Look up a word and append it to the word list."""
    try:
        if req.dry_run:
            result, block = await lookup_block(req.word, settings, service)
        else:
            added = await add_word(req.word, settings, service, store)
            result, block = added.result, added.block
    except EnglishWordsError as e:
        raise HTTPException(status_code=status_for(e), detail=str(e))

    return {
        "word": result.to_dict(),
        "markdown": block,
        "path": settings.file_path,
        "saved": not req.dry_run,
    }
