"""
Word list routes: /api/document
"""

from fastapi import APIRouter, Depends, HTTPException

from english_words.core.settings import Settings
from english_words.core.store import DocumentStore
from english_words.server.deps import get_settings, get_store


router = APIRouter(prefix="/api/document", tags=["document"])


@router.get("")
async def get_document(
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
):
    """Get the word list text."""
    text = store.read(settings.file_path)
    if text is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return {"path": settings.file_path, "text": text}
