"""
Shared dependencies for routes.
"""

import os

from english_words.core.lookup import LookupService, create_service
from english_words.core.settings import Settings, load_settings
from english_words.core.store import DocumentStore, FileDocumentStore


VAULT_ENV = "ENGLISH_WORDS_VAULT"


def get_settings() -> Settings:
    return load_settings()


def get_store() -> DocumentStore:
    return FileDocumentStore(os.environ.get(VAULT_ENV, "."))


def get_service() -> LookupService:
    return create_service(verify_server_certificate=False)
