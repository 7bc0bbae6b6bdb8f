# src/english_words/core/errors.py
"""
Errors raised by the lookup pipeline.

Every error carries one human-readable message; callers show str(e).
"""


class EnglishWordsError(Exception):
    """Base class for all lookup pipeline errors."""


class NetworkError(EnglishWordsError):
    """Connection, DNS or TLS failure while talking to an endpoint."""


class AuthError(EnglishWordsError):
    """Token endpoint reply did not contain an access token."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class WordLookupError(EnglishWordsError):
    """Chat reply is missing the expected completion structure."""


class InvalidWordError(EnglishWordsError):
    pass


class MissingCredentialsError(EnglishWordsError):
    pass
