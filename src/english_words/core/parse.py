# src/english_words/core/parse.py
"""
Parse the model's `key: value` reply into a WordResult.

The reply format is only promised by the system prompt, so parsing is
tolerant: lines without a colon are skipped, unknown keys are dropped,
missing keys become "". A repeated key keeps its last value.
"""

from english_words.core.record import FIELD_NAMES, WordResult


def parse_lines(text: str) -> dict[str, str]:
    """All `key: value` pairs in the text, keys lowercased."""
    pairs = {}
    for line in text.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        pairs[key.strip().lower()] = value.strip()
    return pairs


def parse_response(text: str) -> WordResult:
    pairs = parse_lines(text)
    return WordResult(**{name: pairs.get(name, "") for name in FIELD_NAMES})
