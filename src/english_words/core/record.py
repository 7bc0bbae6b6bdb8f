# src/english_words/core/record.py
"""
The parsed result of one lookup.

Exactly ten string fields, each defaulting to "".
"""

from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class WordResult:
    word: str = ""
    translation: str = ""
    transcription: str = ""
    pronunciation: str = ""
    example1_en: str = ""
    example1_ru: str = ""
    example2_en: str = ""
    example2_ru: str = ""
    example3_en: str = ""
    example3_ru: str = ""

    @property
    def examples(self) -> list[tuple[str, str]]:
        """(english, russian) pairs in order."""
        return [
            (self.example1_en, self.example1_ru),
            (self.example2_en, self.example2_ru),
            (self.example3_en, self.example3_ru),
        ]

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(WordResult))
