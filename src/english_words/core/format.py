# src/english_words/core/format.py
"""
Render a WordResult as a Markdown block for the word list.

Values go in verbatim. A translation containing Markdown (say a leading
"##") will show up as Markdown in the document.
"""

from english_words.core.record import WordResult


def format_markdown(result: WordResult) -> str:
    md = f"\n## {result.word}\n"
    md += f"- **Перевод:** {result.translation}\n"
    md += f"- **Транскрипция:** {result.transcription}\n"
    md += f"- **Произношение:** {result.pronunciation}\n\n"
    md += "**Примеры:**\n"
    for i, (en, ru) in enumerate(result.examples, 1):
        md += f"{i}. {en}\n   {ru}\n"
    md += "\n---\n"
    return md
