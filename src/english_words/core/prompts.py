# src/english_words/core/prompts.py
"""
GigaChat endpoints and the prompts sent to the chat model.
"""

OAUTH_URL = "https://ngw.devices.sberbank.ru:9443/api/v2/oauth"
CHAT_URL = "https://gigachat.devices.sberbank.ru/api/v1/chat/completions"

SCOPE = "GIGACHAT_API_PERS"
MODEL = "GigaChat-Pro"
TEMPERATURE = 0.1

NOT_A_WORD = "This is not an English word."


SYSTEM_PROMPT = f"""You are a linguistic assistant. Your response must be structured as follows:
- **word**: the English word or a message indicating it's not an English word.
- **translation**: the Russian translation or a message indicating it's not an English word.
- **transcription**: IPA phonetic transcription or a message indicating it's not an English word.
- **pronunciation**: approximate Russian pronunciation hint or a message indicating it's not an English word.
- **examples**: 3 common everyday example sentences using the word. Each example must have the sentence in English and its Russian translation. Choose sentences that are frequently used in daily life.
If the input is not an English word, respond with '{NOT_A_WORD}' for each field.

Reply ONLY with the structured data, no extra text. Use exactly this format:
word: <word>
translation: <translation>
transcription: <transcription>
pronunciation: <pronunciation>
example1_en: <sentence>
example1_ru: <translation>
example2_en: <sentence>
example2_ru: <translation>
example3_en: <sentence>
example3_ru: <translation>"""


def build_prompt(word: str) -> str:
    return (
        "Please provide the translation, IPA transcription, and Russian pronunciation hint "
        f"for the English word: **{word}**. If it's not an English word, note that in your response."
    )
