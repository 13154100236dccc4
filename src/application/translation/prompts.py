"""
Prompt template for chunk translation.
The language code and the raw HTML are embedded verbatim; nothing guards
against instructions hidden in either.
"""

TRANSLATION_PROMPT = "Translate this HTML content to {language}: {content}"


def build_translation_prompt(content: str, language: str) -> str:
    return TRANSLATION_PROMPT.format(language=language, content=content)
