"""Greeting word lookup by language code or name."""
from __future__ import annotations

DEFAULT_GREETING = "Hello"

GREETINGS: dict[str, str] = {
    "fr": "Bonjour",
    "french": "Bonjour",
    "es": "Hola",
    "spanish": "Hola",
    "de": "Guten Tag",
    "german": "Guten Tag",
    "it": "Ciao",
    "italian": "Ciao",
    "jp": "こんにちは",
    "japanese": "こんにちは",
}

def greeting_for(language: str | None) -> str:
    """
    Return the greeting word for a language.

    Args:
        language: Code or English name, matched case-insensitively.

    Returns:
        The greeting word, or "Hello" for unknown or missing languages.
    """
    if language is None:
        return DEFAULT_GREETING
    return GREETINGS.get(language.lower(), DEFAULT_GREETING)
