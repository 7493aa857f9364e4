from __future__ import annotations

import pytest

from greeting_service.common.languages import greeting_for


@pytest.mark.parametrize(
    "language, expected",
    [
        ("fr", "Bonjour"),
        ("French", "Bonjour"),
        ("ES", "Hola"),
        ("spanish", "Hola"),
        ("de", "Guten Tag"),
        ("GERMAN", "Guten Tag"),
        ("it", "Ciao"),
        ("Italian", "Ciao"),
        ("jp", "こんにちは"),
        ("japanese", "こんにちは"),
    ],
)
def test_known_languages(language: str, expected: str) -> None:
    assert greeting_for(language) == expected


@pytest.mark.parametrize("language", [None, "", "en", "klingon", " fr"])
def test_unknown_languages_fall_back_to_hello(language: str | None) -> None:
    assert greeting_for(language) == "Hello"


def test_lookup_is_case_insensitive() -> None:
    assert greeting_for("fR") == greeting_for("FR") == greeting_for("fr")
