"""Tests for the shared types of the simple_translation package."""

from simple_translation.types import (
    DEFAULT_LANGUAGE,
    MISSING_TRANSLATION_PREFIX,
    LanguageEntry,
    missing_translation,
)


def test_missing_translation_sentinel() -> None:
    """The sentinel is the prefix followed by the key."""
    assert missing_translation("hello") == "__MISSING_TRANSLATION_hello"
    assert missing_translation("").startswith(MISSING_TRANSLATION_PREFIX)


def test_default_language_is_french() -> None:
    """The fallback default language is 'fr'."""
    assert DEFAULT_LANGUAGE == "fr"


def test_language_entry_fields() -> None:
    """A language entry exposes its code and table."""
    entry = LanguageEntry(code="en", table={"hello": "Hello"})
    assert entry.code == "en"
    assert entry.table["hello"] == "Hello"
