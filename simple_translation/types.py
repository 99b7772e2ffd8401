"""Module containing custom types for the simple_translation package."""
from collections.abc import Mapping
from typing import NamedTuple

LanguageCode = str
"""Opaque identifier of a language (e.g. "en", "fr"), never normalized."""

TranslationKey = str
"""Identifier of a template, unique within one language table."""

Template = str
"""A string holding zero or more sprintf-style placeholders."""

TranslationTable = Mapping[TranslationKey, Template]
"""All templates of a language, indexed by translation key."""

DEFAULT_LANGUAGE: LanguageCode = "fr"
"""Language selected by a registry until set_language is called."""

MISSING_TRANSLATION_PREFIX = "__MISSING_TRANSLATION_"


class LanguageEntry(NamedTuple):
    """A language registered in a translation registry."""

    code: LanguageCode
    table: TranslationTable


def missing_translation(key: TranslationKey) -> str:
    """Return the sentinel returned by translate when *key* cannot be resolved."""
    return f"{MISSING_TRANSLATION_PREFIX}{key}"
