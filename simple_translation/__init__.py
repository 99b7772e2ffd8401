"""In-memory translation lookup with sprintf-style interpolation."""

from simple_translation.config import Config
from simple_translation.exceptions import (
    FormatSpecifierError,
    TranslationError,
    UnsupportedConfigFormatError,
)
from simple_translation.parser import Parser
from simple_translation.translation import Translation
from simple_translation.types import (
    DEFAULT_LANGUAGE,
    MISSING_TRANSLATION_PREFIX,
    LanguageEntry,
    missing_translation,
)

__all__ = [
    "Config",
    "DEFAULT_LANGUAGE",
    "FormatSpecifierError",
    "LanguageEntry",
    "MISSING_TRANSLATION_PREFIX",
    "Parser",
    "Translation",
    "TranslationError",
    "UnsupportedConfigFormatError",
    "missing_translation",
]
