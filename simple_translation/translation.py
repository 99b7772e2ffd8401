"""In-memory registry of translation tables.

A :class:`Translation` holds the tables of every registered language, the
language currently selected and the default language it started with.
Lookups never raise: a key that cannot be resolved, or a template that cannot
be rendered, yields the ``__MISSING_TRANSLATION_<key>`` sentinel.
"""

import logging

from simple_translation.parser import Parser
from simple_translation.types import (
    DEFAULT_LANGUAGE,
    LanguageCode,
    LanguageEntry,
    TranslationKey,
    TranslationTable,
    missing_translation,
)

logger = logging.getLogger(__name__)


class Translation:
    """Registry of languages and their translation tables.

    Usage:
        translation = Translation()
        translation.add_language("en", {"hello_name": "Hello %s"})
        translation.add_language("fr", {"hello_name": "Bonjour %s"})
        translation.set_language("en")
        translation.translate("hello_name", "John")  # "Hello John"
        translation.set_language("fr")
        translation.translate("hello_name", "John")  # "Bonjour John"
        translation.translate("hello_name")  # "Bonjour %s"
    """

    def __init__(
        self,
        default_language: LanguageCode = DEFAULT_LANGUAGE,
        parser: Parser | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            default_language: Language selected until set_language is called.
            parser: Parser used to interpolate templates.
        """
        self._default_language = default_language
        self._current_language = default_language
        self._entries: list[LanguageEntry] = []
        self._parser = parser or Parser()
        logger.info("Translation set to default language: %s", default_language)

    @property
    def current_language(self) -> LanguageCode:
        """Return the selected language code, registered or not."""
        return self._current_language

    @property
    def default_language(self) -> LanguageCode:
        """Return the language code the registry was created with."""
        return self._default_language

    @property
    def all_languages(self) -> list[LanguageCode]:
        """Return the code of every registered language, in registration order."""
        return [entry.code for entry in self._entries]

    def add_language(
        self, language: LanguageCode, translations: TranslationTable
    ) -> None:
        """Register the translation table of a language.

        Registering a code twice keeps both entries; lookups use the first one.
        """
        logger.info("Adding translation for language: %s", language)
        self._entries.append(LanguageEntry(code=language, table=translations))

    def set_language(self, language: LanguageCode) -> None:
        """Select the language used by translate."""
        logger.info("Setting language to: %s", language)
        self._current_language = language

    def _find_entry(self, language: LanguageCode) -> LanguageEntry | None:
        return next(
            (entry for entry in self._entries if entry.code == language),
            None,
        )

    def translate(self, key: TranslationKey, *values: object) -> str:
        """Translate a key in the current language.

        Args:
            key: The key to look up.
            values: Values interpolated into the template, left to right.

        Returns:
            The interpolated template, or the missing translation sentinel when
            the current language or the key is unknown or rendering fails.
        """
        try:
            entry = self._find_entry(self._current_language)
            if entry is None or key not in entry.table:
                logger.debug(
                    "No translation for %r in language %r",
                    key,
                    self._current_language,
                )
                return missing_translation(key)
            return self._parser.parse(entry.table[key], *values)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error while translating %r: %s", key, e)
            return missing_translation(key)
