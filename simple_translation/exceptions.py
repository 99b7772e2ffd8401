"""Custom exception hierarchy for simple translation."""

from pathlib import Path


class TranslationError(Exception):
    """Base exception for all simple translation errors."""


class FormatSpecifierError(TranslationError):
    """A placeholder could not be rendered with the value it was given."""

    def __init__(self, template: str, specifier: str, message: str) -> None:
        super().__init__(f"Cannot render {specifier!r} in {template!r}: {message}")
        self.template = template
        self.specifier = specifier


class UnsupportedConfigFormatError(TranslationError, ValueError):
    """The configuration file is not in a supported format."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Unsupported file format: '{path.suffix}'")
        self.path = path
