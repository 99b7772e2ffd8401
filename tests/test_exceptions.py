"""Tests for the custom exception hierarchy."""

from pathlib import Path

import pytest

from simple_translation.exceptions import (
    FormatSpecifierError,
    TranslationError,
    UnsupportedConfigFormatError,
)


@pytest.mark.parametrize(
    "exception",
    [
        FormatSpecifierError("Total: %d", "%d", "bad value"),
        UnsupportedConfigFormatError(Path("/tmp/config.json")),
    ],
    ids=["FormatSpecifierError", "UnsupportedConfigFormatError"],
)
def test_all_inherit_from_base(exception: TranslationError) -> None:
    """Every custom exception is a TranslationError."""
    assert isinstance(exception, TranslationError)


class TestFormatSpecifierError:
    """Tests for FormatSpecifierError."""

    def test_message_includes_specifier_and_template(self) -> None:
        """Error message names the placeholder and its template."""
        error = FormatSpecifierError("Total: %d", "%d", "expecting number")
        assert "'%d'" in str(error)
        assert "'Total: %d'" in str(error)
        assert "expecting number" in str(error)

    def test_attributes(self) -> None:
        """The template and specifier attributes are stored."""
        error = FormatSpecifierError("Total: %d", "%d", "expecting number")
        assert error.template == "Total: %d"
        assert error.specifier == "%d"


class TestUnsupportedConfigFormatError:
    """Tests for UnsupportedConfigFormatError."""

    def test_message_includes_suffix(self) -> None:
        """Error message contains the rejected suffix."""
        error = UnsupportedConfigFormatError(Path("/tmp/config.json"))
        assert str(error) == "Unsupported file format: '.json'"

    def test_is_a_value_error(self) -> None:
        """Callers catching ValueError still catch it."""
        with pytest.raises(ValueError):
            raise UnsupportedConfigFormatError(Path("config.toml"))

    def test_path_attribute(self) -> None:
        """The path attribute stores the original path."""
        path = Path("/tmp/config.json")
        assert UnsupportedConfigFormatError(path).path == path
