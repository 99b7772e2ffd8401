"""sprintf-style interpolation of translation templates.

Placeholders follow the ``%[argnum$][+][0|'c][-][width][.precision]type``
syntax. Sequential placeholders consume the values left to right, while
``argnum$`` placeholders pick an explicit 1-based value without moving the
sequential cursor. A placeholder without a matching value is kept as written
and surplus values are ignored, so a template and its values never need to
agree on a count.

Numbers are rendered the Python way: ``%e`` and ``%g`` always use Python's
exponent notation with a default precision of 6, so ``%.3g`` of 1234.5 gives
``1.23e+03`` where JavaScript's sprintf gives ``1230``. ``%j`` takes its JSON
indentation from the width and is never padded.
"""

import itertools
import json
import logging
import re
from collections.abc import Callable, Mapping
from typing import NamedTuple

from simple_translation.exceptions import FormatSpecifierError
from simple_translation.types import Template

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(
    r"%%"
    r"|%(?:(?P<argnum>[1-9]\d*)\$)?"
    r"(?P<sign>\+)?"
    r"(?P<pad>0|'.)?"
    r"(?P<align>-)?"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<conversion>[bcdeEfgGijostTuvxX])"
)

# Integer prefix of a numeric string: "12.5" -> 12
_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+")

_SIGNED_CONVERSIONS = frozenset("deEfgGi")

_UINT32 = 2**32


class Placeholder(NamedTuple):
    """A placeholder found in a template."""

    text: str
    """The placeholder exactly as written in the template."""

    argnum: int | None
    force_sign: bool
    pad_char: str
    left_align: bool
    width: int | None
    precision: int | None
    conversion: str

    @classmethod
    def from_match(cls, match: re.Match[str]) -> "Placeholder":
        """Build a placeholder from a match of the token pattern."""
        pad = match.group("pad")
        return cls(
            text=match.group(0),
            argnum=_optional_int(match.group("argnum")),
            force_sign=match.group("sign") is not None,
            pad_char=" " if pad is None else pad[-1],
            left_align=match.group("align") is not None,
            width=_optional_int(match.group("width")),
            precision=_optional_int(match.group("precision")),
            conversion=match.group("conversion"),
        )

    def justify(self, text: str) -> str:
        """Apply the sign and padding options to a converted value."""
        sign = ""
        if self.conversion in _SIGNED_CONVERSIONS:
            if text.startswith("-"):
                sign, text = "-", text[1:]
            elif self.force_sign:
                sign = "+"

        pad_length = (self.width or 0) - len(sign + text)
        pad = self.pad_char * pad_length if pad_length > 0 else ""
        if self.left_align:
            return sign + text + pad
        if self.pad_char == "0":
            return sign + pad + text
        return pad + sign + text


def _optional_int(group: str | None) -> int | None:
    return None if group is None else int(group)


def _to_int(value: object) -> int:
    if isinstance(value, str):
        _to_float(value)
        match = _LEADING_INT_RE.match(value)
        if match is None:
            raise ValueError(f"expecting number but found {value!r}")
        return int(match.group())
    return int(value)  # type: ignore[call-overload]


def _to_float(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except ValueError as e:
        raise ValueError(f"expecting number but found {value!r}") from e


def _format_plain_float(number: float) -> str:
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _truncate(text: str, precision: int | None) -> str:
    return text if precision is None else text[:precision]


def _type_name(value: object) -> str:
    """Name the type of *value* the way JavaScript's sprintf does for %T."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__.lower()


def _convert_string(value: object, precision: int | None) -> str:
    return _truncate(str(value), precision)


def _convert_boolean(value: object, precision: int | None) -> str:
    return _truncate(str(bool(value)).lower(), precision)


def _convert_type(value: object, precision: int | None) -> str:
    return _truncate(_type_name(value), precision)


def _convert_float(value: object, precision: int | None) -> str:
    number = _to_float(value)
    if precision is None:
        return _format_plain_float(number)
    return f"{number:.{precision}f}"


def _convert_json(value: object, width: int | None) -> str:
    if width:
        return json.dumps(value, indent=width, ensure_ascii=False)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _exponent(spec: str) -> Callable[[object, int | None], str]:
    def convert(value: object, precision: int | None) -> str:
        number = _to_float(value)
        if precision is None:
            return f"{number:{spec}}"
        return f"{number:.{precision}{spec}}"

    return convert


def _unsigned(spec: str) -> Callable[[object, int | None], str]:
    def convert(value: object, _precision: int | None) -> str:
        return format(_to_int(value) % _UINT32, spec)

    return convert


_CONVERTERS: dict[str, Callable[[object, int | None], str]] = {
    "s": _convert_string,
    "t": _convert_boolean,
    "T": _convert_type,
    "v": _convert_string,
    "d": lambda value, _: str(_to_int(value)),
    "i": lambda value, _: str(_to_int(value)),
    "u": _unsigned("d"),
    "f": _convert_float,
    "e": _exponent("e"),
    "E": _exponent("E"),
    "g": _exponent("g"),
    "G": _exponent("G"),
    "x": _unsigned("x"),
    "X": _unsigned("X"),
    "o": _unsigned("o"),
    "b": _unsigned("b"),
    "c": lambda value, _: chr(_to_int(value)),
}


class Parser:
    """Interpolate values into templates.

    Example:
        >>> Parser().parse("Hello %s %s", "John")
        'Hello John %s'
        >>> Parser().parse("Hello %s", "John", "Doe")
        'Hello John'
    """

    def parse(self, template: Template, *values: object) -> str:
        """Substitute *values* into the placeholders of *template*.

        Args:
            template: The template to interpolate.
            values: The values, consumed left to right.

        Returns:
            The interpolated string.

        Raises:
            FormatSpecifierError: If a value cannot be rendered by its
                placeholder (e.g. ``%d`` given ``"abc"``).
        """
        logger.debug("Parsing template %r with %d value(s)", template, len(values))
        sequence = itertools.count()

        def substitute(match: re.Match[str]) -> str:
            if match.group(0) == "%%":
                return "%"

            placeholder = Placeholder.from_match(match)
            if placeholder.argnum is not None:
                index = placeholder.argnum - 1
            else:
                index = next(sequence)
            if index >= len(values):
                return placeholder.text
            return self._render(template, placeholder, values[index])

        return _TOKEN_RE.sub(substitute, template)

    @staticmethod
    def _render(template: Template, placeholder: Placeholder, value: object) -> str:
        """Convert *value* as requested by *placeholder*."""
        try:
            if placeholder.conversion == "j":
                return _convert_json(value, placeholder.width)
            text = _CONVERTERS[placeholder.conversion](value, placeholder.precision)
        except (TypeError, ValueError, OverflowError) as e:
            raise FormatSpecifierError(template, placeholder.text, str(e)) from e
        return placeholder.justify(text)
