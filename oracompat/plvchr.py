"""Character helpers modelled on the PLVchr package."""

from __future__ import annotations

from typing import Union

from oracompat.plvstr import InvalidParameterError, substr

__all__ = ["nth", "first", "last", "is_kind", "char_name"]

_CHAR_NAMES = (
    "NULL", "SOH", "STX", "ETX", "EOT", "ENQ", "ACK", "DEL",
    "BS", "HT", "NL", "VT", "NP", "CR", "SO", "SI",
    "DLE", "DC1", "DC2", "DC3", "DC4", "NAK", "SYN", "ETB",
    "CAN", "EM", "SUB", "ESC", "FS", "GS", "RS", "US", "SP",
)

BLANK = 1
DIGIT = 2
QUOTE = 3
OTHER = 4
LETTER = 5


def nth(string: str, n: int) -> str:
    """The ``n``-th character; 0 means the first, negative counts from the end."""
    return substr(string, n, 1)


def first(string: str) -> str:
    """The first character of ``string``."""
    return substr(string, 1, 1)


def last(string: str) -> str:
    """The last character of ``string``."""
    return substr(string, -1, 1)


def _check_not_empty(string: str) -> None:
    if not string:
        raise InvalidParameterError("Not allowed empty string.")


def _code_is_kind(code: int, kind: int) -> bool:
    """Classify a single-byte code; codes of 128 and above match no kind."""
    if kind not in (BLANK, DIGIT, QUOTE, OTHER, LETTER):
        raise InvalidParameterError("Second parametr isn't in enum {1,2,3,4,5}")
    if code >= 128:
        return False
    c = chr(code)
    if kind == BLANK:
        return c == " "
    if kind == DIGIT:
        return "0" <= c <= "9"
    if kind == QUOTE:
        return c == "'"
    if kind == OTHER:
        return (32 <= code <= 47 or 58 <= code <= 64
                or 91 <= code <= 96 or 123 <= code <= 126)
    return "A" <= c <= "Z" or "a" <= c <= "z"


def is_kind(char: Union[str, int], kind: int) -> bool:
    """Whether a character is of a kind: 1 blank, 2 digit, 3 quote, 4 other, 5 letter.

    ``char`` is either a string, whose first character is tested, or a
    character code, of which only the low byte counts. A non-ASCII first
    character counts as a letter.
    """
    if isinstance(char, int):
        return _code_is_kind(char & 0xFF, kind)
    _check_not_empty(char)
    code = ord(char[0])
    if code >= 128:
        return kind == LETTER
    return _code_is_kind(code, kind)


def char_name(string: str) -> str:
    """Name of a control or space character, or the first character itself."""
    _check_not_empty(string)
    code = ord(string[0])
    if code < len(_CHAR_NAMES):
        return _CHAR_NAMES[code]
    return substr(string, 1, 1)