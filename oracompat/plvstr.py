"""String helpers modelled on the PLVstr package: substrings, searching, stripping."""

from __future__ import annotations

from typing import Optional, TypeVar

_S = TypeVar("_S", str, bytes)

__all__ = [
    "InvalidParameterError",
    "substr",
    "substrb",
    "instr",
    "normalize",
    "is_prefix",
    "is_prefix_int",
    "rvrs",
    "lpart",
    "rpart",
    "lstrip",
    "rstrip",
    "left",
    "right",
    "swap",
    "betwn",
    "betwn_str",
]


class InvalidParameterError(ValueError):
    """Raised when an argument is outside the accepted domain."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid parameter: {detail}")
        self.detail = detail


def _substr(value: _S, start: int, length: int) -> _S:
    """Oracle-style substring; a negative ``length`` means "to the end"."""
    empty = value[:0]
    if start == 0:
        start = 1
    elif start < 0:
        start = len(value) + start + 1
        if start <= 0:
            return empty
    begin = start - 1
    if length < 0:
        return value[begin:]
    return value[begin:begin + length]


def substr(string: str, start: int, length: Optional[int] = None) -> Optional[str]:
    """Return ``length`` characters from ``start``; negative ``start`` counts from the end.

    A negative ``length`` yields ``None``; no ``length`` means up to the end.
    """
    if length is None:
        return _substr(string, start, -1)
    if length < 0:
        return None
    return _substr(string, start, length)


def substrb(data: bytes, start: int, length: Optional[int] = None) -> bytes:
    """Byte-oriented substring with the same start rules as :func:`substr`."""
    return _substr(bytes(data), start, -1 if length is None else length)


def instr(string: str, pattern: str, start: int = 1, nth: int = 1) -> int:
    """Position (1-based) of the ``nth`` occurrence of ``pattern``, or 0.

    A positive ``start`` searches forward from that position; zero or a
    negative ``start`` searches backward from the end.
    """
    if nth <= 0:
        raise InvalidParameterError("Four parameter isn't positive.")

    len_txt = len(string)
    len_pat = len(pattern)

    if start > 0:
        positions = range(start - 1, len_txt - len_pat + 1)
    else:
        beg = min(len_txt + start, len_txt - len_pat)
        positions = range(beg, -1, -1)

    for i in positions:
        if string.startswith(pattern, i):
            nth -= 1
            if nth == 0:
                return i + 1
    return 0


_BLANKS = frozenset("\t\n\r ")


def normalize(string: str) -> str:
    """Collapse runs of white space into single spaces and trim both ends.

    Other control characters (code point 32 and below) are dropped.
    """
    out: list[str] = []
    write_space = False
    seen_visible = False
    for ch in string:
        if ch in _BLANKS:
            write_space = seen_visible
        elif ord(ch) > 32:
            if write_space:
                out.append(" ")
                write_space = False
            out.append(ch)
            seen_visible = True
    return "".join(out)


def is_prefix(string: str, prefix: str, case_sensitive: bool = True) -> bool:
    """True when ``prefix`` starts ``string``."""
    if not case_sensitive:
        string = string.lower()
        prefix = prefix.lower()
    return string.startswith(prefix)


def _trunc_div10(n: int) -> int:
    q = abs(n) // 10
    return q if n >= 0 else -q


def is_prefix_int(number: int, prefix: int) -> bool:
    """True when the decimal digits of ``prefix`` lead those of ``number``."""
    n = number
    while True:
        if n == prefix:
            return True
        n = _trunc_div10(n)
        if n < prefix:
            return False


def rvrs(string: Optional[str], start: Optional[int] = 1,
         end: Optional[int] = None) -> Optional[str]:
    """Reverse the whole string or the part between ``start`` and ``end``."""
    if string is None:
        return None
    length = len(string)
    if start is None:
        start = 1
    if end is None:
        end = -length if start < 0 else length

    if (start > end and start > 0) or (start < end and start < 0):
        raise InvalidParameterError("Second parameter is bigger than third.")

    if start < 0:
        start, end = length + end + 1, length + start + 1

    if start == 0:
        start = 1
    end = min(end, length)

    lo = max(start - 1, 0)
    if end <= lo:
        return ""
    return string[lo:end][::-1]


def lpart(string: str, divider: str, start: int = 1, nth: int = 1,
          all_if_notfound: bool = False) -> Optional[str]:
    """Text to the left of the ``nth`` occurrence of ``divider``."""
    loc = instr(string, divider, start, nth)
    if loc == 0:
        return string if all_if_notfound else None
    return _substr(string, 1, loc - 1)


def rpart(string: str, divider: str, start: int = 1, nth: int = 1,
          all_if_notfound: bool = False) -> Optional[str]:
    """Text to the right of the ``nth`` occurrence of ``divider``."""
    loc = instr(string, divider, start, nth)
    if loc == 0:
        return string if all_if_notfound else None
    return _substr(string, loc + 1, -1)


def lstrip(string: str, substring: str, num: int = 1) -> str:
    """Remove up to ``num`` leading repetitions of ``substring``."""
    size = len(substring)
    count = 0
    while count < num and len(string) >= size and string.startswith(substring):
        string = string[size:]
        count += 1
    return string


def rstrip(string: str, substring: str, num: int = 1) -> str:
    """Remove up to ``num`` trailing repetitions of ``substring``."""
    size = len(substring)
    count = 0
    while count < num and len(string) >= size and string.endswith(substring):
        string = string[:len(string) - size]
        count += 1
    return string


def left(string: str, n: int) -> str:
    """First ``n`` characters; a negative ``n`` drops that many from the end."""
    if n < 0:
        n = len(string) + n
    n = max(n, 0)
    return _substr(string, 1, n)


def right(string: str, n: int) -> str:
    """Last ``n`` characters; a negative ``n`` drops that many from the start."""
    if n < 0:
        n = len(string) + n
    n = max(n, 0)
    return _substr(string, -n, -1)


def swap(string: Optional[str], replacement: Optional[str], start: Optional[int] = 1,
         oldlen: Optional[int] = None) -> Optional[str]:
    """Replace ``oldlen`` characters at ``start`` with ``replacement``.

    ``oldlen`` defaults to the length of ``replacement``.
    """
    if string is None or replacement is None:
        return None
    if start is None:
        start = 1
    if oldlen is None:
        oldlen = len(replacement)

    length = len(string)
    start = start if start > 0 else length + start + 1

    if start == 0 or start > length:
        return string
    if start == 1:
        return replacement + _substr(string, oldlen + 1, -1)
    return (_substr(string, 1, start - 1)
            + replacement
            + _substr(string, start + oldlen, -1))


def betwn(string: str, start: int, end: int, inclusive: bool = True) -> str:
    """Substring between the positions ``start`` and ``end``."""
    if (start < 0 < end) or (start > 0 > end) or start > end:
        raise InvalidParameterError("Wrong positions.")

    if start < 0:
        length = len(string)
        start = length + start + 1
        end = length + start + 1

    if not inclusive:
        start += 1
        end -= 1
        if start > end:
            return ""

    return _substr(string, start, end - start + 1)


def betwn_str(string: Optional[str], start: Optional[str], end: Optional[str] = None,
              startnth: Optional[int] = 1, endnth: Optional[int] = 1,
              inclusive: Optional[bool] = True,
              gotoend: Optional[bool] = False) -> Optional[str]:
    """Substring between occurrences of the ``start`` and ``end`` markers.

    ``end`` defaults to ``start``. A ``startnth`` of 0 starts at the first
    character. With ``gotoend`` a missing end marker extends to the end.
    """
    if (string is None or start is None or startnth is None or endnth is None
            or inclusive is None or gotoend is None):
        return None
    if end is None:
        end = start

    if startnth == 0:
        v_start = 1
        v_end = instr(string, end, 1, endnth)
    else:
        v_start = instr(string, start, 1, startnth)
        v_end = instr(string, end, v_start + 1, endnth)

    if v_start == 0:
        return None

    if not inclusive:
        if startnth > 0:
            v_start += len(start)
        v_end -= 1
    else:
        v_end += len(end) - 1

    if (v_start > v_end and v_end > 0) or (v_end <= 0 and not gotoend):
        return None

    if v_end <= 0:
        v_end = len(string)

    return _substr(string, v_start, v_end - v_start + 1)