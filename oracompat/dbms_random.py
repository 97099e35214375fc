"""Pseudo-random numbers and strings in the manner of the DBMS_RANDOM package."""

from __future__ import annotations

import math
import random as _random
import zlib
from typing import Optional, Union

__all__ = ["DbmsRandom", "ltqnorm", "RAND_MAX"]

RAND_MAX = 2**31 - 1

# Coefficients of the rational approximations.
_A = (-3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
      1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00)
_B = (-5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
      6.680131188771972e+01, -1.328068155288572e+01)
_C = (-7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
      -2.549732539343734e+00, 4.374664141464968e+00, 2.938163982698783e+00)
_D = (7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
      3.754408661907416e+00)

_LOW = 0.02425
_HIGH = 0.97575

_CHARSETS = {
    "a": "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "l": "abcdefghijklmnopqrstuvwxyz",
    "u": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "x": "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "p": "`1234567890-=qwertyuiop[]asdfghjkl;'zxcvbnm,./!@#$%^&*()_+"
         "QWERTYUIOP{}|ASDFGHJKL:\"ZXCVVBNM<>? ",
}


def _tail(q: float) -> float:
    num = ((((_C[0] * q + _C[1]) * q + _C[2]) * q + _C[3]) * q + _C[4]) * q + _C[5]
    den = (((_D[0] * q + _D[1]) * q + _D[2]) * q + _D[3]) * q + 1
    return num / den


def ltqnorm(p: float) -> float:
    """Approximate inverse of the standard normal distribution function.

    Relative error is below 1.15e-9. ``p`` must lie in [0, 1]; the ends
    map to minus and plus infinity.
    """
    if p < 0 or p > 1:
        raise ValueError("probability must lie between 0 and 1")
    if p == 0:
        return -math.inf
    if p == 1:
        return math.inf
    if p < _LOW:
        return _tail(math.sqrt(-2 * math.log(p)))
    if p > _HIGH:
        return -_tail(math.sqrt(-2 * math.log(1 - p)))
    q = p - 0.5
    r = q * q
    num = (((((_A[0] * r + _A[1]) * r + _A[2]) * r + _A[3]) * r + _A[4]) * r + _A[5]) * q
    den = ((((_B[0] * r + _B[1]) * r + _B[2]) * r + _B[3]) * r + _B[4]) * r + 1
    return num / den


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


class DbmsRandom:
    """A seeded generator offering the DBMS_RANDOM operations."""

    def __init__(self, seed: Optional[Union[int, str]] = None) -> None:
        self._rng = _random.Random()
        if seed is not None:
            self.seed(seed)

    def _rand(self) -> int:
        """A uniform integer in [0, RAND_MAX]."""
        return self._rng.getrandbits(31)

    def _unit(self) -> float:
        return self._rand() / (RAND_MAX + 1)

    def initialize(self, seed: int) -> None:
        """Seed the generator with an integer."""
        self._rng.seed(int(seed))

    def seed(self, value: Union[int, str]) -> None:
        """Reset the seed from an integer or from text."""
        if isinstance(value, str):
            self._rng.seed(zlib.crc32(value.encode("utf-8")))
        else:
            self._rng.seed(int(value))

    def normal(self) -> float:
        """A number drawn from the standard normal distribution."""
        return ltqnorm((self._rand() + 1) / (RAND_MAX + 2))

    def random(self) -> int:
        """A signed 32-bit random integer."""
        return _to_int32(2 * (self._rand() - RAND_MAX // 2))

    def string(self, option: Optional[str], length: Optional[int]) -> str:
        """A random string of ``length`` characters.

        ``option`` selects the characters: 'a' mixed-case letters, 'l' lower
        case, 'u' upper case, 'x' upper-case alphanumerics, 'p' printable;
        either case is accepted.
        """
        if option is None or length is None:
            raise ValueError("an argument is NULL")
        charset = _CHARSETS.get(option[:1].lower()) if option[:1].isascii() else None
        if charset is None:
            raise ValueError(
                f"unknown option '{option}'; available option \"aAlLuUxXpP\"")
        size = len(charset)
        return "".join(charset[int(self._unit() * size)] for _ in range(length))

    def terminate(self) -> None:
        """End use of the generator; nothing needs releasing."""

    def value(self, low: Optional[float] = None,
              high: Optional[float] = None) -> Optional[float]:
        """A number in [0, 1), or in [low, high) when bounds are given.

        Returns None when ``low`` exceeds ``high`` or only one bound is given.
        """
        if low is None and high is None:
            return self._unit()
        if low is None or high is None or low > high:
            return None
        return self._unit() * (high - low) + low