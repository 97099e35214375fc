"""Assertions for unit tests modelled on the PLUnit package."""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "PlunitAssertionError",
    "assert_true",
    "assert_false",
    "assert_null",
    "assert_not_null",
    "assert_equals",
    "assert_equals_range",
    "assert_not_equals",
    "assert_not_equals_range",
    "fail",
]


class _Unset:
    """Marks a message argument that was not given."""

    def __repr__(self) -> str:
        return "<default message>"


_UNSET: Any = _Unset()


class PlunitAssertionError(AssertionError):
    """Raised when an assertion fails; ``detail`` names the failing check."""

    def __init__(self, message: str, detail: str) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


def _message(message: Any, default: str) -> str:
    if message is _UNSET:
        return default
    if message is None:
        raise ValueError("message is NULL: Message may not be NULL.")
    return str(message)


def _failure(message: str, check: str) -> PlunitAssertionError:
    return PlunitAssertionError(message, f"Plunit.assertation fails ({check}).")


def assert_true(condition: Optional[bool], message: Optional[str] = _UNSET) -> None:
    """Fail unless ``condition`` is true; None counts as a failure."""
    text = _message(message, "plunit.assert_true exception")
    if condition is None or not condition:
        raise _failure(text, "assert_true")


def assert_false(condition: Optional[bool], message: Optional[str] = _UNSET) -> None:
    """Fail unless ``condition`` is false; None counts as a failure."""
    text = _message(message, "plunit.assert_false exception")
    if condition is None or condition:
        raise _failure(text, "assert_false")


def assert_null(actual: Any, message: Optional[str] = _UNSET) -> None:
    """Fail unless ``actual`` is None."""
    text = _message(message, "plunit.assert_null exception")
    if actual is not None:
        raise _failure(text, "assert_null")


def assert_not_null(actual: Any, message: Optional[str] = _UNSET) -> None:
    """Fail when ``actual`` is None."""
    text = _message(message, "plunit.assert_not_null exception")
    if actual is None:
        raise _failure(text, "assert_not_null")


def _within(expected: float, actual: float, tolerance: float) -> bool:
    if tolerance < 0:
        raise ValueError("cannot set range to negative number")
    return abs(float(expected) - float(actual)) < tolerance


def assert_equals(expected: Any, actual: Any, message: Optional[str] = _UNSET) -> None:
    """Fail unless both values are present and equal."""
    text = _message(message, "plunit.assert_equal exception")
    if expected is None or actual is None or not expected == actual:
        raise _failure(text, "assert_equals")


def assert_equals_range(expected: Optional[float], actual: Optional[float],
                        tolerance: Optional[float],
                        message: Optional[str] = _UNSET) -> None:
    """Fail unless ``expected`` and ``actual`` differ by less than ``tolerance``."""
    text = _message(message, "plunit.assert_equal exception")
    if expected is None or actual is None or tolerance is None:
        raise _failure(text, "assert_equals")
    if not _within(expected, actual, tolerance):
        raise _failure(text, "assert_equals")


def assert_not_equals(expected: Any, actual: Any,
                      message: Optional[str] = _UNSET) -> None:
    """Fail when either value is missing or the two are equal."""
    text = _message(message, "plunit.assert_not_equal exception")
    if expected is None or actual is None or expected == actual:
        raise _failure(text, "assert_not_equals")


def assert_not_equals_range(expected: Optional[float], actual: Optional[float],
                            tolerance: Optional[float],
                            message: Optional[str] = _UNSET) -> None:
    """Fail when ``expected`` and ``actual`` differ by less than ``tolerance``."""
    text = _message(message, "plunit.assert_not_equal exception")
    if expected is None or actual is None or tolerance is None:
        raise _failure(text, "assert_not_equals")
    if _within(expected, actual, tolerance):
        raise _failure(text, "assert_not_equals")


def fail(message: Optional[str] = _UNSET) -> None:
    """Fail at once with ``message``."""
    text = _message(message, "plunit.assert_fail exception")
    raise PlunitAssertionError(text, "Plunit.assertation (assert_fail).")