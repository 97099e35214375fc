"""Row filters that turn empty strings into NULL and NULL into empty strings."""

from __future__ import annotations

import warnings
from typing import Any, Iterable, Mapping, Optional, Union

__all__ = ["replace_empty_strings", "replace_null_strings"]


def _warnings_wanted(raise_warnings: Union[bool, str, None]) -> bool:
    """A flag, or the text "on" / "true" as a trigger argument would carry it."""
    if isinstance(raise_warnings, str):
        return raise_warnings in ("on", "true")
    return bool(raise_warnings)


def _rewrite(row: Mapping[str, Any], string_columns: Iterable[str],
             table: Optional[str], raise_warnings: Union[bool, str, None],
             wanted: Any, replacement: Any, note: str) -> dict[str, Any]:
    warn = _warnings_wanted(raise_warnings)
    result = dict(row)
    for column in dict.fromkeys(string_columns):
        if column not in result:
            continue
        value = result[column]
        matches = value is None if wanted is None else (
            value is not None and len(value) == 0)
        if not matches:
            continue
        result[column] = replacement
        if warn:
            warnings.warn(
                f'Field "{column}" of table "{table or ""}" is {note}.',
                stacklevel=3)
    return result


def replace_empty_strings(row: Mapping[str, Any], string_columns: Iterable[str],
                          table: Optional[str] = None,
                          raise_warnings: Union[bool, str, None] = False) -> dict[str, Any]:
    """A copy of ``row`` with empty values of the string columns set to None."""
    return _rewrite(row, string_columns, table, raise_warnings,
                    "", None, "empty string (replaced by NULL)")


def replace_null_strings(row: Mapping[str, Any], string_columns: Iterable[str],
                         table: Optional[str] = None,
                         raise_warnings: Union[bool, str, None] = False) -> dict[str, Any]:
    """A copy of ``row`` with None values of the string columns set to ''."""
    return _rewrite(row, string_columns, table, raise_warnings,
                    None, "", "NULL (replaced by '')")