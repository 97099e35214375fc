"""Template substitution modelled on the PLVsubst package."""

from __future__ import annotations

from typing import Any, Iterable, Optional

__all__ = ["TemplateError", "Substitutor", "DEFAULT_KEYWORD"]

DEFAULT_KEYWORD = "%s"


class TemplateError(ValueError):
    """Raised for a template that cannot be filled or a missing keyword."""


def _split(values: str, delimiter: Optional[str]) -> list[str]:
    if values == "":
        return []
    if delimiter is None:
        return list(values)
    if delimiter == "":
        return [values]
    return values.split(delimiter)


class Substitutor:
    """Fills templates, replacing each keyword occurrence with the next value."""

    def __init__(self) -> None:
        self._keyword = DEFAULT_KEYWORD

    def string(self, template: Optional[str], values: Optional[Iterable[Any]],
               keyword: Optional[str] = None) -> Optional[str]:
        """Replace keyword occurrences in ``template`` by ``values`` in order.

        ``None`` values are written as ``NULL``. Surplus values are ignored;
        too few raise :class:`TemplateError`.
        """
        if template is None or values is None:
            return None
        if keyword is None:
            keyword = self._keyword

        supply = iter(values)
        out: list[str] = []
        i = 0
        while i < len(template):
            if template.startswith(keyword, i):
                try:
                    value = next(supply)
                except StopIteration:
                    raise TemplateError(
                        "too few parameters specified for template string"
                    ) from None
                out.append("NULL" if value is None else str(value))
                i += len(keyword)
            else:
                out.append(template[i])
                i += 1
        return "".join(out)

    def string_from_text(self, template: Optional[str], values: Optional[str],
                         delimiter: Optional[str] = ",",
                         keyword: Optional[str] = None) -> Optional[str]:
        """Like :meth:`string`, with values given as delimited text."""
        if template is None or values is None:
            return None
        return self.string(template, _split(values, delimiter), keyword)

    def setsubst(self, keyword: Optional[str] = DEFAULT_KEYWORD) -> None:
        """Set the substitution keyword."""
        if keyword is None:
            raise TemplateError("substitution keyword may not be NULL")
        self._keyword = keyword

    def setsubst_default(self) -> None:
        """Restore the default keyword."""
        self._keyword = DEFAULT_KEYWORD

    def subst(self) -> str:
        """The current substitution keyword."""
        return self._keyword