"""Errors raised by the statistic lookup helpers."""

from __future__ import annotations

from collections.abc import Iterable


class UnknownStatisticError(KeyError):
    """Raised when a statistic is requested by a name that is not registered."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        self.known = tuple(known)
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown statistic {self.name!r} (known: {', '.join(self.known)})"
