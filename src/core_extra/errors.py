"""Structured error types for the strategy registry and vectorized backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .strategies import AgreementReport


class CoreExtraError(Exception):
    """Base class for structured core-extra errors."""


class UnknownStrategyError(CoreExtraError, KeyError):
    """Lookup of a family or strategy name that is not in the catalog."""

    def __init__(self, name: str, *, known: tuple[str, ...] = ()) -> None:
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        if not self.known:
            return f"unknown strategy name {self.name!r}"
        return f"unknown strategy name {self.name!r}; expected one of {', '.join(self.known)}"


class StrategyMismatchError(CoreExtraError):
    """Strategies of one family returned different results for the same input."""

    def __init__(self, report: "AgreementReport") -> None:
        self.report = report
        super().__init__(
            f"{report.family}: {', '.join(report.mismatched)} disagree with {report.reference}"
        )


class UnsupportedElementError(CoreExtraError, TypeError):
    """Vectorized strategy received elements that do not form a numeric array."""
