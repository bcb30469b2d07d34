"""Human-facing consistency report and message formatting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def format_error(kind: str, name: str, issue: str, fix: str | None = None) -> str:
    message = f"{kind} '{name}': {issue}"
    if fix:
        message += f" -> Fix: {fix}"
    return message


def format_warning(kind: str, name: str, issue: str) -> str:
    return f"{kind} '{name}': {issue}"


def _dedupe(messages: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(messages))


@dataclass(frozen=True, slots=True)
class ConsistencyReport:
    """Errors should block further processing; warnings are advisory."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", _dedupe(self.errors))
        object.__setattr__(self, "warnings", _dedupe(self.warnings))

    @property
    def ok(self) -> bool:
        return not self.errors

    def __add__(self, other: ConsistencyReport) -> ConsistencyReport:
        return ConsistencyReport(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        # allows ``errors, warnings = report``
        yield self.errors
        yield self.warnings


__all__ = ["ConsistencyReport", "format_error", "format_warning"]
