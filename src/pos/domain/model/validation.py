"""Outcome of a business-rule check.

A result is valid, valid with warnings, or invalid with a reason.  Rule
checks return these instead of raising so the caller decides how to
present a rejection.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ValidationResult:

    is_valid: bool
    error_message: str | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @staticmethod
    def success() -> ValidationResult:
        return ValidationResult(True)

    @staticmethod
    def failure(message: str) -> ValidationResult:
        return ValidationResult(False, message)

    @staticmethod
    def warning(message: str) -> ValidationResult:
        return ValidationResult(True, None, (message,))

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def with_warnings(self, *warnings: str) -> ValidationResult:
        """Return a copy carrying *warnings* after the ones already held."""
        if not warnings:
            return self
        return replace(self, warnings=self.warnings + tuple(warnings))
