"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Drink-pairing violations are returned as ValidationResult values by the
engine; RuleViolationError only wraps such a result when an application
handler decides to reject the request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pos.domain.model.validation import ValidationResult


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidAmount(ValidationError):
    """A monetary amount or arithmetic factor is negative or not finite."""


class InvalidQuantity(ValidationError):
    """A quantity is not a positive whole number."""


class InvalidStateTransition(DomainException):
    """The order is not in a status that allows the requested operation."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class RuleViolationError(DomainException):
    """A drink-pairing or selection rule rejected the request."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(result.error_message or "Rule violation")
        self.result = result
