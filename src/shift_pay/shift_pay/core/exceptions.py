from __future__ import annotations

from .enums import PayFailure


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PayComputationError(DomainError):
    """Base for failures of the shift pay calculation."""

    kind: PayFailure


class InvalidTimeFormat(ValidationError, PayComputationError):
    """Raised when a clock time is not a valid ``HH:MM`` value."""

    kind = PayFailure.INVALID_TIME_FORMAT


class InvalidRate(ValidationError, PayComputationError):
    """Raised when the hourly rate is negative or not a number."""

    kind = PayFailure.INVALID_RATE


class ZeroOrNegativeDuration(PayComputationError):
    kind = PayFailure.ZERO_OR_NEGATIVE_DURATION


class NoWorkableTime(PayComputationError):
    """Raised when the lunch deduction consumes the whole shift."""

    kind = PayFailure.NO_WORKABLE_TIME
