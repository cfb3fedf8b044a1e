from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class BillingError(DomainError):
    """Stripe rejected or failed a billing operation."""

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code
