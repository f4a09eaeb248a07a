from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InvalidEnumError(DomainError):
    """Value is not part of its allow-list."""

    def __init__(self, *, kind: str, value: object, valid_values: tuple[str, ...]):
        self.kind = kind
        self.value = value
        self.valid_values = valid_values
        super().__init__(
            f"Invalid {kind} {value!r}. Valid values: {', '.join(valid_values)}."
        )


class FetchFailureError(DomainError):
    """Request to the staking API failed (transport or non-2xx status)."""


class DecodeFailureError(FetchFailureError):
    """Response body is not JSON or lacks an expected field."""
