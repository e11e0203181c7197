"""Common hardscape-specific exceptions."""

from __future__ import annotations


class HardscapeValueError(ValueError):
    """Raised when hardscape detects invalid user-provided data.

    Parameters
    ----------
    message:
        Human-readable description of the failure.
    field:
        Name of the offending input field (``None`` when the failure is not tied to a single
        field).
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


__all__ = ["HardscapeValueError"]
