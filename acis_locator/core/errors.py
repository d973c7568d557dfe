"""
Locator errors.

Not-found is data, not an exception: a failed resolution comes back as a
``LocateResult`` with ``found == False``.  These exceptions exist for the
cases where the caller has asked for absence to be fatal, or where a
mandatory dependency of a found toolkit cannot be satisfied.
"""

from __future__ import annotations


class LocatorError(Exception):
    """Base class for locator failures."""


class ToolkitNotFoundError(LocatorError):
    """Raised when a toolkit marked as required could not be resolved."""

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = list(missing or [])


class DependencyError(LocatorError):
    """Raised when a mandatory runtime dependency cannot be resolved."""
