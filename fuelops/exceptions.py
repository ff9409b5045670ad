"""Exception types shared across the dashboard."""

from __future__ import annotations


class FuelOpsError(Exception):
    """Base class for dashboard errors."""


class StationInputError(FuelOpsError, ValueError):
    """Raised when a form submission cannot be applied to the station state."""


class AssistantError(FuelOpsError):
    """Raised when the assistant call cannot produce a reply."""


class AssistantConfigError(AssistantError):
    """Raised when no API key is available for the assistant."""
