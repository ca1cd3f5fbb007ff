from __future__ import annotations


class NflLookupError(RuntimeError):
    """Base exception for everything the lookup service raises."""


class InvalidInputError(NflLookupError, ValueError):
    """Request rejected before any network activity (empty name, bad week/season)."""


class NotFoundError(NflLookupError):
    """No candidate cleared the confidence threshold.

    This is an expected outcome (misspelling, player inactive that week), not a
    system failure. ``hint`` carries a suggestion for the user.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(NflLookupError):
    """Required setting is missing (e.g. no API key)."""
