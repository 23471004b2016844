"""Exception hierarchy for scoring failures that callers must act on.

Unavailable metrics and degenerate numeric input are ordinary scoring
outcomes and are never raised.
"""

from __future__ import annotations

from typing import Any, Mapping


class ScoringError(Exception):
    """Base class for all errors raised by the scoring package."""

    default_message = "Scoring error occurred"

    def __init__(
        self, message: str | None = None, *, context: Mapping[str, Any] | None = None
    ):
        self.message = message or self.default_message
        self.context: Mapping[str, Any] = dict(context or {})
        formatted = self._format_message()
        super().__init__(formatted)

    def _format_message(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class StrategyError(ScoringError):
    """Problems constructing or binding a scoring strategy."""

    default_message = "Scoring strategy error"


class UnknownStrategyError(StrategyError):
    """Raised when a strategy name is not present in the registry."""

    default_message = "Unknown scoring strategy"


class StrategyRegistrationError(StrategyError):
    """Raised when a strategy cannot be added to the registry."""

    default_message = "Scoring strategy registration failed"


class ConfigurationError(ScoringError, ValueError):
    """Raised when scoring configuration values are invalid."""

    default_message = "Invalid scoring configuration"
