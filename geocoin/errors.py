"""Geocoin exception hierarchy.

All errors derive from :class:`GeocoinError`. The concrete errors also derive
from :class:`ValueError` since each one reports a bad input value, which lets
callers that only care about "bad input" catch the builtin.
"""

from typing import Any, Optional


class GeocoinError(Exception):
    """Base class for all geocoin-specific exceptions."""


class ConfigurationError(GeocoinError, ValueError):
    """Raised when board or session parameters are invalid."""

    def __init__(self, param_name: str, reason: Optional[str] = None) -> None:
        if reason:
            message = f"Invalid configuration for '{param_name}': {reason}"
            self.param_name: Optional[str] = param_name
        else:
            message = param_name
            self.param_name = None
        super().__init__(message)


class MementoError(GeocoinError, ValueError):
    """Raised when a cache memento cannot be decoded.

    Attributes:
        memento: The offending text, kept verbatim for diagnostics.
    """

    def __init__(self, memento: Any, reason: str) -> None:
        self.memento = memento
        self.reason = reason
        super().__init__(f"Invalid cache memento: {reason}")


class DuplicateCoinError(GeocoinError, ValueError):
    """Raised when a deposit would place two coins with one identity in a cache."""

    def __init__(self, coin: Any) -> None:
        self.coin = coin
        super().__init__(f"Coin {coin} is already present in the target cache")
