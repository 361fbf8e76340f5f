"""
Exceptions raised around the PII filter.

The filtering engine itself is total and never raises for malformed
input; these cover lookups and command-line failures.
"""

from typing import Optional, Dict, Any, Iterable


class PIIFilterError(Exception):
    """Base exception for all PII filter errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnknownPresetError(PIIFilterError):
    """Raised when a field-rule preset name is not registered."""

    def __init__(self, preset: str, available: Iterable[str] = (), **kwargs):
        self.preset = preset
        available = sorted(available)
        message = f"Unknown field-rule preset: {preset}"
        if available:
            message = f"{message} (available: {', '.join(available)})"
        super().__init__(message, **kwargs)
