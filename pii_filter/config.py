"""
PII filter configuration.

Toggles are opt-out: every flag is on unless its environment variable
holds the literal string "false".
- PII_FILTER_ENABLED: master switch
- PII_ANONYMIZE_EMAILS: email detection and email-named fields
- PII_ANONYMIZE_NAMES: person name pseudonyms
- PII_ANONYMIZE_PHONE: phone detection
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import os


DISABLED_VALUE = "false"


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name) != DISABLED_VALUE


@dataclass
class PIIFilterConfig:
    """Configuration for a PIIFilter instance."""

    enabled: bool = True  # Master switch, False turns every operation into identity
    anonymize_emails: bool = True
    anonymize_names: bool = True
    anonymize_phone: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PIIFilterConfig":
        """Create configuration from environment variables."""
        if environ is None:
            environ = os.environ

        return cls(
            enabled=_flag(environ, "PII_FILTER_ENABLED"),
            anonymize_emails=_flag(environ, "PII_ANONYMIZE_EMAILS"),
            anonymize_names=_flag(environ, "PII_ANONYMIZE_NAMES"),
            anonymize_phone=_flag(environ, "PII_ANONYMIZE_PHONE"),
        )
