"""
PII filter for product-management records.

Scrubs emails, phone numbers, person and company names from API records
before they reach a language model.
"""

from .config import PIIFilterConfig
from .counters import FilterStats, PIICounters
from .exceptions import PIIFilterError, UnknownPresetError
from .filter import PIIFilter, SAFE_FIELDS
from .matchers import EmailMatcher, Match, Matcher, PhoneMatcher, RegexMatcher
from .presets import available_presets, get_field_rules
from .rules import (
    AnonymizeCompany,
    AnonymizeName,
    CountedName,
    FieldRule,
    Custom,
    FullRedact,
    PassThrough,
    REDACTED_EMAIL,
    REDACTED_USER_ID,
    TextScrub,
)

__all__ = [
    "PIIFilter",
    "PIIFilterConfig",
    "PIICounters",
    "FilterStats",
    "PIIFilterError",
    "UnknownPresetError",
    "SAFE_FIELDS",
    "Match",
    "Matcher",
    "RegexMatcher",
    "EmailMatcher",
    "PhoneMatcher",
    "available_presets",
    "get_field_rules",
    "PassThrough",
    "FullRedact",
    "AnonymizeName",
    "AnonymizeCompany",
    "TextScrub",
    "CountedName",
    "FieldRule",
    "Custom",
    "REDACTED_EMAIL",
    "REDACTED_USER_ID",
]
