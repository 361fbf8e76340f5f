"""
Field rule variants for PIIFilter.filter_object.

A field rule is any callable taking (value, pii_filter) and returning the
replacement. The classes below cover the usual policies so rule tables
read declaratively:

    rules = {
        "title": TextScrub(),
        "owner_email": FullRedact(REDACTED_EMAIL),
        "owner_name": AnonymizeName(),
        "customer": AnonymizeCompany(),
    }

Plain functions remain valid table entries.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .filter import PIIFilter


REDACTED_EMAIL = "[REDACTED_EMAIL]"
REDACTED_USER_ID = "[REDACTED_USER_ID]"


class FieldRule(ABC):
    """Abstract base for declarative field rules."""

    @abstractmethod
    def __call__(self, value: Any, pii_filter: "PIIFilter") -> Any:
        """Return the replacement for a field value."""
        pass


@dataclass(frozen=True)
class PassThrough(FieldRule):
    """Keep the value as-is."""

    def __call__(self, value, pii_filter):
        return value


@dataclass(frozen=True)
class FullRedact(FieldRule):
    """Replace the whole value with a fixed token."""
    token: str = "[REDACTED]"

    def __call__(self, value, pii_filter):
        return self.token


@dataclass(frozen=True)
class AnonymizeName(FieldRule):
    def __call__(self, value, pii_filter):
        return pii_filter.anonymize_name(value)


@dataclass(frozen=True)
class AnonymizeCompany(FieldRule):
    def __call__(self, value, pii_filter):
        return pii_filter.anonymize_company(value)


@dataclass(frozen=True)
class TextScrub(FieldRule):
    def __call__(self, value, pii_filter):
        return pii_filter.filter_text(value)


@dataclass(frozen=True)
class CountedName(FieldRule):
    """
    Participant pseudonym that ignores the name toggle.

    Used for interviewer/participant identifiers, which must never leak even
    when PII_ANONYMIZE_NAMES is off. Still respects the master switch.
    """

    def __call__(self, value, pii_filter):
        if not pii_filter.enabled or not value:
            return value
        n = pii_filter.counters.increment("name")
        return f"Participant {n}"


@dataclass(frozen=True)
class Custom(FieldRule):
    """Wrap an arbitrary (value, pii_filter) function."""
    fn: Callable[[Any, "PIIFilter"], Any]

    def __call__(self, value, pii_filter):
        return self.fn(value, pii_filter)
