"""
Pattern-based PII detectors.

Each detector implements the Matcher interface so stronger detectors
(locale-aware phone validation, NER-based names) can replace the regex
ones without touching the counter and token machinery in PIIFilter.

Patterns are compiled with re.ASCII so \\b and \\d only consider ASCII
word characters and digits.
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Pattern, Union


# PII patterns
EMAIL_PATTERN = r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b'

# Whitespace class for separators; re.ASCII narrows \s, so Unicode spaces
# (NBSP, thin/narrow spaces, ideographic space) are listed explicitly
SPACE_CHARS = r'\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'
SEPARATOR = r'[-.' + SPACE_CHARS + r']'
SPACE = r'[' + SPACE_CHARS + r']'

# US format: (123) 456-7890 or 123-456-7890
PHONE_US_PATTERN = r'\b\(?\d{3}\)?' + SEPARATOR + r'\d{3}' + SEPARATOR + r'\d{4}\b'
# International: +1 234 567 8900 or +44 20 7946 0958
PHONE_INTERNATIONAL_PATTERN = (
    r'\b\+\d{1,3}' + SPACE + r'\d{2,4}' + SPACE + r'\d{3,4}' + SPACE + r'\d{4}\b'
)
# Dotted: 123.456.7890
PHONE_DOTTED_PATTERN = r'\b\d{3}\.\d{3}\.\d{4}\b'

# UUID fragments carry hex letters, timestamps carry colons
PHONE_REJECT_PATTERN = re.compile(r'[a-f:]', re.IGNORECASE | re.ASCII)

URL_EMAIL_PARAM_PATTERN = re.compile(r'([?&]email=)[^&\s]+')
URL_USER_ID_PARAM_PATTERN = re.compile(r'([?&](?:user_id|userId|uid)=)[^&\s]+')
REDACTED = "[REDACTED]"


@dataclass(frozen=True)
class Match:
    """A detected PII span in a piece of text"""
    start: int
    end: int
    text: str
    category: str


class Matcher(ABC):
    """
    Abstract interface for PII detectors.

    detect() returns non-overlapping spans in left-to-right order; the
    caller numbers and substitutes them.
    """

    category: str

    @abstractmethod
    def detect(self, text: str) -> List[Match]:
        """Find PII spans in text."""
        pass


class RegexMatcher(Matcher):
    """Matcher backed by a single regular expression."""

    def __init__(self, pattern: Union[str, Pattern], category: str):
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.ASCII)
        self.pattern = pattern
        self.category = category

    def accept(self, candidate: str) -> bool:
        """Disambiguation hook; rejected candidates stay in the text."""
        return True

    def detect(self, text: str) -> List[Match]:
        return [
            Match(m.start(), m.end(), m.group(0), self.category)
            for m in self.pattern.finditer(text)
            if self.accept(m.group(0))
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern.pattern!r})"


class EmailMatcher(RegexMatcher):
    def __init__(self, pattern: Union[str, Pattern] = EMAIL_PATTERN):
        super().__init__(pattern, "email")


class PhoneMatcher(RegexMatcher):
    """Phone matcher that skips hex-bearing and colon-bearing candidates."""

    def __init__(self, pattern: Union[str, Pattern]):
        super().__init__(pattern, "phone")

    def accept(self, candidate: str) -> bool:
        return PHONE_REJECT_PATTERN.search(candidate) is None


def default_email_matchers() -> List[Matcher]:
    return [EmailMatcher()]


def default_phone_matchers() -> List[Matcher]:
    """
    Phone matchers in application order.

    Each one scans the text after the previous one's replacements.
    """
    return [
        PhoneMatcher(PHONE_US_PATTERN),
        PhoneMatcher(PHONE_INTERNATIONAL_PATTERN),
        PhoneMatcher(PHONE_DOTTED_PATTERN),
    ]


def scrub_sensitive_url_params(text: str) -> str:
    """
    Redact email and user id query parameter values.

    Keeps the parameter name and its ?/& delimiter, e.g.
    "?user_id=42&x=1" -> "?user_id=[REDACTED]&x=1".
    """
    filtered = URL_EMAIL_PARAM_PATTERN.sub(rf'\g<1>{REDACTED}', text)
    return URL_USER_ID_PARAM_PATTERN.sub(rf'\g<1>{REDACTED}', filtered)
