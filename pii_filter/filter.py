"""
PII filter used before records are handed to a language model.

One PIIFilter instance is one redaction session (typically one CLI run):
it owns the category toggles and the counters that number every
pseudonym it hands out.

Field resolution order inside filter_object for string values:
1. caller field rule (exact key)
2. safe field allowlist (case-insensitive) -> unchanged
3. email / phone / name / company key names (case-insensitive)
4. free-text scrubbing
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .config import PIIFilterConfig
from .counters import FilterStats, PIICounters
from .matchers import (
    Match,
    Matcher,
    default_email_matchers,
    default_phone_matchers,
    scrub_sensitive_url_params,
)

logger = logging.getLogger(__name__)


# Keys known to never carry PII (ids, timestamps, URLs, enums)
SAFE_FIELDS = frozenset({
    'id', 'uuid', 'guid', 'self', 'html', 'url', 'href', 'link',
    'createdat', 'updatedat', 'deletedat', 'timestamp', 'date',
    'type', 'status', 'state', 'role', 'archived', 'granularity',
    'startdate', 'enddate', 'timeframe', 'code', 'key',
})

EMAIL_FIELDS = frozenset({'email', 'email_address', 'user_email'})
PHONE_FIELDS = frozenset({'phone', 'phone_number', 'mobile'})
NAME_FIELDS = frozenset({'name', 'full_name', 'display_name', 'user_name', 'customer_name'})
COMPANY_FIELDS = frozenset({'company', 'company_name', 'organization'})

TOKEN_TEMPLATES = {
    "email": "[EMAIL_{n}]",
    "phone": "[PHONE_{n}]",
    "name": "Participant {n}",
    "company": "Company {n}",
}

RuleCallable = Callable[[Any, "PIIFilter"], Any]
FieldRules = Mapping[str, RuleCallable]


class PIIFilter:
    """
    Stateful PII scrubber.

    Every replacement takes the next number from the shared per-category
    counter, across calls: two emails in two separate filter_text calls
    become [EMAIL_1] and [EMAIL_2]. Identical values are not deduplicated.
    """

    def __init__(
        self,
        config: Optional[PIIFilterConfig] = None,
        email_matchers: Optional[Iterable[Matcher]] = None,
        phone_matchers: Optional[Iterable[Matcher]] = None,
    ):
        """
        Args:
            config: Toggles; read from the environment when omitted
            email_matchers: Replacement email detectors
            phone_matchers: Replacement phone detectors, applied in order
        """
        if config is None:
            config = PIIFilterConfig.from_env()

        self.enabled = config.enabled
        self.anonymize_emails = config.anonymize_emails
        self.anonymize_names = config.anonymize_names
        self.anonymize_phone = config.anonymize_phone
        self.counters = PIICounters()

        self.email_matchers: List[Matcher] = (
            list(email_matchers) if email_matchers is not None else default_email_matchers()
        )
        self.phone_matchers: List[Matcher] = (
            list(phone_matchers) if phone_matchers is not None else default_phone_matchers()
        )

        logger.debug(
            f"PIIFilter created: enabled={self.enabled}, emails={self.anonymize_emails}, "
            f"names={self.anonymize_names}, phone={self.anonymize_phone}"
        )
        if not self.enabled:
            logger.warning("PII filtering is disabled, data will pass through unchanged")

    # ------------------------------------------------------------------
    # Text filtering
    # ------------------------------------------------------------------

    def filter_text(self, text: Optional[str]) -> Optional[str]:
        """
        Replace emails, phone numbers and sensitive URL parameters in text.

        Returns the input unchanged when filtering is disabled or the text
        is empty/None.
        """
        if not self.enabled or not text or not isinstance(text, str):
            return text

        filtered = text

        if self.anonymize_emails:
            filtered = self.filter_emails(filtered)

        if self.anonymize_phone:
            filtered = self.filter_phone_numbers(filtered)

        # Runs regardless of the category toggles
        return scrub_sensitive_url_params(filtered)

    def filter_emails(self, text: str) -> str:
        return self._apply_matchers(text, self.email_matchers)

    def filter_phone_numbers(self, text: str) -> str:
        return self._apply_matchers(text, self.phone_matchers)

    def _apply_matchers(self, text: str, matchers: Iterable[Matcher]) -> str:
        # Each matcher sees the output of the previous one
        for matcher in matchers:
            text = self._substitute(text, matcher.detect(text))
        return text

    def _substitute(self, text: str, matches: List[Match]) -> str:
        if not matches:
            return text

        parts = []
        cursor = 0
        for match in matches:
            parts.append(text[cursor:match.start])
            parts.append(self._next_token(match.category))
            cursor = match.end
        parts.append(text[cursor:])
        return "".join(parts)

    def _next_token(self, category: str) -> str:
        n = self.counters.increment(category)
        return TOKEN_TEMPLATES[category].format(n=n)

    # ------------------------------------------------------------------
    # Name / company pseudonyms
    # ------------------------------------------------------------------

    def anonymize_name(self, name: Optional[str]) -> Optional[str]:
        """Replace a person name with "Participant <n>"."""
        if not self.enabled or not self.anonymize_names or not name:
            return name

        return self._next_token("name")

    def anonymize_company(self, company: Optional[str]) -> Optional[str]:
        """
        Replace a company name, keeping a size/type hint.

        "enterprise" or "corp" -> Enterprise Client <n>
        "startup"              -> Startup Client <n>
        anything else          -> Company <n>
        """
        if not self.enabled or not company:
            return company

        n = self.counters.increment("company")
        lowered = str(company).lower()
        if "enterprise" in lowered or "corp" in lowered:
            return f"Enterprise Client {n}"
        elif "startup" in lowered:
            return f"Startup Client {n}"
        else:
            return f"Company {n}"

    # ------------------------------------------------------------------
    # Object filtering
    # ------------------------------------------------------------------

    def filter_object(self, value: Any, field_rules: Optional[FieldRules] = None) -> Any:
        """
        Return a filtered deep copy of a JSON-like value.

        Args:
            value: dict, list or scalar
            field_rules: field name -> rule(value, filter); applied by exact
                key at every nesting depth and wins over all built-in
                handling, including the safe field allowlist

        Falsy input (None, {}, [], "") and a disabled filter return the
        value itself. Exceptions raised by rules propagate.
        """
        if not self.enabled or not value:
            return value

        before = self.counters.snapshot()
        filtered = self._filter_node(value, field_rules or {})

        if logger.isEnabledFor(logging.DEBUG):
            after = self.counters.snapshot()
            replaced = {k: after[k] - before[k] for k in after if after[k] != before[k]}
            logger.debug(f"Filtered {type(value).__name__}, replacements: {replaced}")

        return filtered

    def _filter_node(self, value: Any, field_rules: FieldRules) -> Any:
        if isinstance(value, Mapping):
            return self._filter_mapping(value, field_rules)
        if isinstance(value, (list, tuple)):
            return [self._filter_node(item, field_rules) for item in value]
        if isinstance(value, str):
            # Strings without a key (list items, bare values)
            return self.filter_text(value)
        return value

    def _filter_mapping(self, obj: Mapping, field_rules: FieldRules) -> Dict[Any, Any]:
        filtered = {}

        for key, value in obj.items():
            if isinstance(value, (Mapping, list, tuple)):
                filtered[key] = self._filter_node(value, field_rules)
            elif isinstance(value, str):
                filtered[key] = self._filter_field(key, value, field_rules)
            else:
                filtered[key] = value

        return filtered

    def _filter_field(self, key: Any, value: str, field_rules: FieldRules) -> Any:
        rule = field_rules.get(key)
        if rule is not None:
            return rule(value, self)

        lowered = key.lower() if isinstance(key, str) else str(key).lower()

        if lowered in SAFE_FIELDS:
            return value
        if lowered in EMAIL_FIELDS:
            return self._next_token("email")
        if lowered in PHONE_FIELDS:
            return self._next_token("phone")
        if lowered in NAME_FIELDS:
            return self.anonymize_name(value)
        if lowered in COMPANY_FIELDS:
            return self.anonymize_company(value)

        return self.filter_text(value)

    # ------------------------------------------------------------------
    # Lifecycle / introspection
    # ------------------------------------------------------------------

    def reset_counters(self) -> None:
        """Zero all counters, toggles untouched (batch processing)."""
        self.counters.reset()

    def get_stats(self) -> Dict[str, Any]:
        """
        Returns:
            {"enabled": bool, "itemsFiltered": {"email", "name", "phone", "company"}}
        """
        stats = FilterStats(enabled=self.enabled, items_filtered=self.counters.snapshot())
        return stats.model_dump(by_alias=True)
