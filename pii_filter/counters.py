"""
Per-category pseudonym counters and the statistics snapshot model.

Counters are the only source of the numeric suffix in generated tokens
([EMAIL_3], Participant 3, ...). They never deduplicate: the same value
seen twice gets two numbers.
"""
import threading
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


CATEGORIES = ("email", "name", "phone", "company")


class FilterStats(BaseModel):
    """Snapshot of a filter's state, reported after a command run"""
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool
    items_filtered: Dict[str, int] = Field(default_factory=dict, alias="itemsFiltered")


class PIICounters:
    """
    Monotonic counters for email, name, phone and company replacements.

    increment() is a locked read-modify-write so an instance shared across
    threads never loses updates.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._values: Dict[str, int] = {category: 0 for category in CATEGORIES}

    def increment(self, category: str) -> int:
        """Bump a category and return its new value."""
        with self._lock:
            self._values[category] += 1
            return self._values[category]

    def reset(self) -> None:
        with self._lock:
            for category in CATEGORIES:
                self._values[category] = 0

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._values)

    def __getitem__(self, category: str) -> int:
        return self._values[category]

    @property
    def email(self) -> int:
        return self._values["email"]

    @property
    def name(self) -> int:
        return self._values["name"]

    @property
    def phone(self) -> int:
        return self._values["phone"]

    @property
    def company(self) -> int:
        return self._values["company"]
