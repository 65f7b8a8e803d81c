"""Issue severity levels."""

from enum import Enum


class Severity(str, Enum):
    """Closed set of issue severities, from least to most severe."""

    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"

    def __str__(self) -> str:
        return self.value
