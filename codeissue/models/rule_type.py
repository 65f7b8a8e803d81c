"""Kind of rule that raised an issue."""

from enum import Enum


class RuleType(str, Enum):
    """Closed set of rule types."""

    CODE_SMELL = "CODE_SMELL"
    BUG = "BUG"
    VULNERABILITY = "VULNERABILITY"
    SECURITY_HOTSPOT = "SECURITY_HOTSPOT"

    def __str__(self) -> str:
        return self.value
