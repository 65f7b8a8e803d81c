"""Remediation effort, stored with minute resolution."""

from pydantic import BaseModel, ConfigDict, Field


class Duration(BaseModel):
    """Elapsed remediation effort in minutes."""

    model_config = ConfigDict(frozen=True)

    minutes: int = Field(default=0, ge=0, description="Effort in minutes")

    @classmethod
    def create(cls, minutes: int) -> "Duration":
        return cls(minutes=minutes)

    def to_minutes(self) -> int:
        return self.minutes

    def add(self, other: "Duration") -> "Duration":
        return Duration(minutes=self.minutes + other.minutes)

    def subtract(self, other: "Duration") -> "Duration":
        """Return the difference; fails if ``other`` is the larger effort."""
        return Duration(minutes=self.minutes - other.minutes)

    def is_greater_than(self, other: "Duration") -> bool:
        return self.minutes > other.minutes
