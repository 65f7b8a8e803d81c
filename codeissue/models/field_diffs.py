"""Field-level changes of an issue grouped into one diff record."""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field


class Diff(BaseModel):
    """Old and new value of a single field."""

    old_value: Any = None
    new_value: Any = None


class FieldDiffs(BaseModel):
    """Diff record: field name -> Diff, plus who made the change.

    Entries keep insertion order. A field appears at most once; setting it
    again replaces its entry.
    """

    diffs: Dict[str, Diff] = Field(default_factory=dict, description="Changed fields in edit order")
    issue_key: str | None = Field(default=None, description="Key of the changed issue")
    user_uuid: str | None = Field(default=None, description="Internal user behind the change")
    external_user: str | None = Field(default=None, description="User login on the external system")
    webhook_source: str | None = Field(default=None, description="External system that sent the change")
    creation_date: datetime | None = Field(default=None, description="When the change was made")

    def get(self, field: str) -> Diff | None:
        """Return the diff of ``field``, or None when it was not touched."""
        return self.diffs.get(field)

    def set_diff(self, field: str, old_value: Any, new_value: Any) -> None:
        self.diffs[field] = Diff(old_value=old_value, new_value=new_value)

    def field_names(self) -> list[str]:
        return list(self.diffs)
