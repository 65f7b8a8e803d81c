"""Who or what is changing an issue, and when."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class IssueChangeContext(BaseModel):
    """Authorship of a change: a user action or an analysis scan.

    ``external_user`` and ``webhook_source`` are set when the change comes from
    an outside system (e.g. a GitHub webhook acting for a user).
    """

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(..., description="When the change happened")
    user_uuid: str | None = Field(default=None, description="Internal user making the change")
    external_user: str | None = Field(default=None, description="User login on the external system")
    webhook_source: str | None = Field(default=None, description="External system, e.g. github")
    scan: bool = Field(default=False, description="True when the change comes from an analysis")

    @classmethod
    def by_user(
        cls,
        date: datetime,
        user_uuid: str | None,
        external_user: str | None = None,
        webhook_source: str | None = None,
    ) -> "IssueChangeContext":
        return cls(
            date=date,
            user_uuid=user_uuid,
            external_user=external_user,
            webhook_source=webhook_source,
        )

    @classmethod
    def by_scan(cls, date: datetime) -> "IssueChangeContext":
        return cls(date=date, scan=True)
