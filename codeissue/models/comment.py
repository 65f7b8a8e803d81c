"""Comment on a code-quality issue."""

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field


class IssueComment(BaseModel):
    """Markdown comment left by a user on an issue."""

    key: str | None = Field(default=None, description="Comment key")
    issue_key: str | None = Field(default=None, description="Key of the commented issue")
    user_uuid: str | None = Field(default=None, description="Author of the comment")
    markdown_text: str | None = Field(default=None, description="Comment body")
    created_at: datetime | None = Field(default=None, description="When the comment was created")
    updated_at: datetime | None = Field(default=None, description="When the comment was last edited")
    is_new: bool = Field(default=False, description="True until the comment is persisted")

    @classmethod
    def create(cls, issue_key: str, user_uuid: str | None, markdown_text: str) -> "IssueComment":
        """New unsaved comment with a fresh key and current UTC timestamps."""
        now = datetime.now(UTC)
        return cls(
            key=str(uuid.uuid4()),
            issue_key=issue_key,
            user_uuid=user_uuid,
            markdown_text=markdown_text,
            created_at=now,
            updated_at=now,
            is_new=True,
        )
