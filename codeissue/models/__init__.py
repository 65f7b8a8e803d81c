"""Value types used by issue records (Pydantic where they carry data)."""

from codeissue.models.change_context import IssueChangeContext
from codeissue.models.comment import IssueComment
from codeissue.models.duration import Duration
from codeissue.models.field_diffs import Diff, FieldDiffs
from codeissue.models.rule_type import RuleType
from codeissue.models.severity import Severity

__all__ = [
    "Diff",
    "Duration",
    "FieldDiffs",
    "IssueChangeContext",
    "IssueComment",
    "RuleType",
    "Severity",
]
