"""Code-quality issue records: validated fields, change history, classification."""

from codeissue.changes import ChangeLedger
from codeissue.config import AppConfig, IssueConfig, LoggingConfig, load_config
from codeissue.errors import UnsupportedOperationError
from codeissue.issue import DefaultIssue
from codeissue.logging import get_logger, setup_logging
from codeissue.message import MESSAGE_MAX_LENGTH, max_message_length, truncate_message
from codeissue.models import (
    Diff,
    Duration,
    FieldDiffs,
    IssueChangeContext,
    IssueComment,
    RuleType,
    Severity,
)
from codeissue.views import ReadOnlyList

__all__ = [
    "MESSAGE_MAX_LENGTH",
    "AppConfig",
    "ChangeLedger",
    "DefaultIssue",
    "Diff",
    "Duration",
    "FieldDiffs",
    "IssueChangeContext",
    "IssueComment",
    "IssueConfig",
    "LoggingConfig",
    "ReadOnlyList",
    "RuleType",
    "Severity",
    "UnsupportedOperationError",
    "get_logger",
    "load_config",
    "max_message_length",
    "setup_logging",
    "truncate_message",
]
