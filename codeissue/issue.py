"""Code-quality issue record with validated fields and a change history."""

from datetime import datetime
from typing import Any, Dict, Iterable, List

from codeissue.changes import ChangeLedger
from codeissue.message import MESSAGE_MAX_LENGTH, truncate_message
from codeissue.models.change_context import IssueChangeContext
from codeissue.models.comment import IssueComment
from codeissue.models.duration import Duration
from codeissue.models.field_diffs import FieldDiffs
from codeissue.models.rule_type import RuleType
from codeissue.models.severity import Severity
from codeissue.views import ReadOnlyList


def _string_set(name: str, value: Iterable[str] | None) -> frozenset[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        raise ValueError(f"{name} must be a collection of strings, not a string (got {value!r})")
    return frozenset(value)


class DefaultIssue:
    """Mutable issue record owned by a single analysis or workflow.

    Equality and hashing use ``key`` only. Optional fields are None when
    unset; ``tags`` and ``code_variants`` read back as empty sets instead.
    Setters raise ValueError and keep the previous value when the new one is
    invalid.
    """

    def __init__(self, key: str | None = None, message_max_length: int = MESSAGE_MAX_LENGTH) -> None:
        self.key = key
        self._message_max_length = message_max_length

        self.rule_key: str | None = None
        self.component_uuid: str | None = None
        self.component_key: str | None = None
        self.project_uuid: str | None = None
        self.project_key: str | None = None
        self.checksum: str | None = None
        self.rule_description_context_key: str | None = None

        self.resolution: str | None = None
        self.assignee_uuid: str | None = None
        self.author_login: str | None = None
        self.manual_severity = False
        self.effort: Duration | None = None

        self.creation_date: datetime | None = None
        self.update_date: datetime | None = None
        self.close_date: datetime | None = None
        # When the issue was loaded for the current analysis
        self.selected_at: datetime | None = None

        self.is_new = False
        self.is_copied = False
        self.is_changed = False
        self.send_notifications = False
        self.is_from_external_rule_engine = False
        self.is_prioritized_rule = False
        self.is_quick_fix_available = False
        self.is_on_changed_line = False
        self.is_new_code_reference_issue = False
        self.is_no_longer_new_code_reference_issue = False
        self.anticipated_transition_uuid: str | None = None

        self._status: str | None = None
        self._severity: Severity | None = None
        self._type: RuleType | None = None
        self._message: str | None = None
        self._line: int | None = None
        self._gap: float | None = None
        self._tags: frozenset[str] | None = None
        self._code_variants: frozenset[str] | None = None
        self._attributes: Dict[str, str] = {}
        self._comments: List[IssueComment] = []
        self._ledger = ChangeLedger()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DefaultIssue):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"DefaultIssue(key={self.key!r}, rule_key={self.rule_key!r}, status={self._status!r})"

    # Validated fields

    @property
    def status(self) -> str | None:
        return self._status

    @status.setter
    def status(self, value: str | None) -> None:
        if value == "":
            raise ValueError("Status must be set")
        self._status = value

    @property
    def severity(self) -> Severity | None:
        return self._severity

    @severity.setter
    def severity(self, value: Severity | str | None) -> None:
        if value is None:
            self._severity = None
            return
        try:
            self._severity = Severity(value)
        except ValueError:
            raise ValueError(f"Not a valid severity: {value}") from None

    @property
    def type(self) -> RuleType | None:
        return self._type

    @type.setter
    def type(self, value: RuleType | str | None) -> None:
        if value is None:
            self._type = None
            return
        try:
            self._type = RuleType(value)
        except ValueError:
            raise ValueError(f"Not a valid rule type: {value}") from None

    @property
    def message(self) -> str | None:
        return self._message

    @message.setter
    def message(self, value: str | None) -> None:
        self._message = truncate_message(value, self._message_max_length)

    @property
    def line(self) -> int | None:
        """1-based line of the issue, None for file-level issues."""
        return self._line

    @line.setter
    def line(self, value: int | None) -> None:
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value <= 0):
            raise ValueError(f"Line must be null or greater than zero (got {value})")
        self._line = value

    @property
    def gap(self) -> float | None:
        return self._gap

    @gap.setter
    def gap(self, value: float | None) -> None:
        # NaN fails the comparison and is rejected
        if value is not None and not value >= 0:
            raise ValueError(f"Gap must be greater than or equal 0 (got {value})")
        self._gap = value

    # Sets

    @property
    def tags(self) -> frozenset[str]:
        return self._tags if self._tags is not None else frozenset()

    @tags.setter
    def tags(self, value: Iterable[str] | None) -> None:
        self._tags = _string_set("Tags", value)

    @property
    def code_variants(self) -> frozenset[str]:
        return self._code_variants if self._code_variants is not None else frozenset()

    @code_variants.setter
    def code_variants(self, value: Iterable[str] | None) -> None:
        self._code_variants = _string_set("Code variants", value)

    # Attributes

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    def attribute(self, key: str) -> str | None:
        return self._attributes.get(key)

    def set_attribute(self, key: str, value: str | None) -> None:
        """Set an attribute; None removes it."""
        if value is None:
            self._attributes.pop(key, None)
        else:
            self._attributes[key] = value

    # Derived values

    def effort_in_minutes(self) -> int | None:
        return self.effort.to_minutes() if self.effort is not None else None

    def is_to_be_migrated_as_new_code_reference_issue(self) -> bool:
        """True when an issue on a changed line is not yet tracked as new code."""
        return (
            self.is_on_changed_line
            and not self.is_new_code_reference_issue
            and not self.is_no_longer_new_code_reference_issue
        )

    # Comments

    @property
    def comments(self) -> ReadOnlyList[IssueComment]:
        return ReadOnlyList(self._comments)

    def add_comment(self, comment: IssueComment) -> None:
        self._comments.append(comment)

    # Changes

    @property
    def changes(self) -> ReadOnlyList[FieldDiffs]:
        return self._ledger.changes

    @property
    def current_change(self) -> FieldDiffs | None:
        return self._ledger.current_change

    def add_change(self, change: FieldDiffs | None) -> None:
        self._ledger.add_change(change)

    def set_field_change(self, context: IssueChangeContext, field: str, old_value: Any, new_value: Any) -> None:
        """Record a field edit in the current change (opened if needed)."""
        self._ledger.set_field_change(context, field, old_value, new_value, issue_key=self.key)

    def reset_current_change(self) -> None:
        self._ledger.reset_current_change()
