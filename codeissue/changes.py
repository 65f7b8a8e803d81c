"""Chronological ledger of field changes on one issue.

Successive ``set_field_change`` calls merge into the current diff record, so
one mutation session (e.g. a reconciliation pass) produces a single record
with several fields. The current record is held as a position in the list;
``reset_current_change`` closes the session.
"""

from typing import Any, List

from codeissue.logging import get_logger
from codeissue.models.change_context import IssueChangeContext
from codeissue.models.field_diffs import FieldDiffs
from codeissue.views import ReadOnlyList

LOG = get_logger(__name__)


class ChangeLedger:
    """Ordered diff records with one "current" slot."""

    def __init__(self) -> None:
        self._changes: List[FieldDiffs] = []
        self._current: int | None = None

    @property
    def changes(self) -> ReadOnlyList[FieldDiffs]:
        """All diff records, oldest first."""
        return ReadOnlyList(self._changes)

    @property
    def current_change(self) -> FieldDiffs | None:
        if self._current is None:
            return None
        return self._changes[self._current]

    def add_change(self, change: FieldDiffs | None) -> None:
        """Append a pre-built diff record as is; None is ignored."""
        if change is None:
            return
        self._changes.append(change)
        self._current = len(self._changes) - 1

    def set_field_change(
        self,
        context: IssueChangeContext,
        field: str,
        old_value: Any,
        new_value: Any,
        issue_key: str | None = None,
    ) -> FieldDiffs | None:
        """Record ``field`` going from ``old_value`` to ``new_value``.

        A new record is stamped with the context and ``issue_key``. Merging
        into an existing record only fills in authorship the context actually
        carries, so a record added with ``add_change`` keeps its own.

        Returns the diff record holding the entry, or None when the values are
        equal and nothing was recorded.
        """
        if old_value == new_value:
            return None
        current = self.current_change
        if current is None:
            current = FieldDiffs(
                issue_key=issue_key,
                user_uuid=context.user_uuid,
                external_user=context.external_user,
                webhook_source=context.webhook_source,
                creation_date=context.date,
            )
            self.add_change(current)
            LOG.debug("Opened change #%d", len(self._changes))
        else:
            if context.user_uuid is not None:
                current.user_uuid = context.user_uuid
            if context.external_user is not None:
                current.external_user = context.external_user
            if context.webhook_source is not None:
                current.webhook_source = context.webhook_source
        current.set_diff(field, old_value, new_value)
        LOG.debug("Field %s changed: %r -> %r", field, old_value, new_value)
        return current

    def reset_current_change(self) -> None:
        """End the session: the next field change opens a new record."""
        self._current = None

    def __len__(self) -> int:
        return len(self._changes)
