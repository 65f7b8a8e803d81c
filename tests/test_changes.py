"""Tests for ChangeLedger (merge into current change, add_change, reset)."""

from datetime import datetime, timezone

from codeissue.changes import ChangeLedger
from codeissue.models import FieldDiffs, IssueChangeContext

DATE = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _context(**kwargs) -> IssueChangeContext:
    return IssueChangeContext.by_user(DATE, "user-1", **kwargs)


def test_first_field_change_opens_record() -> None:
    """First set_field_change creates a record seeded with the context."""
    ledger = ChangeLedger()
    diffs = ledger.set_field_change(_context(external_user="toto", webhook_source="github"), "assignee", None, "bob")
    assert diffs is not None
    assert len(ledger) == 1
    assert ledger.current_change is diffs
    assert diffs.user_uuid == "user-1"
    assert diffs.external_user == "toto"
    assert diffs.webhook_source == "github"
    assert diffs.creation_date == DATE
    assert diffs.get("assignee").new_value == "bob"


def test_same_field_is_overwritten() -> None:
    ledger = ChangeLedger()
    ledger.set_field_change(_context(), "severity", "MINOR", "MAJOR")
    ledger.set_field_change(_context(), "severity", "MAJOR", "BLOCKER")
    diffs = ledger.current_change
    assert diffs is not None
    assert diffs.field_names() == ["severity"]
    assert diffs.get("severity").old_value == "MAJOR"
    assert diffs.get("severity").new_value == "BLOCKER"


def test_merge_refreshes_authorship() -> None:
    """Merging into the current record stamps the latest context."""
    ledger = ChangeLedger()
    ledger.set_field_change(_context(external_user="first"), "a", 1, 2)
    ledger.set_field_change(_context(external_user="second", webhook_source="gitlab"), "b", 1, 2)
    diffs = ledger.current_change
    assert len(ledger) == 1
    assert diffs.external_user == "second"
    assert diffs.webhook_source == "gitlab"
    assert diffs.field_names() == ["a", "b"]


def test_unchanged_value_is_not_recorded() -> None:
    ledger = ChangeLedger()
    assert ledger.set_field_change(_context(), "status", "OPEN", "OPEN") is None
    assert len(ledger) == 0
    assert ledger.current_change is None


def test_add_change_appends_verbatim_and_becomes_current() -> None:
    """A pre-built record keeps its authorship when later edits merge into it."""
    ledger = ChangeLedger()
    ledger.set_field_change(_context(), "status", "OPEN", "CONFIRMED")
    imported = FieldDiffs(user_uuid="u9", external_user="ext", webhook_source="gitlab")
    imported.set_diff("tags", None, "security")
    ledger.add_change(imported)
    assert len(ledger) == 2
    assert ledger.changes[1] is imported
    assert ledger.current_change is imported
    ledger.set_field_change(IssueChangeContext.by_scan(DATE), "line", 3, 4, issue_key="AAA")
    assert len(ledger) == 2
    assert imported.field_names() == ["tags", "line"]
    assert imported.user_uuid == "u9"
    assert imported.external_user == "ext"
    assert imported.webhook_source == "gitlab"
    assert imported.issue_key is None


def test_merge_keeps_authorship_missing_from_context() -> None:
    ledger = ChangeLedger()
    ledger.set_field_change(_context(external_user="toto", webhook_source="github"), "a", 1, 2)
    ledger.set_field_change(IssueChangeContext.by_user(DATE, "user-2"), "b", 1, 2)
    diffs = ledger.current_change
    assert diffs.user_uuid == "user-2"
    assert diffs.external_user == "toto"
    assert diffs.webhook_source == "github"


def test_new_record_is_stamped_with_issue_key() -> None:
    ledger = ChangeLedger()
    diffs = ledger.set_field_change(_context(), "status", "OPEN", "CONFIRMED", issue_key="AAA")
    assert diffs.issue_key == "AAA"


def test_add_none_is_noop() -> None:
    ledger = ChangeLedger()
    ledger.set_field_change(_context(), "status", "OPEN", "CONFIRMED")
    current = ledger.current_change
    ledger.add_change(None)
    assert len(ledger) == 1
    assert ledger.current_change is current


def test_reset_closes_session() -> None:
    ledger = ChangeLedger()
    first = ledger.set_field_change(_context(), "status", "OPEN", "CONFIRMED")
    ledger.reset_current_change()
    assert ledger.current_change is None
    second = ledger.set_field_change(_context(), "status", "CONFIRMED", "RESOLVED")
    assert second is not first
    assert list(ledger.changes) == [first, second]


def test_changes_keep_insertion_order() -> None:
    ledger = ChangeLedger()
    records = [FieldDiffs(issue_key=str(i)) for i in range(3)]
    for record in records:
        ledger.add_change(record)
    assert [c.issue_key for c in ledger.changes] == ["0", "1", "2"]
