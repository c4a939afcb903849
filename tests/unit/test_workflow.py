"""Unit tests for workflow tables and the guarded workflow service."""

from datetime import UTC, datetime, timedelta

import pytest

from fauxledger.domain.entities import Approver
from fauxledger.domain.exceptions import WorkflowError
from fauxledger.domain.value_objects import DocumentStatus, Money
from fauxledger.domain.workflow import (
    BRANCHING_TABLE,
    DEFAULT_APPROVAL_NOTE,
    LINEAR_TABLE,
    DocumentWorkflow,
    WorkflowTable,
    get_workflow_table,
)

S = DocumentStatus
NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


# --- Tables ---


def test_branching_table_shape() -> None:
    assert BRANCHING_TABLE.initial is S.INIT
    assert BRANCHING_TABLE.terminal_states == {S.PAID, S.CANCELED, S.DECLINED}
    assert BRANCHING_TABLE.allowed(S.SUBMITTED) == {S.APPROVED, S.DECLINED, S.CANCELED}


def test_linear_table_shape() -> None:
    assert LINEAR_TABLE.initial is S.DRAFT
    assert LINEAR_TABLE.terminal_states == {S.PAID}
    assert LINEAR_TABLE.next_state(S.APPROVED) is S.POSTED


@pytest.mark.parametrize("table", [BRANCHING_TABLE, LINEAR_TABLE])
def test_every_status_reachable_from_initial(table: WorkflowTable) -> None:
    reached = {table.initial}
    frontier = [table.initial]
    while frontier:
        for target in table.allowed(frontier.pop()):
            if target not in reached:
                reached.add(target)
                frontier.append(target)
    assert reached == set(table.states)


@pytest.mark.parametrize("table", [BRANCHING_TABLE, LINEAR_TABLE])
def test_happy_path_ends_in_terminal(table: WorkflowTable) -> None:
    status = table.initial
    steps = 0
    while (nxt := table.next_state(status)) is not None:
        status = nxt
        steps += 1
    assert table.is_terminal(status)
    assert steps == len(table.happy_path)


def test_cyclic_table_rejected() -> None:
    with pytest.raises(ValueError, match="cycle"):
        WorkflowTable(
            name="loop",
            initial=S.DRAFT,
            transitions={
                S.DRAFT: frozenset({S.SUBMITTED}),
                S.SUBMITTED: frozenset({S.DRAFT, S.PAID}),
                S.PAID: frozenset(),
            },
            happy_path={},
        )


def test_unknown_target_rejected() -> None:
    with pytest.raises(ValueError, match="unknown"):
        WorkflowTable(
            name="dangling",
            initial=S.DRAFT,
            transitions={S.DRAFT: frozenset({S.POSTED})},
            happy_path={},
        )


def test_happy_path_must_follow_edges() -> None:
    with pytest.raises(ValueError, match="not a legal transition"):
        WorkflowTable(
            name="shortcut",
            initial=S.DRAFT,
            transitions={S.DRAFT: frozenset({S.SUBMITTED}), S.SUBMITTED: frozenset()},
            happy_path={S.DRAFT: S.PAID},
        )


def test_table_without_terminal_rejected() -> None:
    with pytest.raises(ValueError, match="no terminal"):
        WorkflowTable(
            name="endless",
            initial=S.DRAFT,
            transitions={
                S.DRAFT: frozenset({S.SUBMITTED}),
                S.SUBMITTED: frozenset({S.DRAFT}),
            },
            happy_path={},
        )


def test_get_workflow_table() -> None:
    assert get_workflow_table("linear") is LINEAR_TABLE
    with pytest.raises(ValueError, match="Unknown workflow table"):
        get_workflow_table("spiral")


# --- Advance ---


def test_happy_path_scenario(workflow: DocumentWorkflow, document_factory) -> None:
    """INIT -> SUBMITTED -> APPROVED -> PAID with metadata stamped at each step."""
    doc = document_factory("inv-000001", amount=5000)

    submitted = workflow.advance(doc, NOW)
    assert submitted.status is S.SUBMITTED
    assert submitted.version == 2
    assert submitted.next_approver is not None
    assert submitted.next_approver.user_id == "user-finance-01"
    assert submitted.next_approver.approval_sent_at == NOW

    approved = workflow.advance(submitted, NOW + timedelta(minutes=1))
    assert approved.status is S.APPROVED
    assert approved.version == 3
    assert approved.next_approver is None
    assert approved.approval_note == DEFAULT_APPROVAL_NOTE

    paid = workflow.advance(approved, NOW + timedelta(minutes=2))
    assert paid.status is S.PAID
    assert paid.version == 4
    assert paid.payment_at is not None
    assert paid.payment_at >= approved.updated_at


def test_advance_does_not_modify_input(workflow: DocumentWorkflow, document_factory) -> None:
    doc = document_factory()
    workflow.advance(doc, NOW)
    assert doc.status is S.INIT
    assert doc.version == 1


def test_advance_from_terminal_fails(workflow: DocumentWorkflow, document_factory) -> None:
    doc = document_factory("inv-000009", status=S.PAID, version=4)
    with pytest.raises(WorkflowError, match="already at terminal status 'PAID'") as exc_info:
        workflow.advance(doc, NOW)
    assert exc_info.value.document_id == "inv-000009"
    assert exc_info.value.current_status == S.PAID


def test_timestamps_never_go_backwards(workflow: DocumentWorkflow, document_factory) -> None:
    """A clock behind updated_at does not move updated_at back."""
    future = NOW + timedelta(days=1)
    doc = document_factory(created_at=NOW, updated_at=future)
    moved = workflow.advance(doc, NOW)
    assert moved.updated_at == future
    assert moved.next_approver.approval_sent_at == future


def test_linear_workflow_advances_through_posted(document_factory) -> None:
    workflow = DocumentWorkflow(LINEAR_TABLE, Approver("user-1", "Controller"))
    doc = document_factory(status=S.DRAFT)
    statuses = []
    while not LINEAR_TABLE.is_terminal(doc.status):
        doc = workflow.advance(doc, NOW)
        statuses.append(doc.status)
    assert statuses == [S.SUBMITTED, S.APPROVED, S.POSTED, S.PAID]
    assert doc.version == 5


# --- Explicit transitions ---


def test_set_status_rejects_skipping(workflow: DocumentWorkflow, document_factory) -> None:
    doc = document_factory()
    with pytest.raises(WorkflowError) as exc_info:
        workflow.set_status(doc, S.APPROVED, NOW)
    error = exc_info.value
    assert str(error) == (
        "Invalid status transition: 'INIT' -> 'APPROVED'. "
        "Allowed transitions: SUBMITTED, CANCELED"
    )
    assert error.attempted_status == S.APPROVED
    assert list(error.allowed_statuses) == [S.SUBMITTED, S.CANCELED]


def test_set_status_rejects_backwards(workflow: DocumentWorkflow, document_factory) -> None:
    doc = document_factory(status=S.APPROVED, version=3)
    with pytest.raises(WorkflowError):
        workflow.set_status(doc, S.SUBMITTED, NOW)


def test_set_status_from_terminal_lists_none(workflow: DocumentWorkflow, document_factory) -> None:
    doc = document_factory(status=S.DECLINED, version=3)
    with pytest.raises(WorkflowError, match="Allowed transitions: none"):
        workflow.set_status(doc, S.INIT, NOW)


def test_set_status_stamps_metadata(workflow: DocumentWorkflow, document_factory) -> None:
    """Metadata follows the target status whichever operation moves there."""
    doc = document_factory()
    canceled = workflow.set_status(doc, S.CANCELED, NOW)
    assert canceled.canceled_at == NOW
    assert canceled.version == 2


# --- Guarded operations ---


def test_approve_requires_submitted(workflow: DocumentWorkflow, document_factory) -> None:
    doc = document_factory()
    with pytest.raises(WorkflowError, match="requires status SUBMITTED, got 'INIT'"):
        workflow.approve(doc, NOW)


def test_approve_with_note(workflow: DocumentWorkflow, document_factory) -> None:
    submitted = workflow.advance(document_factory(), NOW)
    approved = workflow.approve(submitted, NOW, note="Checked against PO-77")
    assert approved.approval_note == "Checked against PO-77"
    assert approved.next_approver is None


def test_decline_from_submitted(workflow: DocumentWorkflow, document_factory) -> None:
    submitted = workflow.advance(document_factory(), NOW)
    declined = workflow.decline(submitted, NOW, reason="Amount does not match PO")
    assert declined.status is S.DECLINED
    assert declined.decline_reason == "Amount does not match PO"
    assert declined.next_approver is None
    assert BRANCHING_TABLE.is_terminal(declined.status)


def test_cancel_from_any_non_terminal(workflow: DocumentWorkflow, document_factory) -> None:
    for status in (S.INIT, S.SUBMITTED, S.APPROVED):
        doc = document_factory(status=status, version=2)
        canceled = workflow.cancel(doc, NOW, reason="Duplicate invoice")
        assert canceled.status is S.CANCELED
        assert canceled.cancellation_reason == "Duplicate invoice"
        assert canceled.canceled_at == NOW


def test_cancel_paid_fails(workflow: DocumentWorkflow, document_factory) -> None:
    with pytest.raises(WorkflowError):
        workflow.cancel(document_factory(status=S.PAID, version=4), NOW)


def test_mark_paid_requires_approved(workflow: DocumentWorkflow, document_factory) -> None:
    with pytest.raises(WorkflowError):
        workflow.mark_paid(document_factory(status=S.SUBMITTED, version=2), NOW)
    paid = workflow.mark_paid(document_factory(status=S.APPROVED, version=3), NOW)
    assert paid.payment_at == NOW


def test_linear_table_cannot_decline(document_factory) -> None:
    workflow = DocumentWorkflow(LINEAR_TABLE, Approver("user-1", "Controller"))
    doc = document_factory(status=S.SUBMITTED, version=2)
    with pytest.raises(WorkflowError, match="requires status none"):
        workflow.decline(doc, NOW)


# --- Edits ---


def test_delete_only_in_initial_status(workflow: DocumentWorkflow, document_factory) -> None:
    workflow.ensure_deletable(document_factory())
    with pytest.raises(WorkflowError, match="Cannot delete"):
        workflow.ensure_deletable(document_factory(status=S.SUBMITTED, version=2))


def test_replace_line_items(workflow: DocumentWorkflow, document_factory) -> None:
    doc = document_factory(amount=100)
    total = Money(250, "USD")
    updated = workflow.replace_line_items(doc, [], total, NOW)
    assert updated.total_amount == total
    assert updated.line_items == []
    assert updated.version == 2
    assert updated.status is S.INIT


def test_replace_line_items_after_submit_fails(
    workflow: DocumentWorkflow, document_factory
) -> None:
    submitted = workflow.advance(document_factory(), NOW)
    with pytest.raises(WorkflowError, match="Cannot edit line items of"):
        workflow.replace_line_items(submitted, [], Money(0, "USD"), NOW)
