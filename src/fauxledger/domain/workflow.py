"""Document workflow: transition tables and guarded status changes."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Literal

from fauxledger.domain.entities import Approver, Document, LineItem
from fauxledger.domain.exceptions import WorkflowError
from fauxledger.domain.value_objects import DocumentStatus, Money

S = DocumentStatus

DEFAULT_APPROVAL_NOTE = "Approved for payment"

WorkflowTableName = Literal["branching", "linear"]


@dataclass(frozen=True)
class WorkflowTable:
    """Directed acyclic graph of legal status transitions.

    ``happy_path`` maps a status to the single canonical next status used by
    ``advance``; it must be a subset of ``transitions``.
    """

    name: str
    initial: DocumentStatus
    transitions: Mapping[DocumentStatus, frozenset[DocumentStatus]]
    happy_path: Mapping[DocumentStatus, DocumentStatus]

    def __post_init__(self) -> None:
        if self.initial not in self.transitions:
            raise ValueError(f"Initial status {self.initial} is not in table {self.name}")
        for source, targets in self.transitions.items():
            unknown = targets - set(self.transitions)
            if unknown:
                raise ValueError(f"{source} leads to unknown statuses {sorted(unknown)}")
        for source, target in self.happy_path.items():
            if target not in self.transitions.get(source, frozenset()):
                raise ValueError(f"Happy path {source} -> {target} is not a legal transition")
        if not self.terminal_states:
            raise ValueError(f"Table {self.name} has no terminal status")
        self._check_acyclic()

    def _check_acyclic(self) -> None:
        visiting: set[DocumentStatus] = set()
        done: set[DocumentStatus] = set()

        def visit(status: DocumentStatus) -> None:
            if status in done:
                return
            if status in visiting:
                raise ValueError(f"Table {self.name} has a cycle through {status}")
            visiting.add(status)
            for target in self.transitions[status]:
                visit(target)
            visiting.discard(status)
            done.add(status)

        for status in self.transitions:
            visit(status)

    @property
    def states(self) -> tuple[DocumentStatus, ...]:
        return tuple(self.transitions)

    @property
    def terminal_states(self) -> frozenset[DocumentStatus]:
        return frozenset(s for s, targets in self.transitions.items() if not targets)

    def allowed(self, status: DocumentStatus) -> frozenset[DocumentStatus]:
        return self.transitions.get(status, frozenset())

    def is_terminal(self, status: DocumentStatus) -> bool:
        return not self.allowed(status)

    def next_state(self, status: DocumentStatus) -> DocumentStatus | None:
        return self.happy_path.get(status)

    def sources_of(self, target: DocumentStatus) -> frozenset[DocumentStatus]:
        """Statuses with a direct edge into ``target``."""
        return frozenset(s for s, targets in self.transitions.items() if target in targets)

    def ordered(self, statuses: frozenset[DocumentStatus]) -> list[DocumentStatus]:
        """Statuses in table declaration order, for stable messages."""
        return [s for s in self.transitions if s in statuses]


BRANCHING_TABLE = WorkflowTable(
    name="branching",
    initial=S.INIT,
    transitions={
        S.INIT: frozenset({S.SUBMITTED, S.CANCELED}),
        S.SUBMITTED: frozenset({S.APPROVED, S.DECLINED, S.CANCELED}),
        S.APPROVED: frozenset({S.PAID, S.CANCELED}),
        S.PAID: frozenset(),
        S.CANCELED: frozenset(),
        S.DECLINED: frozenset(),
    },
    happy_path={
        S.INIT: S.SUBMITTED,
        S.SUBMITTED: S.APPROVED,
        S.APPROVED: S.PAID,
    },
)

# Rejection back-edges (SUBMITTED -> DRAFT, APPROVED -> SUBMITTED) are not modelled:
# they would make the graph cyclic.
LINEAR_TABLE = WorkflowTable(
    name="linear",
    initial=S.DRAFT,
    transitions={
        S.DRAFT: frozenset({S.SUBMITTED}),
        S.SUBMITTED: frozenset({S.APPROVED}),
        S.APPROVED: frozenset({S.POSTED}),
        S.POSTED: frozenset({S.PAID}),
        S.PAID: frozenset(),
    },
    happy_path={
        S.DRAFT: S.SUBMITTED,
        S.SUBMITTED: S.APPROVED,
        S.APPROVED: S.POSTED,
        S.POSTED: S.PAID,
    },
)

WORKFLOW_TABLES: dict[str, WorkflowTable] = {
    BRANCHING_TABLE.name: BRANCHING_TABLE,
    LINEAR_TABLE.name: LINEAR_TABLE,
}


def get_workflow_table(name: str) -> WorkflowTable:
    """Look up a transition table by name."""
    try:
        return WORKFLOW_TABLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown workflow table {name!r}; expected one of {sorted(WORKFLOW_TABLES)}"
        ) from None


def _format_statuses(statuses: list[DocumentStatus]) -> str:
    return ", ".join(statuses) or "none"


class DocumentWorkflow:
    """Guarded, forward-only status changes over one transition table.

    Every method returns a new Document; the input is never modified.
    """

    def __init__(self, table: WorkflowTable, approver: Approver) -> None:
        self._table = table
        self._approver = approver

    @property
    def table(self) -> WorkflowTable:
        return self._table

    def advance(self, document: Document, now: datetime) -> Document:
        """Move to the canonical next status."""
        target = self._table.next_state(document.status)
        if target is None:
            raise WorkflowError(
                f"Cannot advance document {document.id}: "
                f"already at terminal status '{document.status}'",
                document_id=document.id,
                current_status=document.status,
            )
        return self._enter(document, target, now)

    def set_status(self, document: Document, target: DocumentStatus, now: datetime) -> Document:
        """Move to ``target`` if it is directly reachable."""
        allowed = self._table.allowed(document.status)
        if target not in allowed:
            legal = self._table.ordered(allowed)
            raise WorkflowError(
                f"Invalid status transition: '{document.status}' -> '{target}'. "
                f"Allowed transitions: {_format_statuses(legal)}",
                document_id=document.id,
                current_status=document.status,
                attempted_status=target,
                allowed_statuses=legal,
            )
        return self._enter(document, target, now)

    def approve(self, document: Document, now: datetime, note: str | None = None) -> Document:
        self._require_source(document, S.APPROVED, "approve")
        return self._enter(document, S.APPROVED, now, note=note)

    def decline(self, document: Document, now: datetime, reason: str | None = None) -> Document:
        self._require_source(document, S.DECLINED, "decline")
        return self._enter(document, S.DECLINED, now, reason=reason)

    def cancel(self, document: Document, now: datetime, reason: str | None = None) -> Document:
        self._require_source(document, S.CANCELED, "cancel")
        return self._enter(document, S.CANCELED, now, reason=reason)

    def mark_paid(self, document: Document, now: datetime) -> Document:
        self._require_source(document, S.PAID, "mark as paid")
        return self._enter(document, S.PAID, now)

    def ensure_deletable(self, document: Document) -> None:
        self._require_initial(document, "delete")

    def ensure_editable(self, document: Document) -> None:
        self._require_initial(document, "edit line items of")

    def replace_line_items(
        self,
        document: Document,
        line_items: list[LineItem],
        total_amount: Money,
        now: datetime,
    ) -> Document:
        """Swap line items and total; only while the document is unsubmitted."""
        self.ensure_editable(document)
        stamp = max(now, document.updated_at)
        return replace(
            document,
            line_items=list(line_items),
            total_amount=total_amount,
            updated_at=stamp,
            version=document.version + 1,
        )

    def _require_initial(self, document: Document, action: str) -> None:
        if document.status != self._table.initial:
            raise WorkflowError(
                f"Cannot {action} document {document.id}: "
                f"only {self._table.initial} documents can be modified "
                f"(current status '{document.status}')",
                document_id=document.id,
                current_status=document.status,
                allowed_statuses=[self._table.initial],
            )

    def _require_source(self, document: Document, target: DocumentStatus, action: str) -> None:
        sources = self._table.sources_of(target)
        if document.status in sources:
            return
        expected = self._table.ordered(sources)
        raise WorkflowError(
            f"Cannot {action} document {document.id}: "
            f"requires status {_format_statuses(expected)}, got '{document.status}'",
            document_id=document.id,
            current_status=document.status,
            attempted_status=target,
            allowed_statuses=self._table.ordered(self._table.allowed(document.status)),
        )

    def _enter(
        self,
        document: Document,
        target: DocumentStatus,
        now: datetime,
        *,
        note: str | None = None,
        reason: str | None = None,
    ) -> Document:
        stamp = max(now, document.updated_at)
        changes: dict[str, object] = {
            "status": target,
            "updated_at": stamp,
            "version": document.version + 1,
        }
        if document.status == S.SUBMITTED:
            changes["next_approver"] = None
        if target == S.SUBMITTED:
            changes["next_approver"] = replace(self._approver, approval_sent_at=stamp)
        elif target == S.APPROVED:
            changes["approval_note"] = note or DEFAULT_APPROVAL_NOTE
        elif target == S.PAID:
            changes["payment_at"] = stamp
        elif target == S.CANCELED:
            changes["canceled_at"] = stamp
            changes["cancellation_reason"] = reason
        elif target == S.DECLINED:
            changes["decline_reason"] = reason
        return replace(document, **changes)
