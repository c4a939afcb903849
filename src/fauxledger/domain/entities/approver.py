"""Approver assigned to a submitted document."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Approver:
    """Person expected to approve a submitted document."""

    user_id: str
    full_name: str
    approval_sent_at: datetime | None = None
