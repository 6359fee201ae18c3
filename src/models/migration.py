"""
Approval state migration — load persisted approvals into the current shape.

Every loading path goes through load_approval(), which always finishes with
upgrade_approval(). Records built elsewhere from legacy data can call
upgrade_approval() directly; it is idempotent, so calling it from several
paths is safe.
"""
from __future__ import annotations

import logging
from typing import Mapping

from src.events.metrics import record_legacy_migration
from src.models.account import Account
from src.models.approval import Approval, ApprovalGrade
from src.models.persisted_state import PersistedApproval

logger = logging.getLogger(__name__)


def upgrade_approval(approval: Approval) -> Approval:
    """
    Fold a legacy bare username into an owned Account.

    If ``legacy_username`` is set it replaces ``actor`` with a new Account
    carrying only that username, then clears ``legacy_username``. A record
    without legacy data is returned untouched.

    Returns:
        The same record, upgraded in place.
    """
    if approval.legacy_username is None:
        return approval

    if approval.actor is not None:
        logger.debug(
            "Legacy username '%s' replaces existing actor '%s' on %s",
            approval.legacy_username,
            approval.actor.username,
            approval,
        )
    approval.actor = Account(username=approval.legacy_username)
    approval.legacy_username = None

    record_legacy_migration()
    logger.info("Upgraded legacy approval state: %s by %s", approval, approval.actor.username)
    return approval


def load_approval(state: str | bytes | Mapping) -> Approval:
    """
    Rebuild an Approval from persisted state (current or legacy shape).

    Args:
        state: A mapping, or its JSON text.

    Returns:
        A record that behaves exactly like a freshly hydrated one.

    Raises:
        pydantic.ValidationError: If a stored field has the wrong type.
    """
    if isinstance(state, Mapping):
        persisted = PersistedApproval.model_validate(state)
    else:
        persisted = PersistedApproval.model_validate_json(state)

    approval = Approval()
    if persisted.category is not None and persisted.score is not None:
        approval.grade = ApprovalGrade(persisted.category, persisted.score)
    if persisted.actor is not None:
        approval.actor = Account(**persisted.actor.model_dump())
    approval.producer_updated = persisted.updated
    approval.previous_score = persisted.previous_score
    approval.legacy_username = persisted.legacy_username

    return upgrade_approval(approval)


def dump_approval(approval: Approval) -> dict:
    """
    Persistable form of *approval* in the current shape.

    A record still holding a legacy username is upgraded first, so the
    approver is never dropped.
    """
    upgrade_approval(approval)
    persisted = PersistedApproval.model_validate(approval.to_dict())
    return persisted.model_dump(by_alias=True, exclude_none=True, exclude={"legacy_username"})
