"""
Approval collections — helpers for consumers of an event's approval list.

Triggers receive ``approvals`` as a JSON array in patchset-created and
comment-added events and typically:
- hydrate every entry
- drop repeated votes (same category and score)
- look for a vote in a given category
"""
import logging
from typing import Iterable, List, Optional

from src.config.constants import APPROVALS
from src.events.json_fields import type_mismatch
from src.models.approval import Approval

logger = logging.getLogger(__name__)


def hydrate_approvals(items: list) -> List[Approval]:
    """
    Hydrate every entry of an ``approvals`` array.

    Raises:
        TypeMismatchError: If *items* is not a list, or an entry has a
            wrong-typed key.
    """
    if not isinstance(items, list):
        raise type_mismatch(APPROVALS, "array", items)

    approvals = [Approval.from_json(item) for item in items]
    logger.debug("Hydrated %d approvals", len(approvals))
    return approvals


def deduplicate_approvals(approvals: Iterable[Approval]) -> List[Approval]:
    """
    Remove repeated approvals by (category, score).

    Stable: the first occurrence is kept, together with its actor.
    """
    seen: set = set()
    unique: List[Approval] = []
    total = 0
    for approval in approvals:
        total += 1
        if approval not in seen:
            unique.append(approval)
            seen.add(approval)

    dropped = total - len(unique)
    if dropped:
        logger.debug("Dropped %d duplicate approvals", dropped)
    return unique


def find_approvals(
    approvals: Iterable[Approval],
    category: str,
    score: Optional[str] = None,
) -> List[Approval]:
    """Approvals in *category*, optionally restricted to one *score*."""
    return [
        a for a in approvals
        if a.category == category and (score is None or a.score == score)
    ]
