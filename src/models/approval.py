"""
Approval — one reviewer's score in one review category.

Hydrated from an entry of an event's ``approvals`` list (or the ``approval``
of a comment event). Identity is the (category, score) pair only: actor and
change history are ignored by ``==`` and ``hash`` so that triggers can
deduplicate approvals by what was voted, not by who voted it.
"""
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Mapping, Optional

from src.config.constants import ABSENT_PLACEHOLDER, BY, OLD_VALUE, TYPE, UPDATED, VALUE
from src.config.schemas import APPROVAL_PAYLOAD_SCHEMA
from src.config.settings import DEPRECATION_WARNINGS_ENABLED
from src.events.json_fields import (
    ensure_payload_types,
    get_boolean,
    get_object,
    get_string,
    parse_json_object,
)
from src.events.metrics import record_hydration
from src.models.account import Account

logger = logging.getLogger(__name__)


def _warn_deprecated(old: str, new: str) -> None:
    if DEPRECATION_WARNINGS_ENABLED:
        warnings.warn(f"Approval.{old} is deprecated, use {new}", DeprecationWarning, stacklevel=3)


@dataclass(frozen=True)
class ApprovalGrade:
    """Category and score; the producer never sends one without the other."""

    category: str
    score: str


class Approval:
    """A Code-Review / Verified / … vote attached to a patch set."""

    def __init__(self, json_obj: str | Mapping | None = None) -> None:
        self.grade: Optional[ApprovalGrade] = None
        self.actor: Optional[Account] = None
        self.previous_score: Optional[str] = None
        # Raw producer flag, kept only for the deprecated `updated` accessor.
        self.producer_updated: Optional[bool] = None
        # Bare username of the legacy persisted shape; cleared by upgrade_approval().
        self.legacy_username: Optional[str] = None

        if json_obj is not None:
            self.hydrate(json_obj)

    @classmethod
    def from_json(cls, json_obj: str | Mapping) -> Approval:
        return cls(json_obj)

    # ------------------------------------------------------------------
    # Hydration
    # ------------------------------------------------------------------

    def hydrate(self, json_obj: str | Mapping) -> Approval:
        """
        Merge the present keys of *json_obj* into this record.

        Keys are handled independently; a key that is absent (or null)
        leaves the corresponding field as it was, so hydrating twice with
        different payloads merges rather than resets. Every key is read
        before any field is assigned, so a call that raises leaves the
        record as it was.

        Raises:
            TypeMismatchError: If a known key carries the wrong JSON type.
            JsonParseError: If *json_obj* is a string that is not a JSON object.
        """
        data = parse_json_object(json_obj)
        ensure_payload_types(data, APPROVAL_PAYLOAD_SCHEMA)

        category = get_string(data, TYPE)
        score = get_string(data, VALUE)
        by = get_object(data, BY)
        actor = Account.from_json(by) if by is not None else None
        updated = get_boolean(data, UPDATED)
        previous_score = get_string(data, OLD_VALUE)

        if category is not None and score is not None:
            self.grade = ApprovalGrade(category, score)
        if actor is not None:
            self.actor = actor
        if updated is not None:
            self.producer_updated = updated
        if previous_score is not None:
            self.previous_score = previous_score

        record_hydration()
        logger.debug("Hydrated %s (changed=%s)", self, self.is_changed())
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def category(self) -> Optional[str]:
        return self.grade.category if self.grade is not None else None

    @property
    def score(self) -> Optional[str]:
        return self.grade.score if self.grade is not None else None

    def set_grade(self, category: str, score: str) -> None:
        self.grade = ApprovalGrade(category, score)

    def is_changed(self) -> bool:
        """
        Whether the score changed in this event.

        Derived from the presence of the previous score; the producer's own
        ``updated`` flag is not consulted.
        """
        return self.previous_score is not None

    @property
    def updated(self) -> Optional[bool]:
        """
        The raw ``updated`` flag: True/False as reported, None if the
        producer did not send it.

        Deprecated, use :meth:`is_changed`.
        """
        _warn_deprecated("updated", "is_changed()")
        return self.producer_updated

    @property
    def username(self) -> Optional[str]:
        """
        Username of the approver.

        Deprecated, use ``actor.username``. Still answers for a legacy
        record that has not been upgraded yet.
        """
        _warn_deprecated("username", "actor.username")
        if self.actor is not None:
            return self.actor.username
        return self.legacy_username

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Same class, category and score; a subclass instance is never equal."""
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return self.category == other.category and self.score == other.score

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self.category, self.score))

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Current producer shape; absent fields are omitted."""
        data: dict = {}
        if self.grade is not None:
            data[TYPE] = self.grade.category
            data[VALUE] = self.grade.score
        if self.actor is not None:
            data[BY] = self.actor.to_dict()
        if self.producer_updated is not None:
            data[UPDATED] = self.producer_updated
        if self.previous_score is not None:
            data[OLD_VALUE] = self.previous_score
        return data

    def __str__(self) -> str:
        category = self.category if self.category is not None else ABSENT_PLACEHOLDER
        score = self.score if self.score is not None else ABSENT_PLACEHOLDER
        return f"Approval: {category} {score}"

    def __repr__(self) -> str:
        actor = self.actor.username if self.actor is not None else None
        return (
            f"Approval({self.category!r}, {self.score!r}, "
            f"by={actor!r}, previous_score={self.previous_score!r})"
        )
