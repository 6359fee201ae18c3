"""
Typed Pydantic models for persisted approval state.

Stored approvals use the producer's key names. Two shapes are accepted on
load:

- current: the approver is a nested ``by`` account object
- legacy:  the approver is a bare ``username`` string (written before the
  account object was introduced)

Unknown keys are ignored so that state written by newer releases still loads.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PersistedAccount(BaseModel):
    """Stored form of an Account."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None


class PersistedApproval(BaseModel):
    """
    Stored form of an Approval.

    ``legacy_username`` maps the old top-level ``username`` key; it is never
    written back by dump_approval().
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    category: Optional[str] = Field(None, alias="type", description="Approval category.")
    score: Optional[str] = Field(None, alias="value", description="Approval score.")
    actor: Optional[PersistedAccount] = Field(None, alias="by", description="Approver account (current shape).")
    updated: Optional[bool] = Field(None, description="Raw producer flag, None if never reported.")
    previous_score: Optional[str] = Field(None, alias="oldValue", description="Score before the change.")
    legacy_username: Optional[str] = Field(None, alias="username", description="Approver username (legacy shape).")
