"""
Account — the user attribute nested in approvals, changes and patch sets.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from src.config.constants import EMAIL, NAME, USERNAME
from src.config.schemas import ACCOUNT_PAYLOAD_SCHEMA
from src.events.json_fields import ensure_payload_types, get_string, parse_json_object


@dataclass
class Account:
    """A user account as reported by the producer; every field is optional."""

    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None

    @classmethod
    def from_json(cls, json_obj: str | Mapping) -> "Account":
        return cls().hydrate(json_obj)

    def hydrate(self, json_obj: str | Mapping) -> "Account":
        """Copy every present key onto this account; absent keys are left alone."""
        data = parse_json_object(json_obj)
        ensure_payload_types(data, ACCOUNT_PAYLOAD_SCHEMA)

        self.name = get_string(data, NAME, self.name)
        self.email = get_string(data, EMAIL, self.email)
        self.username = get_string(data, USERNAME, self.username)
        return self

    @property
    def name_and_email(self) -> Optional[str]:
        """Name and email in the ``"Name" <email>`` form, or None if both are unknown."""
        if self.name is None and self.email is None:
            return None
        if self.email is None:
            return f'"{self.name}"'
        if self.name is None:
            return f"<{self.email}>"
        return f'"{self.name}" <{self.email}>'

    def to_dict(self) -> dict:
        data = {NAME: self.name, EMAIL: self.email, USERNAME: self.username}
        return {k: v for k, v in data.items() if v is not None}
