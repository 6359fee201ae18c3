"""
JSON Schemas for event-attribute payloads.

Type-only schemas: they pin the JSON type of each known key and nothing
else. No key is required and unknown keys pass through, because producers
of different versions omit or add attributes freely.

Two schemas:
1. ACCOUNT_PAYLOAD_SCHEMA  — the nested user object (``by``, ``owner``, …)
2. APPROVAL_PAYLOAD_SCHEMA — one entry of an event's ``approvals`` list
"""
from src.config.constants import BY, EMAIL, NAME, OLD_VALUE, TYPE, UPDATED, USERNAME, VALUE

# Scalars a producer may legitimately send for a string attribute.
_STRING_LIKE: list = ["string", "integer", "number", "null"]

# =============================================================================
# 1. Account payload
# =============================================================================
ACCOUNT_PAYLOAD_SCHEMA: dict = {
    "name": "account_attribute",
    "schema": {
        "type": "object",
        "properties": {
            NAME: {"type": _STRING_LIKE, "description": "Full name of the user"},
            EMAIL: {"type": _STRING_LIKE, "description": "Email address of the user"},
            USERNAME: {"type": _STRING_LIKE, "description": "Login name of the user"},
        },
    },
}

# =============================================================================
# 2. Approval payload
# =============================================================================
APPROVAL_PAYLOAD_SCHEMA: dict = {
    "name": "approval_attribute",
    "schema": {
        "type": "object",
        "properties": {
            TYPE: {
                "type": _STRING_LIKE,
                "description": "Approval category, e.g. 'Code-Review'",
            },
            VALUE: {
                "type": _STRING_LIKE,
                "description": "Score given in the category, e.g. '+1'",
            },
            BY: {
                "type": ["object", "null"],
                "description": "Account that gave the approval",
            },
            UPDATED: {
                "type": ["boolean", "string", "null"],
                "description": "Deprecated producer flag; superseded by presence of oldValue",
            },
            OLD_VALUE: {
                "type": _STRING_LIKE,
                "description": "Previous score, only sent when the score changed",
            },
        },
    },
}
