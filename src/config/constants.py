"""
Constants used across the event-attribute layer.
Key names are pinned to the producer's stream-events JSON format.
"""
from typing import Set

# =============================================================================
# Approval attribute keys
# =============================================================================
TYPE: str = "type"
VALUE: str = "value"
BY: str = "by"
UPDATED: str = "updated"
OLD_VALUE: str = "oldValue"

# =============================================================================
# Account attribute keys
# =============================================================================
NAME: str = "name"
EMAIL: str = "email"
USERNAME: str = "username"

# =============================================================================
# Event-level keys
# =============================================================================
APPROVALS: str = "approvals"

# =============================================================================
# Boolean literals accepted for boolean-like keys (compared lower-cased)
# =============================================================================
TRUE_LITERALS: Set[str] = {"true"}
FALSE_LITERALS: Set[str] = {"false"}

# =============================================================================
# Display
# =============================================================================
ABSENT_PLACEHOLDER: str = "None"
