"""
Prometheus Metrics — attribute-layer observability.

Exposes counters for:
- Approval payloads hydrated
- Type mismatches per payload key
- Legacy persisted records upgraded to the current shape

Usage
-----
    from src.events.metrics import record_hydration, record_legacy_migration

    record_hydration()
    record_type_mismatch("value")
    record_legacy_migration()
"""
from __future__ import annotations

import logging

from prometheus_client import Counter

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Approval payloads hydrated into records.
APPROVAL_HYDRATIONS: Counter = Counter(
    "approval_hydrations_total",
    "Total approval payloads hydrated into Approval records",
)

# Payload keys whose value had the wrong JSON type.
TYPE_MISMATCHES: Counter = Counter(
    "approval_type_mismatches_total",
    "Payload values rejected because of a wrong JSON type, by key",
    ["key"],
)

# Persisted records that still carried the bare-username shape.
LEGACY_MIGRATIONS: Counter = Counter(
    "approval_legacy_migrations_total",
    "Persisted approvals upgraded from the legacy username shape",
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_hydration() -> None:
    """Increment the hydration counter."""
    APPROVAL_HYDRATIONS.inc()


def record_type_mismatch(key: str) -> None:
    """Increment the type mismatch counter for *key*."""
    TYPE_MISMATCHES.labels(key=key).inc()


def record_legacy_migration() -> None:
    """Increment the legacy migration counter."""
    LEGACY_MIGRATIONS.inc()
