"""
Shared test fixtures for the event-attribute test suite.
"""
import json

import pytest


# ==========================================================================
# Accounts
# ==========================================================================

@pytest.fixture
def alice_payload():
    return {
        "name": "Alice Example",
        "email": "alice@example.org",
        "username": "alice",
    }


@pytest.fixture
def bob_payload():
    return {
        "name": "Bob Example",
        "email": "bob@example.org",
        "username": "bob",
    }


# ==========================================================================
# Approval payloads (as sent in patchset-created / comment-added events)
# ==========================================================================

@pytest.fixture
def code_review_payload(alice_payload):
    return {
        "type": "Code-Review",
        "description": "Code-Review",
        "value": "+1",
        "by": alice_payload,
    }


@pytest.fixture
def changed_code_review_payload(bob_payload):
    return {
        "type": "Code-Review",
        "description": "Code-Review",
        "value": "+1",
        "oldValue": "0",
        "updated": True,
        "by": bob_payload,
    }


@pytest.fixture
def verified_payload(alice_payload):
    return {
        "type": "Verified",
        "description": "Verified",
        "value": "-1",
        "by": alice_payload,
    }


@pytest.fixture
def code_review_payload_json(code_review_payload):
    return json.dumps(code_review_payload)


@pytest.fixture
def approvals_array(code_review_payload, changed_code_review_payload, verified_payload):
    return [code_review_payload, changed_code_review_payload, verified_payload]


# ==========================================================================
# Persisted state
# ==========================================================================

@pytest.fixture
def current_state(alice_payload):
    return {
        "type": "Code-Review",
        "value": "+2",
        "by": alice_payload,
        "updated": False,
    }


@pytest.fixture
def legacy_state():
    """Shape written before the approver became a nested account."""
    return {
        "type": "Code-Review",
        "value": "+2",
        "username": "carol",
    }
