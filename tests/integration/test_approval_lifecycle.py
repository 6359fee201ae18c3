"""
End-to-end tests: event payload → typed approvals → consumer decisions,
and persisted legacy state → upgraded approvals.
"""
import json

import pytest

from src.config.constants import APPROVALS
from src.events.approvals import deduplicate_approvals, find_approvals, hydrate_approvals
from src.events.json_fields import parse_json_object
from src.models.account import Account
from src.models.migration import dump_approval, load_approval


@pytest.fixture
def comment_added_event(approvals_array, alice_payload):
    """A comment-added event as received from the stream, before parsing."""
    return json.dumps({
        "type": "comment-added",
        "author": alice_payload,
        "comment": "Patch Set 3: Code-Review+1",
        APPROVALS: approvals_array,
        "eventCreatedOn": 1700000000,
    })


class TestEventToDecision:
    def test_trigger_flow(self, comment_added_event):
        event = parse_json_object(comment_added_event)

        approvals = hydrate_approvals(event[APPROVALS])
        unique = deduplicate_approvals(approvals)
        code_review = find_approvals(unique, "Code-Review", "+1")

        assert len(approvals) == 3
        assert len(unique) == 2
        assert len(code_review) == 1
        assert code_review[0].actor.username == "alice"
        assert code_review[0].is_changed() is False

    def test_changed_votes(self, comment_added_event):
        event = parse_json_object(comment_added_event)
        changed = [a for a in hydrate_approvals(event[APPROVALS]) if a.is_changed()]

        assert len(changed) == 1
        assert changed[0].actor.username == "bob"
        assert changed[0].previous_score == "0"
        assert str(changed[0]) == "Approval: Code-Review +1"


class TestPersistedStateLifecycle:
    def test_mixed_state_loads_uniformly(self, current_state, legacy_state):
        stored = [json.dumps(current_state), json.dumps(legacy_state)]

        approvals = [load_approval(s) for s in stored]

        assert all(a.legacy_username is None for a in approvals)
        assert [a.actor.username for a in approvals] == ["alice", "carol"]
        # Same category and score: one logical approval.
        assert len(deduplicate_approvals(approvals)) == 1

    def test_legacy_state_rewritten_in_current_shape(self, legacy_state):
        approval = load_approval(legacy_state)
        state = dump_approval(approval)

        assert state == {"type": "Code-Review", "value": "+2", "by": {"username": "carol"}}
        assert load_approval(state).actor == Account(username="carol")
