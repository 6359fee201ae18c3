"""
Unit tests for approval collection helpers.
"""
import logging

import pytest

from src.events.approvals import deduplicate_approvals, find_approvals, hydrate_approvals
from src.events.json_fields import TypeMismatchError
from src.models.approval import Approval


class TestHydrateApprovals:
    def test_hydrates_every_entry(self, approvals_array):
        approvals = hydrate_approvals(approvals_array)
        assert len(approvals) == 3
        assert all(isinstance(a, Approval) for a in approvals)
        assert [a.category for a in approvals] == ["Code-Review", "Code-Review", "Verified"]

    def test_empty_array(self):
        assert hydrate_approvals([]) == []

    def test_non_array_rejected(self, code_review_payload):
        with pytest.raises(TypeMismatchError) as exc_info:
            hydrate_approvals(code_review_payload)
        assert exc_info.value.key == "approvals"

    def test_non_array_logged_like_other_mismatches(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.events.json_fields"):
            with pytest.raises(TypeMismatchError):
                hydrate_approvals("Code-Review+1")
        assert any("Type mismatch for key 'approvals'" in r.getMessage() for r in caplog.records)

    def test_bad_entry_propagates(self):
        with pytest.raises(TypeMismatchError):
            hydrate_approvals([{"type": "Verified", "value": "+1"}, 42])


class TestDeduplicateApprovals:
    def test_keeps_first_occurrence(self, approvals_array):
        unique = deduplicate_approvals(hydrate_approvals(approvals_array))
        assert len(unique) == 2
        assert unique[0].actor.username == "alice"
        assert unique[1].category == "Verified"

    def test_no_duplicates_unchanged(self, code_review_payload, verified_payload):
        approvals = hydrate_approvals([code_review_payload, verified_payload])
        assert deduplicate_approvals(approvals) == approvals

    def test_accepts_generator(self, approvals_array):
        unique = deduplicate_approvals(Approval.from_json(p) for p in approvals_array)
        assert len(unique) == 2


class TestFindApprovals:
    def test_by_category(self, approvals_array):
        approvals = hydrate_approvals(approvals_array)
        assert len(find_approvals(approvals, "Code-Review")) == 2

    def test_by_category_and_score(self, approvals_array):
        approvals = hydrate_approvals(approvals_array)
        found = find_approvals(approvals, "Verified", "-1")
        assert len(found) == 1
        assert find_approvals(approvals, "Verified", "+1") == []

    def test_unknown_category(self, approvals_array):
        assert find_approvals(hydrate_approvals(approvals_array), "Library-Compliance") == []
