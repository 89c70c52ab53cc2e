"""Tests for the contract operation registry."""

import zkvote.call  # noqa: F401  (registers the operations)
from zkvote.contract import get_all_operations, get_operation, get_supported_operations
from zkvote.contract.public import SubmitVote
from zkvote.contract.read_only import VerifyVote


class TestOperationRegistry:
    def test_all_registered_in_order(self):
        assert [op.name for op in get_all_operations()] == [
            "register-voter",
            "submit-vote",
            "close-voting",
            "verify-vote",
            "get-total-votes",
            "is-voting-open",
        ]

    def test_get_operation(self):
        assert isinstance(get_operation("submit-vote"), SubmitVote)
        assert isinstance(get_operation("verify-vote"), VerifyVote)

    def test_get_unknown(self):
        assert get_operation("reopen-voting") is None

    def test_read_only_flags(self):
        flags = {op.name: op.read_only for op in get_all_operations()}
        assert flags == {
            "register-voter": False,
            "submit-vote": False,
            "close-voting": False,
            "verify-vote": True,
            "get-total-votes": True,
            "is-voting-open": True,
        }

    def test_supported_operations_text(self):
        text = get_supported_operations()
        assert "  - submit-vote vote_hash (public)" in text
        assert "  - get-total-votes (read-only)" in text
