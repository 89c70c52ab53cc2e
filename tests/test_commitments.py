"""Tests for commitment helpers."""

import hashlib
import re

from zkvote.commitments import compute_commitment, generate_salt
from zkvote.models import VoteCommitment
from zkvote.registry import ElectionRegistry


class TestComputeCommitment:
    def test_format(self):
        commitment = compute_commitment("candidate-a", "salt")
        assert isinstance(commitment, VoteCommitment)
        assert re.fullmatch(r"[0-9a-f]{64}", commitment.value)

    def test_matches_sha256(self):
        expected = hashlib.sha256(b"salt:candidate-a").hexdigest()
        assert compute_commitment("candidate-a", "salt").value == expected

    def test_deterministic(self):
        assert compute_commitment("x", "s") == compute_commitment("x", "s")

    def test_salt_hides_ballot(self):
        assert compute_commitment("x", "s1") != compute_commitment("x", "s2")

    def test_accepted_by_registry(self):
        registry = ElectionRegistry("A")
        registry.register("A")
        commitment = compute_commitment("candidate-a", generate_salt())
        assert registry.submit_vote("A", commitment).success
        assert registry.verify_commitment(commitment.value)


class TestGenerateSalt:
    def test_length(self):
        assert re.fullmatch(r"[0-9a-f]{32}", generate_salt())
        assert len(generate_salt(4)) == 8

    def test_random(self):
        assert generate_salt() != generate_salt()
