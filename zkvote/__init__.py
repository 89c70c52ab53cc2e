"""Single-election voting registry with vote commitments."""

from zkvote.models import ErrorKind, Result, VoteCommitment, VoterId
from zkvote.registry import ElectionRegistry

__all__ = ["ElectionRegistry", "ErrorKind", "Result", "VoteCommitment", "VoterId"]
