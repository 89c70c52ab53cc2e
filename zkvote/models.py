"""Core data models for the election registry."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self


@dataclass(frozen=True)
class VoterId:
    """Opaque voter-identity token (originally a blockchain principal).

    Compared by exact value. Never equal to a VoteCommitment, even when the
    wrapped strings match.
    """
    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: "VoterId | str") -> Self:
        """Wrap a plain string, pass a VoterId through, reject anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Expected a voter identity, got {type(value).__name__}")


@dataclass(frozen=True)
class VoteCommitment:
    """Opaque commitment (hash) of a ballot's contents.

    The registry never inspects its contents. Two voters may submit the same
    commitment.
    """
    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: "VoteCommitment | str") -> Self:
        """Wrap a plain string, pass a VoteCommitment through, reject anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Expected a vote commitment, got {type(value).__name__}")


class ErrorKind(str, Enum):
    """Reasons a registry command can fail.

    Values are the messages the original voting contract reported.
    """
    ALREADY_REGISTERED = "Already registered"
    VOTING_CLOSED = "Voting is closed"
    NOT_REGISTERED = "Not registered"
    ALREADY_VOTED = "Already voted"
    NOT_AUTHORIZED = "Not authorized"


@dataclass(frozen=True)
class Result:
    """Outcome of a registry command.

    Attributes:
        success: Whether the command's writes were applied
        error: Failure reason, None on success
        total_votes: Tally after the command, carried by submit_vote on success
    """
    success: bool
    error: ErrorKind | None = None
    total_votes: int | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, total_votes: int | None = None) -> Self:
        return cls(success=True, total_votes=total_votes)

    @classmethod
    def fail(cls, kind: ErrorKind) -> Self:
        return cls(success=False, error=kind)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"success": self.success}
        if self.error is not None:
            data["error"] = self.error.value
        if self.total_votes is not None:
            data["total_votes"] = self.total_votes
        return data


# Marker stored per voter in cast_ballots; only its presence matters.
BALLOT_CAST = 1


@dataclass
class ElectionState:
    """Mutable state of a single election.

    Attributes:
        administrator: The only identity allowed to close voting
        registered_voters: Identities that have registered
        cast_ballots: voter -> BALLOT_CAST for every voter who has voted
        commitments_seen: Every commitment accepted by submit_vote
        total_votes: Number of successful vote submissions
        voting_open: True until the administrator closes voting; never reopens

    Invariants:
        len(cast_ballots) == total_votes
        cast_ballots.keys() is a subset of registered_voters
    """
    administrator: VoterId
    registered_voters: set[VoterId] = field(default_factory=set)
    cast_ballots: dict[VoterId, int] = field(default_factory=dict)
    commitments_seen: set[VoteCommitment] = field(default_factory=set)
    total_votes: int = 0
    voting_open: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary with stable ordering."""
        return {
            "administrator": self.administrator.value,
            "registered_voters": sorted(v.value for v in self.registered_voters),
            "voted": sorted(v.value for v in self.cast_ballots),
            "commitments": sorted(c.value for c in self.commitments_seen),
            "total_votes": self.total_votes,
            "voting_open": self.voting_open,
        }
