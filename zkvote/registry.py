"""Election registry: guarded state transitions over one election."""

import threading
from typing import Any

from zkvote.models import (
    BALLOT_CAST,
    ElectionState,
    ErrorKind,
    Result,
    VoteCommitment,
    VoterId,
)


class ElectionRegistry:
    """In-memory state machine for a single election.

    Tracks registration, enforces one vote per registered voter, records the
    commitment of each cast vote, and lets the administrator close voting.
    Voting starts open and, once closed, stays closed.

    Every operation holds one lock across its whole check-then-write sequence,
    so the registry can be shared between threads. Guard failures are returned
    as Result values; nothing is raised for them and nothing is written.

    Example:
        >>> registry = ElectionRegistry("A")
        >>> registry.register("A").success
        True
        >>> registry.submit_vote("A", "deadbeef").total_votes
        1
        >>> registry.submit_vote("A", "deadbeef").error
        <ErrorKind.ALREADY_VOTED: 'Already voted'>
    """

    def __init__(self, administrator: VoterId | str):
        self._state = ElectionState(administrator=VoterId.coerce(administrator))
        self._lock = threading.Lock()

    @property
    def administrator(self) -> VoterId:
        return self._state.administrator

    def register(self, voter_id: VoterId | str) -> Result:
        """Register a voter. Anyone may self-register, once."""
        voter = VoterId.coerce(voter_id)
        with self._lock:
            if voter in self._state.registered_voters:
                return Result.fail(ErrorKind.ALREADY_REGISTERED)
            self._state.registered_voters.add(voter)
            return Result.ok()

    def submit_vote(
        self, voter_id: VoterId | str, commitment: VoteCommitment | str
    ) -> Result:
        """Record a vote commitment for a registered voter.

        Guards are checked in order, first failure wins: voting closed,
        voter not registered, voter already voted. The commitment itself is
        not validated and may repeat another voter's.

        Returns:
            Result carrying the updated tally on success
        """
        voter = VoterId.coerce(voter_id)
        vote = VoteCommitment.coerce(commitment)
        with self._lock:
            state = self._state
            if not state.voting_open:
                return Result.fail(ErrorKind.VOTING_CLOSED)
            if voter not in state.registered_voters:
                return Result.fail(ErrorKind.NOT_REGISTERED)
            if voter in state.cast_ballots:
                return Result.fail(ErrorKind.ALREADY_VOTED)

            state.cast_ballots[voter] = BALLOT_CAST
            state.commitments_seen.add(vote)
            state.total_votes += 1
            return Result.ok(total_votes=state.total_votes)

    def verify_commitment(self, commitment: VoteCommitment | str) -> bool:
        """Return True iff this exact commitment was accepted by submit_vote."""
        vote = VoteCommitment.coerce(commitment)
        with self._lock:
            return vote in self._state.commitments_seen

    def tally(self) -> int:
        with self._lock:
            return self._state.total_votes

    def close_voting(self, requester_id: VoterId | str) -> Result:
        """Close voting. Only the administrator may; closing twice succeeds."""
        requester = VoterId.coerce(requester_id)
        with self._lock:
            if requester != self._state.administrator:
                return Result.fail(ErrorKind.NOT_AUTHORIZED)
            self._state.voting_open = False
            return Result.ok()

    def is_voting_open(self) -> bool:
        with self._lock:
            return self._state.voting_open

    def is_registered(self, voter_id: VoterId | str) -> bool:
        voter = VoterId.coerce(voter_id)
        with self._lock:
            return voter in self._state.registered_voters

    def has_voted(self, voter_id: VoterId | str) -> bool:
        voter = VoterId.coerce(voter_id)
        with self._lock:
            return voter in self._state.cast_ballots

    def snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable copy of the current state."""
        with self._lock:
            return self._state.to_dict()
