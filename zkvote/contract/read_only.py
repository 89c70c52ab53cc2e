"""Read-only contract operations. The sender is ignored."""

from zkvote.contract import register_operation
from zkvote.contract.base import ContractOperation
from zkvote.registry import ElectionRegistry


class ReadOnlyOperation(ContractOperation):

    @property
    def read_only(self) -> bool:
        return True


@register_operation
class VerifyVote(ReadOnlyOperation):
    ARGS = ("vote_hash",)

    @property
    def name(self) -> str:
        return "verify-vote"

    def invoke(self, registry: ElectionRegistry, sender: str, *args: str) -> bool:
        (vote_hash,) = args
        return registry.verify_commitment(vote_hash)


@register_operation
class GetTotalVotes(ReadOnlyOperation):

    @property
    def name(self) -> str:
        return "get-total-votes"

    def invoke(self, registry: ElectionRegistry, sender: str, *args: str) -> int:
        return registry.tally()


@register_operation
class IsVotingOpen(ReadOnlyOperation):

    @property
    def name(self) -> str:
        return "is-voting-open"

    def invoke(self, registry: ElectionRegistry, sender: str, *args: str) -> bool:
        return registry.is_voting_open()
