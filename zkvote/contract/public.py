"""Public (state-changing) contract operations."""

from zkvote.contract import register_operation
from zkvote.contract.base import ContractOperation
from zkvote.models import Result
from zkvote.registry import ElectionRegistry


@register_operation
class RegisterVoter(ContractOperation):
    """Register the sender as a voter."""

    @property
    def name(self) -> str:
        return "register-voter"

    def invoke(self, registry: ElectionRegistry, sender: str, *args: str) -> Result:
        return registry.register(sender)


@register_operation
class SubmitVote(ContractOperation):
    """Record the sender's vote commitment."""

    ARGS = ("vote_hash",)

    @property
    def name(self) -> str:
        return "submit-vote"

    def invoke(self, registry: ElectionRegistry, sender: str, *args: str) -> Result:
        (vote_hash,) = args
        return registry.submit_vote(sender, vote_hash)


@register_operation
class CloseVoting(ContractOperation):
    """Close voting; only the administrator may."""

    @property
    def name(self) -> str:
        return "close-voting"

    def invoke(self, registry: ElectionRegistry, sender: str, *args: str) -> Result:
        return registry.close_voting(sender)
