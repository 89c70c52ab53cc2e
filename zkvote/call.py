"""Orchestrator: dispatch named contract calls onto an election registry."""

import logging
from dataclasses import dataclass
from typing import Any

# Import operation modules to register them
from zkvote.contract import get_operation, get_supported_operations
from zkvote.contract import public  # noqa: F401
from zkvote.contract import read_only  # noqa: F401
from zkvote.models import ErrorKind, Result
from zkvote.registry import ElectionRegistry

logger = logging.getLogger(__name__)


@dataclass
class CallResult:
    """Outcome of one contract call.

    Attributes:
        operation: Contract function name that was called
        sender: Identity that made the call
        success: False only when a registry guard rejected the call
        value: Return value (tally for submit-vote, the read for read-only calls)
        error: Guard failure reason, None on success
    """
    operation: str
    sender: str
    success: bool
    value: Any = None
    error: ErrorKind | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "operation": self.operation,
            "sender": self.sender,
            "success": self.success,
            "value": self.value,
            "error": self.error.value if self.error is not None else None,
        }


class ContractCallError(Exception):
    """Malformed contract call (unknown operation or wrong arguments)."""
    pass


def call_contract(
    registry: ElectionRegistry, operation: str, sender: str, *args: str
) -> CallResult:
    """Call a named contract operation on behalf of a sender.

    Args:
        registry: The election registry to act on
        operation: Contract function name, e.g. "submit-vote"
        sender: Identity of the caller
        *args: The operation's positional arguments

    Returns:
        CallResult describing the outcome. Guard failures (already voted,
        not authorized, ...) are reported here, not raised.

    Raises:
        ContractCallError: If the operation is unknown or the arguments do
            not match its signature
    """
    op = get_operation(operation)
    if op is None:
        raise ContractCallError(
            f"Unknown operation: {operation!r}\n\n{get_supported_operations()}"
        )
    if len(args) != len(op.ARGS):
        raise ContractCallError(
            f"{operation} takes {len(op.ARGS)} argument(s) "
            f"({', '.join(op.ARGS) or 'none'}), got {len(args)}"
        )

    logger.debug("Calling %s from %s with %s", operation, sender, args)
    try:
        outcome = op.invoke(registry, sender, *args)
    except TypeError as e:
        raise ContractCallError(f"Invalid arguments for {operation}: {e}") from e

    if not isinstance(outcome, Result):
        return CallResult(operation=operation, sender=sender, success=True, value=outcome)

    if not outcome.success:
        logger.info("%s from %s rejected: %s", operation, sender, outcome.error.value)
    return CallResult(
        operation=operation,
        sender=sender,
        success=outcome.success,
        value=outcome.total_votes,
        error=outcome.error,
    )
