"""Abstract base class for contract operations."""

from abc import ABC, abstractmethod
from typing import Any

from zkvote.registry import ElectionRegistry


class ContractOperation(ABC):
    """Abstract base class for an operation callable on the voting contract.

    Each operation maps one named contract function onto the registry.
    Operations are registered via the @register_operation decorator in
    zkvote/contract/__init__.py.
    """

    # Names of the positional arguments the operation takes after the sender
    ARGS: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Contract function name, e.g. "submit-vote"."""
        pass

    @property
    def read_only(self) -> bool:
        """Whether the operation only reads registry state."""
        return False

    @abstractmethod
    def invoke(self, registry: ElectionRegistry, sender: str, *args: str) -> Any:
        """Run the operation against a registry.

        Args:
            registry: The election registry to act on
            sender: Identity of the caller
            *args: Positional arguments, one per entry in ARGS

        Returns:
            A Result for public operations, a plain value for read-only ones
        """
        pass
