"""Contract-call surface over the election registry."""

from .base import ContractOperation

# Operation registry - import operation modules to register them
_operations: list[type[ContractOperation]] = []


def register_operation(operation_class: type[ContractOperation]) -> type[ContractOperation]:
    """Decorator to register a contract operation class."""
    _operations.append(operation_class)
    return operation_class


def get_all_operations() -> list[ContractOperation]:
    """Return instances of all registered operations."""
    return [operation_class() for operation_class in _operations]


def get_operation(name: str) -> ContractOperation | None:
    """Return an instance of the operation with the given name, if registered."""
    for operation_class in _operations:
        operation = operation_class()
        if operation.name == name:
            return operation
    return None


def get_supported_operations() -> str:
    """Return a user-friendly description of the registered operations."""
    lines = ["Supported operations:"]
    for operation in get_all_operations():
        signature = " ".join(operation.ARGS)
        kind = "read-only" if operation.read_only else "public"
        lines.append(f"  - {operation.name} {signature}".rstrip() + f" ({kind})")
    return "\n".join(lines)
