"""Exception hierarchy for pyd2proto.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Pyd2ProtoError for easy catching of any pyd2proto-specific error.
"""

from __future__ import annotations


class Pyd2ProtoError(Exception):
    """Base exception for all pyd2proto errors."""

    pass


class SchemaError(Pyd2ProtoError):
    """Raised when a schema cannot be compiled to a .proto document.

    Examples:
        - Unsupported node kind anywhere in the schema tree
        - Top-level schema is not an object
        - Self-referential model graph
    """

    pass


class UnsupportedTypeError(SchemaError):
    """Raised when traversal reaches a schema kind with no Protobuf mapping.

    Examples:
        - ``Any`` or multi-member ``Union`` annotations
        - A top-level schema that is not an object
        - A map key or value that does not resolve to a single plain type

    Attributes:
        type_name: Identifier of the offending kind (node class name, unknown
            annotation name, or Python type name of a foreign value)
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unsupported type: {type_name}")
        self.type_name = type_name


class CyclicSchemaError(SchemaError):
    """Raised when a schema refers back to one of its own enclosing objects.

    Attributes:
        path: Names of the objects on the cycle, outermost first
    """

    def __init__(self, path: list[str]) -> None:
        super().__init__(f"Cyclic schema: {' -> '.join(path)}")
        self.path = path
