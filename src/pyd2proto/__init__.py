"""pyd2proto: Pydantic to Protocol Buffers schema compiler

Compiles typed schema trees, built by hand or introspected from Pydantic
models, into proto3 ``.proto`` documents: a package declaration followed by
enum and message definitions. Nested models, enums and tuples are hoisted
into named top-level definitions; arrays and sets become repeated fields.

Quick Start:
    >>> from pydantic import BaseModel
    >>> from pyd2proto import to_proto_schema
    >>>
    >>> class Address(BaseModel):
    ...     street: str
    ...     city: str
    >>>
    >>> class User(BaseModel):
    ...     name: str
    ...     tags: list[str]
    ...     address: Address | None = None
    >>>
    >>> print(to_proto_schema(User, package_name="users", root_message_name="User"))
    syntax = "proto3";
    package users;
    <BLANKLINE>
    message Address {
        string street = 1;
        string city = 2;
    }
    <BLANKLINE>
    message User {
        string name = 1;
        repeated string tags = 2;
        optional Address address = 3;
    }
"""

from __future__ import annotations

from .config import ProtoOptions
from .exceptions import CyclicSchemaError, Pyd2ProtoError, SchemaError, UnsupportedTypeError
from .protobuf import compile_field, compile_object, to_proto_schema, to_type_name
from .schema import (
    ArrayNode,
    BigIntNode,
    BooleanNode,
    DateNode,
    EnumNode,
    Int64,
    MapNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    SetNode,
    StringNode,
    TupleNode,
    UnknownNode,
    schema_from_model,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "to_proto_schema",
    "ProtoOptions",
    "compile_field",
    "compile_object",
    "to_type_name",
    "schema_from_model",
    # Schema nodes
    "SchemaNode",
    "ObjectNode",
    "StringNode",
    "BooleanNode",
    "DateNode",
    "BigIntNode",
    "NumberNode",
    "EnumNode",
    "ArrayNode",
    "SetNode",
    "TupleNode",
    "MapNode",
    "OptionalNode",
    "NullableNode",
    "UnknownNode",
    # Field helpers
    "Int64",
    # Exceptions
    "Pyd2ProtoError",
    "SchemaError",
    "UnsupportedTypeError",
    "CyclicSchemaError",
    # Version
    "__version__",
]
