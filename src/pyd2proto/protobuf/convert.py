"""Protobuf schema generation from schema trees and Pydantic models.

This module drives a full compilation: it turns the input into a schema
node tree, compiles the root object, and renders the .proto document.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from pydantic import BaseModel

from ..config import ProtoOptions
from ..exceptions import UnsupportedTypeError
from ..schema.introspect import schema_from_model
from ..schema.nodes import SchemaNode, is_schema_node, kind_name, strip_modifiers
from .compiler import compile_object
from .emitter import render_document
from .naming import TypeNamer
from .registry import TypeRegistry

logger = logging.getLogger(__name__)


def to_proto_schema(
    schema: SchemaNode | type[BaseModel] | BaseModel,
    options: ProtoOptions | None = None,
    **overrides: Any,
) -> str:
    """Generate a proto3 .proto document from a schema.

    Nested objects, enums and tuples are hoisted into top-level definitions
    named after their field key. The root message is named
    ``type_prefix + root_message_name`` and comes last.

    Args:
        schema: Schema node tree, Pydantic model class, or model instance.
            Must be an object once Optional/Nullable wrappers are stripped.
        options: Compilation options (defaults to ProtoOptions())
        **overrides: ProtoOptions fields overriding those in options

    Returns:
        .proto document as a string

    Raises:
        UnsupportedTypeError: If the schema, or any field in it, has no
            Protobuf mapping
        CyclicSchemaError: If the schema contains itself
        ValueError: If the options are invalid

    Example:
        >>> class User(BaseModel):
        ...     name: str
        ...     age: int
        >>> print(to_proto_schema(User))
        syntax = "proto3";
        package default;
        <BLANKLINE>
        message Message {
            string name = 1;
            int32 age = 2;
        }
    """
    options = options or ProtoOptions()
    if overrides:
        options = dataclasses.replace(options, **overrides)

    root = strip_modifiers(as_schema_node(schema))
    namer = TypeNamer(prefix=options.type_prefix, qualify=options.qualify_names)
    registry = TypeRegistry()

    fields = compile_object(root, registry, namer)
    registry.register_message(namer.root_name(options.root_message_name), fields)

    logger.debug(
        "Generated %d messages and %d enums for package %s",
        len(registry.messages),
        len(registry.enums),
        options.package_name,
    )
    return render_document(registry, options.package_name)


def as_schema_node(schema: Any) -> SchemaNode:
    """Return schema as a node tree, introspecting Pydantic models.

    Raises:
        UnsupportedTypeError: If schema is neither a node nor a Pydantic
            model class or instance
    """
    if is_schema_node(schema):
        return schema

    if isinstance(schema, BaseModel):
        return schema_from_model(type(schema))

    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema_from_model(schema)

    raise UnsupportedTypeError(kind_name(schema))
