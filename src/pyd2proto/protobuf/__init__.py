"""Protobuf .proto generation for pyd2proto.

This module compiles schema node trees (or Pydantic models) into proto3
schema documents.
"""

from __future__ import annotations

from .compiler import FieldDescriptor, compile_field, compile_object
from .convert import as_schema_node, to_proto_schema
from .emitter import render_document
from .naming import TypeNamer, to_type_name
from .registry import TypeRegistry
from .types import scalar_type_name

__all__ = [
    "to_proto_schema",
    "as_schema_node",
    "compile_field",
    "compile_object",
    "FieldDescriptor",
    "TypeRegistry",
    "TypeNamer",
    "to_type_name",
    "scalar_type_name",
    "render_document",
]
