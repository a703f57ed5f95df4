"""Schema tree to Protobuf field compilation.

This module walks a schema node tree depth-first. Every field compiles to
one or more field descriptors; composite types (objects, enums, tuples and
object map values) are hoisted into named top-level definitions in the
TypeRegistry as a side effect, bottom-up, so a definition is always
registered before the message that references it.

Example:
    >>> registry = TypeRegistry()
    >>> schema = ObjectNode(fields={"tags": ArrayNode(StringNode())})
    >>> compile_object(schema, registry, TypeNamer())
    ['repeated string tags = 1;']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

import inflection

from ..exceptions import UnsupportedTypeError
from ..schema.nodes import (
    ArrayNode,
    EnumNode,
    MapNode,
    NullableNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    SetNode,
    TupleNode,
    kind_name,
    unwrap,
)
from .emitter import render_enum
from .naming import TypeNamer
from .registry import TypeRegistry
from .types import SCALAR_NODE_TYPES, scalar_type_name

logger = logging.getLogger(__name__)

REPEATED = "repeated"
OPTIONAL = "optional"


@dataclass(frozen=True)
class FieldDescriptor:
    """A compiled field before it is numbered.

    Attributes:
        type_name: Protobuf type (scalar, message/enum name, or ``map<K, V>``)
        field_name: Field name in the enclosing message
        modifiers: Leading keywords such as "repeated" or "optional"
    """

    type_name: str
    field_name: str
    modifiers: Tuple[str, ...] = ()

    @property
    def type_string(self) -> str:
        """Modifiers and type name joined by spaces."""
        return " ".join((*self.modifiers, self.type_name))

    def render(self, number: int) -> str:
        return f"{self.type_string} {self.field_name} = {number};"


def compile_field(
    key: str,
    node: SchemaNode,
    registry: TypeRegistry,
    namer: TypeNamer,
    *,
    is_optional: bool = False,
    is_in_array: bool = False,
    scope: Sequence[str] = (),
) -> List[FieldDescriptor]:
    """Compile one field of an object schema.

    Args:
        key: Field name
        node: Schema node of the field
        registry: Receives hoisted messages and enums
        namer: Generates names for hoisted definitions
        is_optional: Field was wrapped in Optional/Nullable
        is_in_array: Field is the element of an array or set
        scope: Keys of the enclosing objects, outermost first

    Returns:
        Field descriptors for the field

    Raises:
        UnsupportedTypeError: If the node, or any node below it, has no
            Protobuf mapping
        CyclicSchemaError: If an object contains itself
    """
    if isinstance(node, (OptionalNode, NullableNode)):
        return compile_field(
            key,
            unwrap(node),
            registry,
            namer,
            is_optional=True,
            is_in_array=is_in_array,
            scope=scope,
        )

    if isinstance(node, (ArrayNode, SetNode)):
        return _compile_array(key, node, registry, namer, scope)

    if isinstance(node, MapNode):
        return _compile_map(key, node, registry, namer, scope)

    modifiers: Tuple[str, ...] = (OPTIONAL,) if is_optional and not is_in_array else ()

    if isinstance(node, ObjectNode):
        message_name = namer.name_for(key, scope)
        lines = compile_object(node, registry, namer, scope=(*scope, key))
        registry.register_message(message_name, lines)
        return [FieldDescriptor(message_name, key, modifiers)]

    if isinstance(node, SCALAR_NODE_TYPES):
        return [FieldDescriptor(scalar_type_name(node), key, modifiers)]

    if isinstance(node, EnumNode):
        enum_name = namer.name_for(key, scope)
        registry.register_enum(enum_name, render_enum(enum_name, [str(option) for option in node.options]))
        return [FieldDescriptor(enum_name, key, modifiers)]

    if isinstance(node, TupleNode):
        message_name = namer.name_for(key, scope)
        lines = []
        for index, element in enumerate(node.elements):
            element_fields = compile_field(
                f"{key}_{index}",
                element,
                registry,
                namer,
                is_optional=False,
                is_in_array=is_in_array,
                scope=scope,
            )
            lines.extend(field.render(index + 1) for field in element_fields)
        registry.register_message(message_name, lines)
        return [FieldDescriptor(message_name, key, modifiers)]

    raise UnsupportedTypeError(kind_name(node))


def compile_object(
    schema: SchemaNode,
    registry: TypeRegistry,
    namer: TypeNamer,
    *,
    scope: Sequence[str] = (),
) -> List[str]:
    """Compile every field of an object schema into numbered field lines.

    Field numbers start at 1 for each object and follow declaration order.

    Args:
        schema: Object node to compile
        registry: Receives hoisted messages and enums
        namer: Generates names for hoisted definitions
        scope: Keys leading to this object from the root

    Returns:
        Rendered field lines, e.g. ``["string name = 1;", "int32 age = 2;"]``

    Raises:
        UnsupportedTypeError: If schema is not an object, or a field cannot
            be compiled
    """
    if not isinstance(schema, ObjectNode):
        raise UnsupportedTypeError(kind_name(schema))

    fields: List[FieldDescriptor] = []
    with registry.visiting(schema, scope):
        for key, node in schema.fields.items():
            fields.extend(compile_field(key, node, registry, namer, scope=scope))

    logger.debug("Compiled object %s into %d fields", ".".join(scope) or "<root>", len(fields))
    return [field.render(number) for number, field in enumerate(fields, start=1)]


def _compile_array(
    key: str,
    node: ArrayNode | SetNode,
    registry: TypeRegistry,
    namer: TypeNamer,
    scope: Sequence[str],
) -> List[FieldDescriptor]:
    """Compile an array or set as a repeated field.

    The element is compiled under the singular form of the key (so hoisted
    element types get singular names) and renamed back afterwards. Elements
    are never optional.
    """
    singular_key = inflection.singularize(key)
    element_fields = compile_field(
        singular_key,
        node.element,
        registry,
        namer,
        is_optional=False,
        is_in_array=True,
        scope=scope,
    )
    return [
        replace(
            field,
            field_name=key if field.field_name == singular_key else field.field_name,
            modifiers=(REPEATED, *field.modifiers),
        )
        for field in element_fields
    ]


def _compile_map(
    key: str,
    node: MapNode,
    registry: TypeRegistry,
    namer: TypeNamer,
    scope: Sequence[str],
) -> List[FieldDescriptor]:
    key_type = _map_part_type(f"{key}Key", node.key_type, registry, namer, scope)
    value_type = _map_part_type(f"{key}Value", node.value_type, registry, namer, scope)
    return [FieldDescriptor(f"map<{key_type}, {value_type}>", key)]


def _map_part_type(
    key: str,
    node: SchemaNode,
    registry: TypeRegistry,
    namer: TypeNamer,
    scope: Sequence[str],
) -> str:
    """Compile a map key or value and return its type string.

    Raises:
        UnsupportedTypeError: If the part does not compile to exactly one
            field without modifiers (e.g. an array or optional value)
    """
    fields = compile_field(key, node, registry, namer, scope=scope)
    if len(fields) != 1 or fields[0].modifiers:
        raise UnsupportedTypeError(kind_name(node))
    return fields[0].type_string
