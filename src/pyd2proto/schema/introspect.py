"""Schema introspection for Pydantic models.

This module walks Pydantic models and type annotations and builds the
schema node tree the compiler consumes.

Example:
    >>> class User(BaseModel):
    ...     name: str
    ...     tags: list[str] = []
    >>> schema_from_model(User)
    ObjectNode(fields={'name': StringNode(), 'tags': OptionalNode(inner=ArrayNode(element=StringNode()))})
"""

from __future__ import annotations

import collections.abc
import datetime
import enum
import types
from typing import Annotated, Any, Iterable, Literal, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import CyclicSchemaError
from .fields import INT32_MAX, INT32_MIN, declared_bits
from .nodes import (
    ArrayNode,
    BigIntNode,
    BooleanNode,
    DateNode,
    EnumNode,
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
)

_ARRAY_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence)
_SET_ORIGINS = (set, frozenset, collections.abc.Set, collections.abc.MutableSet)
_MAP_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_UNION_ORIGINS = (Union, types.UnionType)


def schema_from_model(
    model_class: Type[BaseModel], _path: Tuple[type, ...] = ()
) -> ObjectNode:
    """Build an object node from a Pydantic model class.

    Fields keep their declaration order. A field that is not required and
    not already nullable is wrapped in OptionalNode.

    Args:
        model_class: Pydantic model class to introspect

    Returns:
        ObjectNode describing the model

    Raises:
        CyclicSchemaError: If the model refers back to itself, directly or
            through nested models
    """
    if model_class in _path:
        raise CyclicSchemaError([model.__name__ for model in (*_path, model_class)])
    path = (*_path, model_class)

    fields: dict[str, SchemaNode] = {}
    for field_name, field_info in model_class.model_fields.items():
        node = _node_from_field(field_info, path)
        if not field_info.is_required() and not isinstance(node, (OptionalNode, NullableNode)):
            node = OptionalNode(node)
        fields[field_name] = node
    return ObjectNode(fields=fields)


def node_from_annotation(
    annotation: Any, metadata: Iterable[Any] = (), _path: Tuple[type, ...] = ()
) -> SchemaNode:
    """Map a type annotation to a schema node.

    Args:
        annotation: Type annotation (e.g. ``int``, ``list[str]``, a model class)
        metadata: Constraint objects attached to the annotation (Pydantic
            FieldInfo, annotated_types bounds)

    Returns:
        Schema node; UnknownNode for annotations with no Protobuf mapping
    """
    metadata = list(metadata)
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        return node_from_annotation(args[0], [*metadata, *args[1:]], _path)

    if annotation is Any:
        return UnknownNode("Any")

    if origin in _UNION_ORIGINS:
        non_none_args = [arg for arg in args if arg is not type(None)]
        if len(non_none_args) == 1 and len(args) == 2:
            return NullableNode(node_from_annotation(non_none_args[0], metadata, _path))
        return UnknownNode("Union")

    if origin is Literal:
        return EnumNode(options=tuple(args))

    if origin in _ARRAY_ORIGINS:
        return ArrayNode(_element_node(args, _path))

    if origin in _SET_ORIGINS:
        return SetNode(_element_node(args, _path))

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return ArrayNode(node_from_annotation(args[0], (), _path))
        if not args:
            return UnknownNode("tuple")
        return TupleNode(elements=tuple(node_from_annotation(arg, (), _path) for arg in args))

    if origin in _MAP_ORIGINS:
        if len(args) != 2:
            return UnknownNode("dict")
        return MapNode(
            key_type=node_from_annotation(args[0], (), _path),
            value_type=node_from_annotation(args[1], (), _path),
        )

    if not isinstance(annotation, type):
        return UnknownNode(getattr(annotation, "__name__", repr(annotation)))

    # bool is a subclass of int, and IntEnum of both int and Enum
    if issubclass(annotation, bool):
        return BooleanNode()

    if issubclass(annotation, enum.Enum):
        return EnumNode(options=tuple(member.name for member in annotation))

    if issubclass(annotation, int):
        return BigIntNode() if _needs_int64(metadata) else NumberNode(is_integer=True)

    if issubclass(annotation, float):
        return NumberNode(is_integer=False)

    if issubclass(annotation, str):
        return StringNode()

    # datetime is a subclass of date
    if issubclass(annotation, datetime.date):
        return DateNode()

    if issubclass(annotation, BaseModel):
        return schema_from_model(annotation, _path)

    return UnknownNode(annotation.__name__)


def _node_from_field(field_info: FieldInfo, path: Tuple[type, ...]) -> SchemaNode:
    """Map a model field, using its constraints as annotation metadata."""
    if field_info.annotation is None:
        return UnknownNode("None")
    return node_from_annotation(field_info.annotation, [field_info, *field_info.metadata], path)


def _element_node(args: Tuple[Any, ...], path: Tuple[type, ...]) -> SchemaNode:
    if not args:
        return UnknownNode("Any")
    return node_from_annotation(args[0], (), path)


def _needs_int64(metadata: list[Any]) -> bool:
    """Decide whether integer constraints call for a 64-bit type.

    Args:
        metadata: Constraint objects; nested FieldInfo metadata is included

    Returns:
        True if a declared width exceeds 32 bits or a bound falls outside the
        signed 32-bit range
    """
    constraints: list[Any] = []
    for item in metadata:
        constraints.append(item)
        if isinstance(item, FieldInfo):
            constraints.extend(item.metadata)

    for constraint in constraints:
        bits = declared_bits(constraint)
        if bits is not None and bits > 32:
            return True

        # exclusive bounds admit one value less than their inclusive form
        for attr, limit in (("ge", INT32_MIN), ("gt", INT32_MIN - 1)):
            bound = getattr(constraint, attr, None)
            if isinstance(bound, (int, float)) and bound < limit:
                return True
        for attr, limit in (("le", INT32_MAX), ("lt", INT32_MAX + 1)):
            bound = getattr(constraint, attr, None)
            if isinstance(bound, (int, float)) and bound > limit:
                return True

    return False
