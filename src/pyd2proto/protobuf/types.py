"""Scalar type mapping from schema leaves to Protobuf types."""

from __future__ import annotations

from ..exceptions import UnsupportedTypeError
from ..schema.nodes import BigIntNode, BooleanNode, DateNode, NumberNode, SchemaNode, StringNode, kind_name

SCALAR_NODE_TYPES = (StringNode, NumberNode, BooleanNode, DateNode, BigIntNode)


def scalar_type_name(node: SchemaNode) -> str:
    """Convert a scalar schema node to its Protobuf type.

    Dates have no structured timestamp mapping and are carried as strings.

    Args:
        node: Scalar node with Optional/Nullable wrappers already stripped

    Returns:
        Protobuf scalar type string

    Raises:
        UnsupportedTypeError: If node is not a scalar
    """
    if isinstance(node, StringNode):
        return "string"

    if isinstance(node, NumberNode):
        return "int32" if node.is_integer else "double"

    if isinstance(node, BooleanNode):
        return "bool"

    if isinstance(node, DateNode):
        return "string"

    if isinstance(node, BigIntNode):
        return "int64"

    raise UnsupportedTypeError(kind_name(node))
