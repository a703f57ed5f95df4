#!/usr/bin/env python3
"""Building schema trees by hand.

Schemas do not have to come from Pydantic: any tree of schema nodes can be
compiled. This is useful when the schema is read from another source, such
as a configuration file.
"""

from __future__ import annotations

from pyd2proto import (
    ArrayNode,
    EnumNode,
    MapNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    StringNode,
    TupleNode,
    UnknownNode,
    UnsupportedTypeError,
    to_proto_schema,
)


def main() -> None:
    """Run the schema node example."""
    schema = ObjectNode(
        fields={
            "name": StringNode(),
            "age": OptionalNode(NumberNode(is_integer=True)),
            "tags": ArrayNode(StringNode()),
            "status": EnumNode(("ACTIVE", "INACTIVE")),
            "metadata": MapNode(StringNode(), StringNode()),
            "coordinates": TupleNode((NumberNode(), NumberNode())),
            "manager": NullableNode(ObjectNode(fields={"name": StringNode()})),
        }
    )

    print(to_proto_schema(schema, package_name="people"))
    print()

    # Unsupported kinds abort the whole compilation
    try:
        to_proto_schema(ObjectNode(fields={"payload": UnknownNode("Any")}))
    except UnsupportedTypeError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
