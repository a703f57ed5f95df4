"""Unit tests for .proto document generation."""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, List, Optional, Tuple

import pytest
from pydantic import BaseModel

from pyd2proto import (
    ArrayNode,
    EnumNode,
    MapNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    ProtoOptions,
    StringNode,
    TupleNode,
    UnknownNode,
    UnsupportedTypeError,
    to_proto_schema,
)


def proto(*lines: str) -> str:
    """Join expected document lines."""
    return "\n".join(lines)


class Status(enum.Enum):
    """Test enum."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class Person(BaseModel):
    """Flat model."""

    name: str
    age: int


class Label(BaseModel):
    """Array element model."""

    label: str
    value: float


class Account(BaseModel):
    """Nested model with arrays and enums."""

    name: str
    tags: List[Label]
    status: Status


class Envelope(BaseModel):
    """Root model."""

    user: Account
    metadata: Dict[str, str]
    coordinates: Tuple[float, float]
    note: Optional[str] = None


class TestScenarios:
    """Test complete documents for common schemas."""

    def test_flat_object(self) -> None:
        """Test scalar fields with default options."""
        schema = ObjectNode(fields={"name": StringNode(), "age": NumberNode(is_integer=True)})

        assert to_proto_schema(schema) == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "message Message {",
            "    string name = 1;",
            "    int32 age = 2;",
            "}",
        )

    def test_array(self) -> None:
        """Test an array field."""
        schema = ObjectNode(fields={"tags": ArrayNode(StringNode())})

        assert to_proto_schema(schema) == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "message Message {",
            "    repeated string tags = 1;",
            "}",
        )

    def test_enum(self) -> None:
        """Test enums are emitted before messages."""
        schema = ObjectNode(fields={"status": EnumNode(("ACTIVE", "INACTIVE"))})

        assert to_proto_schema(schema) == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "enum Status {",
            "    ACTIVE = 0;",
            "    INACTIVE = 1;",
            "}",
            "",
            "message Message {",
            "    Status status = 1;",
            "}",
        )

    def test_map(self) -> None:
        """Test a scalar map registers no extra message."""
        schema = ObjectNode(fields={"metadata": MapNode(StringNode(), StringNode())})

        assert to_proto_schema(schema) == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "message Message {",
            "    map<string, string> metadata = 1;",
            "}",
        )

    def test_tuple(self) -> None:
        """Test a tuple is hoisted into a positional message."""
        schema = ObjectNode(fields={"coordinates": TupleNode((NumberNode(), NumberNode()))})

        assert to_proto_schema(schema) == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "message Coordinates {",
            "    double coordinates_0 = 1;",
            "    double coordinates_1 = 2;",
            "}",
            "",
            "message Message {",
            "    Coordinates coordinates = 1;",
            "}",
        )

    def test_optional_fields(self) -> None:
        """Test optional, nullable and array combinations."""
        schema = ObjectNode(
            fields={
                "name": OptionalNode(StringNode()),
                "age": NullableNode(NumberNode(is_integer=True)),
                "city": OptionalNode(NullableNode(StringNode())),
                "address": NullableNode(ObjectNode(fields={"street": OptionalNode(StringNode())})),
                "tags": NullableNode(ArrayNode(StringNode())),
                "stickers": ArrayNode(OptionalNode(NullableNode(StringNode()))),
            }
        )

        assert to_proto_schema(schema) == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "message Address {",
            "    optional string street = 1;",
            "}",
            "",
            "message Message {",
            "    optional string name = 1;",
            "    optional int32 age = 2;",
            "    optional string city = 3;",
            "    optional Address address = 4;",
            "    repeated string tags = 5;",
            "    repeated string stickers = 6;",
            "}",
        )

    def test_nested_objects_with_arrays_and_enums(self) -> None:
        """Test hoisted definitions precede the messages that use them."""
        schema = ObjectNode(
            fields={
                "user": ObjectNode(
                    fields={
                        "name": StringNode(),
                        "tags": ArrayNode(
                            ObjectNode(fields={"label": StringNode(), "value": NumberNode()})
                        ),
                        "status": EnumNode(("ACTIVE", "INACTIVE")),
                    }
                )
            }
        )

        assert to_proto_schema(schema) == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "enum Status {",
            "    ACTIVE = 0;",
            "    INACTIVE = 1;",
            "}",
            "",
            "message Tag {",
            "    string label = 1;",
            "    double value = 2;",
            "}",
            "",
            "message User {",
            "    string name = 1;",
            "    repeated Tag tags = 2;",
            "    Status status = 3;",
            "}",
            "",
            "message Message {",
            "    User user = 1;",
            "}",
        )

    def test_nested_arrays(self) -> None:
        """Test an array of arrays stacks repeated modifiers."""
        schema = ObjectNode(fields={"matrix": ArrayNode(ArrayNode(NumberNode(is_integer=True)))})

        assert "    repeated repeated int32 matrix = 1;" in to_proto_schema(schema)


class TestOptions:
    """Test package, root name and prefix options."""

    schema = ObjectNode(
        fields={
            "name": StringNode(),
            "address": ObjectNode(fields={"street": StringNode()}),
        }
    )

    def test_custom_package_and_root(self) -> None:
        """Test package and root message names."""
        result = to_proto_schema(self.schema, package_name="mypackage", root_message_name="MyMessage")

        assert result == proto(
            'syntax = "proto3";',
            "package mypackage;",
            "",
            "message Address {",
            "    string street = 1;",
            "}",
            "",
            "message MyMessage {",
            "    string name = 1;",
            "    Address address = 2;",
            "}",
        )

    def test_type_prefix(self) -> None:
        """Test the prefix applies to nested types and the root, not field names."""
        result = to_proto_schema(self.schema, ProtoOptions(type_prefix="Api"))

        assert "message ApiAddress {" in result
        assert "message ApiMessage {" in result
        assert "    ApiAddress address = 2;" in result

    def test_overrides_win(self) -> None:
        """Test keyword overrides replace fields of the options object."""
        options = ProtoOptions(package_name="one", root_message_name="First")
        result = to_proto_schema(self.schema, options, package_name="two")

        assert "package two;" in result
        assert "message First {" in result

    def test_qualify_names(self) -> None:
        """Test qualified naming for nested types."""
        schema = ObjectNode(
            fields={"user": ObjectNode(fields={"address": ObjectNode(fields={"street": StringNode()})})}
        )
        result = to_proto_schema(schema, qualify_names=True)

        assert "message UserAddress {" in result
        assert "    UserAddress address = 1;" in result

    @pytest.mark.parametrize("field", ["package_name", "root_message_name"])
    def test_empty_names_rejected(self, field: str) -> None:
        """Test option validation."""
        with pytest.raises(ValueError, match=field):
            ProtoOptions(**{field: ""})

    def test_unknown_override_rejected(self) -> None:
        """Test an unknown keyword override is an error."""
        with pytest.raises(TypeError):
            to_proto_schema(self.schema, syntax="proto2")


class TestRootHandling:
    """Test validation of the top-level schema."""

    def test_root_registered_last(self) -> None:
        """Test the root message follows all nested messages."""
        result = to_proto_schema(self.nested())

        assert result.rstrip().endswith("message Message {\n    A a = 1;\n    B b = 2;\n}")

    @staticmethod
    def nested() -> ObjectNode:
        return ObjectNode(
            fields={
                "a": ObjectNode(fields={"x": StringNode()}),
                "b": ObjectNode(fields={"y": StringNode()}),
            }
        )

    def test_wrapped_root_accepted(self) -> None:
        """Test Optional/Nullable wrappers around the root are stripped."""
        schema = ObjectNode(fields={"name": StringNode()})

        assert to_proto_schema(OptionalNode(NullableNode(schema))) == to_proto_schema(schema)

    @pytest.mark.parametrize(
        ("schema", "type_name"),
        [
            ({"test": 1}, "dict"),
            (1, "int"),
            (StringNode(), "StringNode"),
            (ArrayNode(StringNode()), "ArrayNode"),
        ],
    )
    def test_non_object_root_rejected(self, schema: Any, type_name: str) -> None:
        """Test roots that are not objects are rejected."""
        with pytest.raises(UnsupportedTypeError, match=f"Unsupported type: {type_name}"):
            to_proto_schema(schema)

    def test_unknown_field_rejected(self) -> None:
        """Test no partial output is produced for an unsupported field."""
        schema = ObjectNode(fields={"name": StringNode(), "counter": UnknownNode("Any")})

        with pytest.raises(UnsupportedTypeError, match="Unsupported type: Any"):
            to_proto_schema(schema)

    def test_deterministic(self) -> None:
        """Test the same input always produces the same output."""
        assert to_proto_schema(Envelope) == to_proto_schema(Envelope)

    def test_nested_name_equal_to_root(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a nested type named like the root is replaced by the root."""
        schema = ObjectNode(fields={"message": ObjectNode(fields={"text": StringNode()})})

        with caplog.at_level(logging.WARNING, logger="pyd2proto.protobuf.registry"):
            result = to_proto_schema(schema)

        assert result == proto(
            'syntax = "proto3";',
            "package default;",
            "",
            "message Message {",
            "    Message message = 1;",
            "}",
        )
        assert "Message Message defined more than once" in caplog.text


class TestPydanticModels:
    """Test generation straight from Pydantic models."""

    def test_flat_model(self) -> None:
        """Test a flat model matches the equivalent node tree."""
        schema = ObjectNode(fields={"name": StringNode(), "age": NumberNode(is_integer=True)})

        assert to_proto_schema(Person) == to_proto_schema(schema)

    def test_model_instance(self) -> None:
        """Test an instance compiles like its class."""
        assert to_proto_schema(Person(name="Ada", age=36)) == to_proto_schema(Person)

    def test_nested_model(self) -> None:
        """Test a model with nested models, enums, maps and tuples."""
        assert to_proto_schema(Envelope, package_name="accounts", root_message_name="Envelope") == proto(
            'syntax = "proto3";',
            "package accounts;",
            "",
            "enum Status {",
            "    ACTIVE = 0;",
            "    INACTIVE = 1;",
            "}",
            "",
            "message Tag {",
            "    string label = 1;",
            "    double value = 2;",
            "}",
            "",
            "message User {",
            "    string name = 1;",
            "    repeated Tag tags = 2;",
            "    Status status = 3;",
            "}",
            "",
            "message Coordinates {",
            "    double coordinates_0 = 1;",
            "    double coordinates_1 = 2;",
            "}",
            "",
            "message Envelope {",
            "    User user = 1;",
            "    map<string, string> metadata = 2;",
            "    Coordinates coordinates = 3;",
            "    optional string note = 4;",
            "}",
        )

    def test_unsupported_model_field(self) -> None:
        """Test an Any field is rejected."""

        class Loose(BaseModel):
            payload: Any

        with pytest.raises(UnsupportedTypeError, match="Unsupported type: Any"):
            to_proto_schema(Loose)
