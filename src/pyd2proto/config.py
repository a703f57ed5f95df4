"""Configuration for .proto generation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProtoOptions:
    """Options for compiling a schema to a .proto document.

    Attributes:
        package_name: Value of the ``package`` declaration (default "default")
        root_message_name: Name of the outermost message (default "Message").
            The type prefix is prepended to it.
        type_prefix: String prepended to every generated message and enum
            name, including the root (default "")
        qualify_names: Name hoisted messages and enums after the full path of
            enclosing field keys (``user.address`` -> ``UserAddress``) instead
            of the field key alone. Avoids two differently nested fields with
            the same key overwriting each other's definition (default False).
            Neither mode avoids the root name: a nested field whose generated
            name equals it (key ``message`` under the default root) is
            replaced by the root message in the nested type's position, and
            a WARNING is logged

    Examples:
        ```python
        from pyd2proto import ProtoOptions, to_proto_schema

        options = ProtoOptions(package_name="fleet.v1", type_prefix="Fleet")
        proto = to_proto_schema(VehicleStatus, options)

        # Keyword overrides win over the options object
        proto = to_proto_schema(VehicleStatus, options, root_message_name="Status")
        ```
    """

    package_name: str = "default"
    root_message_name: str = "Message"
    type_prefix: str = ""
    qualify_names: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.package_name:
            raise ValueError("package_name must not be empty")

        if not self.root_message_name:
            raise ValueError("root_message_name must not be empty")
