"""Type name generation for Protobuf messages and enums."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


def to_type_name(key: str, prefix: str = "") -> str:
    """Convert a dotted field key to a PascalCase type name.

    Each ``.``-separated segment gets its first character uppercased; the
    rest of the segment is kept as is.

    Args:
        key: Field key, optionally dotted (e.g. "user.address")
        prefix: Prepended verbatim to the result

    Returns:
        Type name (e.g. "UserAddress")

    Example:
        >>> to_type_name("user.address")
        'UserAddress'
        >>> to_type_name("status", prefix="Api")
        'ApiStatus'
    """
    name = "".join(part[:1].upper() + part[1:] for part in key.split("."))
    return f"{prefix}{name}"


@dataclass(frozen=True)
class TypeNamer:
    """Names the messages and enums hoisted out of a schema.

    Attributes:
        prefix: Prepended to every generated message and enum name
        qualify: Build names from the full path of enclosing object keys
            rather than the field key alone
    """

    prefix: str = ""
    qualify: bool = False

    def name_for(self, key: str, scope: Sequence[str] = ()) -> str:
        """Return the type name for a field key nested under scope."""
        if self.qualify and scope:
            key = ".".join((*scope, key))
        return to_type_name(key, self.prefix)

    def root_name(self, base: str) -> str:
        return f"{self.prefix}{base}"
