"""Field helpers for Pydantic models compiled by pyd2proto.

Most fields need no helper: the Protobuf type follows from the annotation.
These helpers attach extra metadata where the annotation alone is ambiguous.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def Int64(**kwargs: Any) -> FieldInfo:
    """Create an integer field compiled to ``int64``.

    Integers are compiled to ``int32`` unless their bounds exceed the signed
    32-bit range. Use this helper for unbounded integers that still need the
    wider type.

    Args:
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Ledger(BaseModel):
        ...     balance_cents: int = Int64()
        ...     entries: list[Annotated[int, Int64()]]
    """
    return cast(FieldInfo, Field(json_schema_extra={"bits": 64}, **kwargs))


def declared_bits(metadata: Any) -> int | None:
    """Return the integer width declared through ``json_schema_extra``, if any."""
    extra = getattr(metadata, "json_schema_extra", None)
    if isinstance(extra, dict) and isinstance(extra.get("bits"), int):
        return cast(int, extra["bits"])
    return None
