"""Rendering of registered definitions into a .proto document."""

from __future__ import annotations

from typing import Sequence

from .registry import TypeRegistry

INDENT = "    "


def render_enum(name: str, options: Sequence[object]) -> str:
    """Render an enum definition, numbering options from 0 in order.

    Example:
        >>> print(render_enum("Status", ["ACTIVE", "INACTIVE"]))
        enum Status {
            ACTIVE = 0;
            INACTIVE = 1;
        }
    """
    values = "\n".join(f"{INDENT}{option} = {index};" for index, option in enumerate(options))
    return f"enum {name} {{\n{values}\n}}"


def render_message(name: str, lines: Sequence[str]) -> str:
    body = "\n".join(f"{INDENT}{line}" for line in lines)
    return f"message {name} {{\n{body}\n}}"


def render_document(registry: TypeRegistry, package_name: str) -> str:
    """Render the full .proto document.

    Enums come first, then messages, each group in registration order.
    Nested messages are registered before the messages that reference them,
    so dependencies always precede their users.

    Args:
        registry: Definitions collected during compilation
        package_name: Value of the ``package`` declaration

    Returns:
        Document text with surrounding whitespace trimmed
    """
    enums = list(registry.enums.values())
    messages = [render_message(name, lines) for name, lines in registry.messages.items()]

    content = "\n\n".join("\n\n".join(block) for block in (enums, messages) if block)

    document = f'syntax = "proto3";\npackage {package_name};\n\n{content}\n'
    return document.strip()
