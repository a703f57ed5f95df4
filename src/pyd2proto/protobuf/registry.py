"""Accumulators for the message and enum definitions hoisted during compilation."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple

from ..exceptions import CyclicSchemaError
from ..schema.nodes import ObjectNode

logger = logging.getLogger(__name__)


@dataclass
class TypeRegistry:
    """Ordered message and enum definitions for one compilation.

    A registry is created per top-level compile call and passed explicitly
    through the traversal. Both mappings keep insertion order; registering a
    name twice replaces the body but keeps the original position.

    Attributes:
        messages: Message name to its rendered, numbered field lines
        enums: Enum name to its fully rendered definition
    """

    messages: Dict[str, List[str]] = field(default_factory=dict)
    enums: Dict[str, str] = field(default_factory=dict)
    _active: List[Tuple[int, str]] = field(default_factory=list, repr=False)

    def register_message(self, name: str, lines: Sequence[str]) -> None:
        if name in self.messages:
            logger.warning("Message %s defined more than once; the last definition wins", name)
        logger.debug("Registered message %s with %d fields", name, len(lines))
        self.messages[name] = list(lines)

    def register_enum(self, name: str, body: str) -> None:
        if name in self.enums:
            logger.warning("Enum %s defined more than once; the last definition wins", name)
        logger.debug("Registered enum %s", name)
        self.enums[name] = body

    @contextmanager
    def visiting(self, node: ObjectNode, scope: Sequence[str]) -> Iterator[None]:
        """Mark an object as being compiled for the duration of the block.

        Args:
            node: Object node about to be traversed
            scope: Keys leading to the object from the root

        Raises:
            CyclicSchemaError: If the object is already being compiled
                further up the traversal
        """
        label = ".".join(scope) or "<root>"
        if any(node_id == id(node) for node_id, _ in self._active):
            raise CyclicSchemaError([name for _, name in self._active] + [label])
        self._active.append((id(node), label))
        try:
            yield
        finally:
            self._active.pop()
