"""Singly linked nodes holding integer values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A node holding an integer and a link to the next node."""

    value: int
    next: Optional[Node] = None

    def __str__(self) -> str:
        return f"{{ {self.value} }}"


def format_node(node: Optional[Node]) -> str:
    """Render a node, or the placeholder shown for a missing one."""
    if node is None:
        return "[NULL]"
    return str(node)