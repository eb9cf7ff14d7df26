"""Search tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = ["Node"]


@dataclass(frozen=True)
class Node:
    """A puzzle state with its path cost, heuristic estimate and parent.

    Nodes compare and hash by state alone.
    """

    state: tuple[int, ...]
    g_cost: float = field(default=0.0, compare=False)
    h_cost: float = field(default=0.0, compare=False)
    parent: Optional[Node] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "state", tuple(self.state))

    @property
    def f_cost(self) -> float:
        """Estimated total cost through this node."""
        return self.g_cost + self.h_cost

    def path(self) -> list[tuple[int, ...]]:
        """States from the root of the tree down to this node."""
        states = []
        node: Optional[Node] = self
        while node is not None:
            states.append(node.state)
            node = node.parent
        states.reverse()
        return states