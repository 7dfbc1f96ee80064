"""Search nodes and the deduplicating node store.

Nodes live in an arena (a list) owned by ``NodeStore``. ``parent`` and
``successors`` hold arena indices rather than node references, so the
cyclic state graph never becomes a cycle of owning links.
"""

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeStatus(Enum):
    """Expansion status. Transitions only go UNVISITED -> OPEN -> CLOSED."""

    UNVISITED = "unvisited"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Node:
    """Bookkeeping record for one distinct state.

    Attributes:
        index: Position in the owning ``NodeStore``.
        state: The state value (used as the dedup key).
        cost: Rule applications on the best known path from the initial state.
        value: Cached heuristic of ``(state, cost)``; the open-list sort key.
        status: Expansion status.
        parent: Index of the node that produced ``cost``, None for the root.
        successors: Indices generated by the latest expansion, in rule order.
    """

    index: int
    state: Hashable
    cost: int = 0
    value: float = 0
    status: NodeStatus = NodeStatus.UNVISITED
    parent: int | None = None
    successors: list[int] = field(default_factory=list)


class NodeStore:
    """Deduplicating map from state to node.

    Two ``get_or_create`` calls with equal states return the same node for
    the lifetime of the store.
    """

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self._index: dict[Hashable, int] = {}

    def get_or_create(self, state: Hashable) -> Node:
        """Return the node for ``state``, creating an unvisited one if needed.

        Args:
            state: Hashable state value, compared by equality.

        Returns:
            The unique node for ``state``.
        """
        idx = self._index.get(state)
        if idx is not None:
            return self.nodes[idx]
        node = Node(index=len(self.nodes), state=state)
        self._index[state] = node.index
        self.nodes.append(node)
        return node

    def find(self, state: Hashable) -> Node | None:
        """Return the node for ``state`` without creating one."""
        idx = self._index.get(state)
        return None if idx is None else self.nodes[idx]

    def path_to(self, node: Node) -> list[Hashable]:
        """Walk parent links back to the root.

        Returns:
            States from the root to ``node`` inclusive.
        """
        states = [node.state]
        while node.parent is not None:
            node = self.nodes[node.parent]
            states.append(node.state)
        states.reverse()
        return states

    def reset(self) -> None:
        """Drop every node."""
        self.nodes.clear()
        self._index.clear()

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __contains__(self, state: object) -> bool:
        return state in self._index

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)
