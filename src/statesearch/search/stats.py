"""Post-run statistics over a search's node store."""

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from statesearch.search.node import NodeStatus

if TYPE_CHECKING:
    from statesearch.search.search import SearchContext


@dataclass(frozen=True)
class SearchSummary:
    """Read-only counts describing a finished run.

    Attributes:
        total_generated: Nodes ever created in the store.
        expanded: Nodes with status CLOSED (the goal node included).
        open: Nodes still waiting in the open list.
        relaxations: Strict cost improvements applied during the run.
        max_cost: Largest best-known cost among reached nodes.
        cost_distribution: Node count per cost, index is the cost.
        solution_length: States in the returned path, 0 when none.
    """

    total_generated: int
    expanded: int
    open: int = 0
    relaxations: int = 0
    max_cost: int = 0
    cost_distribution: tuple[int, ...] = field(default_factory=tuple)
    solution_length: int = 0

    def as_dict(self) -> dict[str, object]:
        """Plain-dict view for JSON reports."""
        return {
            "total_generated": self.total_generated,
            "expanded": self.expanded,
            "open": self.open,
            "relaxations": self.relaxations,
            "max_cost": self.max_cost,
            "cost_distribution": list(self.cost_distribution),
            "solution_length": self.solution_length,
        }


def summarize(ctx: "SearchContext", path: list[Hashable] | None = None) -> SearchSummary:
    """Count nodes by status and cost in a single pass over the store.

    Args:
        ctx: Finished search run.
        path: Returned solution, if any.

    Returns:
        SearchSummary for the run.
    """
    expanded = 0
    open_count = 0
    costs: list[int] = []
    for node in ctx.store:
        if node.status is NodeStatus.CLOSED:
            expanded += 1
        elif node.status is NodeStatus.OPEN:
            open_count += 1
        costs.append(node.cost)
    distribution = np.bincount(np.asarray(costs, dtype=np.int64)) if costs else np.zeros(0, dtype=np.int64)
    return SearchSummary(
        total_generated=len(ctx.store),
        expanded=expanded,
        open=open_count,
        relaxations=ctx.relaxations,
        max_cost=int(distribution.size - 1) if distribution.size else 0,
        cost_distribution=tuple(int(c) for c in distribution),
        solution_length=len(path) if path is not None else 0,
    )
