"""Best-first state-space search with incremental cost relaxation.

The driver pops the first open node, closes it, tests it against the
goal, and expands it through the ruleset. Successors seen for the first
time join a batch that is merged into the open list; successors already
known are offered the new path through ``relax``. A strictly cheaper
path rewrites the node's parent, cost and value in place and, when the
node is closed, cascades through its recorded successors.

Costs are unit per rule application. Relaxation only follows strictly
decreasing integer costs, so it terminates on any finite graph.
"""

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from enum import Enum

from tqdm import tqdm

from statesearch.config import MergeMethod, SearchConfig
from statesearch.rules.base import RuleSet
from statesearch.rules.registry import RuleSetRegistry
from statesearch.search.node import Node, NodeStatus, NodeStore
from statesearch.search.open_list import OpenList, sort_batch
from statesearch.search.stats import SearchSummary, summarize

logger = logging.getLogger(__name__)

Heuristic = Callable[[Hashable, int], float]
GoalTest = Callable[[Hashable], bool]


def uniform_cost(state: Hashable, cost: int) -> float:
    """Heuristic that orders nodes by path cost alone."""
    return cost


class SearchStatus(Enum):
    """How a run ended."""

    FOUND = "found"
    EXHAUSTED = "exhausted"
    LIMIT_REACHED = "limit_reached"


@dataclass
class SearchContext:
    """Mutable state of one search run.

    Attributes:
        ruleset: Rules used for expansion.
        heuristic: Value function over ``(state, cost)``.
        config: Run options.
        store: Node arena for this run.
        open_list: Frontier of open node indices.
        trace: Node indices in the order they were popped.
        relaxations: Number of strict cost improvements applied.
    """

    ruleset: RuleSet
    heuristic: Heuristic
    config: SearchConfig
    store: NodeStore = field(default_factory=NodeStore)
    open_list: OpenList = field(init=False)
    trace: list[int] = field(default_factory=list)
    relaxations: int = 0

    def __post_init__(self) -> None:
        self.open_list = OpenList(self.config.merge_method, self.value_of)

    def value_of(self, index: int) -> float:
        return self.store[index].value

    def assign_cost(self, node: Node, parent: Node | None, cost: int) -> None:
        """Set a node's parent and cost, recomputing its cached value."""
        node.parent = None if parent is None else parent.index
        node.cost = cost
        node.value = self.heuristic(node.state, cost)


@dataclass
class SearchResult:
    """Outcome of ``run_search``.

    Attributes:
        status: How the run ended.
        path: States from initial to goal inclusive, None unless FOUND.
        context: The run's node store, open list and counters.
    """

    status: SearchStatus
    path: list[Hashable] | None
    context: SearchContext

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    def summary(self) -> SearchSummary:
        """Summarize the run's node store."""
        return summarize(self.context, self.path)


def relax(ctx: SearchContext, parent: Node, target: Node) -> None:
    """Offer ``target`` the path through ``parent`` and cascade improvements.

    If ``parent.cost + 1`` beats ``target.cost`` the target is re-parented.
    A closed target then offers its own new cost to each of its recorded
    successors, recursively. Open targets are not re-queued. The cascade
    runs depth-first in successor order with an explicit stack.

    Args:
        ctx: Search run state.
        parent: Candidate parent, already expanded.
        target: A node that was already open or closed.
    """
    if not _improve(ctx, parent, target):
        return
    stack = [(target, iter(target.successors))] if target.status is NodeStatus.CLOSED else []
    while stack:
        node, successors = stack[-1]
        child_idx = next(successors, None)
        if child_idx is None:
            stack.pop()
            continue
        child = ctx.store[child_idx]
        if _improve(ctx, node, child) and child.status is NodeStatus.CLOSED:
            stack.append((child, iter(child.successors)))


def _improve(ctx: SearchContext, parent: Node, target: Node) -> bool:
    """Re-parent ``target`` if the path through ``parent`` is strictly cheaper."""
    new_cost = parent.cost + 1
    if new_cost >= target.cost:
        return False
    logger.debug("Relax %r: cost %d -> %d via %r", target.state, target.cost, new_cost, parent.state)
    ctx.assign_cost(target, parent, new_cost)
    ctx.relaxations += 1
    return True


def _expand(ctx: SearchContext, node: Node) -> list[int]:
    """Generate successors of ``node`` and return the indices of new ones."""
    new_nodes: list[int] = []
    node.successors = []
    for _rule, next_state in ctx.ruleset.successors(node.state):
        succ = ctx.store.get_or_create(next_state)
        node.successors.append(succ.index)
        if succ.status is NodeStatus.UNVISITED:
            succ.status = NodeStatus.OPEN
            ctx.assign_cost(succ, node, node.cost + 1)
            new_nodes.append(succ.index)
        else:
            relax(ctx, node, succ)
    return new_nodes


def _loop(ctx: SearchContext, is_goal: GoalTest, progress: tqdm) -> tuple[SearchStatus, Node | None]:
    """Run the pop/expand/merge loop until a goal, exhaustion, or the limit."""
    limit = ctx.config.max_expansions
    while ctx.open_list:
        if limit is not None and len(ctx.trace) >= limit:
            return SearchStatus.LIMIT_REACHED, None
        node = ctx.store[ctx.open_list.pop()]
        node.status = NodeStatus.CLOSED
        ctx.trace.append(node.index)
        progress.update(1)
        if is_goal(node.state):
            return SearchStatus.FOUND, node
        new_nodes = _expand(ctx, node)
        if ctx.config.sort_new_nodes:
            new_nodes = sort_batch(new_nodes, ctx.value_of)
        ctx.open_list.push_batch(new_nodes)
        logger.debug(
            "Expanded %r (cost %d): %d successors, %d new, %d open",
            node.state,
            node.cost,
            len(node.successors),
            len(new_nodes),
            len(ctx.open_list),
        )
    return SearchStatus.EXHAUSTED, None


def run_search(
    ruleset: RuleSet,
    initial_state: Hashable,
    is_goal: GoalTest,
    heuristic: Heuristic | None = None,
    config: SearchConfig | None = None,
) -> SearchResult:
    """Search from ``initial_state`` for a state satisfying ``is_goal``.

    Args:
        ruleset: Ordered rules defining the transitions.
        initial_state: Hashable start state.
        is_goal: Goal predicate.
        heuristic: Value function over ``(state, cost)``; defaults to the cost.
        config: Ordering and limit options; defaults to ``SearchConfig()``.

    Returns:
        SearchResult with the path when a goal node was popped.
    """
    ctx = SearchContext(ruleset=ruleset, heuristic=heuristic or uniform_cost, config=config or SearchConfig())
    root = ctx.store.get_or_create(initial_state)
    ctx.assign_cost(root, None, 0)
    root.status = NodeStatus.OPEN
    ctx.open_list.push_batch([root.index])
    logger.info(
        "Search start: ruleset %r (%d rules), merge=%s, sort_new_nodes=%s",
        ruleset.name,
        len(ruleset),
        ctx.config.merge_method.value,
        ctx.config.sort_new_nodes,
    )

    with tqdm(desc="Expanding", unit="nodes", disable=not ctx.config.show_progress) as progress:
        status, goal = _loop(ctx, is_goal, progress)

    path = ctx.store.path_to(goal) if goal is not None else None
    logger.info(
        "Search %s: %d expanded, %d generated, %d relaxations%s",
        status.value,
        len(ctx.trace),
        len(ctx.store),
        ctx.relaxations,
        f", path of {len(path)} states" if path is not None else "",
    )
    return SearchResult(status=status, path=path, context=ctx)


class SearchEngine:
    """Runs searches over the rulesets of a registry.

    Attributes:
        registry: Source of named rulesets.
        last_result: Result of the most recent run, None before any run.
    """

    def __init__(self, registry: RuleSetRegistry) -> None:
        self.registry = registry
        self.last_result: SearchResult | None = None

    def search(
        self,
        initial_state: Hashable,
        is_goal: GoalTest,
        ruleset: str,
        heuristic: Heuristic | None = None,
        sort_new_nodes: bool = False,
        merge_method: MergeMethod | str = MergeMethod.PREPEND,
        max_expansions: int | None = None,
    ) -> list[Hashable] | None:
        """Search using the named ruleset.

        Args:
            initial_state: Hashable start state.
            is_goal: Goal predicate.
            ruleset: Name of a ruleset in the registry.
            heuristic: Value function over ``(state, cost)``; defaults to the cost.
            sort_new_nodes: Sort each new batch by value before merging.
            merge_method: ``"prepend"``, ``"append"`` or ``"merge"``.
            max_expansions: Optional cap on expansions.

        Returns:
            States from initial to goal inclusive, or None if no goal was reached.

        Raises:
            UnknownRuleSetError: If ``ruleset`` was never created.
        """
        rules = self.registry.get(ruleset)
        config = SearchConfig(sort_new_nodes=sort_new_nodes, merge_method=merge_method, max_expansions=max_expansions)
        self.last_result = run_search(rules, initial_state, is_goal, heuristic, config)
        return self.last_result.path

    def summary(self) -> SearchSummary:
        """Statistics for the most recent run.

        Raises:
            RuntimeError: If no search has run yet.
        """
        if self.last_result is None:
            raise RuntimeError("No search has been run")
        return self.last_result.summary()
