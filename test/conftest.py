"""Shared test utilities and fixtures for pytest."""

from collections.abc import Callable, Hashable

import pytest

from statesearch.domains import hanoi
from statesearch.rules import RuleSet, RuleSetRegistry
from statesearch.search.search import SearchContext


@pytest.fixture
def registry() -> RuleSetRegistry:
    """Registry holding the three-peg ``hanoi`` ruleset."""
    reg = RuleSetRegistry()
    hanoi.build_ruleset(reg)
    return reg


def equals(target: Hashable) -> Callable[[Hashable], bool]:
    """Goal predicate matching a single state."""
    return lambda state: state == target


def never(state: Hashable) -> bool:
    """Goal predicate that never holds, forcing exhaustive search."""
    return False


def graph_ruleset(edges: list[tuple[str, str]], name: str = "graph") -> RuleSet:
    """Build a ruleset with one rule per directed edge, in list order.

    Args:
        edges: ``(source, target)`` state pairs.
        name: Ruleset name.

    Returns:
        RuleSet whose rule ``"u->v"`` fires only on ``u`` and yields ``v``.
    """
    reg = RuleSetRegistry()
    reg.create_ruleset(name)
    for source, target in edges:
        reg.register_rule(name, f"{source}->{target}", lambda s, u=source: s == u, lambda s, v=target: v)
    return reg.get(name)


def table_heuristic(values: dict[str, float]) -> Callable[[Hashable, int], float]:
    """Heuristic that looks a state up in a fixed table and ignores cost."""
    return lambda state, cost: values[state]


def assert_cost_path_consistency(ctx: SearchContext) -> None:
    """Every node's parent chain has length ``cost`` and follows ruleset edges.

    Args:
        ctx: A finished search run.
    """
    for node in ctx.store:
        length = 0
        current = node
        while current.parent is not None:
            parent = ctx.store[current.parent]
            assert parent.cost + 1 == current.cost
            assert ctx.ruleset.rule_between(parent.state, current.state) is not None
            current = parent
            length += 1
        assert current.index == 0
        assert length == node.cost
