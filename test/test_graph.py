"""Tests for statesearch.search.graph networkx export.

Run with: pytest test/test_graph.py -v
"""

import networkx as nx
from conftest import equals, graph_ruleset, never

from statesearch.config import SearchConfig
from statesearch.domains import hanoi
from statesearch.rules import RuleSetRegistry
from statesearch.search import run_search
from statesearch.search.graph import to_networkx, tree_edges


class TestToNetworkx:
    """Tests for to_networkx()."""

    def test_nodes_and_attributes(self) -> None:
        """Every store node appears with its bookkeeping attributes."""
        result = run_search(graph_ruleset([("a", "b"), ("b", "c")]), "a", never)
        graph = to_networkx(result.context)
        assert graph.number_of_nodes() == 3
        assert graph.nodes[2] == {"state": "c", "cost": 2, "value": 2, "status": "closed"}

    def test_tree_edges_are_parent_links(self) -> None:
        """Tree edges are exactly the parent links."""
        result = run_search(graph_ruleset([("a", "b"), ("a", "c"), ("b", "c")]), "a", never)
        graph = to_networkx(result.context)
        assert sorted(tree_edges(graph)) == [(0, 1), (0, 2)]
        assert graph.has_edge(1, 2)
        assert graph.edges[1, 2]["tree"] is False

    def test_goal_node_has_no_out_edges(self, registry: RuleSetRegistry) -> None:
        """The goal is closed without expansion."""
        result = run_search(registry.get("hanoi"), ((1, 2), (), ()), equals(((), (), (1, 2))))
        graph = to_networkx(result.context)
        goal = result.context.store.find(((), (), (1, 2))).index
        assert graph.out_degree(goal) == 0


class TestCostsAreShortestDistances:
    """After a run every cost equals the shortest distance over discovered edges."""

    def _assert_shortest(self, graph: nx.DiGraph) -> None:
        distances = nx.single_source_shortest_path_length(graph, 0)
        for index, cost in graph.nodes(data="cost"):
            assert distances[index] == cost

    def test_depth_first_hanoi(self, registry: RuleSetRegistry) -> None:
        """Prepend order on three disks still ends with shortest costs."""
        result = run_search(registry.get("hanoi"), hanoi.initial_state(3), never)
        self._assert_shortest(to_networkx(result.context))

    def test_best_first_hanoi(self, registry: RuleSetRegistry) -> None:
        """Greedy merge order with a heuristic ends with shortest costs."""
        config = SearchConfig(sort_new_nodes=True, merge_method="merge")
        result = run_search(registry.get("hanoi"), hanoi.initial_state(3), never, hanoi.misplaced_disks, config)
        self._assert_shortest(to_networkx(result.context))

    def test_tree_is_spanning_arborescence(self, registry: RuleSetRegistry) -> None:
        """Parent links form a tree rooted at the initial node."""
        result = run_search(registry.get("hanoi"), hanoi.initial_state(3), never)
        tree = nx.DiGraph(tree_edges(to_networkx(result.context)))
        assert nx.is_arborescence(tree)
        assert tree.number_of_nodes() == len(result.context.store)
