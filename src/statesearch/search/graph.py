"""Export of an explored search graph to networkx."""

import networkx as nx

from statesearch.search.search import SearchContext


def to_networkx(ctx: SearchContext) -> nx.DiGraph:
    """Build a directed graph of every node and recorded successor edge.

    Nodes are keyed by store index and carry ``state``, ``cost``, ``value``
    and ``status`` attributes. Edge ``u -> v`` exists when ``v`` was
    generated by expanding ``u``; ``tree`` is True when ``u`` is the current
    parent of ``v``.

    Args:
        ctx: A search run, finished or not.

    Returns:
        The explored graph.
    """
    graph = nx.DiGraph()
    for node in ctx.store:
        graph.add_node(node.index, state=node.state, cost=node.cost, value=node.value, status=node.status.value)
    for node in ctx.store:
        for succ_idx in node.successors:
            graph.add_edge(node.index, succ_idx, tree=ctx.store[succ_idx].parent == node.index)
    return graph


def tree_edges(graph: nx.DiGraph) -> list[tuple[int, int]]:
    """Return the parent-link edges of an exported graph."""
    return [(u, v) for u, v, tree in graph.edges(data="tree") if tree]
