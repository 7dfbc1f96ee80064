"""Plot an explored search graph with matplotlib."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from statesearch.search.graph import to_networkx, tree_edges
from statesearch.search.search import SearchResult

_STATUS_COLORS = {"open": "#9ecae1", "closed": "#c7c7c7", "unvisited": "#ffffff"}
_PATH_COLOR = "#e6550d"


def plot_search_graph(result: SearchResult, output_path: Path, with_labels: bool = False) -> Path:
    """Draw the explored graph, highlighting the solution path.

    Nodes are laid out in layers by cost. Parent links are drawn solid,
    other recorded successor edges dashed.

    Args:
        result: Finished search run.
        output_path: Image file to write (format from the suffix).
        with_labels: Label nodes with their states.

    Returns:
        ``output_path``.
    """
    graph = to_networkx(result.context)
    for _, data in graph.nodes(data=True):
        data["layer"] = data["cost"]
    pos = nx.multipartite_layout(graph, subset_key="layer") if graph.number_of_nodes() else {}

    on_path: set[int] = set()
    if result.path is not None:
        on_path = {result.context.store.find(s).index for s in result.path}
    colors = [
        _PATH_COLOR if n in on_path else _STATUS_COLORS[status] for n, status in graph.nodes(data="status")
    ]
    tree = tree_edges(graph)
    tree_set = set(tree)
    other = [e for e in graph.edges if e not in tree_set]

    fig, ax = plt.subplots(figsize=(12, 8))
    nx.draw_networkx_nodes(graph, pos, node_color=colors, node_size=120, edgecolors="black", ax=ax)
    nx.draw_networkx_edges(graph, pos, edgelist=tree, width=1.2, arrows=True, ax=ax)
    nx.draw_networkx_edges(graph, pos, edgelist=other, width=0.5, style="dashed", alpha=0.4, arrows=False, ax=ax)
    if with_labels:
        labels = {n: str(state) for n, state in graph.nodes(data="state")}
        nx.draw_networkx_labels(graph, pos, labels=labels, font_size=6, ax=ax)
    ax.set_title(f"{result.context.ruleset.name}: {result.status.value}")
    ax.set_axis_off()
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
