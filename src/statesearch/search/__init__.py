"""State-space search engine.

Best-first search over a graph of hashable states. Equal states share one
node, open-list order follows a configurable merge discipline, and cheaper
paths found late are propagated through already-expanded nodes.
"""

from statesearch.search.node import Node, NodeStatus, NodeStore
from statesearch.search.open_list import OpenList
from statesearch.search.search import (
    SearchContext,
    SearchEngine,
    SearchResult,
    SearchStatus,
    relax,
    run_search,
    uniform_cost,
)
from statesearch.search.stats import SearchSummary, summarize

__all__ = [
    "Node",
    "NodeStatus",
    "NodeStore",
    "OpenList",
    "SearchContext",
    "SearchEngine",
    "SearchResult",
    "SearchStatus",
    "SearchSummary",
    "relax",
    "run_search",
    "summarize",
    "uniform_cost",
]
