"""Tests for statesearch.visualize.

Run with: pytest test/test_visualize.py -v
"""

from pathlib import Path

from conftest import equals, never

from statesearch.rules import RuleSetRegistry
from statesearch.search import run_search
from statesearch.visualize import plot_search_graph


class TestPlotSearchGraph:
    """Tests for plot_search_graph()."""

    def test_writes_png_for_found_run(self, tmp_path: Path, registry: RuleSetRegistry) -> None:
        """A PNG is written with the solution path highlighted."""
        result = run_search(registry.get("hanoi"), ((1, 2), (), ()), equals(((), (), (1, 2))))
        output = plot_search_graph(result, tmp_path / "graph.png", with_labels=True)
        assert output.exists()
        assert output.read_bytes()[:4] == b"\x89PNG"

    def test_writes_png_without_path(self, tmp_path: Path, registry: RuleSetRegistry) -> None:
        """An exhausted run still renders."""
        result = run_search(registry.get("hanoi"), ((1, 2), (), ()), never)
        assert plot_search_graph(result, tmp_path / "graph.png").exists()
