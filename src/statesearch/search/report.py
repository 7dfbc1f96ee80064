"""Human-readable tables and a JSON report for finished search runs."""

import json
from collections.abc import Callable, Hashable
from pathlib import Path
from typing import Any

from tabulate import tabulate

from statesearch.rules.base import RuleSet
from statesearch.search.search import SearchResult
from statesearch.search.stats import SearchSummary


def format_summary(summary: SearchSummary, tablefmt: str = "simple") -> str:
    """Render run statistics as a two-column table.

    Args:
        summary: Statistics to render.
        tablefmt: Any tabulate table format.

    Returns:
        Table string.
    """
    rows = [
        ["total_generated", summary.total_generated],
        ["expanded", summary.expanded],
        ["open", summary.open],
        ["relaxations", summary.relaxations],
        ["max_cost", summary.max_cost],
        ["solution_length", summary.solution_length],
    ]
    return tabulate(rows, headers=["metric", "value"], tablefmt=tablefmt)


def format_path(
    path: list[Hashable],
    ruleset: RuleSet,
    state_repr: Callable[[Hashable], str] = repr,
    tablefmt: str = "simple",
) -> str:
    """Render a solution path with the rule applied at each step.

    The first row has no rule. A step no rule explains is shown as ``?``.

    Args:
        path: States from initial to goal.
        ruleset: Ruleset the path was found with.
        state_repr: Formats a state for display.
        tablefmt: Any tabulate table format.

    Returns:
        Table string.
    """
    rows: list[list[Any]] = []
    previous = None
    for step, state in enumerate(path):
        rule_name = ""
        if step > 0:
            rule = ruleset.rule_between(previous, state)
            rule_name = rule.name if rule is not None else "?"
        rows.append([step, rule_name, state_repr(state)])
        previous = state
    return tabulate(rows, headers=["step", "rule", "state"], tablefmt=tablefmt)


def write_report(path: Path, result: SearchResult, state_repr: Callable[[Hashable], str] = repr) -> None:
    """Write a JSON report of the run, replacing ``path`` atomically.

    Args:
        path: Destination file.
        result: Finished run.
        state_repr: Formats states for the ``path`` field.
    """
    ctx = result.context
    data = {
        "status": result.status.value,
        "ruleset": ctx.ruleset.name,
        "config": {
            "sort_new_nodes": ctx.config.sort_new_nodes,
            "merge_method": ctx.config.merge_method.value,
            "max_expansions": ctx.config.max_expansions,
        },
        "summary": result.summary().as_dict(),
        "path": [state_repr(s) for s in result.path] if result.path is not None else None,
    }
    tmp_path = path.with_suffix(".tmp")
    tmp_path.write_text(json.dumps(data, indent=2) + "\n")
    tmp_path.replace(path)
