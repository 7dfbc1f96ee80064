"""Solve the towers-of-disks puzzle and print the path and run statistics.

Example:
    python examples/hanoi.py --disks 3 --merge-method merge --sort-new-nodes --report results.json
"""

import argparse
import logging
from pathlib import Path

from statesearch import RuleSetRegistry, SearchConfig, run_search
from statesearch.domains import hanoi
from statesearch.search.report import format_path, format_summary, write_report
from statesearch.utils import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Solve towers of disks with statesearch")
    parser.add_argument("--disks", type=int, default=3, help="Number of disks on the starting peg")
    parser.add_argument("--merge-method", choices=["prepend", "append", "merge"], default="prepend")
    parser.add_argument("--sort-new-nodes", action="store_true", help="Sort each new batch by heuristic value")
    parser.add_argument("--max-expansions", type=int, default=None)
    parser.add_argument("--report", type=Path, default=None, help="Write a JSON run report here")
    parser.add_argument("--plot", type=Path, default=None, help="Save a PNG of the explored graph here")
    parser.add_argument("--log-file", type=str, default=None, help="Log to this file instead of stderr")
    parser.add_argument("--verbose", action="store_true", help="Log every expansion")
    args = parser.parse_args()

    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)

    registry = RuleSetRegistry()
    name = hanoi.build_ruleset(registry)
    config = SearchConfig(
        sort_new_nodes=args.sort_new_nodes,
        merge_method=args.merge_method,
        max_expansions=args.max_expansions,
        show_progress=True,
    )
    target = hanoi.target_state(args.disks)
    result = run_search(
        registry.get(name), hanoi.initial_state(args.disks), lambda s: s == target, hanoi.misplaced_disks, config
    )

    if result.path is None:
        print(f"No solution ({result.status.value})")
    else:
        print(format_path(result.path, registry.get(name), state_repr=hanoi.format_state))
    print()
    print(format_summary(result.summary()))

    if args.report is not None:
        write_report(args.report, result, state_repr=hanoi.format_state)
        logger.info("Report: %s", args.report)
    if args.plot is not None:
        from statesearch.visualize import plot_search_graph

        plot_search_graph(result, args.plot)
        logger.info("Plot: %s", args.plot)


if __name__ == "__main__":
    main()
