"""statesearch - generic state-space search with cost relaxation.

Pipeline: rules -> ruleset registry -> search driver -> statistics / reports

Subpackages:
    rules: Rule and RuleSet types and the named RuleSetRegistry
    search: Node store, open list, search driver, statistics, reports
    domains: Example problem domains (towers of disks)
    utils: Logging configuration
"""

from statesearch.config import MergeMethod, SearchConfig
from statesearch.errors import InvalidPathError, InvalidRuleApplicationError, StateSearchError, UnknownRuleSetError
from statesearch.rules import Rule, RuleSet, RuleSetRegistry, validate_path
from statesearch.search import SearchEngine, SearchResult, SearchStatus, SearchSummary, run_search

__all__ = [
    "MergeMethod",
    "SearchConfig",
    "StateSearchError",
    "UnknownRuleSetError",
    "InvalidRuleApplicationError",
    "InvalidPathError",
    "Rule",
    "RuleSet",
    "RuleSetRegistry",
    "validate_path",
    "SearchEngine",
    "SearchResult",
    "SearchStatus",
    "SearchSummary",
    "run_search",
]
