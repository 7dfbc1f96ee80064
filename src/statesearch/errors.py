"""Exception types raised by statesearch.

An exhausted search is not an error: it is reported through
``SearchStatus.EXHAUSTED`` and a ``None`` path.
"""


class StateSearchError(Exception):
    """Base class for all statesearch errors."""


class UnknownRuleSetError(StateSearchError, KeyError):
    """A ruleset name was referenced before ``create_ruleset`` was called for it.

    Attributes:
        name: The ruleset name that was looked up.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown ruleset: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidRuleApplicationError(StateSearchError, ValueError):
    """A rule action was requested on a state its precondition rejects."""


class InvalidPathError(StateSearchError, ValueError):
    """A state sequence is not a legal solution path for a ruleset."""
