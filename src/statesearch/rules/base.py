"""Rule and RuleSet definitions.

To add a rule to a search space:
1. Create a ruleset on a ``RuleSetRegistry`` with ``create_ruleset``
2. Call ``register_rule`` with a precondition and an action
3. Pass the ruleset name to ``SearchEngine.search``

Preconditions and actions must be pure. Actions return a new state and
never mutate their argument.
"""

from collections.abc import Callable, Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from statesearch.errors import InvalidPathError, InvalidRuleApplicationError

State = Hashable
Precondition = Callable[[Any], bool]
Action = Callable[[Any], Any]


@dataclass(frozen=True)
class Rule:
    """A single legal transition.

    Attributes:
        name: Identifier used in logs and path rendering.
        precondition: Returns True when the rule may fire on a state.
        action: Maps a state to its successor.
    """

    name: str
    precondition: Precondition
    action: Action

    def applies(self, state: State) -> bool:
        """Return whether the precondition holds on ``state``."""
        return bool(self.precondition(state))

    def apply(self, state: State) -> State:
        """Apply the action after checking the precondition.

        Args:
            state: State to transform.

        Returns:
            The successor state.

        Raises:
            InvalidRuleApplicationError: If the precondition is false.
        """
        if not self.applies(state):
            raise InvalidRuleApplicationError(f"Rule {self.name!r} does not apply to state {state!r}")
        return self.action(state)


@dataclass
class RuleSet:
    """An ordered, named list of rules.

    Attributes:
        name: Ruleset identifier.
        rules: Rules in registration order.
    """

    name: str
    rules: list[Rule] = field(default_factory=list)

    def add(self, rule: Rule) -> Rule:
        """Append ``rule`` to the end of the ruleset."""
        self.rules.append(rule)
        return rule

    def successors(self, state: State) -> Iterator[tuple[Rule, State]]:
        """Yield ``(rule, next_state)`` for every rule whose precondition holds."""
        for rule in self.rules:
            if rule.applies(state):
                yield rule, rule.action(state)

    def rule_between(self, source: State, target: State) -> Rule | None:
        """Return the first rule mapping ``source`` to ``target``, or None."""
        for rule, next_state in self.successors(source):
            if next_state == target:
                return rule
        return None

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)


def validate_path(
    ruleset: RuleSet, path: Sequence[State], initial_state: State, is_goal: Callable[[State], bool]
) -> None:
    """Check that ``path`` is a legal solution.

    The first state must equal ``initial_state``, the last must satisfy
    ``is_goal``, and every consecutive pair must be linked by a rule.

    Args:
        ruleset: Rules the path must follow.
        path: Candidate solution, initial state first.
        initial_state: Expected first state.
        is_goal: Goal predicate.

    Raises:
        InvalidPathError: Describing the first violated condition.
    """
    if not path:
        raise InvalidPathError("Path is empty")
    if path[0] != initial_state:
        raise InvalidPathError(f"Path starts at {path[0]!r}, expected {initial_state!r}")
    if not is_goal(path[-1]):
        raise InvalidPathError(f"Path ends at non-goal state {path[-1]!r}")
    for step, (source, target) in enumerate(zip(path, path[1:])):
        if ruleset.rule_between(source, target) is None:
            raise InvalidPathError(f"Step {step}: no rule in {ruleset.name!r} maps {source!r} to {target!r}")
