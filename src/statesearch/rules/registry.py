"""Registry of named rulesets.

The registry is a long-lived configuration object: build it once, then
reuse it across any number of search runs.
"""

import logging

from statesearch.errors import UnknownRuleSetError
from statesearch.rules.base import Action, Precondition, Rule, RuleSet

logger = logging.getLogger(__name__)


class RuleSetRegistry:
    """Owns named, ordered rule lists."""

    def __init__(self) -> None:
        self._rulesets: dict[str, RuleSet] = {}

    def create_ruleset(self, name: str) -> RuleSet:
        """Create an empty ruleset under ``name``.

        Re-creating an existing name discards the previous rules.

        Args:
            name: Ruleset identifier.

        Returns:
            The new, empty ruleset.
        """
        if name in self._rulesets:
            logger.warning("Replacing ruleset %r (%d rules discarded)", name, len(self._rulesets[name]))
        ruleset = RuleSet(name)
        self._rulesets[name] = ruleset
        return ruleset

    def register_rule(self, ruleset_name: str, rule_name: str, precondition: Precondition, action: Action) -> Rule:
        """Append a rule to the end of a named ruleset.

        Args:
            ruleset_name: Name passed to ``create_ruleset``.
            rule_name: Identifier for the new rule.
            precondition: Predicate over a state.
            action: State transformer applied when the precondition holds.

        Returns:
            The registered rule.

        Raises:
            UnknownRuleSetError: If ``ruleset_name`` was never created.
        """
        ruleset = self.get(ruleset_name)
        rule = ruleset.add(Rule(rule_name, precondition, action))
        logger.debug("Registered rule %r in %r (position %d)", rule_name, ruleset_name, len(ruleset) - 1)
        return rule

    def get(self, name: str) -> RuleSet:
        """Look up a ruleset by name.

        Raises:
            UnknownRuleSetError: If no ruleset is registered under ``name``.
        """
        if name not in self._rulesets:
            raise UnknownRuleSetError(name)
        return self._rulesets[name]

    def names(self) -> list[str]:
        """Return ruleset names in creation order."""
        return list(self._rulesets)

    def __contains__(self, name: object) -> bool:
        return name in self._rulesets

    def __len__(self) -> int:
        return len(self._rulesets)
