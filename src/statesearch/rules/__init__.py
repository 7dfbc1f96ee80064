"""Rules and named rulesets.

A rule is a precondition/action pair over an opaque state value. Rules
are grouped into ordered, named rulesets held by a ``RuleSetRegistry``.
Successors are always generated in registration order.
"""

from statesearch.rules.base import Rule, RuleSet, validate_path
from statesearch.rules.registry import RuleSetRegistry

__all__ = ["Rule", "RuleSet", "RuleSetRegistry", "validate_path"]
