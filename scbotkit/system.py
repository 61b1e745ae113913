"""Mamdani style fuzzy inference over linguistic variables and rules."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from .membership import FuzzyError
from .rules import Clause, RuleStack
from .variable import LinguisticVariable

log = logging.getLogger(__name__)


class FuzzySystem:
    """Holds linguistic variables and named rules and defuzzifies outputs.

    Outputs are defuzzified by the centroid method: the universe of the
    output variable is sampled in ``defuzzification_interval`` steps, the
    membership of every fired consequent is clipped at the rule's firing
    strength, and the weighted mean of the samples is returned.
    """

    def __init__(self, defuzzification_interval: int = 1000) -> None:
        self.defuzzification_interval = defuzzification_interval
        self._variables: dict[str, LinguisticVariable] = {}
        self._rules: dict[str, RuleStack] = {}

    @property
    def variables(self) -> Mapping[str, LinguisticVariable]:
        """Read-only view of the system's variables by name."""
        return MappingProxyType(self._variables)

    @property
    def rules(self) -> Mapping[str, RuleStack]:
        """Read-only view of the system's rules by name."""
        return MappingProxyType(self._rules)

    def add_variable(self, variable: LinguisticVariable) -> None:
        """Add a copy of ``variable``; a name already present keeps its first variable."""
        self._variables.setdefault(variable.name, variable.copy())

    def _variable(self, name: str, where: str) -> LinguisticVariable:
        try:
            return self._variables[name]
        except KeyError:
            raise FuzzyError(
                f"FuzzySystem.{where}: cannot find variable {name!r}!"
            ) from None

    def set_input(self, variable_name: str, value: float) -> None:
        """Set the crisp input of a variable of the system."""
        self._variable(variable_name, "set_input").input = value

    def new_rule(self, name: str, stack: RuleStack) -> None:
        """Add a copy of ``stack`` as a rule after binding all its clauses.

        A rule name already present keeps its first rule.
        """
        if stack.then is None:
            raise FuzzyError(f"FuzzySystem.new_rule: rule {name!r} has no THEN clause!")
        rule = stack.copy()
        self._bind_stack(rule, check_then=True)
        self._rules.setdefault(name, rule)

    def _bind_stack(self, stack: RuleStack, check_then: bool = False) -> None:
        if check_then and stack.then is not None:
            self._bind_clause(stack.then)
        for item in stack.items:
            if isinstance(item, Clause):
                self._bind_clause(item)
            elif isinstance(item, RuleStack):
                self._bind_stack(item)

    def _bind_clause(self, clause: Clause) -> None:
        variable = self._variables.get(clause.variable_name)
        if variable is None:
            raise FuzzyError(
                "FuzzySystem.checkConsistency: linguistic variable "
                f'"{clause.variable_name}" not found!'
            )
        if not variable.has_fuzzy_set(clause.fuzzy_set):
            raise FuzzyError(
                f'FuzzySystem.checkConsistency: fuzzy set "{clause.fuzzy_set}" not found!'
            )
        clause.bind(variable)

    def evaluate(self, variable_name: str) -> float:
        """Defuzzified value of ``variable_name`` for the current inputs."""
        target = self._variable(variable_name, "evaluate")
        weight_sum = 0.0
        membership_sum = 0.0

        for rule_name in sorted(self._rules):
            rule = self._rules[rule_name]
            if not rule.is_then_rule(variable_name):
                continue
            then = rule.then
            assert then is not None and then.variable is not None
            then_variable = then.variable
            strength = rule.evaluate()
            if not target.has_fuzzy_set(then.fuzzy_set):
                continue

            start = then_variable.minimum
            end = then_variable.maximum
            increment = (end - start) / self.defuzzification_interval
            rule_weight = 0.0
            rule_membership = 0.0
            x = start
            while x < end:
                clipped = min(then_variable.membership(then.fuzzy_set, x), strength)
                rule_weight += x * clipped
                rule_membership += clipped
                x += increment
            weight_sum += rule_weight
            membership_sum += rule_membership
            log.debug(
                "FuzzySystem.evaluate: rule %s, fuzzy set %s: firing strength %f, "
                "membership sum %f, weight sum %f",
                rule_name,
                then.fuzzy_set,
                strength,
                rule_membership,
                rule_weight,
            )

        if membership_sum == 0:
            raise FuzzyError(
                "FuzzySystem.evaluate: The numerical output is unavaliable. "
                "All memberships are zero."
            )
        return weight_sum / membership_sum