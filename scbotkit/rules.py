"""Clauses and rule stacks that form the antecedents of fuzzy rules."""

from __future__ import annotations

from typing import Iterator, Union

from .membership import FuzzyError
from .operators import NormOperator
from .variable import LinguisticVariable


class Clause:
    """The statement "variable IS fuzzy_set".

    It evaluates to the membership of the variable's current input in the
    fuzzy set. The variable is looked up by name and attached with
    :meth:`bind` before the clause can be evaluated.
    """

    def __init__(self, variable_name: str, fuzzy_set: str) -> None:
        self.variable_name = variable_name
        self.fuzzy_set = fuzzy_set
        self.variable: LinguisticVariable | None = None

    def bind(self, variable: LinguisticVariable) -> None:
        """Attach the linguistic variable this clause reads its input from."""
        self.variable = variable
        self.variable_name = variable.name

    def evaluate(self) -> float:
        if self.variable is None:
            raise FuzzyError(
                f"Clause.evaluate: variable {self.variable_name!r} is not bound!"
            )
        return self.variable.membership(self.fuzzy_set)

    def copy(self) -> "Clause":
        """Return a clause of the same kind with the same names and binding."""
        duplicate = type(self)(self.variable_name, self.fuzzy_set)
        duplicate.variable = self.variable
        return duplicate

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.variable_name!r}, {self.fuzzy_set!r})"


class NotClause(Clause):
    """The statement "variable IS NOT fuzzy_set": the complement of a clause."""

    def evaluate(self) -> float:
        return 1.0 - super().evaluate()

    @classmethod
    def negate(cls, clause: Clause) -> "NotClause":
        """Build the complement of an existing clause, keeping its binding."""
        negated = cls(clause.variable_name, clause.fuzzy_set)
        negated.variable = clause.variable
        return negated


StackItem = Union[Clause, "RuleStack", NormOperator]


class RuleStack:
    """An antecedent read left to right, with an optional THEN clause.

    Items alternate between something that evaluates (a clause or a nested
    stack) and a norm operator that combines the running value with the
    next evaluated item.
    """

    def __init__(self) -> None:
        self._items: list[StackItem] = []
        self.then: Clause | None = None

    @property
    def items(self) -> tuple[StackItem, ...]:
        """The items of the antecedent in order."""
        return tuple(self._items)

    def add(self, item: StackItem) -> None:
        """Append a copy of a clause or nested stack, or an operator."""
        if isinstance(item, (Clause, RuleStack)):
            self._items.append(item.copy())
        elif isinstance(item, NormOperator):
            self._items.append(item)
        else:
            raise TypeError(f"cannot add {type(item).__name__} to a rule stack")

    def set_then(self, clause: Clause) -> None:
        """Set the consequent of the rule to a copy of ``clause``."""
        self.then = clause.copy()

    def is_then_rule(self, variable_name: str) -> bool:
        """Whether the consequent of this rule concerns ``variable_name``."""
        if self.then is None:
            raise FuzzyError("RuleStack.is_then_rule: the rule has no THEN clause!")
        return self.then.variable_name == variable_name

    def evaluate(self) -> float:
        """Firing strength of the antecedent; 0.0 for an empty stack."""
        items: Iterator[StackItem] = iter(self._items)
        first = next(items, None)
        if first is None:
            return 0.0
        if isinstance(first, NormOperator):
            raise FuzzyError(
                "Rulestack.evaluate: first element has to be evaluateable!"
            )
        value = first.evaluate()
        for operator in items:
            if not isinstance(operator, NormOperator):
                raise FuzzyError(
                    "Rulestack.evaluate: evaluateables must be joined by a "
                    "NormOperator( OR/AND )!"
                )
            operand = next(items, None)
            if operand is None:
                raise FuzzyError(
                    "Rulestack.evaluate: after an NormOperator( OR/AND ) "
                    "a Evaluatable is needed!"
                )
            if isinstance(operand, NormOperator):
                raise FuzzyError(
                    "Rulestack.evaluate: after an NormOperator( OR/AND ) "
                    "a Evaluatable is needed!"
                )
            value = operator.apply(value, operand.evaluate())
        return value

    def copy(self) -> "RuleStack":
        """Return a deep copy of the items and the THEN clause."""
        duplicate = RuleStack()
        for item in self._items:
            duplicate.add(item)
        if self.then is not None:
            duplicate.then = self.then.copy()
        return duplicate

    def __repr__(self) -> str:
        return f"RuleStack({self._items!r}, then={self.then!r})"