"""Linguistic variables: named universes holding fuzzy sets."""

from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Mapping

from .membership import FuzzyError, MembershipFunction


class LinguisticVariable:
    """A named variable over [minimum, maximum] with labelled fuzzy sets."""

    def __init__(
        self,
        name: str,
        minimum: float = -sys.float_info.max,
        maximum: float = sys.float_info.max,
    ) -> None:
        self.name = name
        self.minimum = minimum
        self.maximum = maximum
        self.input = 0.0
        self._fuzzy_sets: dict[str, MembershipFunction] = {}

    @property
    def fuzzy_sets(self) -> Mapping[str, MembershipFunction]:
        """Read-only view of the fuzzy sets by label."""
        return MappingProxyType(self._fuzzy_sets)

    def add_fuzzy_set(self, name: str, function: MembershipFunction) -> None:
        """Add a fuzzy set; a label that already exists keeps its first function."""
        self._fuzzy_sets.setdefault(name, function)

    def has_fuzzy_set(self, name: str) -> bool:
        return name in self._fuzzy_sets

    def membership(self, fuzzy_set: str, x: float | None = None) -> float:
        """Membership of ``x`` (the current input by default) in a fuzzy set."""
        try:
            function = self._fuzzy_sets[fuzzy_set]
        except KeyError:
            raise FuzzyError(
                f"LinguisticVariable.membership: the fuzzy set {fuzzy_set!r} doesn't exist!"
            ) from None
        return function.membership(self.input if x is None else x)

    def copy(self) -> "LinguisticVariable":
        """Return a variable with the same name, range and fuzzy sets."""
        duplicate = LinguisticVariable(self.name, self.minimum, self.maximum)
        duplicate._fuzzy_sets = dict(self._fuzzy_sets)
        return duplicate

    def __repr__(self) -> str:
        return (
            f"LinguisticVariable({self.name!r}, {self.minimum!r}, {self.maximum!r}, "
            f"sets={list(self._fuzzy_sets)!r})"
        )