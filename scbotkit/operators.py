"""Binary norm operators that combine clause values in a rule."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class NormOperator(ABC):
    """Combines two membership degrees into one."""

    @abstractmethod
    def apply(self, value1: float, value2: float) -> float:
        """Combine two degrees."""


@dataclass(frozen=True)
class AndOperator(NormOperator):
    """Minimum t-norm."""

    def apply(self, value1: float, value2: float) -> float:
        return min(value1, value2)


@dataclass(frozen=True)
class OrOperator(NormOperator):
    """Maximum t-conorm."""

    def apply(self, value1: float, value2: float) -> float:
        return max(value1, value2)