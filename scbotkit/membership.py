"""Fuzzy membership functions."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable


class FuzzyError(Exception):
    """Raised for inconsistent fuzzy definitions or evaluations."""


@dataclass(frozen=True)
class Point:
    x: float
    y: float


class MembershipFunction(ABC):
    """Maps a crisp value to a degree of membership in [0, 1]."""

    @abstractmethod
    def membership(self, x: float) -> float:
        """Return the degree of membership of ``x``."""


class PiecewiseLinearFunction(MembershipFunction):
    """Membership given by straight lines between points sorted on X."""

    def __init__(self, points: Iterable[Point | tuple[float, float]]) -> None:
        self.points = tuple(p if isinstance(p, Point) else Point(*p) for p in points)
        self._check()

    def _check(self) -> None:
        for point in self.points:
            if not 0 <= point.y <= 1:
                raise FuzzyError("Y value of points must be in the range of [0, 1].")
        for before, after in zip(self.points, self.points[1:]):
            if before.x > after.x:
                raise FuzzyError("Points must be in crescent order on X axis.")

    def membership(self, x: float) -> float:
        if not self.points:
            return 0.0
        first = self.points[0]
        if x < first.x:
            return first.y
        for start, end in zip(self.points, self.points[1:]):
            if x < end.x:
                slope = (end.y - start.y) / (end.x - start.x)
                return slope * (x - start.x) + start.y
        return self.points[-1].y

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.points)!r})"


class TriangleFunction(PiecewiseLinearFunction):
    """Triangle rising from ``left`` to a peak midway and falling to ``right``."""

    def __init__(self, left: float, right: float) -> None:
        super().__init__(
            [Point(left, 0.0), Point((left + right) / 2, 1.0), Point(right, 0.0)]
        )


class EdgeType(enum.Enum):
    """Which side of a shoulder function is open.

    ``LEFT`` rises from 0 to 1, ``RIGHT`` falls from 1 to 0.
    """

    LEFT = "left"
    RIGHT = "right"


class TrapezoidalFunction(PiecewiseLinearFunction):
    """Trapezoid rising on [m1, m2], flat at 1, falling on [m3, m4]."""

    def __init__(self, m1: float, m2: float, m3: float, m4: float) -> None:
        super().__init__(
            [Point(m1, 0.0), Point(m2, 1.0), Point(m3, 1.0), Point(m4, 0.0)]
        )

    @classmethod
    def shoulder(cls, m1: float, m2: float, edge: EdgeType) -> "TrapezoidalFunction":
        """Build a half trapezoid with a single edge between m1 and m2."""
        if edge is EdgeType.LEFT:
            points = [Point(m1, 0.0), Point(m2, 1.0)]
        else:
            points = [Point(m1, 1.0), Point(m2, 0.0)]
        function = cls.__new__(cls)
        PiecewiseLinearFunction.__init__(function, points)
        return function