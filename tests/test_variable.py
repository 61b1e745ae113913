import sys

import pytest

from scbotkit.membership import FuzzyError, TrapezoidalFunction, TriangleFunction
from scbotkit.variable import LinguisticVariable


@pytest.fixture
def front():
    var = LinguisticVariable("FrontalDistance", 0, 100)
    var.add_fuzzy_set("Near", TriangleFunction(-50, 10))
    var.add_fuzzy_set("Medium", TriangleFunction(0, 100))
    var.add_fuzzy_set("Far", TriangleFunction(50, 150))
    return var


def test_attributes(front):
    assert front.name == "FrontalDistance"
    assert (front.minimum, front.maximum) == (0, 100)
    assert list(front.fuzzy_sets) == ["Near", "Medium", "Far"]


def test_default_range_is_unbounded():
    var = LinguisticVariable("x")
    assert var.minimum == -sys.float_info.max
    assert var.maximum == sys.float_info.max


def test_membership_uses_input(front):
    front.input = 50
    assert front.membership("Medium") == 1.0
    assert front.membership("Far") == 0.0
    assert front.membership("Medium") == front.membership("Medium", 50)


def test_membership_with_explicit_value(front):
    front.input = 0
    assert front.membership("Far", 100) == 1.0
    assert front.membership("Near", -20) == 1.0


def test_missing_set_raises(front):
    with pytest.raises(FuzzyError):
        front.membership("Huge")


def test_has_fuzzy_set(front):
    assert front.has_fuzzy_set("Near")
    assert not front.has_fuzzy_set("Huge")


def test_duplicate_label_keeps_first():
    var = LinguisticVariable("v", 0, 10)
    var.add_fuzzy_set("A", TriangleFunction(0, 10))
    var.add_fuzzy_set("A", TrapezoidalFunction(0, 1, 2, 3))
    assert var.membership("A", 5) == 1.0
    assert len(var.fuzzy_sets) == 1


def test_copy_is_independent(front):
    duplicate = front.copy()
    duplicate.add_fuzzy_set("Extra", TriangleFunction(0, 1))
    assert duplicate.name == front.name
    assert duplicate.has_fuzzy_set("Far")
    assert not front.has_fuzzy_set("Extra")
    assert duplicate.membership("Medium", 30) == front.membership("Medium", 30)


def test_fuzzy_sets_view_is_read_only(front):
    with pytest.raises(TypeError):
        front.fuzzy_sets["New"] = TriangleFunction(0, 1)