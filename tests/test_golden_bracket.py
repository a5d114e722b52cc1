import math

import pytest

from modular_optimization.optimization.golden_section import INV_PHI, GoldenBracket
from modular_optimization.validation import InvalidBracketError


def test_from_bounds_places_interior_points_by_golden_ratio():
    bracket = GoldenBracket.from_bounds((0.0, 1.0))

    assert bracket.left == 0.0
    assert bracket.right == 1.0
    assert bracket.width == pytest.approx(1.0)
    assert bracket.inner_left == pytest.approx(1.0 - INV_PHI)
    assert bracket.inner_right == pytest.approx(INV_PHI)
    assert bracket.inner_left / (1.0 - bracket.inner_left) == pytest.approx(INV_PHI)


def test_inv_phi_value():
    assert INV_PHI == pytest.approx((math.sqrt(5.0) - 1.0) / 2.0)
    assert INV_PHI == pytest.approx(0.6180339887)


@pytest.mark.parametrize(
    "bounds",
    [
        (1.0, -2.0),
        (3.0, 3.0),
        (math.nan, 1.0),
        (0.0, math.inf),
        (-math.inf, 0.0),
        (0.0,),
        (0.0, 1.0, 2.0),
        ("low", 1.0),
        (None, 1.0),
        (bound for bound in (0.0, 1.0)),
        42.0,
    ],
)
def test_from_bounds_rejects_invalid_brackets(bounds):
    with pytest.raises(InvalidBracketError):
        GoldenBracket.from_bounds(bounds)


def test_new_inner_left_is_pure_and_matches_shrink_right():
    bracket = GoldenBracket.from_bounds((0.0, 1.0))
    before = (bracket.left, bracket.inner_left, bracket.inner_right, bracket.right)

    candidate = bracket.new_inner_left()

    assert (bracket.left, bracket.inner_left, bracket.inner_right, bracket.right) == before
    old_inner_left = bracket.inner_left
    bracket.shrink_right()
    assert bracket.left == 0.0
    assert bracket.right == pytest.approx(INV_PHI)
    assert bracket.inner_right == old_inner_left
    assert bracket.inner_left == candidate
    assert bracket.inner_left == pytest.approx(bracket.left + (1.0 - INV_PHI) * bracket.width)


def test_new_inner_right_is_pure_and_matches_shrink_left():
    bracket = GoldenBracket.from_bounds((0.0, 1.0))
    before = (bracket.left, bracket.inner_left, bracket.inner_right, bracket.right)

    candidate = bracket.new_inner_right()

    assert (bracket.left, bracket.inner_left, bracket.inner_right, bracket.right) == before
    old_inner_right = bracket.inner_right
    bracket.shrink_left()
    assert bracket.left == pytest.approx(1.0 - INV_PHI)
    assert bracket.right == 1.0
    assert bracket.inner_left == old_inner_right
    assert bracket.inner_right == candidate
    assert bracket.inner_right == pytest.approx(bracket.left + INV_PHI * bracket.width)


def test_width_shrinks_by_inv_phi_and_bounds_stay_ordered():
    bracket = GoldenBracket.from_bounds((-2.0, 2.0))

    for step in range(30):
        width = bracket.width
        if step % 3 == 0:
            bracket.shrink_left()
        else:
            bracket.shrink_right()
        assert bracket.width == pytest.approx(INV_PHI * width, rel=1e-6)
        assert bracket.left < bracket.inner_left < bracket.inner_right < bracket.right
