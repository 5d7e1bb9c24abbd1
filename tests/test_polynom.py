import math

import pytest

from polyats.polynom import Polynom
from polyats.tcomplex import TComplex


def _real_polynom(a_n, *roots):
    p = Polynom(len(roots))
    p.read([str(a_n)] + [str(r) for r in roots])
    return p


def test_negative_degree_rejected():
    with pytest.raises(ValueError):
        Polynom(-1)


def test_factored_form_of_real_polynom():
    p = _real_polynom(1, 1, -2)
    assert str(p) == "1((x-1)(x+2))"


def test_expanded_form_of_real_polynom():
    p = _real_polynom(1, 1, -2)
    p.expanded = True
    assert str(p) == "x^2+x-2"


def test_factored_form_with_complex_root():
    p = Polynom(1)
    p.read("1 1+2i", TComplex.parse)
    assert str(p) == "1((x-(1+2i)))"


def test_expanded_complex_conjugate_roots():
    p = Polynom(2)
    p.read("1 0+1i 0-1i", TComplex.parse)
    p.expanded = True
    assert str(p) == "x^2+1"
    assert p.evaluate(TComplex(0.0, 1.0)) == 0


def test_degree_zero_prints_leading_coefficient():
    p = Polynom(0)
    p.read("2.5")
    assert str(p) == "2.5"


@pytest.mark.parametrize("roots", [(1.0, 2.0), (-3.0, 0.5, 4.0), (0.0, 0.0, 2.0)])
def test_evaluate_vanishes_at_roots(roots):
    p = _real_polynom(3, *roots)
    for root in roots:
        assert p.evaluate(root) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("x", [-2.0, 0.0, 1.5, 7.0])
def test_evaluate_matches_factored_product(x):
    roots = (1.0, -2.0, 3.0)
    p = _real_polynom(2, *roots)
    expected = 2 * math.prod(x - r for r in roots)
    assert p.evaluate(x) == pytest.approx(expected)


def test_leading_coefficient_is_one():
    p = _real_polynom(5, 4, -1, 2)
    assert p.coefficients[0] == 1
    assert len(p.coefficients) == 4


def test_first_undefined_root_tracks_reading():
    p = Polynom(3)
    assert p.first_undefined_root() == 0
    p.read("1 2 3 4")
    assert p.first_undefined_root() is None


def test_change_root_recomputes_coefficients():
    p = _real_polynom(1, 1, 2)
    p.change_root(0, 5.0)
    assert p.roots[0] == 5.0
    assert p.evaluate(5.0) == pytest.approx(0.0)
    assert p.evaluate(1.0) != pytest.approx(0.0)


def test_change_root_out_of_range():
    p = _real_polynom(1, 1, 2)
    with pytest.raises(IndexError):
        p.change_root(2, 1.0)
    with pytest.raises(IndexError):
        p.change_root(-1, 1.0)


def test_resize_keeps_leading_roots():
    p = _real_polynom(1, 3, 4)
    p.resize(3)
    assert p.degree == 3
    assert list(p.roots)[:2] == [3.0, 4.0]
    assert p.evaluate(3.0) == pytest.approx(0.0)
    assert len(p.coefficients) == 4


def test_resize_to_zero_drops_roots():
    p = _real_polynom(2, 3, 4)
    p.resize(0)
    assert p.degree == 0
    assert len(p.roots) == 0
    assert str(p) == "2"


def test_evaluate_without_coefficients_raises():
    p = Polynom(2)
    with pytest.raises(ValueError):
        p.evaluate(1.0)


def test_read_with_missing_values_raises():
    p = Polynom(3)
    with pytest.raises(ValueError):
        p.read("1 2")


def test_expanded_form_evaluates_consistently_with_leading_factor():
    p = _real_polynom(-2, 1, 3)
    p.expanded = True
    text = str(p)
    assert text.startswith("-2x^2")
    assert p.evaluate(1.0) == pytest.approx(0.0)