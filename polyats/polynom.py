"""Polynomials given by a leading coefficient and their roots."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Union

from polyats.numarray import NumArray
from polyats.tcomplex import TComplex

Number = Union[float, TComplex]


def _format(value: Number) -> str:
    if isinstance(value, TComplex):
        return str(value)
    return format(value, ".6g")


def _is_negative(value: Number) -> bool:
    if isinstance(value, TComplex):
        return value.real < 0
    return value < 0


def _wrapped(value: Number) -> str:
    """Format *value*, in parentheses when it has an imaginary part."""
    text = _format(value)
    if isinstance(value, TComplex) and value.imaginary != 0:
        return f"({text})"
    return text


def _power_suffix(power: int) -> str:
    return "x" if power == 1 else f"x^{power}"


class Polynom:
    """A polynomial ``a_n * (x - r1) * ... * (x - rn)`` with cached expanded coefficients.

    ``coefficients`` holds the expanded coefficients of the monic product,
    highest degree first; ``a_n`` multiplies all of them.  ``expanded``
    chooses between the factored and the expanded text form.
    """

    def __init__(self, degree: int) -> None:
        if degree < 0:
            raise ValueError("degree must not be negative")
        self.degree = degree
        self.roots = NumArray(degree)
        self.coefficients = NumArray(0)
        self.a_n: Number = 1.0
        self.expanded = False

    def read(
        self,
        tokens: Union[str, Iterable[str]],
        parse: Callable[[str], Number] = float,
    ) -> None:
        """Read the leading coefficient, then one root per degree, from tokens."""
        if isinstance(tokens, str):
            tokens = tokens.split()
        stream: Iterator[str] = iter(tokens)

        def take() -> Number:
            try:
                return parse(next(stream))
            except StopIteration:
                raise ValueError("not enough values to read the polynomial") from None

        self.a_n = take()
        if self.degree == 0:
            return
        for _ in range(self.degree):
            self.roots.push_back(take())
        self.count_coefficients()

    def _require_coefficients(self) -> List[Number]:
        values = list(self.coefficients)
        if len(values) < self.degree + 1:
            raise ValueError("coefficients have not been computed")
        return values

    def __str__(self) -> str:
        if self.degree == 0:
            return _format(self.a_n)
        if not self.expanded:
            parts = [_wrapped(self.a_n), "("]
            for root in self.roots:
                if _is_negative(root):
                    parts.append(f"(x+{_wrapped(root * -1)})")
                else:
                    parts.append(f"(x-{_wrapped(root)})")
            parts.append(")")
            return "".join(parts)

        coefficients = self._require_coefficients()
        parts = []
        for index, coefficient in enumerate(coefficients[: self.degree]):
            if coefficient == 0:
                continue
            power = self.degree - index
            value = self.a_n * coefficient
            sign = "" if index == 0 else "+"
            if value != 1:
                if _is_negative(value):
                    term = "-" + _wrapped(value * -1)
                else:
                    term = sign + _wrapped(value)
                parts.append(term + _power_suffix(power))
            elif power != 1:
                parts.append(sign + _power_suffix(power))
            else:
                parts.append("+x")
        constant = self.a_n * coefficients[self.degree]
        if _is_negative(constant):
            parts.append("-" + _wrapped(constant * -1))
        else:
            parts.append("+" + _wrapped(constant))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Polynom(degree={self.degree}, a_n={self.a_n!r}, roots={list(self.roots)!r})"

    def evaluate(self, x: Number) -> Number:
        """Return the value of the polynomial at *x*."""
        coefficients = self._require_coefficients()
        result: Number = 0.0
        for power, coefficient in zip(range(self.degree, -1, -1), coefficients):
            if power > 0:
                result = result + self.a_n * x ** power * coefficient
            else:
                result = result + self.a_n * coefficient
        return result

    def resize(self, degree: int) -> None:
        """Change the degree, keeping the leading roots and recomputing coefficients."""
        if self.degree == 0 and degree <= 0:
            return
        if degree <= 0:
            self.coefficients = NumArray(0)
            self.roots.resize(degree)
            self.degree = 0
            return
        self.roots.resize(degree)
        self.degree = degree
        self.count_coefficients()

    def change_root(self, index: int, value: Number) -> None:
        """Replace the root at *index* and recompute the coefficients."""
        if not 0 <= index < self.degree:
            raise IndexError(f"root index {index} out of range")
        self.roots[index] = value
        self.count_coefficients()

    def count_coefficients(self) -> None:
        """Expand the product of ``(x - root)`` into ``coefficients``."""
        expansion: List[Number] = [1.0]
        for root in self.roots:
            shift = root * -1
            expansion = [
                upper + shift * lower
                for upper, lower in zip(expansion + [0.0], [0.0] + expansion)
            ]
        self.coefficients = NumArray(len(expansion))
        for index, value in enumerate(expansion):
            self.coefficients[index] = value

    def first_undefined_root(self) -> Optional[int]:
        """Return the index of the first root not yet given, or None if all are."""
        return next(
            (index for index in range(len(self.roots)) if not self.roots.is_defined(index)),
            None,
        )