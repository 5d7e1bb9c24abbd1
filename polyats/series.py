"""Truncated Taylor series written as polynomials."""

from __future__ import annotations

import math
from itertools import cycle, islice
from typing import Iterable, List, Union

from polyats.numarray import NumArray
from polyats.polynom import Polynom
from polyats.tcomplex import TComplex

Number = Union[float, TComplex]


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer *n*."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return math.factorial(n)


class TaylorFunction(Polynom):
    """A polynomial built from the derivatives of a function at zero.

    ``derivatives`` lists the derivative values of orders ``0 .. accuracy-1``.
    The polynomial has degree ``accuracy - 1`` and leading factor 1.  When the
    zeroth derivative is non-zero, every factorial is taken one order higher,
    which turns the series of a function ``f`` into that of
    ``(integral of f) / x``.
    """

    def __init__(self, accuracy: int, derivatives: Iterable[Number]) -> None:
        if accuracy < 1:
            raise ValueError("accuracy must be at least 1")
        values = list(derivatives)
        if len(values) != accuracy:
            raise ValueError(
                f"expected {accuracy} derivative values, got {len(values)}"
            )
        super().__init__(accuracy - 1)
        self.a_n = 1.0
        top = accuracy - 1 if values[0] == 0 else accuracy
        self.coefficients = NumArray(accuracy)
        for index, value in enumerate(reversed(values)):
            self.coefficients[index] = value / factorial(top - index)


class Sine(TaylorFunction):
    """Taylor polynomial of ``sin(x)`` with *accuracy* terms."""

    def __init__(self, accuracy: int) -> None:
        super().__init__(accuracy, self.derivatives(accuracy))

    @staticmethod
    def derivatives(accuracy: int) -> List[float]:
        """Derivatives of the sine at zero, orders ``0 .. accuracy-1``."""
        return list(islice(cycle((0.0, 1.0, 0.0, -1.0)), max(accuracy, 0)))


class SineIntegral(TaylorFunction):
    """Series built from the cosine's derivatives, integrated term by term over x."""

    def __init__(self, accuracy: int) -> None:
        super().__init__(accuracy, self.derivatives(accuracy))

    @staticmethod
    def derivatives(accuracy: int) -> List[float]:
        """Derivatives of the cosine at zero, orders ``0 .. accuracy-1``."""
        return list(islice(cycle((1.0, 0.0, -1.0, 0.0)), max(accuracy, 0)))