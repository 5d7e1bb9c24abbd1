"""A fixed-size numeric array that remembers which slots were filled."""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Callable, Iterable, Iterator, List, Union

from polyats.tcomplex import TComplex

Number = Union[float, TComplex]


def _format(value: Number) -> str:
    if isinstance(value, TComplex):
        return str(value)
    return format(value, ".6g")


def _compare(left: Number, right: Number) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


class NumArray:
    """Array of numbers (floats or TComplex) with per-slot 'defined' flags."""

    def __init__(self, size: int = 0) -> None:
        count = max(size, 0)
        self._values: List[Number] = [0.0] * count
        self._defined: List[bool] = [False] * count

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Number:
        return self._values[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._values[index] = value
        self._defined[index] = True

    def __iter__(self) -> Iterator[Number]:
        return iter(self._values)

    def __str__(self) -> str:
        return "[" + ", ".join(_format(value) for value in self._values) + "]"

    def __repr__(self) -> str:
        return f"NumArray({self._values!r})"

    def read(
        self,
        tokens: Union[str, Iterable[str]],
        parse: Callable[[str], Number] = float,
    ) -> None:
        """Fill every slot, in order, from whitespace-separated tokens."""
        if isinstance(tokens, str):
            tokens = tokens.split()
        stream = iter(tokens)
        for index in range(len(self._values)):
            try:
                token = next(stream)
            except StopIteration:
                raise ValueError(
                    f"expected {len(self._values)} values, got {index}"
                ) from None
            self[index] = parse(token)

    def is_defined(self, index: int) -> bool:
        """Tell whether the slot at *index* was given a value."""
        return self._defined[index]

    def arithmetic_mean(self) -> Number:
        """Return the mean of all slots."""
        if not self._values:
            raise ValueError("mean of an empty array")
        total: Number = 0.0
        for value in self._values:
            total = total + value
        return total / len(self._values)

    def root_mean_square_deviation(self) -> Number:
        """Return the sample standard deviation (zero for fewer than two values)."""
        count = len(self._values)
        if count <= 1:
            return 0.0
        mean = self.arithmetic_mean()
        total: Number = 0.0
        for value in self._values:
            difference = value - mean
            total = total + difference * difference
        scaled = total * (1 / (count - 1))
        if isinstance(scaled, TComplex):
            return scaled.sqrt()
        return math.sqrt(scaled) if scaled >= 0 else math.nan

    def resize(self, size: int) -> None:
        """Change the size, keeping leading values and marking them defined."""
        if size <= 0:
            self._values = []
            self._defined = []
            return
        if not self._values:
            self._values = [0.0] * size
            self._defined = [False] * size
            return
        kept = min(len(self._values), size)
        self._values = self._values[:kept] + [0.0] * (size - kept)
        self._defined = [True] * kept + [False] * (size - kept)

    def sort(self, ascending: bool = True) -> None:
        """Sort in place; complex values are ordered by magnitude."""
        self._values.sort(key=cmp_to_key(_compare), reverse=not ascending)

    def push_back(self, value: Number) -> None:
        """Store *value* in the first undefined slot; do nothing if all are defined."""
        for index, defined in enumerate(self._defined):
            if not defined:
                self[index] = value
                return