"""A small complex-number type with textual parsing and formatting."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

_COMPLEX_RE = re.compile(r"(-?\d+(\.\d+)?)([+-]\d+(\.\d+)?)i")
_REAL_PREFIX_RE = re.compile(
    r"[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _format_double(value: float) -> str:
    """Format a float the way a default-precision text stream does."""
    return format(value, ".6g")


@dataclass(frozen=True, eq=False)
class TComplex:
    """Immutable complex number ordered by its squared magnitude."""

    real: float = 0.0
    imaginary: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imaginary", float(self.imaginary))

    @classmethod
    def parse(cls, text: str) -> "TComplex":
        """Parse ``a+bi``/``a-bi`` or a plain real number from the first token of *text*."""
        tokens = text.split()
        if not tokens:
            raise ValueError("no number to parse")
        token = tokens[0]
        match = _COMPLEX_RE.fullmatch(token)
        if match:
            return cls(float(match.group(1)), float(match.group(3)))
        prefix = _REAL_PREFIX_RE.match(token)
        if prefix is None:
            raise ValueError(f"not a number: {token!r}")
        return cls(float(prefix.group(0)))

    def __str__(self) -> str:
        if self.imaginary > 0:
            return f"{_format_double(self.real)}+{_format_double(self.imaginary)}i"
        if self.imaginary == 0:
            return _format_double(self.real)
        if self.real != 0:
            return f"{_format_double(self.real)}{_format_double(self.imaginary)}i"
        return f"{_format_double(self.imaginary)}i"

    def __repr__(self) -> str:
        return f"TComplex({self.real!r}, {self.imaginary!r})"

    def __eq__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.real == value.real and self.imaginary == value.imaginary

    def __hash__(self) -> int:
        if self.imaginary == 0:
            return hash(self.real)
        return hash((self.real, self.imaginary))

    def __lt__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.magnitude() < value.magnitude()

    def __gt__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.magnitude() > value.magnitude()

    def __add__(self, other: object) -> "TComplex":
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return TComplex(self.real + value.real, self.imaginary + value.imaginary)

    def __radd__(self, other: object) -> "TComplex":
        return self.__add__(other)

    def __sub__(self, other: object) -> "TComplex":
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return TComplex(self.real - value.real, self.imaginary - value.imaginary)

    def __rsub__(self, other: object) -> "TComplex":
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return value - self

    def __mul__(self, other: object) -> "TComplex":
        if isinstance(other, (int, float)):
            return TComplex(self.real * other, self.imaginary * other)
        if not isinstance(other, TComplex):
            return NotImplemented
        return TComplex(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def __rmul__(self, other: object) -> "TComplex":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "TComplex":
        if isinstance(other, (int, float)):
            return TComplex(self.real / other, self.imaginary / other)
        if not isinstance(other, TComplex):
            return NotImplemented
        denominator = other.real ** 2 + other.imaginary ** 2
        if denominator == 0:
            raise ZeroDivisionError("complex division by zero")
        return TComplex(
            (self.real * other.real + self.imaginary * other.imaginary) / denominator,
            (self.imaginary * other.real - self.real * other.imaginary) / denominator,
        )

    def __rtruediv__(self, other: object) -> "TComplex":
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return value / self

    def __neg__(self) -> "TComplex":
        return self * -1

    def __pow__(self, exponent: object) -> "TComplex":
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return TComplex(1.0) / (self ** -exponent)
        result = TComplex(1.0)
        for _ in range(exponent):
            result = result * self
        return result

    def magnitude(self) -> float:
        """Return the squared modulus, used for ordering."""
        return self.real * self.real + self.imaginary * self.imaginary

    def sqrt(self) -> "TComplex":
        """Return the principal square root."""
        if self.imaginary != 0:
            modulus = math.sqrt(self.real * self.real + self.imaginary * self.imaginary)
            sign = math.copysign(1.0, self.imaginary)
            return TComplex(
                math.sqrt((modulus + self.real) / 2),
                sign * math.sqrt((modulus - self.real) / 2),
            )
        if self.real < 0:
            return TComplex(math.nan, 0.0)
        return TComplex(math.sqrt(self.real), 0.0)


Number = Union[int, float, TComplex]


def _coerce(value: object) -> Optional[TComplex]:
    if isinstance(value, TComplex):
        return value
    if isinstance(value, (int, float)):
        return TComplex(float(value))
    return None


def is_complex_string(text: str) -> bool:
    """Tell whether *text* is written exactly as ``a+bi`` or ``a-bi``."""
    return _COMPLEX_RE.fullmatch(text) is not None