"""Evaluate and tabulate the sine and sine-integral series from the command line."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from polyats.series import Sine, SineIntegral, TaylorFunction
from polyats.tcomplex import TComplex


class SeriesKind(Enum):
    """Which series to evaluate."""

    SINE = "sin"
    SINE_INTEGRAL = "si"


def _build(kind: Union[SeriesKind, str], degree: int) -> TaylorFunction:
    kind = SeriesKind(kind)
    accuracy = degree * 2
    if kind is SeriesKind.SINE:
        return Sine(accuracy)
    return SineIntegral(accuracy)


def _to_point(point: Union[str, float, int, TComplex]) -> TComplex:
    if isinstance(point, TComplex):
        return point
    if isinstance(point, str):
        return TComplex.parse(point)
    return TComplex(float(point))


def evaluate(
    kind: Union[SeriesKind, str],
    degree: int,
    point: Union[str, float, int, TComplex],
) -> TComplex:
    """Evaluate the series of *kind* with ``2 * degree`` terms at *point*."""
    function = _build(kind, degree)
    value = function.evaluate(_to_point(point))
    if isinstance(value, TComplex):
        return value
    return TComplex(value)


def plot_points(
    kind: Union[SeriesKind, str],
    degree: int,
    start: float,
    stop: float,
    step: float = 0.1,
) -> List[Tuple[float, float]]:
    """Return ``(x, real part of value)`` pairs from *start* until *x* reaches *stop*."""
    if step <= 0:
        raise ValueError("step must be positive")
    function = _build(kind, degree)

    def real_value(x: float) -> float:
        value = function.evaluate(TComplex(x))
        return value.real if isinstance(value, TComplex) else float(value)

    points = [(float(start), real_value(start))]
    count = 0
    x = float(start)
    while x < stop:
        count += 1
        x = start + count * step
        points.append((x, real_value(x)))
    return points


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyats-series",
        description="Evaluate the sine or sine-integral Taylor series.",
    )
    parser.add_argument("kind", choices=[kind.value for kind in SeriesKind])
    parser.add_argument("degree", type=int, help="number of term pairs (0..100000)")
    parser.add_argument("point", help="point such as 0.5 or 1+2i")
    parser.add_argument(
        "--range",
        nargs=2,
        type=int,
        metavar=("FROM", "TO"),
        help="also print the series on the interval [FROM, TO]",
    )
    parser.add_argument("--step", type=float, default=0.1)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not 0 <= args.degree <= 100000:
        parser.error("degree must be between 0 and 100000")
    try:
        result = evaluate(args.kind, args.degree, args.point)
        points = (
            plot_points(args.kind, args.degree, args.range[0], args.range[1], args.step)
            if args.range
            else []
        )
    except ValueError as error:
        parser.error(str(error))
    print(result)
    for x, y in points:
        print(f"{x:.6g} {y:.6g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())