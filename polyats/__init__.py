"""Complex polynomials, Taylor series for sin(x) and sin(x)/x, and a small UDP telephone exchange."""

__version__ = "0.1.0"

__all__ = [
    "abonent",
    "calculator",
    "numarray",
    "polynom",
    "series",
    "server",
    "tcomplex",
    "transport",
]