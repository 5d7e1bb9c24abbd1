# polyats

`polyats` has two parts.

**Numerics.** A small complex-number type, a fixed-size numeric array
and a polynomial defined by its roots. On top of these it builds
truncated Taylor series for `sin(x)` and for `sin(x)/x`.

**A toy telephone exchange.** An exchange and telephone clients that
talk to each other with text datagrams over UDP on `127.0.0.1`.

No third-party libraries are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Numerics

```python
from polyats.tcomplex import TComplex, is_complex_string
from polyats.numarray import NumArray
from polyats.polynom import Polynom
from polyats.series import Sine, SineIntegral, factorial

z = TComplex.parse("3+4i")
print(z, z.magnitude(), z * z, z ** 2)   # 3+4i 25.0 -7+24i -7+24i
print(is_complex_string("1.5-2i"))       # True

sine = Sine(10)                          # ten terms, degree 9
print(sine.evaluate(TComplex(1.0)))

si = SineIntegral(10)                    # series of sin(x)/x
print(si.evaluate(TComplex(0.5)))
```

### `polyats.tcomplex`

`TComplex(real, imaginary)` is an immutable complex number. It supports
`+`, `-`, `*`, `/` with other `TComplex` values and with plain numbers,
unary `-`, and `**` with an integer exponent. `magnitude()` returns the
*squared* modulus, and `<` / `>` compare by it. `sqrt()` returns the
principal square root. `TComplex.parse(text)` reads the first token of
`text`, written as `a+bi`, `a-bi` or a plain real number, and raises
`ValueError` if it is neither. `str()` writes the number back in the same
form. `is_complex_string(text)` tells whether `text` is exactly of the
form `a+bi` or `a-bi`.

### `polyats.numarray`

`NumArray(size)` is a fixed-size array of floats or `TComplex` values
that remembers which slots have been set (`is_defined(index)`). It offers
`read(tokens, parse)`, `arithmetic_mean()`, `root_mean_square_deviation()`
(sample standard deviation, zero for fewer than two values),
`sort(ascending)`, `resize(size)` and `push_back(value)`, which fills the
first slot not yet set and does nothing if all are set.

### `polyats.polynom`

`Polynom(degree)` is `a_n * (x - r1) * ... * (x - rn)`. Set the leading
factor and roots with `read(tokens, parse)` (the leading factor first,
then one root per degree) or with `change_root(index, value)`;
`count_coefficients()` expands the roots into `coefficients`, highest
degree first. `evaluate(x)` returns the value at `x`, `resize(degree)`
changes the degree keeping the leading roots, and
`first_undefined_root()` gives the index of the first root not yet set,
or `None`. `str()` writes the factored form, or the expanded form when
`expanded` is true.

### `polyats.series`

`factorial(n)`; `TaylorFunction(accuracy, derivatives)` builds a
polynomial of degree `accuracy - 1` from derivative values at zero.
`Sine(accuracy)` is the Taylor polynomial of `sin(x)`.
`SineIntegral(accuracy)` is the series of `sin(x)/x`, the integrand of
the sine integral. Both have a static `derivatives(accuracy)` method.

### `polyats.calculator`

`evaluate(kind, degree, point)` evaluates the `"sin"` or `"si"` series
with `2 * degree` terms at `point` (a string, a number or a `TComplex`).
`plot_points(kind, degree, start, stop, step)` returns `(x, real part)`
pairs from `start` until `x` reaches `stop`. `SeriesKind` names the two
kinds.

From the command line:

```
polyats-series sin 5 1+2i
polyats-series si 5 0.5 --range 0 10 --step 0.5
```

The first line printed is the value; with `--range FROM TO` each further
line is an `x y` pair.

## Telephone exchange

Start the exchange with `K` and `N`: it allows at most `2**K` calls at
once and at most `2**N - 1` subscribers.

```
polyats-server 2 4
```

It listens on `127.0.0.1:1984` and prints the list of subscribers and
calls after each request it handles.

Start one telephone per terminal:

```
polyats-phone
```

The telephone asks the exchange for a number (waiting `--timeout`
seconds, 5 by default), then reads commands from standard input:

```
check | call NUMBER | answer | hangup | say TEXT | quit
```

`check` asks whether a line is free and must come before `call`. The
called side can `answer` or `hangup` to reject; while connected, either
side can `say` text or `hangup`. On quit the number goes back to the
exchange's pool.

A new telephone binds UDP port 1 to receive its number, and then the
port equal to its number. On most systems binding port 1 needs
administrator rights.

Messages are text datagrams that start with a code:

| code | meaning |
|------|---------|
| 0 | ask for a number / number assigned |
| 1 | ask whether a line is free / answer to it |
| 2 | place a call / call rejected |
| 3 | incoming call / answer or reject a call |
| 4 | call connected |
| 5 | text within a call |
| 6 | end the call / call over |
| 7 | subscriber leaves / notice from the exchange |

The logic runs without a network as well. `polyats.server.Server` and
`polyats.abonent.Abonent` each take a `send` callable; feed them
messages through `handle_message`. `Server.status_lines()` lists the
subscribers and the current calls; `describe_event(message)` gives the
text a telephone shows for a message. `polyats.transport.Communicator`
is the UDP socket both commands use.

## What it does not do

There is no graphical interface: `plot_points` returns points but draws
nothing, and the exchange and telephones are text-only. The exchange
runs only on `127.0.0.1` with fixed ports and keeps no state beyond the
running process.