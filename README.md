# labkit

A set of small console programs and the library code behind them. It needs
nothing beyond the Python standard library.

## Modules

- `labkit.bodies` – `Sphere`, `Cone`, `Cylinder` and `Parallelepiped` (all
  `SolidBody` subclasses) and `Compound`, a body made of other bodies. Every
  `Body` has `density`, `volume`, `mass` and `type_name` properties and a
  `to_string()` description with three decimals. A `Compound` has
  `add_child()`, `children` and `len()`; its density is total mass over total
  volume (NaN when it is empty). The sphere's volume is computed as π·r³.
- `labkit.body_handler` – `BodyHandler`, a command loop that builds bodies from
  lines of text and can report the heaviest body (`max_mass()`) and the body
  that weighs least in water (`min_weight()`).
- `labkit.rational` – `Rational`, an immutable fraction kept in lowest terms
  with a positive denominator. It supports `+`, `-`, `*`, `/` with other
  rationals and ints, equality, ordering (compared as floats), `to_float()`,
  `str()` as `numerator/denominator` and `Rational.parse("7/15")`. A zero
  denominator raises `ValueError`.
- `labkit.http_url` – `HttpUrl`, a parser for `http`/`https` URLs, with
  `protocol`, `domain`, `port`, `document` and `url`. `HttpUrl(text)` raises
  `UrlParsingError` for a malformed URL and `ValueError` for a port outside
  1–65535; backslashes are read as slashes and ASCII letters are lower-cased.
  `HttpUrl.from_parts(domain, document, protocol, port)` builds one from its
  parts, using port 80 or 443 when no port is given. Also `Protocol`,
  `protocol_to_string()` and `normalize_document()`.
- `labkit.stack` – `Stack`, with `push`, `pop`, `top`, `is_empty`, `clear`,
  `copy`, `take` (moves the elements out, leaving the stack empty) and `len()`.
  `pop` and `top` on an empty stack raise `IndexError`.
- `labkit.car` – `Car`, with an engine, a `Gear` and a `Direction`. Gears limit
  the speed (reverse 0–20, neutral 0–150, first 0–30, second 20–50, third
  30–60, fourth 40–90, fifth 50–150). `set_gear()` and `set_speed()` raise
  `CarError` when a change is not allowed; `turn_off_engine()` returns whether
  the engine is off (only possible in neutral at speed 0).
- `labkit.car_handler` – `CarHandler`, a command loop that drives a `Car` and
  prints `CarError` messages.
- `labkit.findtext` – `find_lines(lines, needle)` yields the 1-based numbers of
  matching lines.
- `labkit.flipbyte` – `flip_byte(byte)` reverses the eight bits of a byte;
  `is_int(text)` checks for an optional minus sign followed by digits.
- `labkit.word_count` – `read_words(stream)` and `print_words(output, words)`.
- `labkit.trim_blanks` – `read_string`, `trim_blanks` (strips spaces only) and
  `print_string`.
- `labkit.vector_ops` – `parse_vector(stream)` reads numbers up to the first
  non-number, `multiply_by_min(values)` and `print_vector(output, values)`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `labkit-bodies` | Reads body commands from standard input: `1 density radius` sphere, `2 density height width depth` parallelepiped, `3 density radius height` cone, `4 density radius height` cylinder, `5` starts a compound and `6` ends it, `7` max mass, `8` min weight, `9` print, `10` prints everything and exits. All arguments must be positive numbers. |
| `labkit-url` | Reads URLs line by line and prints protocol, domain, port and document, or `Error: Invalid url`. |
| `labkit-stack` | Shows a short demonstration of the stack with integers and strings. |
| `labkit-car` | Drives a car from standard input (`1` info, `2` engine on, `3` engine off, `4 N` set gear, `5 N` set speed). |
| `labkit-findtext FILE TEXT` | Prints the numbers of the lines of `FILE` that contain `TEXT`; exits 0 if found, 1 if not, 2 on a usage or file error. |
| `labkit-flipbyte N` | Prints the byte `N` (0–255) with its bits reversed; exits 1 on bad input. |
| `labkit-wordcount` | Counts the words read from standard input and prints `word->count` in sorted order. |
| `labkit-trim` | Strips leading and trailing spaces from every input line. |
| `labkit-vector` | Reads numbers, multiplies each by the smallest one and prints them with two decimals. |

Example:

```
$ labkit-flipbyte 7
224
$ printf 'http://localhost:8080/index.html\n' | labkit-url
Current url:
	Protocol: http
	Domain: localhost
	Port: 8080
	Document: /index.html
```

## Library use

```python
from labkit.rational import Rational
from labkit.http_url import HttpUrl, Protocol

print(Rational(1, 2) + Rational(1, 6))   # 2/3
url = HttpUrl.from_parts("example.com", "docs", Protocol.HTTPS)
print(url.url)                           # https://example.com:443/docs
```

## Not included

`labkit.rational` is a library only; there is no command for it.