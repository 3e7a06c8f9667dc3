# exprlang

Runtime building blocks for a small, safe expression language: the rules
by which its values are compared, converted, indexed, sliced and searched,
plus the character classes and string-literal unescaping its source text
uses.

The operations follow the language's rules rather than Python's: ints and
floats compare by value, division-free ordering works only between numbers,
strings or datetimes, and anything unsupported raises `RuntimeFault`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Values and conversions (`exprlang.values`)

```python
from exprlang.values import equal, is_nil, to_int, to_int64, to_float64

equal(1, 1.0)          # True: numbers compare by value
equal([1, 2], [1, 2])  # True: containers compare element by element
equal(True, 1)         # False: bool is not a number here
is_nil(None)           # True
to_int("42")           # 42: decimal strings only
to_int(3.9)            # 3: floats are truncated
to_int64(7.5)          # 7
to_float64("1e3")      # 1000.0
```

`to_int` rejects strings that are not decimal integers within 64-bit
range; `to_int64` accepts numbers only; `to_float64` accepts decimal and
hexadecimal float notation as well as `inf` and `nan`. NaN or infinite
floats cannot be converted to integers.

## Ordering (`exprlang.ordering`)

```python
from exprlang.ordering import less, more, less_or_equal, more_or_equal, make_range

less("a", "b")          # True
more(2, 1.5)            # True
less_or_equal(3, 3)     # True
make_range(1, 3)        # [1, 2, 3]
make_range(3, 1)        # []
```

Ordering is defined between two numbers, two strings or two `datetime`
values (a naive datetime is taken to be in UTC). Any other pair raises
`RuntimeFault`, for example `invalid operation: string < int`.

## Access (`exprlang.access`)

```python
from dataclasses import dataclass, field
from exprlang.access import fetch, slice_, in_, length, Field, fetch_field

fetch([10, 20, 30], -1)    # 30: negative indexes count from the end
fetch({"a": 1}, "b")       # None: a missing map key gives None
slice_("hello", 1, 3)      # "el"
slice_([1, 2, 3], -2, 99)  # [2, 3]: the stop bound is clipped
in_(2, [1, 2, 3])          # True
in_("a", {"a": 1})         # True
length({"a": 1})           # 1

@dataclass
class Ticket:
    price: int
    label: str = field(default="", metadata={"expr": "name"})

t = Ticket(5, "vip")
fetch(t, "price")          # 5
fetch(t, "name")           # "vip": found through the "expr" metadata tag
in_("price", t)            # True
fetch_field(t, Field(index=[0], path=["price"]))  # 5
```

- `fetch(source, key)` reads an element of a list, tuple or string, a map
  value, or from a user object a public method (bound) or a field.
- `fetch_field(source, field)` follows a `Field` whose `index` lists
  positional dataclass field indexes and whose `path` gives their names
  for error messages.
- `fetch_method(source, method)` returns the bound method at
  `Method.index` among the object's public methods sorted by name.
- `deref(i)` returns its argument unchanged.
- `length(a)` works on lists, tuples, maps and strings.

Out-of-range indexes, unsupported containers and bad keys raise
`RuntimeFault`.

## String literals and characters (`exprlang.unescape`)

```python
from exprlang.unescape import unescape, is_space, is_alphabetic, is_alphanumeric

unescape('"a\\tb"')         # "a\tb"
unescape("'\\u263A'")       # "☺"
is_alphabetic("$")          # True: "_" and "$" may start an identifier
is_alphanumeric("7")        # True
is_space("\u00a0")          # True
```

`unescape` takes a literal with its surrounding quotes (single or double),
normalises line endings to `\n` and resolves the escapes `\a \b \f \n \r
\t \v \\ \' \" \` \?`, `\xHH`, `\uHHHH`, `\UHHHHHHHH` and three-digit octal
`\[0-3][0-7][0-7]`. A malformed literal raises `ValueError`.

## What this package does not do

It does not tokenize or parse expression text, and it has no arithmetic
operations (addition, subtraction, multiplication, division, modulo,
exponent, negation, absolute value) and no evaluator that runs compiled
expressions. It provides only the value semantics, access rules and
literal unescaping described above, for use by such components.