# containerkit

A few small container utilities, with no dependencies beyond the standard
library.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Finding an element

`containerkit.easyfind.easyfind(container, to_find)` returns the position of
the first element equal to `to_find`. Any iterable works: lists, tuples,
deques and so on. It raises `EasyFindError` (a `LookupError`) with the
message `Empty Container` when the container holds nothing, and
`No Matching Element In The Container` when no element matches.

```python
from containerkit.easyfind import easyfind, EasyFindError

easyfind([-1, 1, 2, 3, 4], 4)   # 4
try:
    easyfind([], 42)
except EasyFindError as exc:
    print(exc)                  # Empty Container
```

## Spans

`containerkit.span.Span(max_size=0)` holds at most `max_size` integers.

- `add_number(n)` appends one number and raises `SpanError` when the span is
  full.
- `add_numbers(values)` appends numbers from any iterable in order. If the span
  fills up part way, `SpanError` is raised and the numbers added so far stay.
- `shortest_span()` returns the smallest difference between any two stored
  numbers; `longest_span()` returns the largest minus the smallest. Both raise
  `SpanError` when fewer than two numbers are stored.
- `max_size` and `numbers` (a tuple, in insertion order) are read-only
  properties. A `Span` supports `len()`, iteration and `copy.copy()`.
- `describe()` returns a text listing of the capacity and each stored value.

A negative `max_size` raises `SpanError`. The capacity is kept as an unsigned
32-bit value, so larger sizes wrap around.

```python
from containerkit.span import Span, SpanError

span = Span(5)
span.add_numbers([6, 3, 17, 9, 11])
span.shortest_span()   # 2
span.longest_span()    # 14
span.add_number(1)     # raises SpanError: the span is full
```

## An iterable stack

`containerkit.mutant_stack.MutantStack(items=())` is a last-in-first-out stack
with `push`, `pop`, `top` and `empty`. `pop` and `top` raise `IndexError` on an
empty stack. Iterating it goes from the bottom to the top, and `reversed()`
goes from the top to the bottom. `copy()` returns an independent stack, and two
stacks compare equal when they hold the same values in the same order.
`describe_values()` and `describe_stats()` return text listings of the contents
and of the size and emptiness.

```python
from containerkit.mutant_stack import MutantStack

stack = MutantStack([10, 4, 0])
stack.push(12)
stack.top()             # 12
list(stack)             # [10, 4, 0, 12]
list(reversed(stack))   # [12, 0, 4, 10]
snapshot = stack.copy()
stack.pop()
len(snapshot), len(stack)   # (4, 3)
```

## Demonstration commands

Each module has a command that runs a short, fixed demonstration, writing its
results to standard output and any expected errors to standard error:

```
containerkit-easyfind
containerkit-span
containerkit-mutant-stack
```

## What it does not do

The commands take no options and read no input; they only run their built-in
demonstrations. To work with your own data, use the classes and functions
from Python.