"""A bounded collection of integers that reports its shortest and longest span."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

_UINT_MASK = 0xFFFFFFFF


class SpanError(RuntimeError):
    """Raised for invalid sizes, overflowing a Span or too few numbers."""


class Span:
    """Holds at most ``max_size`` integers."""

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise SpanError("Initial Max Size Must be Positive")
        # Capacity is stored as an unsigned 32-bit quantity.
        self._max_size = max_size & _UINT_MASK
        self._nums: list[int] = []

    def add_number(self, n: int) -> None:
        """Append one number, failing if the span is full."""
        if len(self._nums) >= self._max_size:
            raise SpanError("The Span is Full, we can't add more numbers")
        self._nums.append(n)

    def add_numbers(self, values: Iterable[int]) -> None:
        """Append numbers in order; numbers added before overflow are kept."""
        for value in values:
            if len(self._nums) >= self._max_size:
                raise SpanError("Add NUMBERS: Span Already Full")
            self._nums.append(value)

    def shortest_span(self) -> int:
        """Return the smallest distance between any two stored numbers."""
        if not self._nums:
            raise SpanError("No Shortest Span: Empty Container")
        if len(self._nums) < 2:
            raise SpanError("No Shortest Span: Size too Small")
        ordered = sorted(self._nums)
        return min(b - a for a, b in zip(ordered, ordered[1:]))

    def longest_span(self) -> int:
        """Return the distance between the largest and smallest numbers."""
        if not self._nums:
            raise SpanError("No Longest Span: Empty Container")
        if len(self._nums) < 2:
            raise SpanError("No Longest Span: Size too Small")
        result = max(self._nums) - min(self._nums)
        if result < 0:
            raise SpanError("Negative Result in Longest Span")
        return result

    @property
    def max_size(self) -> int:
        """Capacity of the span."""
        return self._max_size

    @property
    def numbers(self) -> tuple[int, ...]:
        """Stored numbers in insertion order."""
        return tuple(self._nums)

    def __len__(self) -> int:
        return len(self._nums)

    def __iter__(self) -> Iterator[int]:
        return iter(self._nums)

    def __copy__(self) -> Span:
        clone = Span(self._max_size)
        clone._nums = list(self._nums)
        return clone

    def describe(self) -> str:
        """Return a listing of the capacity and every stored value."""
        parts = []
        if not self._nums:
            parts.append("Span is Empty: no members to print")
        parts.append(f"Vector Max Size: {self._max_size}\n")
        parts.extend(
            f"Index: {index}, Value [{value}]\n"
            for index, value in enumerate(self._nums)
        )
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Span(max_size={self._max_size}, numbers={self._nums!r})"


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration of filling spans and measuring them."""
    out, err = sys.stdout, sys.stderr
    size = 10

    try:
        span = Span(size)
        for i in range(span.max_size):
            span.add_number(i * 2)
        print(f"The Longest Span is: {span.longest_span()}", file=out)
        print(f"The Shortest Span is: {span.shortest_span()}", file=out)
        out.write(span.describe())
    except SpanError as exc:
        print(f"1st Exception Error: {exc}", file=err)

    try:
        dummy = Span(size)
        print(f"Dummy Longest Span is: {dummy.longest_span()}", file=out)
        print(f"Dummy Shortest Span is: {dummy.shortest_span()}", file=out)
    except SpanError as exc:
        print(f"2nd Exception Error: {exc}", file=err)

    try:
        filled = Span(size)
        filled.add_numbers(i * 2 for i in range(size))
        print(f"The Longest Span is: {filled.longest_span()}", file=out)
        print(f"The Shortest Span is: {filled.shortest_span()}", file=out)
        out.write(filled.describe())
    except SpanError as exc:
        print(f"3rd Exception Error: {exc}", file=err)
    return 0


if __name__ == "__main__":
    sys.exit(main())