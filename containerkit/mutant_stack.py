"""A last-in-first-out stack whose contents can also be iterated."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class MutantStack:
    """Stack with bottom-to-top iteration and top-to-bottom reversal."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def push(self, value: Any) -> None:
        """Place a value on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Whether the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutantStack):
            return NotImplemented
        return self._items == other._items

    def copy(self) -> MutantStack:
        """Return an independent stack with the same contents."""
        return MutantStack(self._items)

    __copy__ = copy

    def describe_values(self) -> str:
        """Return a listing of the values from bottom to top."""
        if not self._items:
            return "Cant Print!! Empty Stack\n"
        lines = ["**  [Value Printing...]  **\n"]
        lines.extend(
            f"Index: {index}, Value: [{value}] \n"
            for index, value in enumerate(self._items)
        )
        return "".join(lines)

    def describe_stats(self) -> str:
        """Return the size and emptiness of the stack."""
        return (
            "**  [Stats Printing...]  **\n"
            f"Original Stack Size: {len(self._items)}\n"
            f"Original Stack empty? {str(self.empty()).lower()}\n"
        )

    def __repr__(self) -> str:
        return f"MutantStack({list(self._items)!r})"


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration of copying, iterating and emptying a stack."""
    out = sys.stdout
    mutant = MutantStack()
    for value in (10, 4, 0, 12, 199):
        mutant.push(value)

    out.write("** Original Stack Values **\n")
    out.write(mutant.describe_values())
    out.write(mutant.describe_stats())

    out.write(" ***[ASSIGNEMENT]*** \n")
    assigned = mutant.copy()

    out.write("==> Poping One Element From the Original Stack Top\n")
    mutant.pop()

    out.write("** The New Assigned Stack Values **\n")
    out.write(assigned.describe_values())
    out.write(assigned.describe_stats())

    out.write("** Compared to The Original Stack after Poping **\n")
    out.write(mutant.describe_values())
    out.write(mutant.describe_stats())

    out.write("** [Testing Reverse Iterator] **\n")
    for index, value in enumerate(reversed(mutant)):
        out.write(f"Index: {index}, Original Stack val: {value}\n")

    out.write("** [Emptying the Original Stack] **\n")
    while not mutant.empty():
        mutant.pop()
    out.write(f"After pop() Original_Stack Size: {len(mutant)}\n")
    out.write(f"After pop() Original_Stack is Empty? {str(mutant.empty()).lower()}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())