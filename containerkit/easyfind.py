"""Locate the first occurrence of a value inside any iterable container."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any, TextIO


class EasyFindError(LookupError):
    """Raised when a container is empty or does not hold the wanted value."""


def easyfind(container: Iterable[Any], to_find: Any) -> int:
    """Return the position of the first element equal to ``to_find``.

    Raises EasyFindError if the container is empty or holds no such element.
    """
    empty = True
    for position, item in enumerate(container):
        empty = False
        if item == to_find:
            return position
    if empty:
        raise EasyFindError("Empty Container")
    raise EasyFindError("No Matching Element In The Container")


def _report(
    label: str,
    error_label: str,
    container: Sequence[Any] | deque,
    to_find: Any,
    out: TextIO,
    err: TextIO,
    value_word: str = "Value: ",
) -> None:
    try:
        position = easyfind(container, to_find)
    except EasyFindError as exc:
        print(f"Error: {error_label}: {exc}", file=err)
        return
    print(f"{label} Element Found{', ' if value_word else ': '}{value_word}"
          f"{container[position]}, Index: {position}", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration searches over several container kinds."""
    out, err = sys.stdout, sys.stderr

    vector = [-1, 1, 2, 3, 4]
    _report("Vector", "Vetor", vector, 4, out, err)
    vector.pop()
    _report("Vector", "Vetor", vector, 4, out, err)

    _report("2nd_Vector", "2nd_Vector", [], 42, out, err)

    queue = deque([1, 2, 3, 4, 0])
    _report("Deque", "Deque", queue, 0, out, err)

    linked = deque([1, 2, 3, 4])
    linked.appendleft(0)
    _report("List", "List", linked, 1, out, err, value_word="")
    return 0


if __name__ == "__main__":
    sys.exit(main())