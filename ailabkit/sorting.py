"""Selection sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with ``items`` in ascending order."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers, then print them sorted."""
    parser = argparse.ArgumentParser(description="Sort integers with selection sort.")
    parser.parse_args(argv)
    words = sys.stdin.read().split()
    print("Enter no of elements: ", end="")
    try:
        count = int(words[0])
        if count < 0:
            raise ValueError("number of elements must be non-negative")
        print("\nEnter array elements: ", end="")
        values = [int(word) for word in words[1 : 1 + count]]
        if len(values) < count:
            raise ValueError(f"expected {count} elements, got {len(values)}")
    except (IndexError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print()
    for value in selection_sort(values):
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())