"""A singly linked list with a head sentinel, selection sort and range deletion."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

SAMPLE = (6, 7, 10, 1, 2, 3, 4, 5, 8, 9)


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """A singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _Node(0)
        tail = self._head
        for value in values:
            tail.next = _Node(value)
            tail = tail.next

    @staticmethod
    def _chain(node: _Node | None) -> Iterator[_Node]:
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._chain(self._head.next))

    def __len__(self) -> int:
        return sum(1 for _ in self._chain(self._head.next))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def selection_sort(self) -> None:
        """Sort the values in ascending order by swapping node values."""
        for node in self._chain(self._head.next):
            smallest = min(self._chain(node), key=lambda candidate: candidate.value)
            if smallest is not node:
                node.value, smallest.value = smallest.value, node.value

    def delete_range(self, mink: int, maxk: int) -> None:
        """Remove the values greater than mink and at most maxk.

        The list is expected to be sorted: the run removed starts after the
        leading values that are at most mink and ends before the first value
        greater than maxk.
        """
        prev = self._head
        while prev.next is not None and prev.next.value <= mink:
            prev = prev.next
        after = prev.next
        while after is not None and after.value <= maxk:
            after = after.next
        prev.next = after


def _show(values: LinkedList) -> None:
    print(" ".join(str(value) for value in values))


def main(argv: list[str] | None = None) -> int:
    """Print a list, the list sorted, and the sorted list after a range deletion."""
    parser = argparse.ArgumentParser(
        prog="linklist", description="Sort a linked list and delete a value range."
    )
    parser.add_argument("values", nargs="*", type=int, help="list values")
    parser.add_argument("--min", dest="mink", type=int, default=4)
    parser.add_argument("--max", dest="maxk", type=int, default=8)
    args = parser.parse_args(argv)

    values = LinkedList(args.values or SAMPLE)
    _show(values)
    values.selection_sort()
    _show(values)
    values.delete_range(args.mink, args.maxk)
    _show(values)
    return 0


if __name__ == "__main__":
    sys.exit(main())