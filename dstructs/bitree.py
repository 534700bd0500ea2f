"""Binary trees built from extended preorder sequences, with their traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

EMPTY_MARK = "*"
SAMPLE = "124*6***3*57**8**"


@dataclass
class BiTNode:
    """A binary tree node holding one character."""

    data: str
    left: BiTNode | None = None
    right: BiTNode | None = None


def build_bitree(text: str) -> BiTNode | None:
    """Build a tree from an extended preorder sequence where '*' marks an empty subtree.

    Characters left over once the tree is complete are ignored.
    """
    symbols = iter(text)

    def build() -> BiTNode | None:
        try:
            symbol = next(symbols)
        except StopIteration:
            raise ValueError(
                f"sequence {text!r} ends before the tree is complete"
            ) from None
        if symbol == EMPTY_MARK:
            return None
        node = BiTNode(symbol)
        node.left = build()
        node.right = build()
        return node

    return build()


def _preorder(tree: BiTNode | None) -> Iterator[str]:
    if tree is not None:
        yield tree.data
        yield from _preorder(tree.left)
        yield from _preorder(tree.right)


def _inorder(tree: BiTNode | None) -> Iterator[str]:
    if tree is not None:
        yield from _inorder(tree.left)
        yield tree.data
        yield from _inorder(tree.right)


def _postorder(tree: BiTNode | None) -> Iterator[str]:
    if tree is not None:
        yield from _postorder(tree.left)
        yield from _postorder(tree.right)
        yield tree.data


def preorder(tree: BiTNode | None) -> list[str]:
    """Node values in preorder, computed recursively."""
    return list(_preorder(tree))


def inorder(tree: BiTNode | None) -> list[str]:
    """Node values in inorder, computed recursively."""
    return list(_inorder(tree))


def postorder(tree: BiTNode | None) -> list[str]:
    """Node values in postorder, computed recursively."""
    return list(_postorder(tree))


def preorder_iterative(tree: BiTNode | None) -> list[str]:
    """Node values in preorder, computed with an explicit stack."""
    result: list[str] = []
    stack: list[BiTNode] = []
    node = tree
    while node is not None or stack:
        while node is not None:
            result.append(node.data)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return result


def inorder_iterative(tree: BiTNode | None) -> list[str]:
    """Node values in inorder, computed with an explicit stack."""
    result: list[str] = []
    stack: list[BiTNode] = []
    node = tree
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack.pop()
        result.append(top.data)
        node = top.right
    return result


def postorder_iterative(tree: BiTNode | None) -> list[str]:
    """Node values in postorder, computed with an explicit stack."""
    result: list[str] = []
    stack: list[BiTNode] = []
    node = tree
    last_visited: BiTNode | None = None
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack[-1]
        if top.right is None or top.right is last_visited:
            result.append(top.data)
            stack.pop()
            last_visited = top
            node = None
        else:
            node = top.right
    return result


def level_order(tree: BiTNode | None) -> list[str]:
    """Node values level by level, left to right."""
    if tree is None:
        return []
    result: list[str] = []
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def count_nodes(tree: BiTNode | None) -> int:
    """Number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + count_nodes(tree.left) + count_nodes(tree.right)


def depth(tree: BiTNode | None) -> int:
    """Number of levels in the tree; an empty tree has depth 0."""
    if tree is None:
        return 0
    return 1 + max(depth(tree.left), depth(tree.right))


_TRAVERSALS = (
    ("Preorder (recursive)", preorder),
    ("Inorder (recursive)", inorder),
    ("Postorder (recursive)", postorder),
    ("Preorder (iterative)", preorder_iterative),
    ("Inorder (iterative)", inorder_iterative),
    ("Postorder (iterative)", postorder_iterative),
    ("Level order", level_order),
)


def _report(text: str) -> None:
    tree = build_bitree(text)
    print(f"Extended preorder sequence: {text}")
    for label, traversal in _TRAVERSALS:
        print(f"{label}:\t{' '.join(traversal(tree))}")
    print(f"Node count:\t{count_nodes(tree)}")
    print(f"Depth:\t{depth(tree)}")


def main(argv: list[str] | None = None) -> int:
    """Print traversals, node count and depth for extended preorder sequences."""
    parser = argparse.ArgumentParser(
        prog="bitree",
        description="Build binary trees from extended preorder sequences ('*' = empty).",
    )
    parser.add_argument("sequences", nargs="*", help="extended preorder sequences")
    args = parser.parse_args(argv)

    sequences = list(args.sequences)
    if not sequences:
        _report(SAMPLE)
        print()
        try:
            line = input("Extended preorder sequence: ")
        except EOFError:
            return 0
        sequences = line.split()[:1]

    for sequence in sequences:
        try:
            _report(sequence)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())