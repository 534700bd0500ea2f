"""General trees stored as first-child / next-sibling links."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

END_MARK = "#"
SAMPLE_EDGES = "#A,AB,AC,BD,BE,CF,DG,DH,EI,IJ,##"
SAMPLE_DEGREES = "A2B2C1D2E1F0G0H0I1J0"


@dataclass
class CSNode:
    """A tree node linked to its first child and its next sibling."""

    data: str
    first_child: CSNode | None = None
    next_sibling: CSNode | None = None


def _append_child(parent: CSNode, child: CSNode) -> None:
    if parent.first_child is None:
        parent.first_child = child
        return
    node = parent.first_child
    while node.next_sibling is not None:
        node = node.next_sibling
    node.next_sibling = child


def _children(node: CSNode) -> Iterator[CSNode]:
    child = node.first_child
    while child is not None:
        yield child
        child = child.next_sibling


def build_from_edges(text: str) -> CSNode | None:
    """Build a tree from its edges listed top-down, e.g. '#A,AB,AC,BD,##'.

    The first pair names the root, later pairs are parent-child edges and a
    pair whose second character is '#' ends the list. Commas are optional.
    """
    symbols = iter(text.replace(",", ""))
    nodes: dict[str, CSNode] = {}
    root: CSNode | None = None
    for index, (parent_label, child_label) in enumerate(zip(symbols, symbols)):
        if child_label == END_MARK:
            return root
        node = CSNode(child_label)
        if index == 0:
            root = node
        else:
            try:
                parent = nodes[parent_label]
            except KeyError:
                raise ValueError(
                    f"edge {parent_label}{child_label} names unknown parent {parent_label!r}"
                ) from None
            _append_child(parent, node)
        nodes[child_label] = node
    raise ValueError(f"edge list {text!r} has no closing '{END_MARK}{END_MARK}'")


def _degree(symbol: str, label: str) -> int:
    if len(symbol) != 1 or not "0" <= symbol <= "9":
        raise ValueError(f"node {label!r} has degree {symbol!r}, expected a digit")
    return int(symbol)


def build_from_degrees(text: str) -> CSNode:
    """Build a tree from its nodes in level order, each followed by its degree.

    For example 'A2B2C1D0E0F0'. Pairs left over once every node has its
    children are ignored.
    """
    labels = text[0::2]
    degrees = text[1::2]
    if not degrees:
        raise ValueError("a tree needs at least one node with its degree")

    root = CSNode(labels[0])
    queue = deque([root])
    position = 0
    created = 1
    while queue:
        parent = queue.popleft()
        count = _degree(degrees[position], labels[position])
        position += 1
        previous: CSNode | None = None
        for _ in range(count):
            if created >= len(degrees):
                raise ValueError(f"sequence {text!r} ends before every child is given")
            child = CSNode(labels[created])
            created += 1
            if previous is None:
                parent.first_child = child
            else:
                previous.next_sibling = child
            previous = child
            queue.append(child)
    return root


def tree_depth(tree: CSNode | None) -> int:
    """Number of levels in the tree; an empty tree has depth 0."""
    levels = 0
    level = [tree] if tree is not None else []
    while level:
        levels += 1
        level = [child for node in level for child in _children(node)]
    return levels


def main(argv: list[str] | None = None) -> int:
    """Build trees from an edge list and a degree sequence and print their depths."""
    parser = argparse.ArgumentParser(
        prog="cstree", description="Compute the depth of trees in child-sibling form."
    )
    parser.add_argument("--edges", help=f"edges top-down, e.g. {SAMPLE_EDGES}")
    parser.add_argument("--degrees", help=f"nodes with degrees, e.g. {SAMPLE_DEGREES}")
    args = parser.parse_args(argv)

    try:
        edges = args.edges
        if edges is None:
            edges = input("Tree edges (e.g. #A,AB,AC,BD,##): ").strip()
        print(f"Depth of the tree built from edges: {tree_depth(build_from_edges(edges))}")

        degrees = args.degrees
        if degrees is None:
            degrees = input("Nodes with their degrees (e.g. A2B2C1D0E0F0): ").strip()
        print(
            "Depth of the tree built from degrees: "
            f"{tree_depth(build_from_degrees(degrees))}"
        )
    except EOFError:
        return 0
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())