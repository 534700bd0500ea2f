# dstructs

This package holds small, self-contained versions of four textbook data
structures and the algorithms that usually come with them:

- **`dstructs.bitree`**: binary trees. A tree is built from its extended
  preorder sequence, in which `*` marks an empty subtree. The module has
  recursive and iterative preorder, inorder and postorder traversals, a
  level-order traversal, a node count and the tree depth.
- **`dstructs.cstree`**: general trees in child-sibling form. A tree is built
  either from a list of edges or from a level-order list of nodes, each with
  its degree. The module also computes the tree depth.
- **`dstructs.graph`**: a directed graph kept as adjacency lists. It can tell
  whether there is a simple path of exactly `k` arcs between two vertices.
- **`dstructs.linklist`**: a singly linked list of integers. It supports an
  in-place selection sort and the deletion of a value range from a sorted list.

It needs Python 3.10 or later and no third-party packages.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Binary trees

```python
from dstructs.bitree import (
    build_bitree, preorder, inorder, postorder,
    preorder_iterative, inorder_iterative, postorder_iterative,
    level_order, count_nodes, depth,
)

#        1
#     2     3
#  4           5
#     6      7   8
tree = build_bitree("124*6***3*57**8**")

preorder(tree)      # ['1', '2', '4', '6', '3', '5', '7', '8']
inorder(tree)       # ['4', '6', '2', '1', '3', '7', '5', '8']
count_nodes(tree)   # 8
depth(tree)         # 4
```

Every traversal returns a list of the node characters. The iterative
traversals use an explicit stack and give the same order as the recursive
ones. `level_order` visits the tree one level at a time, from left to right.

`build_bitree` raises `ValueError` if the sequence ends before the tree is
complete; characters left over after a complete tree are ignored. The nodes
are `BiTNode` dataclasses with `data`, `left` and `right` fields, and an empty
tree is `None`.

## Child-sibling trees

Both input formats below describe the same tree:

```
       A
   B       C
 D   E     F
G H   I
      J
```

```python
from dstructs.cstree import build_from_edges, build_from_degrees, tree_depth

edges = build_from_edges("#A,AB,AC,BD,BE,CF,DG,DH,EI,IJ,##")
degrees = build_from_degrees("A2B2C1D2E1F0G0H0I1J0")

tree_depth(edges)     # 5
tree_depth(degrees)   # 5
```

Edge input lists the edges from the top of the tree down, two characters per
pair. The second character of the first pair is the root (written `#A` by
convention), later pairs are parent-child edges, and a pair whose second
character is `#` ends the list. Commas are optional. A `ValueError` is raised
for an edge whose parent has not appeared yet, or when the closing `##` is
missing.

Degree input lists every node in level order, each followed by its number of
children as one digit. A `ValueError` is raised for a degree that is not a
digit, or when the sequence runs out before every child is given.

The nodes are `CSNode` dataclasses with `data`, `first_child` and
`next_sibling` fields.

## Graphs

```python
from dstructs.graph import Graph

g = Graph(4, [(0, 1), (1, 2), (2, 3)])
g.has_path(0, 3, 3)   # True
g.has_path(0, 3, 2)   # False
g.neighbours(1)       # [2]
```

Edges are directed; to model an undirected graph, add each edge in both
directions. `has_path(start, end, length)` searches only for simple paths,
which never visit a vertex twice. `neighbours(vertex)` lists the targets of a
vertex's arcs, most recently added first. A graph holds at most 20 vertices,
numbered from 0; a larger vertex count or an unknown vertex raises
`ValueError`.

## Linked lists

```python
from dstructs.linklist import LinkedList

values = LinkedList([6, 7, 10, 1, 2, 3, 4, 5, 8, 9])
values.selection_sort()
list(values)              # [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]

values.delete_range(4, 8)
list(values)              # [1, 2, 3, 4, 9, 10]
len(values)               # 6
```

`delete_range(mink, maxk)` is meant for a sorted list. It skips the leading
values that are at most `mink`, then removes the run of values that follows up
to the first one greater than `maxk`.

## Command-line demos

Each module has a small demonstration command:

```
dstructs-bitree [SEQUENCE ...]
dstructs-cstree [--edges EDGES] [--degrees DEGREES]
dstructs-graph
dstructs-linklist [VALUE ...] [--min MINK] [--max MAXK]
```

- `dstructs-bitree` prints every traversal, the node count and the depth for
  each sequence given. With no arguments it shows the sample tree above and
  then asks for one sequence.
- `dstructs-cstree` prints the depth of the tree built from an edge list and
  from a degree sequence, asking for whichever is not given.
- `dstructs-graph` runs a fixed set of path queries on a built-in sample graph;
  it takes no input of its own.
- `dstructs-linklist` prints the list, the sorted list and the list after
  `delete_range`. Without values it uses the sample list above; `--min` and
  `--max` default to 4 and 8.

## What it does not do

The structures live in memory only: there is no way to save or load them, no
drawing of trees or graphs, and the graph command cannot be given a graph of
your own.