# classicds

A small collection of classic data structures in plain Python, with no
third-party dependencies.

## What is in it

- `classicds.variations`: `DoublyLinkedList` (nodes are `DoublyNode`, with
  forward and backward links; `reversed()` walks the back links) and
  `CircularList` (nodes are `CircularNode`; the last node points back to
  the head, and `get(n)` returns the 1-based `n`-th item, wrapping round the
  circle).
- `classicds.trees`: `BinaryTree`, shaped by explicit `insert_root`,
  `insert_left` and `insert_right` calls, with `preorder`, `inorder` and
  `postorder` generators; and `BinarySearchTree`, with `insert`, `delete`
  and `in`.
- `classicds.avl`: `AVLTree`, a search tree kept height-balanced by
  rotations, with `insert`, `delete`, `in`, `height`, `inorder` and a nested
  text form from `format`.
- `classicds.graphs`: `AdjacencyMatrixGraph` (optionally directed, with
  weights and `edge_count`), `AdjacencyListGraph` (undirected, neighbours
  kept in ascending order, optional weights) and `IncidenceMatrixGraph`.
  Each can be read from a text file with `from_file` and printed as a table
  with `format`. Adding an edge twice raises `DuplicateEdgeError`; a vertex
  out of range raises `IndexError`.
- `classicds.disjoint_sets`: `ListDisjointSets`, where each set is a member
  list and every element records its representative; `ForestDisjointSets`,
  with union by height and path compression; and `connected_components`,
  which turns a graph into one set per component.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Lists hand back their nodes, so that later insertions and deletions can say
where they go:

```python
from classicds.variations import CircularList, DoublyLinkedList

items = DoublyLinkedList()
for value in (3, 2, 1):
    items.insert_first(value)
print(list(items), list(reversed(items)))  # [1, 2, 3] [3, 2, 1]

ring = CircularList()
for value in (4, 3, 2, 1):
    ring.insert_first(value)
print(ring.get(13))  # 1
```

Search trees report duplicates and missing items:

```python
from classicds.avl import AVLTree
from classicds.trees import BinarySearchTree

bst = BinarySearchTree()
for value in (10, 6, 14, 5, 7):
    bst.insert(value)
print(bst.insert(6))       # False: already present
bst.delete(6)              # KeyError if the item is missing
print(list(bst.inorder())) # [5, 7, 10, 14]

tree = AVLTree()
for value in (2, 20, 28, 36, 32, 29, 7, 15, 12):
    tree.insert(value)
print(29 in tree, tree.height())
print(tree.format())
```

Graph files hold whitespace-separated integers: the vertex count, then one
`u v` pair per edge (`u v w` when `weighted=True`). An incidence-matrix file
starts with the vertex count and the edge count.

```python
from classicds.disjoint_sets import ForestDisjointSets, connected_components
from classicds.graphs import AdjacencyListGraph

graph = AdjacencyListGraph.from_file("graph.txt")
print(graph.format())
print(connected_components(graph).format())

sets = ForestDisjointSets(7)
sets.union(1, 3)
sets.union(2, 4)
print(sets.find(4), sets.groups())
```

## What it does not do

The package is a library only: it installs no command-line program, and it
has no stack, queue, singly linked list or heap containers.