"""Classic data structures: linked list variations, binary and AVL trees, graphs and disjoint sets."""

__version__ = "0.1.0"