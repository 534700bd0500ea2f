"""Classic data structures: binary trees, child-sibling trees, graphs and linked lists."""

__version__ = "0.1.0"
__all__ = ["bitree", "cstree", "graph", "linklist"]