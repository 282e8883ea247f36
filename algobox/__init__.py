"""Classic algorithms on linked lists, binary trees, search spaces, graphs, arrays, strings and grids."""

__version__ = "0.1.0"
__all__ = ["arrays", "bst", "graphs", "grid", "linked_list", "search", "text", "tree"]