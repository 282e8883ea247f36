"""Binary search trees: generation, validation, queries and updates."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional

from algobox.tree import TreeNode, inorder, preorder


def generate_trees(n: int) -> list[Optional[TreeNode]]:
    """Return every structurally distinct BST holding the values 1..n.

    Subtrees are shared between the returned trees.
    """
    if n == 0:
        return []

    def build(start: int, end: int) -> list[Optional[TreeNode]]:
        if start > end:
            return [None]
        trees: list[Optional[TreeNode]] = []
        for val in range(start, end + 1):
            lefts = build(start, val - 1)
            rights = build(val + 1, end)
            trees.extend(TreeNode(val, left, right) for left in lefts for right in rights)
        return trees

    return build(1, n)


def count_trees(n: int) -> int:
    """Return how many structurally distinct BSTs hold the values 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [1] + [0] * n
    for size in range(1, n + 1):
        counts[size] = sum(counts[root - 1] * counts[size - root] for root in range(1, size + 1))
    return counts[n]


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a BST with strictly increasing inorder values."""
    stack: list[tuple[Optional[TreeNode], float, float]] = [(root, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if not low < node.val < high:
            return False
        stack.append((node.left, low, node.val))
        stack.append((node.right, node.val, high))
    return True


class BSTIterator:
    """Iterate over a BST's values in ascending order, lazily."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: list[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def next(self) -> int:
        """Return the next smallest value; raise StopIteration when exhausted."""
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.val

    def has_next(self) -> bool:
        """Tell whether another value remains."""
        return bool(self._stack)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) in the tree."""
    values = sorted(preorder(root))
    if not 1 <= k <= len(values):
        raise IndexError(f"k={k} is out of range for a tree of {len(values)} nodes")
    return values[k - 1]


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node of the BST that has both ``p`` and ``q`` below or at it."""
    node = root
    while node is not None:
        if node.val < p.val and node.val < q.val:
            node = node.right
        elif node.val > p.val and node.val > q.val:
            node = node.left
        else:
            return node
    return None


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove ``key`` from the BST and return the new root."""
    if root is None:
        return None
    if root.val > key:
        root.left = delete_node(root.left, key)
    elif root.val < key:
        root.right = delete_node(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def find_target(root: Optional[TreeNode], k: int) -> bool:
    """Tell whether two distinct nodes of the BST sum to ``k``."""
    values = inorder(root)
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == k:
            return True
        if total < k:
            low += 1
        else:
            high -= 1
    return False


def search(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val``, or ``None``."""
    node = root
    while node is not None:
        if node.val == val:
            return node
        node = node.right if val > node.val else node.left
    return None


def insert(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` as a new leaf and return the root; equal values go right."""
    new_node = TreeNode(val)
    if root is None:
        return new_node
    node = root
    while True:
        if node.val > val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def from_preorder(preorder: Iterable[int]) -> Optional[TreeNode]:
    """Build the BST whose preorder traversal is ``preorder``."""
    root: Optional[TreeNode] = None
    for val in preorder:
        root = insert(root, val)
    return root