"""Binary trees: traversal, construction, flattening, serialization and distances."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in left, node, right order."""
    return [node.val for node in _inorder_nodes(root)]


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in node, left, right order."""
    return [node.val for node in _preorder_nodes(root)]


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its preorder and inorder traversals."""
    order = list(inorder)
    values = iter(preorder)

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo >= hi:
            return None
        try:
            val = next(values)
        except StopIteration:
            raise ValueError("preorder has fewer values than inorder") from None
        try:
            idx = order.index(val, lo, hi)
        except ValueError:
            raise ValueError(f"value {val!r} is missing from inorder") from None
        node = TreeNode(val)
        node.left = build(lo, idx)
        node.right = build(idx + 1, hi)
        return node

    return build(0, len(order))


def build_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals.

    Returns ``None`` when the two sequences differ in length.
    """
    order = list(inorder)
    post = list(postorder)
    if len(order) != len(post):
        return None
    position = {val: idx for idx, val in enumerate(order)}

    def build(in_lo: int, in_hi: int, post_lo: int, post_hi: int) -> Optional[TreeNode]:
        if in_lo > in_hi or post_lo > post_hi:
            return None
        val = post[post_hi]
        root_idx = position.get(val)
        if root_idx is None or not in_lo <= root_idx <= in_hi:
            raise ValueError(f"value {val!r} does not fit the inorder traversal")
        left_size = root_idx - in_lo
        node = TreeNode(val)
        node.left = build(in_lo, root_idx - 1, post_lo, post_lo + left_size - 1)
        node.right = build(root_idx + 1, in_hi, post_lo + left_size, post_hi - 1)
        return node

    return build(0, len(order) - 1, 0, len(post) - 1)


def flatten(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree in place into a right-leaning chain in preorder; return the root."""
    nodes = list(_preorder_nodes(root))
    for node, following in zip(nodes, nodes[1:] + [None]):
        node.left = None
        node.right = following
    return root


def serialize(root: Optional[TreeNode]) -> str:
    """Encode a tree level by level as comma-terminated tokens, ``#`` for empty."""
    if root is None:
        return ""
    parts: list[str] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append("#,")
        else:
            parts.append(f"{node.val},")
            queue.append(node.left)
            queue.append(node.right)
    return "".join(parts)


def deserialize(data: str) -> Optional[TreeNode]:
    """Decode a string produced by :func:`serialize` back into a tree."""
    if not data:
        return None
    tokens = data.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    stream = iter(tokens)

    def read() -> Optional[TreeNode]:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("serialized tree is truncated") from None
        if token == "#":
            return None
        return TreeNode(int(token))

    root = read()
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left = read()
        if node.left is not None:
            queue.append(node.left)
        node.right = read()
        if node.right is not None:
            queue.append(node.right)
    return root


def distance_k(root: Optional[TreeNode], target: Optional[TreeNode], k: int) -> list[int]:
    """Return the values of all nodes exactly ``k`` edges away from ``target``."""
    if root is None or target is None:
        return []

    parent: dict[int, TreeNode] = {}
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is not None:
                parent[child.val] = node
                queue.append(child)

    seen: set[int] = set()
    queue = deque([target])
    for _ in range(k):
        if not queue:
            break
        for _ in range(len(queue)):
            node = queue.popleft()
            seen.add(node.val)
            for neighbour in (node.left, node.right, parent.get(node.val)):
                if neighbour is not None and neighbour.val not in seen:
                    queue.append(neighbour)
    return [node.val for node in queue]