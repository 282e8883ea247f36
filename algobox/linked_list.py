"""Singly linked lists and k-way merging."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def linked_from(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; ``None`` when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def linked_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list from head to tail."""
    if head is None:
        return []
    return [node.val for node in head]


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted linked lists into one sorted list, relinking the given nodes."""
    sequence = count()
    heap = [(node.val, next(sequence), node) for node in lists if node is not None]
    heapq.heapify(heap)

    dummy = ListNode(-1)
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(sequence), node.next))
        tail.next = node
        tail = node
    return dummy.next