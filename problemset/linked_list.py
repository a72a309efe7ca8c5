"""Singly linked lists and reversing their nodes in groups of k."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    val: int
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; None when there are none."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        values: list[int] = []
        node: Optional[ListNode] = self
        while node is not None:
            values.append(node.val)
            node = node.next
        return values


def list_length(head: Optional[ListNode]) -> int:
    """Count the nodes of the list starting at ``head``."""
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the nodes in consecutive groups of ``k``; a short tail stays as it is."""
    if k < 1:
        raise ValueError("k must be positive")
    groups = list_length(head) // k
    anchor = ListNode(0, head)
    tail = anchor
    for _ in range(groups):
        group_head = tail.next
        previous: Optional[ListNode] = None
        current = group_head
        for _ in range(k):
            current.next, previous, current = previous, current, current.next
        tail.next = previous
        group_head.next = current
        tail = group_head
    return anchor.next