"""Singly linked list and a few operations on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: Any
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({to_values(self)!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; return its head, or None if empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def move_last_to_front(head: Optional[ListNode]) -> Optional[ListNode]:
    """Move the last node to the front and return the new head."""
    if head is None or head.next is None:
        return head
    node = head
    while node.next.next is not None:
        node = node.next
    last = node.next
    node.next = None
    last.next = head
    return last


def move_last_k_to_front(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Move the last ``k`` nodes, in order, to the front and return the new head."""
    nodes = list(_nodes(head))
    length = len(nodes)
    if not 0 <= k <= length:
        raise ValueError(f"k={k} is outside 0..{length}")
    if k in (0, length):
        return head
    new_tail = nodes[length - k - 1]
    new_head = nodes[length - k]
    new_tail.next = None
    nodes[-1].next = head
    return new_head


def intersection(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet."""
    length_a = sum(1 for _ in _nodes(head_a))
    length_b = sum(1 for _ in _nodes(head_b))
    node_a, node_b = head_a, head_b
    for _ in range(length_a - length_b):
        node_a = node_a.next
    for _ in range(length_b - length_a):
        node_b = node_b.next
    while node_a is not node_b:
        node_a = node_a.next
        node_b = node_b.next
    return node_a