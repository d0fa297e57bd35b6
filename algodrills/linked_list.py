"""Singly linked list drills: arithmetic, merging, cycles, reversal and copying."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class FlatNode:
    """A node of a list of sorted columns: ``next`` links columns, ``bottom`` links within one."""

    data: int = 0
    next: FlatNode | None = field(default=None, repr=False)
    bottom: FlatNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class RandomNode:
    """A list node that also points at an arbitrary node of the same list."""

    val: int = 0
    next: RandomNode | None = field(default=None, repr=False)
    random: RandomNode | None = field(default=None, repr=False)


def _walk(head: Any) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic linked list in order."""
    return [node.val for node in _walk(head)]


def add_two_numbers(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while first is not None or second is not None or carry:
        if first is not None:
            carry += first.val
            first = first.next
        if second is not None:
            carry += second.val
            second = second.next
        tail.next = ListNode(carry % 10)
        carry //= 10
        tail = tail.next
    return dummy.next


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list without access to the head.

    The node takes over its successor's value and link, so it cannot be the tail.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node without the head")
    node.val = successor.val
    node.next = successor.next


def merge_two_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list."""
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; with an even count, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the n-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("the list is shorter than n")
        fast = fast.next
    if fast is None:
        return head.next  # type: ignore[union-attr]
    slow = head
    while fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next
    slow.next = slow.next.next  # type: ignore[union-attr]
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            fast = head
            while slow is not fast:
                slow = slow.next  # type: ignore[union-attr]
                fast = fast.next  # type: ignore[union-attr]
            return slow
    return None


def has_cycle(head: ListNode | None) -> bool:
    """True if following ``next`` from ``head`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _merge_bottom(first: FlatNode | None, second: FlatNode | None) -> FlatNode | None:
    dummy = FlatNode()
    tail = dummy
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.bottom = first
            first = first.bottom
        else:
            tail.bottom = second
            second = second.bottom
        tail = tail.bottom
    tail.bottom = first if first is not None else second
    return dummy.bottom


def flatten(root: FlatNode | None) -> FlatNode | None:
    """Merge every sorted column into one sorted chain linked by ``bottom``."""
    columns = list(_walk(root))
    if len(columns) <= 1:
        return root
    merged: FlatNode | None = columns[-1]
    for column in reversed(columns[:-1]):
        merged = _merge_bottom(column, merged)
    return merged


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by two lists, or None."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def is_palindrome(head: ListNode | None) -> bool:
    """True if the values read the same both ways; reverses the second half in place."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    back = reverse_list(slow)
    front = head
    while back is not None:
        if back.val != front.val:  # type: ignore[union-attr]
            return False
        back = back.next
        front = front.next  # type: ignore[union-attr]
    return True


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a shorter tail is left as is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if head is None or head.next is None or k == 1:
        return head
    size = sum(1 for _ in _walk(head))
    dummy = ListNode()
    tail = dummy
    current: ListNode | None = head
    while size >= k:
        group_head: ListNode | None = None
        group_tail = current
        for _ in range(k):
            following = current.next  # type: ignore[union-attr]
            current.next = group_head  # type: ignore[union-attr]
            group_head = current
            current = following
        tail.next = group_head
        tail = group_tail  # type: ignore[assignment]
        size -= k
    tail.next = current
    return dummy.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or head.next is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    current = tail
    for _ in range(length - k % length):
        current = current.next  # type: ignore[assignment]
    new_head = current.next
    current.next = None
    return new_head


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a list whose nodes carry random pointers."""
    if head is None:
        return None
    copies = {node: RandomNode(node.val) for node in _walk(head)}
    for node, copy in copies.items():
        copy.next = copies.get(node.next)
        copy.random = copies.get(node.random)
    return copies[head]