"""Binary search tree drills: search, bounds, order statistics and serialisation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from math import inf

from algodrills.binary_tree import TreeNode

_EMPTY = "NULL"


class BSTIterator:
    """Iterate the values of a binary search tree in ascending order, lazily."""

    def __init__(self, root: TreeNode | None) -> None:
        self._stack: list[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: TreeNode | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.val

    def has_next(self) -> bool:
        """True while values remain."""
        return bool(self._stack)


def lca_bst(root: TreeNode | None, n1: int, n2: int) -> TreeNode | None:
    """The lowest node whose value lies between ``n1`` and ``n2`` on the search paths."""
    low, high = min(n1, n2), max(n1, n2)
    node = root
    while node is not None:
        if low > node.val:
            node = node.right
        elif high < node.val:
            node = node.left
        else:
            return node
    return None


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted values."""

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        mid = start + (end - start) // 2
        return TreeNode(nums[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(nums) - 1)


def is_valid_bst(root: TreeNode | None) -> bool:
    """True if an inorder walk yields strictly increasing values."""
    previous: int | None = None
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if previous is not None and node.val <= previous:
            return False
        previous = node.val
        node = node.right
    return True


def inorder_successor(root: TreeNode | None, node: TreeNode) -> TreeNode | None:
    """The node holding the smallest value greater than ``node``'s, or None."""
    successor: TreeNode | None = None
    current = root
    while current is not None:
        if current.val > node.val:
            successor = current
            current = current.left
        else:
            current = current.right
    return successor


def connect(root: TreeNode | None) -> TreeNode | None:
    """Set each node's ``next`` attribute to its right neighbour on the same level.

    The last node of each level gets None. Returns ``root``.
    """
    if root is None:
        return None
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = list(queue)
        queue.clear()
        for node, neighbour in zip(level, [*level[1:], None]):
            node.next = neighbour  # type: ignore[attr-defined]
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return root


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """The node holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def find_ceil(root: TreeNode | None, key: int) -> int:
    """Smallest value not below ``key``, or -1 if there is none."""
    ceiling = -1
    node = root
    while node is not None:
        if node.val == key:
            return key
        if node.val > key:
            ceiling = node.val
            node = node.left
        else:
            node = node.right
    return ceiling


def find_floor(root: TreeNode | None, key: int) -> int:
    """Largest value not above ``key``, or -1 if there is none."""
    floor = -1
    node = root
    while node is not None:
        if node.val == key:
            return key
        if node.val > key:
            node = node.left
        else:
            floor = node.val
            node = node.right
    return floor


def kth_largest(root: TreeNode | None, k: int) -> int:
    """The k-th largest value (1-based)."""
    stack: list[TreeNode] = []
    node = root
    remaining = k
    while remaining >= 1 and (stack or node is not None):
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        remaining -= 1
        if remaining == 0:
            return node.val
        node = node.left
    raise ValueError("k is out of range for this tree")


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """The k-th smallest value (1-based)."""
    if k >= 1:
        for position, value in enumerate(BSTIterator(root), start=1):
            if position == k:
                return value
    raise ValueError("k is out of range for this tree")


def _bst_info(node: TreeNode | None) -> tuple[bool, int, float, float]:
    if node is None:
        return True, 0, inf, -inf
    if node.left is None and node.right is None:
        return True, 1, node.val, node.val
    left_ok, left_size, left_low, left_high = _bst_info(node.left)
    right_ok, right_size, right_low, right_high = _bst_info(node.right)
    if left_ok and right_ok and left_high < node.val < right_low:
        return (
            True,
            left_size + right_size + 1,
            min(left_low, node.val),
            max(right_high, node.val),
        )
    return False, max(left_size, right_size), 0, 0


def largest_bst(root: TreeNode | None) -> int:
    """Number of nodes in the largest subtree that is a binary search tree."""
    return _bst_info(root)[1]


def serialize(root: TreeNode | None) -> str:
    """Encode a tree as comma-terminated preorder values, NULL for a missing child."""
    parts: list[str] = []

    def visit(node: TreeNode | None) -> None:
        if node is None:
            parts.append(_EMPTY)
            return
        parts.append(str(node.val))
        visit(node.left)
        visit(node.right)

    visit(root)
    return "".join(f"{part}," for part in parts)


def deserialize(data: str) -> TreeNode | None:
    """Decode the text produced by :func:`serialize`."""
    tokens = data.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    stream = iter(tokens)

    def build() -> TreeNode | None:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("serialised tree ends too early") from None
        if token == _EMPTY:
            return None
        node = TreeNode(int(token))
        node.left = build()
        node.right = build()
        return node

    return build()