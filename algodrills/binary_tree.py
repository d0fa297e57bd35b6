"""Binary tree drills: traversals, views, ancestors and shape checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def tree_from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where None marks a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    pending: deque[TreeNode] = deque([root])
    rest = iter(items[1:])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(rest)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _by_distance(root: TreeNode | None, keep_first: bool) -> list[int]:
    if root is None:
        return []
    columns: dict[int, int] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        if keep_first:
            columns.setdefault(distance, node.val)
        else:
            columns[distance] = node.val
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
    return [columns[distance] for distance in sorted(columns)]


def bottom_view(root: TreeNode | None) -> list[int]:
    """Values seen from below, left to right; the later node in level order wins."""
    return _by_distance(root, keep_first=False)


def top_view(root: TreeNode | None) -> list[int]:
    """Values seen from above, left to right; the first node in level order wins."""
    return _by_distance(root, keep_first=True)


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Left, node, right order, computed with an explicit stack."""
    results: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        results.append(node.val)
        node = node.right
    return results


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Node, left, right order, computed with an explicit stack."""
    if root is None:
        return []
    results: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        results.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return results


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Left, right, node order, by reversing a node-right-left walk."""
    if root is None:
        return []
    results: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        results.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    results.reverse()
    return results


def _side_view(root: TreeNode | None, right_first: bool) -> list[int]:
    results: list[int] = []

    def visit(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        if level == len(results):
            results.append(node.val)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        visit(first, level + 1)
        visit(second, level + 1)

    visit(root, 0)
    return results


def left_view(root: TreeNode | None) -> list[int]:
    """The leftmost value of each level, top to bottom."""
    return _side_view(root, right_first=False)


def right_side_view(root: TreeNode | None) -> list[int]:
    """The rightmost value of each level, top to bottom."""
    return _side_view(root, right_first=True)


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """The deepest node having both ``p`` and ``q`` beneath it (a node counts as its own)."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _height_and_diameter(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(node.left)
    right_height, right_diameter = _height_and_diameter(node.right)
    return (
        max(left_height, right_height) + 1,
        max(left_height + right_height, left_diameter, right_diameter),
    )


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def _balanced_height(node: TreeNode | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    right = _balanced_height(node.right)
    if left is None or right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    return _balanced_height(root) is not None


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """True if both trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values level by level, each level left to right."""
    if root is None:
        return []
    results: list[list[int]] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        results.append(level)
    return results


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Values level by level, alternating left-to-right and right-to-left."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(level_order(root))
    ]