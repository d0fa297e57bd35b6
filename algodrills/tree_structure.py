"""Binary tree structure drills: symmetry, flattening, path sums and reconstruction."""

from __future__ import annotations

from collections.abc import Sequence
from math import inf

from algodrills.binary_tree import TreeNode


def _mirrored(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.val == right.val
        and _mirrored(left.left, right.right)
        and _mirrored(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """True if the tree is a mirror image of itself around its centre."""
    return _mirrored(root, root)


def flatten_tree(root: TreeNode | None) -> None:
    """Rewire the tree in place into a right-leaning chain in preorder."""
    node = root
    while node is not None:
        if node.left is not None:
            rightmost = node.left
            while rightmost.right is not None:
                rightmost = rightmost.right
            rightmost.right = node.right
            node.right = node.left
            node.left = None
        node = node.right


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum along any path between two nodes; 0 for an empty tree."""
    if root is None:
        return 0
    best = -inf

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = gain(node.left)
        right = gain(node.right)
        alone = node.val
        with_left = left + node.val
        with_right = right + node.val
        through = left + right + node.val
        best = max(best, alone, with_left, with_right, through)
        return max(0, alone, with_left, with_right)

    gain(root)
    return int(best)


def _index_inorder(order: Sequence[int], inorder: Sequence[int]) -> dict[int, int]:
    if len(order) != len(inorder):
        raise ValueError("both traversals must hold the same number of values")
    index = {value: position for position, value in enumerate(inorder)}
    if len(index) != len(inorder) or set(order) != set(index):
        raise ValueError("traversals must hold the same distinct values")
    return index


def build_tree_in_post(inorder: Sequence[int], postorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    index = _index_inorder(postorder, inorder)
    values = reversed(postorder)

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        node = TreeNode(next(values))
        split = index[node.val]
        node.right = build(split + 1, end)
        node.left = build(start, split - 1)
        return node

    return build(0, len(inorder) - 1)


def build_tree_pre_in(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    index = _index_inorder(preorder, inorder)
    values = iter(preorder)

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        node = TreeNode(next(values))
        split = index[node.val]
        node.left = build(start, split - 1)
        node.right = build(split + 1, end)
        return node

    return build(0, len(inorder) - 1)