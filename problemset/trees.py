"""Binary tree problems: path sums, diameter and leaf sequences."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _postorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[tuple[Optional[TreeNode], bool]] = [(root, False)]
    while stack:
        node, visited = stack.pop()
        if node is None:
            continue
        if visited:
            yield node
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    gains: dict[TreeNode, int] = {}
    best: Optional[int] = None
    for node in _postorder(root):
        left = gains.get(node.left, 0)
        right = gains.get(node.right, 0)
        branch = max(node.val, node.val + max(left, right))
        through = max(branch, node.val + left + right)
        best = through if best is None else max(best, through)
        gains[node] = branch
    assert best is not None
    return best


def has_path_sum(root: Optional[TreeNode], total: int) -> bool:
    """Return True when some root-to-leaf path adds up to ``total``."""
    if root is None:
        return False
    stack = [(root, total)]
    while stack:
        node, remaining = stack.pop()
        if node.left is None and node.right is None:
            if remaining == node.val:
                return True
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, remaining - node.val))
    return False


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path in the tree."""
    heights: dict[TreeNode, int] = {}
    best = 0
    for node in _postorder(root):
        left = heights.get(node.left, 0)
        right = heights.get(node.right, 0)
        heights[node] = max(left, right) + 1
        best = max(best, left + right + 1)
    return best


def leaf_values(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the leaves from left to right."""
    leaves: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            leaves.append(node.val)
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return leaves


def leaf_similar(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same leaf value sequence."""
    return leaf_values(first) == leaf_values(second)