"""Binary trees built from level-order input, their traversals, and a BST."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator

NULL = -1
"""Marker for a missing child in level-order input."""

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _make(value: int | None) -> TreeNode | None:
    if value is None or value == NULL:
        return None
    return TreeNode(value)


def build_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from values listed level by level.

    ``-1`` (or ``None``) stands for a missing child. Children are handed out
    in pairs to the present nodes in the order they were created. Values left
    over once no node is waiting for children raise ``ValueError``.
    """
    items = iter(values)
    root = _make(next(items, None))
    if root is None:
        return None
    waiting: deque[TreeNode] = deque([root])
    for left in items:
        if not waiting:
            raise ValueError("level-order values left over with no parent")
        parent = waiting.popleft()
        parent.left = _make(left)
        if parent.left is not None:
            waiting.append(parent.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        parent.right = _make(right)  # type: ignore[arg-type]
        if parent.right is not None:
            waiting.append(parent.right)
    return root


def _inorder(root: TreeNode | None) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def inorder(root: TreeNode | None) -> list[int]:
    """Return values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Return values in node, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list[int]:
    """Return values in left, right, node order."""
    reversed_order: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_order[::-1]


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def count_leaves(root: TreeNode | None) -> int:
    """Return the number of nodes without children."""
    return sum(
        1
        for level in _levels(root)
        for node in level
        if node.left is None and node.right is None
    )


def level_order(root: TreeNode | None) -> list[int]:
    """Return values breadth first, left to right within each level."""
    return [node.value for level in _levels(root) for node in level]


def vertical_order(root: TreeNode | None) -> list[list[int]]:
    """Group values by horizontal distance from the root, leftmost column first.

    Within a column values keep breadth-first order.
    """
    columns: dict[int, list[int]] = {}
    queue: deque[tuple[TreeNode, int]] = deque()
    if root is not None:
        queue.append((root, 0))
    while queue:
        node, distance = queue.popleft()
        columns.setdefault(distance, []).append(node.value)
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
    return [columns[distance] for distance in sorted(columns)]


def _find_lca(node: TreeNode | None, first: int, second: int) -> TreeNode | None:
    if node is None or node.value == first or node.value == second:
        return node
    left = _find_lca(node.left, first, second)
    right = _find_lca(node.right, first, second)
    if left is not None and right is not None:
        return node
    return left if left is not None else right


def lowest_common_ancestor(
    root: TreeNode | None, first: int, second: int
) -> int | None:
    """Return the value of the lowest common ancestor of two values.

    If only one of the values is in the tree, that value is returned; if
    neither is, the result is ``None``.
    """
    found = _find_lca(root, first, second)
    return None if found is None else found.value


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Add ``value``; tell whether it was new."""
        if self.root is None:
            self.root = TreeNode(value)
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return True
                node = node.right
            else:
                return False

    def search(self, key: int) -> TreeNode | None:
        """Return the node holding ``key``, or ``None``."""
        node = self.root
        while node is not None and node.value != key:
            node = node.left if key < node.value else node.right
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __iter__(self) -> Iterator[int]:
        """Yield values in ascending order."""
        return _inorder(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def lowest_common_ancestor(self, first: int, second: int) -> int | None:
        """Return the value where the search paths of the two keys part.

        ``None`` when the walk runs off the tree before they part.
        """
        node = self.root
        while node is not None:
            if first < node.value and second < node.value:
                node = node.left
            elif first > node.value and second > node.value:
                node = node.right
            else:
                return node.value
        return None