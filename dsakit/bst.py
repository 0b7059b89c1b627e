"""Binary trees: level-order parsing, search-tree insertion and queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_tree(text: str) -> Node | None:
    """Build a tree from space-separated level-order values, ``N`` for no child."""
    if not text or text[0] == "N":
        return None
    tokens = iter(text.split())
    root = Node(int(next(tokens)))
    pending: deque[Node] = deque([root])
    while pending:
        current = pending.popleft()
        left = next(tokens, None)
        if left is None:
            break
        if left != "N":
            current.left = Node(int(left))
            pending.append(current.left)
        right = next(tokens, None)
        if right is None:
            break
        if right != "N":
            current.right = Node(int(right))
            pending.append(current.right)
    return root


def lowest_common_ancestor(root: Node | None, n1: int, n2: int) -> Node:
    """Lowest node of a search tree lying between ``n1`` and ``n2``.

    Raises ValueError when the walk runs off the tree.
    """
    node = root
    while node is not None:
        if node.data < n1 and node.data < n2:
            node = node.right
        elif node.data > n1 and node.data > n2:
            node = node.left
        else:
            return node
    raise ValueError(f"no common ancestor of {n1} and {n2}")


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into a search tree and return its root.

    Values already present are left alone.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.data:
            if node.left is None:
                node.left = Node(value)
                break
            node = node.left
        elif value > node.data:
            if node.right is None:
                node.right = Node(value)
                break
            node = node.right
        else:
            break
    return root


def count_nodes_in_range(root: Node | None, low: int, high: int) -> int:
    """Count nodes of a search tree whose values lie in ``low..high``."""
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node.data == high and node.data == low:
            count += 1
        elif low <= node.data <= high:
            count += 1
            stack.append(node.left)
            stack.append(node.right)
        elif node.data < low:
            stack.append(node.right)
        else:
            stack.append(node.left)
    return count


def is_dead_end(root: Node | None) -> bool:
    """Tell whether some leaf has both neighbouring values taken.

    Neighbours count as taken when they are inner nodes of the tree, or
    zero, since no positive value can be inserted below one.
    """
    if root is None:
        return False
    taken = {0}
    leaves: list[int] = []
    queue: deque[Node] = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None and node.right is None:
            leaves.append(node.data)
            continue
        taken.add(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return any(leaf + 1 in taken and leaf - 1 in taken for leaf in leaves)