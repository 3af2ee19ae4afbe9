"""An unbalanced binary search tree of distinct, comparable values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A tree node holding one value and links to its two subtrees."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def _insert(node: Node | None, value: Any) -> Node:
    if node is None:
        return Node(value)
    if value < node.data:
        node.left = _insert(node.left, value)
    elif value > node.data:
        node.right = _insert(node.right, value)
    return node


def _min_node(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Node | None, value: Any) -> Node | None:
    if node is None:
        return None
    if value < node.data:
        node.left = _delete(node.left, value)
    elif value > node.data:
        node.right = _delete(node.right, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        node.data = _min_node(node.right).data
        node.right = _delete(node.right, node.data)
    return node


def _in_order(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.data
        yield from _in_order(node.right)


def _pre_order(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.data


def _height(node: Node | None) -> int:
    return -1 if node is None else max(_height(node.left), _height(node.right)) + 1


def _balanced(node: Node | None) -> bool:
    if node is None:
        return True
    return (
        abs(_height(node.left) - _height(node.right)) <= 1
        and _balanced(node.left)
        and _balanced(node.right)
    )


class BinarySearchTree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert value; return False when it was already in the tree."""
        if value in self:
            return False
        self.root = _insert(self.root, value)
        return True

    def delete(self, value: Any) -> bool:
        """Remove value; return False when it was not in the tree."""
        if value not in self:
            return False
        self.root = _delete(self.root, value)
        return True

    def search(self, value: Any) -> Node | None:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None and node.data != value:
            node = node.left if value < node.data else node.right
        return node

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return _in_order(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def in_order(self) -> list[Any]:
        return list(_in_order(self.root))

    def pre_order(self) -> list[Any]:
        return list(_pre_order(self.root))

    def post_order(self) -> list[Any]:
        return list(_post_order(self.root))

    def level_order(self) -> list[Any]:
        result: list[Any] = []
        pending = deque([self.root] if self.root is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.data)
            pending.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def find_min(self) -> Any:
        """Return the smallest value; raise ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("cannot find the minimum of an empty tree")
        return _min_node(self.root).data

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 when empty."""
        return _height(self.root)

    def is_balanced(self) -> bool:
        """True when every node's subtree heights differ by at most one."""
        return _balanced(self.root)