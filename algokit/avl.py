"""Self-balancing AVL search tree that allows repeated values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node holding one value and the height of its subtree."""

    value: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _balance(node: AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update_height(node)
    factor = _balance(node)
    if factor >= 2:
        assert node.left is not None
        if _balance(node.left) <= -1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor <= -2:
        assert node.right is not None
        if _balance(node.right) >= 1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: AVLNode | None, value: Any) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value <= node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _pop_max(node: AVLNode) -> tuple[AVLNode | None, Any]:
    if node.right is None:
        return node.left, node.value
    node.right, value = _pop_max(node.right)
    return _rebalance(node), value


def _erase(node: AVLNode | None, value: Any) -> tuple[AVLNode | None, bool]:
    if node is None:
        return None, False
    if node.value == value:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.left, node.value = _pop_max(node.left)
        return _rebalance(node), True
    if value < node.value:
        node.left, found = _erase(node.left, value)
    else:
        node.right, found = _erase(node.right, value)
    return _rebalance(node), found


def _contains(node: AVLNode | None, value: Any) -> bool:
    while node is not None:
        if node.value == value:
            return True
        node = node.left if value < node.value else node.right
    return False


def _inorder(node: AVLNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _dot_lines(node: AVLNode) -> Iterator[str]:
    yield f"{node.value};"
    for child in (node.left, node.right):
        if child is not None:
            yield f"{child.value};"
            yield f"{node.value}->{child.value};"
            yield from _dot_lines(child)


class AVLTree:
    """An AVL tree; equal values are kept and go to the left."""

    def __init__(self) -> None:
        self._root: AVLNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return _contains(self._root, value)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        return _inorder(self._root)

    @property
    def root_node(self) -> AVLNode | None:
        """The root node, or None for an empty tree."""
        return self._root

    def root(self) -> Any:
        """Return the value at the root."""
        if self._root is None:
            raise IndexError("root of an empty tree")
        return self._root.value

    def height(self) -> int:
        """Return the tree's height; an empty tree has height 0."""
        return _height(self._root)

    def is_empty(self) -> bool:
        return self._size == 0

    def insert(self, value: Any) -> None:
        """Add one occurrence of ``value``."""
        self._root = _insert(self._root, value)
        self._size += 1

    def erase(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return whether it was present."""
        self._root, found = _erase(self._root, value)
        if found:
            self._size -= 1
        return found

    def to_graphviz(self, name: str) -> str:
        """Render the tree as a GraphViz digraph; an empty tree gives ''."""
        if self._root is None:
            return ""
        lines = [f"digraph {name} {{", *_dot_lines(self._root), "}"]
        return "\n".join(lines) + "\n"