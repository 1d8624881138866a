"""Red-black tree core shared by the augmented search trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum

INDENT_STEP = 4


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


class RBNode:
    """A red-black tree node linked to its children and its parent."""

    def __init__(self, color: Color = Color.RED) -> None:
        self.color = color
        self.left: RBNode | None = None
        self.right: RBNode | None = None
        self.parent: RBNode | None = None


def _color(node: RBNode | None) -> Color:
    return Color.BLACK if node is None else node.color


def _sibling(node: RBNode) -> RBNode | None:
    parent = node.parent
    assert parent is not None
    return parent.right if node is parent.left else parent.left


def _grandparent(node: RBNode) -> RBNode:
    assert node.parent is not None and node.parent.parent is not None
    return node.parent.parent


def _uncle(node: RBNode) -> RBNode | None:
    assert node.parent is not None
    return _sibling(node.parent)


class RBTreeBase:
    """Balancing machinery for red-black trees.

    Subclasses place new nodes themselves, then call ``_insert_fixup``;
    to delete they reduce the node to one with at most one child and call
    ``_remove``. Rotations report to ``_rotated`` so that subclasses can
    keep per-node summaries up to date.
    """

    def __init__(self) -> None:
        self._root: RBNode | None = None

    def root(self) -> RBNode | None:
        """Return the root node, or None for an empty tree."""
        return self._root

    def check_invariants(self) -> int:
        """Verify the red-black properties and return the black height.

        The black height counts the black nodes on every path from the root
        down to a missing child. Raises ValueError on the first violation.
        """
        root = self._root
        if root is None:
            return 0
        if root.parent is not None:
            raise ValueError("root has a parent")
        if root.color is not Color.BLACK:
            raise ValueError("root is not black")
        return self._check_subtree(root)

    def _check_subtree(self, node: RBNode | None) -> int:
        if node is None:
            return 0
        for child in (node.left, node.right):
            if child is not None and child.parent is not node:
                raise ValueError("child does not link back to its parent")
        if node.color is Color.RED and Color.RED in (
            _color(node.left),
            _color(node.right),
        ):
            raise ValueError("red node has a red child")
        left_height = self._check_subtree(node.left)
        right_height = self._check_subtree(node.right)
        if left_height != right_height:
            raise ValueError("black heights of the subtrees differ")
        self._check_node(node)
        return left_height + (1 if node.color is Color.BLACK else 0)

    def _check_node(self, node: RBNode) -> None:
        """Check a subclass's per-node summary; the base has none."""

    def _rotated(self, node: RBNode, parent: RBNode) -> None:
        """Called after a rotation moved ``node`` below its new ``parent``."""

    def _owns(self, node: RBNode) -> bool:
        top = node
        while top.parent is not None:
            top = top.parent
        return top is self._root

    def _replace_node(self, old: RBNode, new: RBNode | None) -> None:
        parent = old.parent
        if parent is None:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _rotate_left(self, node: RBNode) -> None:
        pivot = node.right
        assert pivot is not None
        self._replace_node(node, pivot)
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
        node.parent = pivot
        self._rotated(node, pivot)

    def _rotate_right(self, node: RBNode) -> None:
        pivot = node.left
        assert pivot is not None
        self._replace_node(node, pivot)
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
        node.parent = pivot
        self._rotated(node, pivot)

    @staticmethod
    def _maximum_node(node: RBNode) -> RBNode:
        while node.right is not None:
            node = node.right
        return node

    def _insert_fixup(self, node: RBNode) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.color = Color.BLACK
                return
            if parent.color is Color.BLACK:
                return
            uncle = _uncle(node)
            if _color(uncle) is Color.RED:
                assert uncle is not None
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grand = _grandparent(node)
                grand.color = Color.RED
                node = grand
                continue
            grand = _grandparent(node)
            if node is parent.right and parent is grand.left:
                self._rotate_left(parent)
                assert node.left is not None
                node = node.left
            elif node is parent.left and parent is grand.right:
                self._rotate_right(parent)
                assert node.right is not None
                node = node.right
            parent = node.parent
            assert parent is not None
            grand = _grandparent(node)
            parent.color = Color.BLACK
            grand.color = Color.RED
            if node is parent.left:
                self._rotate_right(grand)
            else:
                self._rotate_left(grand)
            return

    def _delete_fixup(self, node: RBNode) -> None:
        while node.parent is not None:
            parent = node.parent
            sibling = _sibling(node)
            if _color(sibling) is Color.RED:
                assert sibling is not None
                parent.color = Color.RED
                sibling.color = Color.BLACK
                if node is parent.left:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)
            sibling = _sibling(node)
            assert sibling is not None
            children_black = (
                _color(sibling.left) is Color.BLACK
                and _color(sibling.right) is Color.BLACK
            )
            if (
                parent.color is Color.BLACK
                and sibling.color is Color.BLACK
                and children_black
            ):
                sibling.color = Color.RED
                node = parent
                continue
            if (
                parent.color is Color.RED
                and sibling.color is Color.BLACK
                and children_black
            ):
                sibling.color = Color.RED
                parent.color = Color.BLACK
                return
            if (
                node is parent.left
                and sibling.color is Color.BLACK
                and _color(sibling.left) is Color.RED
                and _color(sibling.right) is Color.BLACK
            ):
                assert sibling.left is not None
                sibling.color = Color.RED
                sibling.left.color = Color.BLACK
                self._rotate_right(sibling)
            elif (
                node is parent.right
                and sibling.color is Color.BLACK
                and _color(sibling.right) is Color.RED
                and _color(sibling.left) is Color.BLACK
            ):
                assert sibling.right is not None
                sibling.color = Color.RED
                sibling.right.color = Color.BLACK
                self._rotate_left(sibling)
            sibling = _sibling(node)
            assert sibling is not None
            sibling.color = parent.color
            parent.color = Color.BLACK
            if node is parent.left:
                assert sibling.right is not None
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                assert sibling.left is not None
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
            return

    def _remove(self, node: RBNode) -> None:
        """Unlink a node that has at most one child and rebalance."""
        assert node.left is None or node.right is None
        child = node.left if node.right is None else node.right
        if node.color is Color.BLACK:
            node.color = _color(child)
            self._delete_fixup(node)
        self._replace_node(node, child)
        if node.parent is None and child is not None:
            child.color = Color.BLACK
        node.left = node.right = node.parent = None

    def _render_lines(
        self, node: RBNode, indent: int, label: Callable[[RBNode], str]
    ) -> Iterator[str]:
        if node.right is not None:
            yield from self._render_lines(node.right, indent + INDENT_STEP, label)
        mark = "" if node.color is Color.BLACK else "*"
        yield " " * indent + mark + label(node)
        if node.left is not None:
            yield from self._render_lines(node.left, indent + INDENT_STEP, label)

    def _render(self, label: Callable[[RBNode], str]) -> str:
        """Draw the tree sideways, right subtree on top; red nodes get a '*'."""
        if self._root is None:
            return "<empty tree>\n"
        lines = self._render_lines(self._root, 0, label)
        return "".join(line + "\n" for line in lines) + "\n"