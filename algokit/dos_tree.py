"""Dynamic order statistics on a red-black tree of integer keys."""

from __future__ import annotations

from algokit.rbtree import Color, RBNode, RBTreeBase


class DosNode(RBNode):
    """A node holding a key and the number of nodes in its subtree."""

    def __init__(self, key: int) -> None:
        super().__init__(Color.RED)
        self.key = key
        self.size = 1

    def __repr__(self) -> str:
        return f"DosNode(key={self.key!r}, size={self.size})"


def _size(node: RBNode | None) -> int:
    return 0 if node is None else node.size  # type: ignore[attr-defined]


class DosTree(RBTreeBase):
    """A red-black tree that selects the i-th smallest key in O(log n).

    Equal keys are allowed and are placed to the right.
    """

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return _size(self._root)

    def insert(self, key: int) -> DosNode:
        """Add ``key`` and return the node that holds it."""
        node = DosNode(key)
        current = self._root
        if current is None:
            self._root = node
        else:
            while True:
                current.size += 1  # type: ignore[attr-defined]
                if key < current.key:  # type: ignore[attr-defined]
                    if current.left is None:
                        current.left = node
                        break
                    current = current.left
                else:
                    if current.right is None:
                        current.right = node
                        break
                    current = current.right
            node.parent = current
        self._insert_fixup(node)
        return node

    def index(self, position: int) -> DosNode | None:
        """Return the node with the ``position``-th smallest key (1-based).

        Positions outside 1..len(tree) give None.
        """
        node = self._root
        while node is not None:
            rank = _size(node.left) + 1
            if position == rank:
                return node  # type: ignore[return-value]
            if position < rank:
                node = node.left
            else:
                position -= rank
                node = node.right
        return None

    def delete(self, node: DosNode) -> None:
        """Remove ``node``'s key from the tree.

        A node with two children takes over its predecessor's key and the
        predecessor is unlinked instead. Raises ValueError if the node does
        not belong to this tree.
        """
        if not self._owns(node):
            raise ValueError("node is not in this tree")
        target: RBNode = node
        if node.left is not None and node.right is not None:
            pred = self._maximum_node(node.left)
            node.key = pred.key  # type: ignore[attr-defined]
            target = pred
        walk: RBNode | None = target
        while walk is not None:
            walk.size -= 1  # type: ignore[attr-defined]
            walk = walk.parent
        self._remove(target)

    def render(self) -> str:
        """Draw the tree sideways with each node's key and subtree size."""
        return self._render(
            lambda n: f"[key:{n.key} size:{n.size}]"  # type: ignore[attr-defined]
        )

    def _rotated(self, node: RBNode, parent: RBNode) -> None:
        parent.size = _size(node)  # type: ignore[attr-defined]
        node.size = _size(node.left) + _size(node.right) + 1  # type: ignore[attr-defined]

    def _check_node(self, node: RBNode) -> None:
        expected = _size(node.left) + _size(node.right) + 1
        if _size(node) != expected:
            raise ValueError(f"subtree size {_size(node)} should be {expected}")