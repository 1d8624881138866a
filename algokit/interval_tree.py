"""Interval tree on a red-black tree, for finding overlapping ranges."""

from __future__ import annotations

from algokit.rbtree import Color, RBNode, RBTreeBase

_NONE = float("-inf")


class IntervalNode(RBNode):
    """A node holding a closed range and the largest upper bound below it."""

    def __init__(self, low: int, high: int) -> None:
        super().__init__(Color.RED)
        self.low = low
        self.high = high
        self.m: float = high

    def __repr__(self) -> str:
        return f"IntervalNode(low={self.low!r}, high={self.high!r}, m={self.m!r})"


def _m(node: RBNode | None) -> float:
    return _NONE if node is None else node.m  # type: ignore[attr-defined]


def _recompute(node: RBNode) -> None:
    node.m = max(node.high, _m(node.left), _m(node.right))  # type: ignore[attr-defined]


class IntervalTree(RBTreeBase):
    """Closed ranges [low, high] ordered by their lower bound."""

    def __init__(self) -> None:
        super().__init__()

    def insert(self, low: int, high: int) -> IntervalNode:
        """Add the range [low, high] and return its node."""
        node = IntervalNode(low, high)
        current = self._root
        if current is None:
            self._root = node
        else:
            while True:
                if node.m > current.m:  # type: ignore[attr-defined]
                    current.m = node.m  # type: ignore[attr-defined]
                if low < current.low:  # type: ignore[attr-defined]
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

    def lookup(self, low: int, high: int) -> IntervalNode | None:
        """Return one stored range overlapping [low, high], or None."""
        node = self._root
        while node is not None and (
            low > node.high or node.low > high  # type: ignore[attr-defined]
        ):
            if node.left is not None and low <= _m(node.left):
                node = node.left
            else:
                node = node.right
        return node  # type: ignore[return-value]

    def delete(self, node: IntervalNode | None) -> None:
        """Remove ``node``'s range; None is ignored.

        A node with two children takes over its predecessor's range and the
        predecessor is unlinked instead. Raises ValueError if the node does
        not belong to this tree.
        """
        if node is None:
            return
        if not self._owns(node):
            raise ValueError("node is not in this tree")
        target: RBNode = node
        if node.left is not None and node.right is not None:
            pred = self._maximum_node(node.left)
            node.low = pred.low  # type: ignore[attr-defined]
            node.high = pred.high  # type: ignore[attr-defined]
            target = pred
        target.m = max(_m(target.left), _m(target.right))  # type: ignore[attr-defined]
        ancestor = target.parent
        while ancestor is not None:
            _recompute(ancestor)
            ancestor = ancestor.parent
        self._remove(target)

    def render(self) -> str:
        """Draw the tree sideways with each node's range and its m value."""
        return self._render(
            lambda n: f"[{n.low} {n.high}, m->{n.m}]"  # type: ignore[attr-defined]
        )

    def _rotated(self, node: RBNode, parent: RBNode) -> None:
        parent.m = node.m  # type: ignore[attr-defined]
        _recompute(node)

    def _check_node(self, node: RBNode) -> None:
        expected = max(node.high, _m(node.left), _m(node.right))  # type: ignore[attr-defined]
        if node.m != expected:  # type: ignore[attr-defined]
            raise ValueError(f"m value {node.m} should be {expected}")  # type: ignore[attr-defined]