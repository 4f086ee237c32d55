"""Binary trees: iterative traversals and a level-order filled tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Iterator, List, Optional, Tuple


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def inorder(root: Optional[Node]) -> List[Any]:
    """Left, node, right, walked with an explicit stack."""
    out: List[Any] = []
    stack: List[Node] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.value)
        node = node.right
    return out


def preorder(root: Optional[Node]) -> List[Any]:
    """Node, left, right, walked with an explicit stack."""
    out: List[Any] = []
    stack: List[Node] = []
    node = root
    while node is not None or stack:
        while node is not None:
            out.append(node.value)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return out


def postorder(root: Optional[Node]) -> List[Any]:
    """Left, right, node, walked with an explicit stack."""
    out: List[Any] = []
    stack: List[Node] = []
    node = root
    last: Optional[Node] = None
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        peek = stack[-1]
        if peek.right is not None and peek.right is not last:
            node = peek.right
        else:
            out.append(peek.value)
            last = stack.pop()
    return out


class LevelOrderTree:
    """A binary tree filled level by level, left to right."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def _walk(self) -> Iterator[Tuple[Node, Optional[Node]]]:
        if self.root is None:
            return
        pending: Deque[Tuple[Node, Optional[Node]]] = deque([(self.root, None)])
        while pending:
            node, parent = pending.popleft()
            yield node, parent
            if node.left is not None:
                pending.append((node.left, node))
            if node.right is not None:
                pending.append((node.right, node))

    def insert(self, value: Any) -> None:
        """Place ``value`` in the first free child slot in level order."""
        new = Node(value)
        if self.root is None:
            self.root = new
            return
        for node, _ in self._walk():
            if node.left is None:
                node.left = new
                return
            if node.right is None:
                node.right = new
                return

    def delete(self, value: Any) -> None:
        """Replace the last node in level order holding ``value`` with the
        deepest, rightmost node's value, then remove that deepest node."""
        target: Optional[Node] = None
        last: Optional[Node] = None
        parent: Optional[Node] = None
        for node, par in self._walk():
            if node.value == value:
                target = node
            last, parent = node, par
        if target is None or last is None:
            raise KeyError(f"{value} not found")
        target.value = last.value
        if parent is None:
            self.root = None
        elif parent.left is last:
            parent.left = None
        else:
            parent.right = None

    def level_order(self) -> List[Any]:
        """Values from the root down, left to right on each level."""
        return [node.value for node, _ in self._walk()]