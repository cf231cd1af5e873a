"""Small practice problems: a binary search tree, a maze walk and triangles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` as a new leaf."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if node.value > value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right

    def _preorder(self) -> Iterator[Any]:
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def _inorder(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> list[Any]:
        """Return the values in root, left, right order."""
        return list(self._preorder())

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        return list(self._inorder())


def matching_positions(first: Sequence[Any], second: Sequence[Any]) -> list[tuple[int, Any]]:
    """Return ``(position, value)`` pairs, 1-based, where both sequences agree."""
    if len(first) != len(second):
        raise ValueError("sequences differ in length; error in tree building")
    return [
        (position, a)
        for position, (a, b) in enumerate(zip(first, second), start=1)
        if a == b
    ]


def maze_path_length(maze: Sequence[Sequence[str]]) -> int:
    """Return the steps of the depth-first path from ``#`` to ``@``, or -1.

    Cells marked ``1`` are open; directions are tried up, down, left, right.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        raise ValueError("maze must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all maze rows must have the same length")
    source = dest = None
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == "#":
                source = (r, c)
            elif cell == "@":
                dest = (r, c)
    if source is None or dest is None:
        raise ValueError("maze needs a '#' start and an '@' destination")
    if source == dest:
        return 0

    height = len(grid)
    visited = {source}
    stack = [(source, 0, iter(_DIRECTIONS))]
    while stack:
        (r, c), depth, directions = stack[-1]
        for dr, dc in directions:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < height
                and 0 <= nc < width
                and (nr, nc) not in visited
                and grid[nr][nc] in ("1", "@")
            ):
                visited.add((nr, nc))
                if (nr, nc) == dest:
                    return depth + 1
                stack.append(((nr, nc), depth + 1, iter(_DIRECTIONS)))
                break
        else:
            stack.pop()
    return -1


def classify_triangle(a: float, b: float, c: float) -> str:
    """Name the kind of triangle with the given side lengths."""
    if not (a + b > c and b + c > a and c + a > b):
        return "invalid"
    if a == b == c:
        return "equilateral"
    if a * a + b * b == c * c or b * b + c * c == a * a or c * c + a * a == b * b:
        return "right-angled"
    if a == b or b == c or c == a:
        return "isosceles"
    return "notspecial"