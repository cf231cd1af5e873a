"""Vector shapes drawn as pixels through line-to-point adapters."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A pixel position."""

    x: int
    y: int


@dataclass(frozen=True)
class Line:
    """A straight segment between two points."""

    start: Point
    end: Point


class VectorRectangle:
    """An axis-aligned rectangle made of four lines."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self._lines = (
            Line(Point(x, y), Point(x + width, y)),
            Line(Point(x + width, y), Point(x + width, y + height)),
            Line(Point(x, y), Point(x, y + height)),
            Line(Point(x, y + height), Point(x + width, y + height)),
        )

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)


def line_to_points(line: Line) -> list[Point]:
    """Return the pixels of a vertical or horizontal line, without interpolation.

    Lines that are neither vertical nor horizontal yield no points.
    """
    left = min(line.start.x, line.end.x)
    right = max(line.start.x, line.end.x)
    top = min(line.start.y, line.end.y)
    bottom = max(line.start.y, line.end.y)
    if right - left == 0:
        return [Point(left, y) for y in range(top, bottom + 1)]
    if line.end.y - line.start.y == 0:
        return [Point(x, top) for x in range(left, right + 1)]
    return []


class LineToPointAdapter:
    """Presents a line as the points it covers, computing them every time."""

    generation_count: ClassVar[int] = 0

    def __init__(self, line: Line) -> None:
        _log.debug(
            "%d: generating points for line (no caching)",
            LineToPointAdapter.generation_count,
        )
        LineToPointAdapter.generation_count += 1
        self._points = line_to_points(line)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)


class LineToPointCachingAdapter:
    """Presents a line as its points, sharing results for equal lines."""

    generation_count: ClassVar[int] = 0
    _cache: ClassVar[dict[Line, list[Point]]] = {}

    def __init__(self, line: Line) -> None:
        self._line = line
        if line in self._cache:
            return
        _log.debug(
            "%d: generating points for line (with caching)",
            LineToPointCachingAdapter.generation_count,
        )
        LineToPointCachingAdapter.generation_count += 1
        self._cache[line] = line_to_points(line)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._cache[self._line])


def rasterize(objects: Iterable[Iterable[Line]]) -> list[Point]:
    """Return the points of every line of every object, in drawing order."""
    return [
        point
        for shape in objects
        for line in shape
        for point in LineToPointCachingAdapter(line)
    ]