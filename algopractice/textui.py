"""Text buffers shown through viewports, and a menu bar built fluently."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Size:
    """A width and height in characters."""

    width: int
    height: int


@dataclass(frozen=True)
class Point:
    """A character position."""

    x: int = 0
    y: int = 0


class TextBuffer:
    """Lines of text with a bold flag each, keeping only the newest ``height`` lines."""

    line_break = "\n"

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._lines: deque[str] = deque(maxlen=height)
        self._format: deque[bool] = deque(maxlen=height)

    @property
    def size(self) -> Size:
        """The buffer's dimensions."""
        return Size(self.width, self.height)

    def char_at(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of line ``y``, or "" outside the text."""
        if y < 0 or y >= len(self._lines):
            return ""
        line = self._lines[y]
        if x < 0 or x >= len(line):
            return ""
        return line[x]

    def add_string(self, text: str, bold: bool = False) -> None:
        """Append a line, dropping the oldest one when full."""
        self._lines.append(text)
        self._format.append(bold)

    def get_format(self, line: int) -> bool:
        """Return whether line ``line`` is bold; False outside the text."""
        if line < 0 or line >= len(self._format):
            return False
        return self._format[line]

    def to_string(self) -> str:
        """Return every line followed by a line break."""
        return "".join(line + self.line_break for line in self._lines)


class Viewport:
    """A window onto a buffer, drawn at a given place on the screen."""

    def __init__(
        self,
        buffer: TextBuffer,
        size: Optional[Size] = None,
        buffer_location: Optional[Point] = None,
        screen_location: Optional[Point] = None,
    ) -> None:
        self.buffer = buffer
        self.size = size if size is not None else buffer.size
        self.buffer_location = buffer_location if buffer_location is not None else Point()
        self.screen_location = screen_location if screen_location is not None else Point()

    def char_at(self, x: int, y: int) -> tuple[str, bool]:
        """Return the character and bold flag shown at screen position ``(x, y)``.

        Positions outside the viewport give ``("", False)``.
        """
        left, top = self.screen_location.x, self.screen_location.y
        if left <= x < left + self.size.width and top <= y < top + self.size.height:
            return self.buffer.char_at(x - left, y - top), self.buffer.get_format(y - top)
        return "", False


class Area:
    """A buffer together with the viewport that shows it."""

    def __init__(self, width: int, height: int) -> None:
        self.text_buffer = TextBuffer(width, height)
        self.viewport = Viewport(self.text_buffer)


MenuHandler = Callable[["MenuItem"], Any]


@dataclass(eq=False)
class MenuItem:
    """An entry of a menu, possibly holding sub-items."""

    parent: Union[MenuBar, MenuItem]
    text: str
    items: list[MenuItem] = field(default_factory=list)
    handlers: list[MenuHandler] = field(default_factory=list)

    def fire(self) -> Any:
        """Call every handler in order; return the last one's result, or None."""
        result = None
        for handler in self.handlers:
            result = handler(self)
        return result


class MenuBar(Area):
    """A menu bar holding top-level items."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.items: list[MenuItem] = []

    @staticmethod
    def create(width: int, height: int) -> MenuBarBuilder:
        """Start building a new menu bar of the given size."""
        return MenuBarBuilder(MenuBar(width, height))


class MenuBarBuilder:
    """Adds items to a menu bar or menu item, fluently."""

    def __init__(self, menu: Union[MenuBar, MenuItem]) -> None:
        self.menu = menu

    def add(
        self,
        text: str,
        handler: MenuHandler,
        children: Optional[Callable[[MenuBarBuilder], Any]] = None,
    ) -> MenuBarBuilder:
        """Add an item with ``handler``; ``children`` may add sub-items to it."""
        item = MenuItem(self.menu, text)
        item.handlers.append(handler)
        if children is not None:
            children(MenuBarBuilder(item))
        self.menu.items.append(item)
        return self