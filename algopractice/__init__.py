"""Classic algorithms, data structures and small design-pattern examples."""

__version__ = "0.1.0"

__all__ = [
    "adapter",
    "chat",
    "fifo",
    "graphs",
    "matrix",
    "observer",
    "practice",
    "proxy",
    "puzzles",
    "searching",
    "sorting",
    "textui",
]