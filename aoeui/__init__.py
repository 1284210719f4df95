"""Core of a small modeless text editor: UTF-8, texts with undo, search and completion."""

__version__ = "1.7"

__all__ = ["chars", "chart", "complete", "rgba", "search", "text", "utf8"]