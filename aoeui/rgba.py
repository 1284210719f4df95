"""Colours as 32-bit RGBA values and the editor's colour scheme."""

__all__ = [
    "DEFAULT_FGRGBA",
    "DEFAULT_BGRGBA",
    "RED_RGBA",
    "GREEN_RGBA",
    "BLUE_RGBA",
    "YELLOW_RGBA",
    "MAGENTA_RGBA",
    "CYAN_RGBA",
    "WHITE_RGBA",
    "BLACK_RGBA",
    "DEFAULT_CURSORRGBA",
    "RDONLY_RGBA",
    "DIRTY_RGBA",
    "SELECTING_RGBA",
    "SELECTION_FGRGBA",
    "BRACKET_FGRGBA",
    "COMMENT_FGRGBA",
    "STRING_FGRGBA",
    "KEYWORD_FGRGBA",
    "FOLDED_FGRGBA",
    "FOLDED_BGRGBA",
    "SELECTION_BGRGBA",
    "LAMESPACE_BGRGBA",
    "BADCHAR_BGRGBA",
    "SEARCH_BGRGBA",
    "pale",
]

DEFAULT_FGRGBA = 0xFF
DEFAULT_BGRGBA = 0xFFFFFFFF

RED_RGBA = 0xFF000000
GREEN_RGBA = 0x00FF0000
BLUE_RGBA = 0x0000FF00
YELLOW_RGBA = 0xFFFF0000
MAGENTA_RGBA = 0xFF00FF00
CYAN_RGBA = 0x00FFFF00
WHITE_RGBA = 0xFFFFFF00
BLACK_RGBA = 0x00000000

DEFAULT_CURSORRGBA = GREEN_RGBA
RDONLY_RGBA = RED_RGBA
DIRTY_RGBA = MAGENTA_RGBA
SELECTING_RGBA = BLUE_RGBA

SELECTION_FGRGBA = RED_RGBA
BRACKET_FGRGBA = BLUE_RGBA
COMMENT_FGRGBA = MAGENTA_RGBA
STRING_FGRGBA = RED_RGBA
KEYWORD_FGRGBA = BLUE_RGBA
FOLDED_FGRGBA = WHITE_RGBA

FOLDED_BGRGBA = RED_RGBA
SELECTION_BGRGBA = CYAN_RGBA
LAMESPACE_BGRGBA = MAGENTA_RGBA
BADCHAR_BGRGBA = MAGENTA_RGBA
SEARCH_BGRGBA = YELLOW_RGBA


def pale(rgba: int) -> int:
    """Return a paler shade: each colour channel halved, alpha dropped."""
    return rgba & 0x7F7F7F00