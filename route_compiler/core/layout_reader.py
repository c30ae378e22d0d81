"""Level layout reader - plain text to symbol grid.

One grid row per line, one character per cell. Lines shorter than the grid
are padded with spaces (editors often strip trailing blanks), so a row of
empty cells may be written as an empty line.
"""

import logging
from pathlib import Path
from typing import Union

from route_compiler.constants import GridConfig
from route_compiler.model.errors import GridSizeError

logger = logging.getLogger(__name__)


def read_layout_text(text: str, size: int = GridConfig.SIZE) -> list[str]:
    """Split layout text into size rows of exactly size characters.

    Args:
        text: Layout text, rows separated by newlines
        size: Grid edge length

    Returns:
        List of row strings, each padded to size characters.

    Raises:
        GridSizeError: If there are not exactly size rows or a row is too long.
    """
    lines = text.splitlines()
    if len(lines) != size:
        raise GridSizeError(expected=size, actual=len(lines))

    rows = []
    for index, line in enumerate(lines):
        if len(line) > size:
            raise GridSizeError(expected=size, actual=len(line), row=index)
        rows.append(line.ljust(size, GridConfig.EMPTY_SYMBOL))
    return rows


def read_layout_file(path: Union[str, Path], size: int = GridConfig.SIZE) -> list[str]:
    """Read a layout text file into size row strings.

    Raises:
        FileNotFoundError: If the file does not exist.
        GridSizeError: If the layout is not size x size.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    logger.info(f"Read layout {path.name}")
    return read_layout_text(text=text, size=size)
