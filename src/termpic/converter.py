from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from termpic.config import RenderConfig
from termpic.engine import CellGrid
from termpic.sampling import sample_grid
from termpic.terminal import RESET, colour_sequence


def render_line(chars: str, colours: np.ndarray | None = None) -> str:
    """Serialise one grid row, prefixing each glyph with its colour when given.

    A coloured line ends with a single reset; each colour escape overrides
    the previous one, so cells are not reset individually.
    """
    if colours is None:
        return chars
    parts = [colour_sequence(int(r), int(g), int(b)) + char for char, (r, g, b) in zip(chars, colours)]
    parts.append(RESET)
    return "".join(parts)


def render_grid(grid: CellGrid) -> list[str]:
    if grid.colours is None:
        return [render_line(row) for row in grid.chars]
    return [render_line(row, grid.colours[r]) for r, row in enumerate(grid.chars)]


def image_to_lines(image: Image.Image | str | Path, config: RenderConfig) -> list[str]:
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    grid = sample_grid(image, config.width, colour=config.use_colour, bw=config.bw)
    return render_grid(grid)


def image_to_ascii(image: Image.Image | str | Path, config: RenderConfig) -> str:
    return "\n".join(image_to_lines(image, config))
