from __future__ import annotations

import math

import numpy as np
from PIL import Image

from termpic.charsets import BW_DARK, BW_LIGHT, EMPTY_PLACEHOLDER, RAMP
from termpic.engine import CellGrid

# Terminal cells are roughly twice as tall as they are wide
VERTICAL_COMPRESSION = 2
MIN_ROWS = 1
MAX_ROWS = 2000
BW_THRESHOLD = 127

# Modes carrying more than 8 bits per channel
_WIDE_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}

_RAMP_GLYPHS = np.array(list(RAMP))


def target_height(width: int, height: int, target_width: int) -> int:
    """Number of output rows for an image of ``width`` x ``height`` pixels.

    Rounds half up and clamps to [MIN_ROWS, MAX_ROWS] so extreme aspect
    ratios still give a usable grid.
    """
    ratio = width / height
    rows = math.floor(target_width / ratio / VERTICAL_COMPRESSION + 0.5)
    return max(MIN_ROWS, min(MAX_ROWS, rows))


def luminance(rgb):
    """Perceptual brightness of RGB values in [0, 255], over the last axis."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return 0.299 * rgb[..., 0] + 0.587 * rgb[..., 1] + 0.114 * rgb[..., 2]


def glyphs_for_luminance(values, bw: bool = False) -> np.ndarray:
    """Map an array of luminance values to an array of single-character glyphs."""
    values = np.asarray(values, dtype=np.float64)
    if bw:
        return np.where(values > BW_THRESHOLD, BW_LIGHT, BW_DARK)
    indices = (values / 255.0 * (len(RAMP) - 1)).astype(np.intp)
    return _RAMP_GLYPHS[np.clip(indices, 0, len(RAMP) - 1)]


def glyph_for_luminance(value: float, bw: bool = False) -> str:
    return str(np.asarray(glyphs_for_luminance(value, bw)).item())


def to_rgb8(image: Image.Image) -> np.ndarray:
    """Return the image as an (h, w, 3) uint8 array.

    Higher bit depth sources are truncated to 8 bits by shifting, not rounded.
    """
    if image.mode in _WIDE_MODES:
        wide = np.asarray(image).astype(np.int64)
        grey = np.clip(wide >> 8, 0, 255).astype(np.uint8)
        return np.repeat(grey[:, :, np.newaxis], 3, axis=2)
    return np.asarray(image.convert("RGB"), dtype=np.uint8)


def sample_grid(image: Image.Image, target_width: int, colour: bool = False, bw: bool = False) -> CellGrid:
    """Downsample an image onto a character grid ``target_width`` cells wide.

    Each cell takes the nearest source pixel at
    ``(x * w // target_width, y * h // rows)``. With ``colour`` set, the
    sampled RGB triplets are returned alongside the glyphs.

    A zero-sized image gives a single placeholder line and no colours.
    """
    if target_width < 1:
        raise ValueError(f"Target width must be at least 1, got {target_width}")

    w, h = image.size
    if w == 0 or h == 0:
        return CellGrid(chars=[EMPTY_PLACEHOLDER], colours=None)

    rows = target_height(w, h, target_width)
    arr = to_rgb8(image)

    src_y = np.arange(rows) * h // rows
    src_x = np.arange(target_width) * w // target_width
    sampled = arr[src_y[:, np.newaxis], src_x[np.newaxis, :]]  # (rows, cols, 3)

    glyphs = glyphs_for_luminance(luminance(sampled), bw)
    chars = ["".join(row) for row in glyphs]
    return CellGrid(chars=chars, colours=sampled.copy() if colour else None)
