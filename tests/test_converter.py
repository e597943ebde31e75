import numpy as np
from PIL import Image

from termpic.config import RenderConfig
from termpic.converter import image_to_ascii, image_to_lines, render_grid, render_line
from termpic.engine import CellGrid
from termpic.sink import strip_ansi


def test_plain_line_is_just_glyphs():
    assert render_line(" .#") == " .#"


def test_colour_line_prefixes_each_glyph():
    colours = np.array([[255, 0, 0], [0, 128, 255]], dtype=np.uint8)
    line = render_line("#@", colours)
    assert line == "\033[38;2;255;0;0m#\033[38;2;0;128;255m@\033[0m"


def test_colour_line_resets_once():
    colours = np.zeros((5, 3), dtype=np.uint8)
    line = render_line("#####", colours)
    assert line.count("\033[0m") == 1
    assert line.endswith("\033[0m")
    assert line.count("\033[38;2;") == 5


def test_render_grid_rows():
    grid = CellGrid(chars=["ab", "cd"], colours=None)
    assert render_grid(grid) == ["ab", "cd"]


def test_render_grid_uses_row_colours():
    colours = np.zeros((2, 1, 3), dtype=np.uint8)
    colours[1, 0] = (9, 8, 7)
    lines = render_grid(CellGrid(chars=["a", "b"], colours=colours))
    assert lines[0] == "\033[38;2;0;0;0ma\033[0m"
    assert lines[1] == "\033[38;2;9;8;7mb\033[0m"


def test_image_to_ascii_plain():
    img = Image.new("RGB", (40, 20), (0, 0, 0))
    assert image_to_ascii(img, RenderConfig(width=4, colour=False)) == "    "


def test_colour_config_adds_escapes():
    img = Image.new("RGB", (20, 20), (255, 0, 0))
    result = image_to_ascii(img, RenderConfig(width=4))
    assert "\033[38;2;255;0;0m" in result
    assert "\033[0m" in result


def test_bw_disables_colour():
    img = Image.new("RGB", (20, 20), (255, 0, 0))
    assert "\033" not in image_to_ascii(img, RenderConfig(width=4, bw=True))


def test_markdown_disables_colour():
    img = Image.new("RGB", (20, 20), (255, 0, 0))
    assert "\033" not in image_to_ascii(img, RenderConfig(width=4, markdown=True))


def test_stripping_plain_render_is_a_no_op():
    rng = np.random.default_rng(7)
    img = Image.fromarray(rng.integers(0, 256, (24, 48, 3), dtype=np.uint8))
    lines = image_to_lines(img, RenderConfig(width=16, colour=False))
    assert [strip_ansi(line) for line in lines] == lines


def test_stripping_colour_render_matches_plain_render():
    rng = np.random.default_rng(7)
    img = Image.fromarray(rng.integers(0, 256, (24, 48, 3), dtype=np.uint8))
    coloured = image_to_lines(img, RenderConfig(width=16))
    plain = image_to_lines(img, RenderConfig(width=16, colour=False))
    assert [strip_ansi(line) for line in coloured] == plain


def test_accepts_file_path(tmp_path):
    path = tmp_path / "test.png"
    Image.new("RGB", (20, 20), (200, 200, 200)).save(path)
    assert image_to_ascii(path, RenderConfig(width=4, colour=False)) == "####\n####"
