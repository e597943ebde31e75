import dataclasses
from pathlib import Path

import pytest

from termpic.cli import build_parser
from termpic.config import RenderConfig


def test_defaults():
    config = RenderConfig.from_args(build_parser().parse_args(["pic.png"]))
    assert config == RenderConfig(width=100, colour=True, bw=False, markdown=False, out=None, fps=0, loop=True)
    assert config.use_colour


def test_flags():
    args = build_parser().parse_args(
        ["pic.gif", "-w", "40", "--no-colour", "--bw", "--markdown", "-o", "out.md", "--fps", "12", "--no-loop"]
    )
    config = RenderConfig.from_args(args)
    assert config.width == 40
    assert not config.colour
    assert config.bw
    assert config.markdown
    assert config.out == Path("out.md")
    assert config.fps == 12
    assert not config.loop


def test_color_spelling_alias():
    assert not RenderConfig.from_args(build_parser().parse_args(["pic.png", "--no-color"])).colour


@pytest.mark.parametrize(
    "config",
    [RenderConfig(bw=True), RenderConfig(markdown=True), RenderConfig(colour=False)],
)
def test_colour_is_overridden(config):
    assert not config.use_colour


def test_is_immutable():
    config = RenderConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width = 10


def test_rejects_bad_width():
    with pytest.raises(ValueError, match="Width"):
        RenderConfig(width=0)


def test_rejects_negative_fps():
    with pytest.raises(ValueError, match="FPS"):
        RenderConfig(fps=-1)
