import pytest
from PIL import Image


def make_gif(path, colours, durations):
    """Write an animated GIF with one solid frame per colour."""
    frames = [Image.new("RGB", (20, 10), colour) for colour in colours]
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=durations, loop=0)
    return path


@pytest.fixture
def still_png(tmp_path):
    path = tmp_path / "still.png"
    Image.new("RGB", (40, 20), (200, 200, 200)).save(path)
    return path


@pytest.fixture
def animated_gif(tmp_path):
    return make_gif(tmp_path / "anim.gif", [(0, 0, 0), (200, 200, 200), (128, 128, 128)], [100, 200, 50])
