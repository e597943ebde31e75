from __future__ import annotations

import sys
import threading
from typing import Sequence

from termpic.sink import print_frame
from termpic.terminal import CLEAR_SCREEN, CURSOR_HOME, HIDE_CURSOR

# Used for frames whose source delay is zero or negative
DEFAULT_FRAME_DURATION = 0.05


def frame_durations(delays: Sequence[int]) -> list[float]:
    """Convert delays in hundredths of a second to seconds."""
    return [d / 100 if d > 0 else DEFAULT_FRAME_DURATION for d in delays]


def frame_wait(index: int, durations: Sequence[float], fps: int = 0) -> float:
    """Seconds to hold frame ``index``; a positive ``fps`` overrides the source timing."""
    if fps > 0:
        return 1 / fps
    return durations[index % len(durations)]


class Animator:
    """Plays pre-rendered frames in place on a terminal.

    ``cancel`` is any object with ``is_set()`` and ``wait(timeout)``, normally
    a ``CancelToken``. It is checked between frames and its ``wait`` is
    the only sleep, so setting it stops playback without waiting out the
    current frame. Restoring the terminal afterwards is left to the caller.
    """

    def __init__(
        self,
        frames: Sequence[Sequence[str]],
        delays: Sequence[int],
        fps: int = 0,
        loop: bool = True,
        stream=None,
        cancel=None,
    ):
        if not frames:
            raise ValueError("No frames to play")
        if len(frames) != len(delays):
            raise ValueError(f"Got {len(frames)} frames but {len(delays)} delays")
        self.frames = frames
        self.durations = frame_durations(delays)
        self.fps = fps
        self.loop = loop
        self.stream = stream if stream is not None else sys.stdout
        self.cancel = cancel if cancel is not None else threading.Event()

    def wait_for(self, index: int) -> float:
        return frame_wait(index, self.durations, self.fps)

    def play(self) -> int:
        """Show frames until done or cancelled. Returns the number of frames shown."""
        self.stream.write(HIDE_CURSOR + CLEAR_SCREEN + CURSOR_HOME)
        shown = 0
        while not self.cancel.is_set():
            print_frame(self.frames[shown % len(self.frames)], self.stream, home=True)
            cancelled = self.cancel.wait(self.wait_for(shown))
            shown += 1
            if cancelled or (not self.loop and shown >= len(self.frames)):
                break
        return shown
