from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, ImageSequence, UnidentifiedImageError

from termpic.errors import FileUnreadableError, ImageUndecodableError


@dataclass
class Animation:
    frames: list[Image.Image]
    delays: list[int] = field(default_factory=list)  # hundredths of a second, one per frame

    @property
    def is_animated(self) -> bool:
        return len(self.frames) > 1


def _frame_delay(frame: Image.Image) -> int:
    # Pillow reports frame durations in milliseconds
    return int(frame.info.get("duration", 0) or 0) // 10


def decode_animation(data: bytes) -> Animation:
    """Decode every frame of an image held in memory.

    Multi-frame sources are decoded eagerly, in order. A failure in any
    frame fails the whole decode.
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            if getattr(image, "is_animated", False):
                frames = []
                delays = []
                for frame in ImageSequence.Iterator(image):
                    delays.append(_frame_delay(frame))
                    frames.append(frame.convert("RGB"))
                return Animation(frames=frames, delays=delays)
            image.load()
            return Animation(frames=[image.copy()], delays=[0])
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, EOFError) as e:
        raise ImageUndecodableError(f"Cannot decode image: {e}") from e


def load_animation(path: str | Path) -> Animation:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileUnreadableError(f"Cannot read {path}: {e}") from e
    return decode_animation(data)
