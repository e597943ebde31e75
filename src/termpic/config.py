from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

DEFAULT_WIDTH = 100


@dataclass(frozen=True)
class RenderConfig:
    """Options for one invocation, built once from the command line."""

    width: int = DEFAULT_WIDTH
    colour: bool = True
    bw: bool = False
    markdown: bool = False
    out: Path | None = None
    fps: int = 0
    loop: bool = True

    def __post_init__(self):
        if self.width < 1:
            raise ValueError(f"Width must be at least 1, got {self.width}")
        if self.fps < 0:
            raise ValueError(f"FPS must not be negative, got {self.fps}")

    @property
    def use_colour(self) -> bool:
        # Markdown never carries colour; black/white overrides it too
        return self.colour and not self.markdown and not self.bw

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RenderConfig":
        return cls(
            width=args.width,
            colour=args.colour,
            bw=args.bw,
            markdown=args.markdown,
            out=Path(args.out) if args.out else None,
            fps=args.fps,
            loop=args.loop,
        )
