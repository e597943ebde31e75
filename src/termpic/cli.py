import argparse
import sys

from termpic.animator import Animator
from termpic.config import DEFAULT_WIDTH, RenderConfig
from termpic.converter import image_to_lines
from termpic.decoder import Animation, load_animation
from termpic.errors import InputNotSpecifiedError, TermpicError
from termpic.sink import print_frame, write_output
from termpic.terminal import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    RESET,
    SHOW_CURSOR,
    CancelToken,
    interrupt_handler,
    interrupts_raise,
    terminal_session,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image or animation as ASCII art")
    parser.add_argument("image", nargs="?", help="Path to input image (png, jpg, gif, webp, ...)")
    parser.add_argument(
        "-w", "--width", type=int, default=DEFAULT_WIDTH, help=f"Output width in columns (default: {DEFAULT_WIDTH})"
    )
    parser.add_argument(
        "-c",
        "--colour",
        "--color",
        dest="colour",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Truecolor ANSI output (default: on)",
    )
    parser.add_argument("--bw", action="store_true", default=False, help="Black and white output using '#' and space")
    parser.add_argument(
        "-m", "--markdown", action="store_true", default=False, help="Write a fenced markdown block, without colour"
    )
    parser.add_argument("-o", "--out", default=None, help="Save the output to a file instead of the terminal")
    parser.add_argument(
        "--fps", type=int, default=0, help="Frame rate for animations (default: 0, use the delays stored in the file)"
    )
    parser.add_argument(
        "--loop",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Loop animations until interrupted (default: on)",
    )
    return parser


def _play(animation: Animation, config: RenderConfig, stream) -> None:
    frames = [image_to_lines(frame, config) for frame in animation.frames]

    if config.markdown or config.out is not None:
        # Text destinations can't animate, so they get the first frame
        write_output(frames[0], markdown=True, path=config.out, stream=stream)
        if config.out is not None:
            print(f"Saved: {config.out} (static frame for markdown)", file=stream)
        return

    with CancelToken() as cancel, terminal_session(stream) as out, interrupt_handler(cancel):
        Animator(frames, animation.delays, fps=config.fps, loop=config.loop, stream=out, cancel=cancel).play()
    if cancel.is_set():
        stream.write("\n")


def _show(animation: Animation, config: RenderConfig, stream) -> None:
    lines = image_to_lines(animation.frames[0], config)

    if config.out is not None:
        write_output(lines, markdown=config.markdown, path=config.out)
        print(f"Saved: {config.out}", file=stream)
        return

    if config.markdown:
        write_output(lines, markdown=True, stream=stream)
        return

    with terminal_session(stream) as out:
        out.write(CLEAR_SCREEN + CURSOR_HOME)
        print_frame(lines, out)


def run(image_path: str | None, config: RenderConfig, stream=None) -> None:
    stream = stream if stream is not None else sys.stdout
    if not image_path:
        raise InputNotSpecifiedError("No input file given: termpic path/to/image.(png|jpg|gif)")

    animation = load_animation(image_path)
    if animation.is_animated:
        _play(animation, config, stream)
    else:
        _show(animation, config, stream)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = RenderConfig.from_args(args)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        with interrupts_raise():
            run(args.image, config)
    except TermpicError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Interrupted before or outside playback
        sys.stdout.write(RESET + SHOW_CURSOR + "\n")
        sys.stdout.flush()
        return 0
    return 0
