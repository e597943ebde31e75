import os
import select
import signal
import sys
import threading
from contextlib import contextmanager

ESC = "\033"

CURSOR_HOME = f"{ESC}[H"
CLEAR_SCREEN = f"{ESC}[2J"
HIDE_CURSOR = f"{ESC}[?25l"
SHOW_CURSOR = f"{ESC}[?25h"
RESET = f"{ESC}[0m"

INTERRUPT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def colour_sequence(r: int, g: int, b: int) -> str:
    """24-bit foreground colour escape."""
    return f"{ESC}[38;2;{r};{g};{b}m"


class CancelToken:
    """Cancellation flag that is safe to set from a signal handler.

    ``set`` takes no locks: it flips a flag and writes a byte to a pipe, and
    ``wait`` sleeps in ``select`` on that pipe, so a signal arriving at any
    point wakes the waiter at once.
    """

    def __init__(self):
        self._cancelled = False
        self._read_fd, self._write_fd = os.pipe()
        os.set_blocking(self._write_fd, False)

    def set(self) -> None:
        self._cancelled = True
        try:
            os.write(self._write_fd, b"\0")
        except BlockingIOError:
            # Pipe already full, the waiter is awake anyway
            pass

    def is_set(self) -> bool:
        return self._cancelled

    def wait(self, timeout: float | None = None) -> bool:
        """Sleep up to ``timeout`` seconds or until set. Returns whether it is set."""
        if not self._cancelled:
            select.select([self._read_fd], [], [], timeout)
        return self._cancelled

    def close(self) -> None:
        os.close(self._read_fd)
        os.close(self._write_fd)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@contextmanager
def terminal_session(stream=None):
    """Reset colour and show the cursor when the block exits, however it exits."""
    stream = stream if stream is not None else sys.stdout
    try:
        yield stream
    finally:
        stream.write(RESET + SHOW_CURSOR)
        stream.flush()


@contextmanager
def _handlers(handler):
    if threading.current_thread() is not threading.main_thread():
        # Signal handlers can only be installed from the main thread
        yield
        return
    previous = {sig: signal.signal(sig, handler) for sig in INTERRUPT_SIGNALS}
    try:
        yield
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)


@contextmanager
def interrupt_handler(cancel: CancelToken):
    """Set ``cancel`` on SIGINT/SIGTERM for the duration of the block."""

    def _handle(signum, frame):
        cancel.set()

    with _handlers(_handle):
        yield cancel


@contextmanager
def interrupts_raise():
    """Raise ``KeyboardInterrupt`` on SIGINT and SIGTERM for the duration of the block."""
    with _handlers(signal.default_int_handler):
        yield
