"""Terminal spinner for progress display on stderr."""

import sys
import threading
from contextlib import contextmanager

FRAMES = "|/-\\"
FETCH_MSG = "fetching"

BLUE = "\033[34m"
RESET = "\033[0m"
CLEAR_LINE = "\033[2K\r"


class Spin:
    """Single status line that is rewritten on every update.

    Safe to call from several threads; writes are serialized.
    """

    def __init__(self, stream=None, quiet: bool = False, color: bool | None = None):
        self.stream = stream or sys.stderr
        self.quiet = quiet
        if color is None:
            color = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.color = color
        self._frame = 0
        self._lock = threading.Lock()

    def _next_frame(self) -> str:
        frame = FRAMES[self._frame % len(FRAMES)]
        self._frame += 1
        return frame

    def next(self, desc: str, *detail: str) -> None:
        if self.quiet:
            return
        with self._lock:
            label = f"{BLUE}{desc}{RESET}" if self.color else desc
            line = " ".join([label, self._next_frame(), *detail]).rstrip()
            self.stream.write(f"{CLEAR_LINE}{line}")
            self.stream.flush()

    def page(self, done: int, total: int) -> None:
        """Progress callback for the paginated fetcher."""
        self.next(FETCH_MSG, f"page: {done}/{total}")

    def flush(self) -> None:
        if self.quiet:
            return
        with self._lock:
            self.stream.write(CLEAR_LINE)
            self.stream.flush()

    @contextmanager
    def spinning(self, desc: str, interval: float = 0.1):
        """Animate ``desc`` in a background thread while the block runs."""
        done = threading.Event()

        def animate():
            while not done.is_set():
                self.next(desc)
                done.wait(interval)

        thread = threading.Thread(target=animate, daemon=True)
        thread.start()
        try:
            yield self
        finally:
            done.set()
            thread.join()
            self.flush()
