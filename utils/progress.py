"""
Progress tracking and display for movconvert.

The bar keeps spinning while the main thread is blocked inside an encode:
a short-lived ticker thread re-renders it at a fixed interval.
"""

import threading
from tqdm import tqdm
from typing import Optional


class ProgressTracker:
    """Manages progress bar display and background ticking with thread safety."""

    SPINNER_FRAMES = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']

    def __init__(self, tick_interval: float = 0.1):
        """
        Initialize the progress tracker.

        Args:
            tick_interval: Seconds between spinner refreshes while ticking
        """
        self.pbar: Optional[tqdm] = None
        self.tick_interval = tick_interval
        self.message = ""
        self.spinner_index = 0
        self._lock = threading.Lock()  # Protect concurrent access to progress bar
        self._stop_event = threading.Event()
        self._ticker: Optional[threading.Thread] = None

    def begin(self, total: int, unit: str = "file"):
        """
        Start a new progress bar.

        Args:
            total: Total number of items to process
            unit: Unit name for progress
        """
        with self._lock:
            self.pbar = tqdm(total=total, unit=unit)

    @property
    def position(self) -> int:
        with self._lock:
            return self.pbar.n if self.pbar else 0

    @property
    def total(self) -> int:
        with self._lock:
            return self.pbar.total if self.pbar else 0

    def set_message(self, text: str):
        """Set the status message shown next to the spinner."""
        with self._lock:
            self.message = text
            self._render()

    def _render(self):
        # Caller holds self._lock
        if self.pbar:
            spinner = self.SPINNER_FRAMES[self.spinner_index]
            self.pbar.set_description_str(f"{spinner} {self.message}", refresh=True)

    def tick(self):
        """Advance the spinner one frame and redraw. Position and message are untouched."""
        with self._lock:
            self.spinner_index = (self.spinner_index + 1) % len(self.SPINNER_FRAMES)
            self._render()

    def _tick_loop(self, stop_event: threading.Event):
        """Background thread - ticks until stop_event is set."""
        while not stop_event.wait(self.tick_interval):
            self.tick()

    def start_ticking(self):
        """Start the background ticker thread (no-op if already running)."""
        if self._ticker is not None:
            return
        self._stop_event = threading.Event()
        self._ticker = threading.Thread(target=self._tick_loop, args=(self._stop_event,),
                                        name="progress-ticker", daemon=True)
        self._ticker.start()

    def stop_ticking(self):
        """Stop the ticker thread and wait until it has exited."""
        if self._ticker is None:
            return
        self._stop_event.set()
        self._ticker.join()
        self._ticker = None

    @property
    def ticking(self) -> bool:
        return self._ticker is not None

    def advance(self):
        """Move the bar forward by one item, never past its total."""
        with self._lock:
            if self.pbar and (self.pbar.total is None or self.pbar.n < self.pbar.total):
                self.pbar.update(1)

    def println(self, text: str):
        """Print a line above the bar without breaking its rendering."""
        with self._lock:
            tqdm.write(text)

    def finish(self, text: str):
        """Stop ticking, show a final message and close the bar."""
        self.stop_ticking()
        with self._lock:
            self.message = text
            if self.pbar:
                self.pbar.set_description_str(text, refresh=True)
                self.pbar.close()
                self.pbar = None

    def close(self):
        """Close the progress bar."""
        self.stop_ticking()
        with self._lock:
            if self.pbar:
                self.pbar.close()
                self.pbar = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
