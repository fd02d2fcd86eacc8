"""sysdash - terminal refresh loop and entry point."""

import logging
import signal
import sys
import threading
from typing import TextIO

from sysdash.dashboard import START_BANNER, render_frame
from sysdash.monitor import MetricsProvider, PsutilProvider

logger = logging.getLogger(__name__)


class RefreshLoop:
    """
    Drives the acquire, render and sleep cycle against a metrics provider.

    Runs on the calling thread. The loop ends when its stop event is set,
    which is checked at every cycle boundary and interrupts the pause.
    """

    def __init__(
        self,
        provider: MetricsProvider,
        interval: float = 2.0,
        startup_delay: float = 1.0,
        stream: TextIO | None = None,
        stop_event: threading.Event | None = None,
    ) -> None:
        """
        Initialize the RefreshLoop.

        Args:
            provider: Source of snapshots, owned by this loop.
            interval: Pause between refresh cycles (in seconds). Default 2.0s.
            startup_delay: Pause after the startup banner (in seconds).
            stream: Where frames are written. Defaults to sys.stdout.
            stop_event: Cancellation token; a new one is created if omitted.
        """
        self._provider = provider
        self.interval = interval
        self._startup_delay = startup_delay
        self._stream = stream
        self._stop_event = stop_event or threading.Event()
        self.cycles = 0

    @property
    def interval(self) -> float:
        """Get the current refresh interval."""
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        """Set the refresh interval."""
        self._interval = max(0.1, value)  # Minimum 0.1 seconds

    @property
    def stream(self) -> TextIO:
        """Get the output stream, sys.stdout unless one was given."""
        # Resolved late so a replaced sys.stdout is honored
        return self._stream if self._stream is not None else sys.stdout

    @property
    def stopped(self) -> bool:
        """Check if a stop has been requested."""
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Request the loop to end at the next cycle boundary."""
        self._stop_event.set()

    def start_banner(self) -> None:
        self.stream.write("\n".join(START_BANNER) + "\n")
        self.stream.flush()

    def run_cycle(self) -> None:
        """Acquire a fresh snapshot and draw it as a single flushed frame."""
        snapshot = self._provider.refresh()
        self.stream.write(render_frame(snapshot, self._interval))
        self.stream.flush()
        self.cycles += 1

    def run(self, max_cycles: int | None = None) -> None:
        """
        Run refresh cycles until stopped.

        Args:
            max_cycles: Stop after this many cycles. None runs until stop().
        """
        logger.debug("Refresh loop starting (interval %.1fs)", self._interval)
        self.start_banner()
        self._stop_event.wait(timeout=self._startup_delay)

        while not self._stop_event.is_set():
            self.run_cycle()
            if max_cycles is not None and self.cycles >= max_cycles:
                break
            # Wait for interval seconds or until stop is requested
            self._stop_event.wait(timeout=self._interval)

        logger.debug("Refresh loop stopped after %d cycles", self.cycles)


def main() -> int:
    """Entry point for the sysdash monitor."""
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Installed first so an interrupt while the provider starts up is clean
    stop_event = threading.Event()
    signal.signal(signal.SIGINT, lambda signum, frame: stop_event.set())

    try:
        loop = RefreshLoop(PsutilProvider(), stop_event=stop_event)
        loop.run()
    except Exception:
        logger.exception("sysdash terminated")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
