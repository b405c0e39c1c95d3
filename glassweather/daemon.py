"""Widget daemon: drives the cycle controller on a fixed interval.

Usage:
    python -m glassweather run --config config.yaml --output weather.html
"""

import logging
import signal
import time

from glassweather.pipeline.cycle import CycleController

logger = logging.getLogger(__name__)


class WidgetDaemon:
    """Ticks the controller once per interval until stopped."""

    def __init__(self, controller: CycleController, interval: float):
        self.controller = controller
        self.interval = interval
        self._running = False
        self._total_passes = 0
        self._total_failures = 0

    def start(self) -> None:
        """Set up the controller and run the tick loop.

        A SetupError from the controller propagates before any tick runs.
        """
        self.controller.setup()
        self._setup_signals()
        self._running = True
        logger.info("Daemon started, interval=%.0fs", self.interval)

        try:
            self._loop()
        except KeyboardInterrupt:
            logger.info("Daemon interrupted by keyboard")
        finally:
            logger.info(
                "Daemon stopped, %d passes (%d with errors)",
                self._total_passes, self._total_failures,
            )

    def stop(self) -> None:
        self._running = False

    def _loop(self) -> None:
        while self._running:
            pass_start = time.monotonic()
            self._run_one_pass()

            # Sleep in 1-second increments so we can respond to signals
            sleep_until = pass_start + self.interval
            while self._running and time.monotonic() < sleep_until:
                time.sleep(min(1.0, max(0.0, sleep_until - time.monotonic())))

    def _run_one_pass(self) -> None:
        self._total_passes += 1
        try:
            summary = self.controller.tick()
        except Exception:
            self._total_failures += 1
            logger.exception("Pass #%d crashed", self._total_passes)
            return
        if summary.errors:
            self._total_failures += 1

    def _setup_signals(self) -> None:
        """Handle SIGTERM and SIGINT for graceful shutdown."""
        def _stop(signum: int, frame: object) -> None:
            logger.info("Received %s, shutting down", signal.Signals(signum).name)
            self.stop()

        signal.signal(signal.SIGTERM, _stop)
        signal.signal(signal.SIGINT, _stop)
