"""Tests for the widget daemon."""

from unittest.mock import MagicMock, patch

import pytest

from glassweather.daemon import WidgetDaemon
from glassweather.errors import SetupError
from glassweather.models.reporting import CycleSummary
from glassweather.pipeline.cycle import CycleController


@pytest.fixture
def controller() -> MagicMock:
    controller = MagicMock(spec=CycleController)
    controller.tick.return_value = CycleSummary(pass_number=1)
    return controller


class TestWidgetDaemon:
    def test_setup_before_first_tick(self, controller):
        daemon = WidgetDaemon(controller, interval=60)

        with patch.object(daemon, "_loop"), patch.object(daemon, "_setup_signals"):
            daemon.start()

        controller.setup.assert_called_once()
        controller.tick.assert_not_called()

    def test_setup_error_aborts(self, controller):
        controller.setup.side_effect = SetupError("bad template")
        daemon = WidgetDaemon(controller, interval=60)

        with patch.object(daemon, "_loop") as loop, pytest.raises(SetupError):
            daemon.start()
        loop.assert_not_called()

    def test_loop_ticks_until_stopped(self, controller):
        daemon = WidgetDaemon(controller, interval=0)

        def _tick():
            if controller.tick.call_count >= 3:
                daemon.stop()
            return CycleSummary(pass_number=controller.tick.call_count)

        controller.tick.side_effect = _tick
        daemon._running = True
        daemon._loop()

        assert controller.tick.call_count == 3
        assert daemon._total_passes == 3

    def test_loop_sleeps_between_passes(self, controller):
        daemon = WidgetDaemon(controller, interval=5)

        def _sleep(seconds):
            daemon.stop()

        daemon._running = True
        with patch("glassweather.daemon.time.sleep", side_effect=_sleep) as sleep:
            daemon._loop()

        sleep.assert_called_once()
        assert 0 < sleep.call_args.args[0] <= 1.0

    def test_failed_pass_counted(self, controller):
        controller.tick.return_value = CycleSummary(pass_number=1, errors=["current: x"])
        daemon = WidgetDaemon(controller, interval=60)
        daemon._run_one_pass()
        assert daemon._total_failures == 1

    def test_crash_does_not_stop_daemon(self, controller):
        controller.tick.side_effect = RuntimeError("bug")
        daemon = WidgetDaemon(controller, interval=60)
        daemon._run_one_pass()
        assert daemon._total_passes == 1
        assert daemon._total_failures == 1
