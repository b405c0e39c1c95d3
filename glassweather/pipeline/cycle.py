"""Cycle controller: one fetch → transform → render pass per tick."""

import logging
import time
from dataclasses import dataclass, replace
from enum import StrEnum

from glassweather.config.schema import WidgetConfig
from glassweather.errors import SetupError, TemplateError, WidgetError
from glassweather.ingest.owm_client import OpenWeatherClient
from glassweather.models.payloads import CurrentPayload, ForecastPayload
from glassweather.models.reporting import CycleSummary
from glassweather.render.mount import Mount
from glassweather.render.renderer import Renderer, load_stylesheets
from glassweather.transform.transformer import transform

logger = logging.getLogger(__name__)


class CycleStatus(StrEnum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class CycleState:
    """State carried from one pass to the next."""

    markup: str | None = None
    passes: int = 0


class CycleController:
    def __init__(
        self,
        config: WidgetConfig,
        client: OpenWeatherClient,
        renderer: Renderer,
        mount: Mount,
    ):
        self.config = config
        self.client = client
        self.renderer = renderer
        self.mount = mount
        self.state = CycleState()
        self.status = CycleStatus.IDLE

    def setup(self) -> None:
        """Hand the stylesheets to the host and render the empty state."""
        sheets = load_stylesheets()
        try:
            self.mount.load_css(*sheets)
        except OSError as e:
            raise SetupError(f"loading css: {e}") from e

        summary = CycleSummary(pass_number=0)
        self.state = self._render(self.state, CurrentPayload(), ForecastPayload(), summary)
        if summary.rendered:
            self._publish(self.state.markup)

    def tick(self) -> CycleSummary:
        """Run one pass and replace the mounted content if it rendered."""
        # Only reachable through re-entrancy; passes never overlap
        if self.status == CycleStatus.RUNNING:
            logger.warning("Previous pass still running, skipping tick")
            return CycleSummary(pass_number=self.state.passes, errors=["pass already running"])

        self.status = CycleStatus.RUNNING
        try:
            self.state, summary = self.run_cycle(self.state)
            if summary.rendered:
                self._publish(self.state.markup)
        finally:
            self.status = CycleStatus.IDLE
        return summary

    def run_cycle(self, state: CycleState) -> tuple[CycleState, CycleSummary]:
        """Execute one pass against ``state`` and return the next state.

        Upstream and template failures are logged and recorded in the summary;
        they never escape this method.
        """
        start = time.monotonic()
        summary = CycleSummary(pass_number=state.passes + 1)

        current = CurrentPayload()
        try:
            current = self.client.get_current()
            summary.current_ok = True
        except WidgetError as e:
            logger.error(
                "Could not get current weather data (endpoint=%s): %s",
                getattr(e, "endpoint", ""), e,
            )
            summary.errors.append(f"current: {e}")

        forecast = ForecastPayload()
        try:
            forecast = self.client.get_forecast(self.config.forecast_days)
            summary.forecast_ok = True
        except WidgetError as e:
            logger.error(
                "Could not get forecast weather data (endpoint=%s): %s",
                getattr(e, "endpoint", ""), e,
            )
            summary.errors.append(f"forecast: {e}")

        next_state = self._render(state, current, forecast, summary)
        next_state = replace(next_state, passes=state.passes + 1)
        summary.duration_seconds = time.monotonic() - start

        logger.info(
            "Pass #%d done in %.2fs: current=%s forecast=%s rendered=%s",
            summary.pass_number, summary.duration_seconds,
            "ok" if summary.current_ok else "failed",
            "ok" if summary.forecast_ok else "failed",
            summary.rendered,
        )
        return next_state, summary

    def _render(
        self,
        state: CycleState,
        current: CurrentPayload,
        forecast: ForecastPayload,
        summary: CycleSummary,
    ) -> CycleState:
        model = transform(current, forecast, self.config.tzinfo)
        summary.forecast_days = len(model.forecast)
        try:
            markup = self.renderer.render(model)
        except TemplateError as e:
            logger.error("Could not render weather data (stage=render): %s", e)
            summary.errors.append(f"render: {e}")
            return state
        summary.rendered = True
        return replace(state, markup=markup)

    def _publish(self, markup: str | None) -> None:
        if markup is None:
            return
        try:
            self.mount.set_inner_html(markup)
        except OSError as e:
            logger.error("Could not update mount point (stage=mount): %s", e)
