"""HTML renderer for the weather widget."""

import logging
import math
from importlib import resources

import jinja2

from glassweather.errors import SetupError, TemplateError
from glassweather.models.weather import RenderModel

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "index.html"
STYLESHEETS = ("style.css", "wu-icons-style.css")
MISSING = "--"


class Renderer:
    """Binds a RenderModel to the widget template.

    The template is compiled once on construction; a broken template is a
    startup failure.
    """

    def __init__(self, template_name: str = TEMPLATE_NAME, env: jinja2.Environment | None = None):
        self.env = env or jinja2.Environment(
            loader=jinja2.PackageLoader("glassweather.render", "templates"),
            autoescape=jinja2.select_autoescape(default=True),
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["temp"] = format_temp
        self.env.filters["precip"] = format_precip
        try:
            self.template = self.env.get_template(template_name)
        except jinja2.TemplateError as e:
            raise SetupError(f"parsing template {template_name}: {e}") from e

    def render(self, model: RenderModel) -> str:
        try:
            return self.template.render(current=model.current, forecast=model.forecast)
        except jinja2.TemplateError as e:
            raise TemplateError(f"rendering html: {e}") from e
        except Exception as e:
            raise TemplateError(f"rendering html: {type(e).__name__}: {e}") from e


def format_temp(value: float) -> str:
    """Whole-degree temperature, or a placeholder for inf and NaN."""
    if not math.isfinite(value):
        return MISSING
    return str(round(value))


def format_precip(value: float) -> str:
    """Precipitation to one decimal, or a placeholder for inf and NaN."""
    if not math.isfinite(value):
        return MISSING
    return f"{value:.1f}"


def load_stylesheets() -> tuple[str, ...]:
    """Read the bundled stylesheets handed to the host at setup."""
    assets = resources.files("glassweather.render") / "assets"
    try:
        return tuple((assets / name).read_text(encoding="utf-8") for name in STYLESHEETS)
    except OSError as e:
        raise SetupError(f"loading css: {e}") from e
