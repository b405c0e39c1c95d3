"""CLI entry point for the weather widget."""

import argparse
import logging
import sys

from glassweather.config.defaults import DEFAULT_CONFIG, DEFAULT_OUTPUT
from glassweather.config.loader import config_json, load_config
from glassweather.daemon import WidgetDaemon
from glassweather.errors import SetupError
from glassweather.ingest.owm_client import OpenWeatherClient
from glassweather.pipeline.cycle import CycleController
from glassweather.render.mount import FileMount, MemoryMount
from glassweather.render.renderer import Renderer

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="glassweather",
        description="Periodic OpenWeatherMap dashboard widget",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # run
    run_p = sub.add_parser("run", help="Render on every interval until stopped")
    run_p.add_argument("--output", default=DEFAULT_OUTPUT, help="HTML page to write")

    # once
    once_p = sub.add_parser("once", help="Run one pass and exit")
    once_p.add_argument("--output", help="HTML page to write instead of stdout")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.command == "run":
            return _cmd_run(config, args)
        elif args.command == "once":
            return _cmd_once(config, args)
        elif args.command == "config":
            return _cmd_config(config, args)
    except SetupError as e:
        logger.error("Could not set up widget: %s", e)
        return 1

    parser.print_help()
    return 1


def _cmd_run(config, args) -> int:
    renderer = Renderer()
    with OpenWeatherClient(config) as client:
        controller = CycleController(config, client, renderer, FileMount(args.output))
        WidgetDaemon(controller, config.interval.total_seconds()).start()
    return 0


def _cmd_once(config, args) -> int:
    renderer = Renderer()
    mount = FileMount(args.output) if args.output else MemoryMount()
    with OpenWeatherClient(config) as client:
        controller = CycleController(config, client, renderer, mount)
        controller.setup()
        summary = controller.tick()

    if isinstance(mount, MemoryMount):
        sys.stdout.write(mount.markup)
    for err in summary.errors:
        print(f"warning: {err}", file=sys.stderr)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config_json(config))
        return 0
    print("Use: config show")
    return 1
