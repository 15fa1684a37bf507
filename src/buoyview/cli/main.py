"""
BuoyView CLI entry point.

    buoyview                    same as ``buoyview stations``
    buoyview stations           NDBC active stations (XML feed)
    buoyview observations       NDBC latest observations (plaintext feed)

Both feed commands accept ``--print`` to write the table to stdout instead
of opening the viewer, and ``--url`` to point at a different copy of the
feed.  Any fetch or parse failure is fatal: one red line on stderr, exit 1.
"""

from __future__ import annotations

import sys
from typing import NoReturn

import click
import structlog
from rich.console import Console
from rich.markup import escape

from buoyview import __version__
from buoyview.core.config import LOG_LEVELS, BuoyViewConfig, load_config
from buoyview.core.exceptions import BuoyViewError
from buoyview.core.feeds import OBSERVATIONS, STATIONS, Feed, load_rows
from buoyview.core.logging_config import configure_logging, viewer_log_level

logger = structlog.get_logger()

console = Console()
err_console = Console(stderr=True)


def _fail(exc: BuoyViewError) -> NoReturn:
    logger.error("fatal", error=str(exc), error_type=type(exc).__name__)
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    sys.exit(1)


@click.group("buoyview", invoke_without_command=True)
@click.version_option(__version__, prog_name="buoyview")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help=(
        "Log level (default: WARNING, or $BUOYVIEW_LOG_LEVEL). "
        "In the viewer, DEBUG and INFO need --log-file; stderr stays at WARNING."
    ),
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSON log lines to this file instead of stderr.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_file: str | None) -> None:
    """Browse NOAA NDBC buoy telemetry in the terminal."""
    try:
        cfg = load_config().with_overrides(log_level=log_level, log_file=log_file)
    except BuoyViewError as exc:
        _fail(exc)

    configure_logging(cfg.log_level, cfg.log_file)
    ctx.obj = cfg

    if ctx.invoked_subcommand is None:
        ctx.invoke(stations_cmd)


def _feed_options(fn: click.decorators.FC) -> click.decorators.FC:
    fn = click.option(
        "--print",
        "print_only",
        is_flag=True,
        default=False,
        help="Print the table to stdout instead of opening the viewer.",
    )(fn)
    fn = click.option("--url", default=None, help="Fetch the feed from this URL.")(fn)
    return fn


def _show_feed(feed: Feed, cfg: BuoyViewConfig, url: str | None, print_only: bool) -> None:
    try:
        if url:
            cfg = cfg.with_overrides(**{feed.url_setting: url})
        rows = load_rows(feed, cfg)
    except BuoyViewError as exc:
        _fail(exc)

    if print_only:
        from buoyview.cli._print import cmd_print

        cmd_print(feed, rows, console)
        return

    level = viewer_log_level(cfg.log_level, cfg.log_file)
    if level != cfg.log_level:
        logger.warning(
            "stderr_log_level_raised",
            requested=cfg.log_level,
            level=level,
            hint="pass --log-file to keep debug records while the viewer is open",
        )
        configure_logging(level, cfg.log_file)

    from buoyview.ui.app import run

    run(feed, rows)


@cli.command("stations")
@_feed_options
@click.pass_obj
def stations_cmd(cfg: BuoyViewConfig, url: str | None = None, print_only: bool = False) -> None:
    """Show the NDBC active stations list."""
    _show_feed(STATIONS, cfg, url, print_only)


@cli.command("observations")
@_feed_options
@click.pass_obj
def observations_cmd(
    cfg: BuoyViewConfig, url: str | None = None, print_only: bool = False
) -> None:
    """Show the latest observation from every reporting station."""
    _show_feed(OBSERVATIONS, cfg, url, print_only)


def main() -> None:
    cli()
