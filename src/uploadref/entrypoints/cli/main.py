"""uploadref CLI entry point.

Defines the top-level ``uploadref`` command (via Click-Extra), configures
logging from the global options, and registers the subcommands.

Available commands
- ``uploadref parse NAME`` - decompose an upload file name.
- ``uploadref check VALUE...`` - validate upload references against storage.

Examples
    $ uploadref --version
    $ uploadref parse "report_85e16d7b-58ed-43bc-8dce-7d3ff7d69f41.pdf"
    $ uploadref check --storage-root /srv/uploads "https://example.com/a.pdf"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from uploadref import __version__
from uploadref.interfaces.redactor import RedactorMode
from uploadref.logging import (
    DEFAULT_FLIGHT_RECORDER_CAPACITY,
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    effective_level,
    log_startup,
)

from .files import check, parse
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """uploadref command-line interface.

    Parse upload file names of the form <display>_<uuid>.<ext> and check that
    the temporary object each one refers to is present in storage.
    """


def _default_log_path() -> Path:
    return Path(user_log_dir("uploadref", appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Raise console verbosity one level above WARNING per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Lower console verbosity one level below WARNING per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight-recorder output file.",
    default=_default_log_path,
    envvar="UPLOADREF_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="UPLOADREF_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    envvar="UPLOADREF_FLIGHT_RECORDER",
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "with --force-flush."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    envvar="UPLOADREF_FORCE_FLUSH_FLIGHT_RECORDER",
    help="Always write the flight-recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="UPLOADREF_LOGGER_LEVEL",
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable, or a comma/space separated list "
        "in UPLOADREF_LOGGER_LEVEL."
    ),
    show_envvar=True,
)
@click.option(
    "--redactor-mode",
    "redactor_mode",
    type=click.Choice([mode.value for mode in RedactorMode], case_sensitive=False),
    envvar="UPLOADREF_REDACTOR_MODE",
    help=(
        "How URL values are scrubbed in logs and output. 'lenient' masks "
        "passwords, tokens and signatures; 'strict' also masks usernames and "
        "access-key ids."
    ),
    default=RedactorMode.LENIENT.value,
    show_envvar=True,
    show_default=True,
)
@clickx.pass_context
def uploadref(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """uploadref command-line interface."""
    level = effective_level(verbose_count, quiet_count)

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    configure_logging(handlers, logger_levels)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        redactor_mode=redactor_mode,
    )

    ctx.ensure_object(dict)
    ctx.obj["redactor_mode"] = RedactorMode(redactor_mode.lower())

    ctx.call_on_close(logging.shutdown)


uploadref.add_command(parse)
uploadref.add_command(check)
