"""Top-level ``govcat`` command.

Sets up logging from the global options, then hands over to one of the
command groups:

    govcat db ...        schema management (upgrade, current, heads, history, status)
    govcat services ...  browse, search and register catalogue entries
    govcat health        liveness report as JSON

Examples
    $ govcat --version
    $ govcat -v db upgrade
    $ govcat services search -q passport -t travel
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from govcat import __version__
from govcat.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    LoggingOptions,
    configure_logging,
    log_startup,
)

from .db import db as db_group
from .health import health as health_command
from .helpers import parse_log_level
from .services import services as services_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path(user_log_dir("govcat", appauthor=False)) / "latest.log"

HELP = """Catalogue of government digital services.

    Each entry records what a service does, which agency owns it, where its
    documentation lives and a set of free-form tags used for search and for
    finding related services.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Environment:", fg="blue", bold=True, underline=True),
        "  GOVCAT_DB_URL      : SQLAlchemy URL of the catalogue database",
        "  GOVCAT_STRICT_LOAD : fail on malformed stored records instead of skipping",
        "  GOVCAT_LOG_PATH    : flight recorder log file",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    epilog=EPILOG,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose",
    count=True,
    help="Show more log output; repeat for more (-vv shows DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet",
    count=True,
    help="Show less log output; repeat for less.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="GOVCAT_LOG_PATH",
    show_default=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    help=(
        "Buffer recent DEBUG records in memory and write them to --log-path "
        "once a WARNING or ERROR is logged."
    ),
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_CAPACITY,
    envvar="GOVCAT_FLIGHT_RECORDER_CAPACITY",
    hidden=True,
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    help="Write the flight recorder to --log-path on exit even without errors.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="GOVCAT_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "Minimum level of one logger as NAME=LEVEL (e.g. -L sqlalchemy.engine=INFO). "
        "Repeatable. SQLAlchemy and Alembic default to WARNING."
    ),
)
@clickx.pass_context
def govcat(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Catalogue of government digital services."""
    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)

    options = LoggingOptions(
        verbosity=verbose - quiet,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(options)
    log_startup(logger, options, handlers, app_version=__version__)

    ctx.call_on_close(logging.shutdown)


for command in (db_group, services_group, health_command):
    govcat.add_command(command)
