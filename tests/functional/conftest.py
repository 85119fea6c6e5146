"""Default marks and CLI fixtures for tests under `tests/functional/`."""

import logging
from pathlib import Path

import pytest
from alembic import command
from click.testing import CliRunner, Result

from govcat import config as govcat_config
from govcat.entrypoints.cli.main import govcat as govcat_cli

# pylint: disable=unused-argument,redefined-outer-name

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    for item in items:
        if FUNCTIONAL_ROOT in item.path.resolve().parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.functional)


# --- CLI fixtures -------------------------------------------------------------


@pytest.fixture
def runner() -> CliRunner:
    """A Click runner; stdout and stderr are captured separately."""
    return CliRunner()


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Flight-recorder file under the test's temp dir (never the user log dir)."""
    return tmp_path / "govcat.log"


@pytest.fixture
def migrated_db_url(sqlite_url: str) -> str:
    """URL of a SQLite file migrated to Alembic head."""
    command.upgrade(govcat_config.build_alembic_config(sqlite_url), "head")
    return sqlite_url


@pytest.fixture
def invoke(runner: CliRunner, log_path: Path, migrated_db_url: str):
    """Run ``govcat`` against the migrated database.

    Example:
        ```py
        result = invoke("services", "list", "--json")
        ```
    """

    def _invoke(*args: str, env: dict[str, str] | None = None, **kwargs) -> Result:
        full_env = {"GOVCAT_DB_URL": migrated_db_url, "GOVCAT_STRICT_LOAD": ""}
        full_env.update(env or {})
        return runner.invoke(
            govcat_cli,
            ["--log-path", str(log_path), *args],
            env=full_env,
            catch_exceptions=False,
            **kwargs,
        )

    return _invoke


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo the logger levels the CLI sets (-v/-q/-L) once a test finishes."""
    manager = logging.Logger.manager
    before = {
        name: lg.level
        for name, lg in manager.loggerDict.items()
        if isinstance(lg, logging.Logger)
    }
    root_level = logging.getLogger().level
    yield
    for name, lg in list(manager.loggerDict.items()):
        if isinstance(lg, logging.Logger):
            lg.setLevel(before.get(name, logging.NOTSET))
    logging.getLogger().setLevel(root_level)
