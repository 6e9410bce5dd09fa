import json
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Allow tests to import `firebase_ci` without installing the package.
sys.path.insert(0, str(Path(__file__).parents[1]))

from firebase_ci.base import CommandServices
from firebase_ci.constants import (
    BRANCH_ENV_VARS,
    CI_PROVIDER_ENV_VARS,
    COMMIT_MESSAGE_ENV_VARS,
    ENV_DEBUG,
    ENV_ENVIRONMENT_SLUG,
    ENV_GITHUB_ENV,
    ENV_GITHUB_SHA,
    ENV_LOG_FILE,
    ENV_PROJECT_OVERRIDE,
    ENV_TOKEN,
    PULL_REQUEST_ENV_VARS,
)
from firebase_ci.logger import CiLogger
from firebase_ci.services.command_runner import CommandRunner
from firebase_ci.services.settings_service import SettingsService

CI_ENV_VARS = {
    *(name for name, _ in BRANCH_ENV_VARS),
    *(name for names in CI_PROVIDER_ENV_VARS.values() for name in names),
    *COMMIT_MESSAGE_ENV_VARS,
    *PULL_REQUEST_ENV_VARS,
    ENV_DEBUG,
    ENV_ENVIRONMENT_SLUG,
    ENV_GITHUB_ENV,
    ENV_GITHUB_SHA,
    ENV_LOG_FILE,
    ENV_PROJECT_OVERRIDE,
    ENV_TOKEN,
}


@pytest.fixture(autouse=True)
def clean_ci_env(monkeypatch):
    """Run every test as if outside of CI."""
    for name in CI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output():
    return Console(record=True, width=200, force_terminal=False, highlight=False)


@pytest.fixture
def logger(output):
    return CiLogger(output=output)


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Empty project directory used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_json(project_dir):
    def _write(relative: str, data: dict) -> Path:
        path = project_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_services(project_dir, logger):
    """Build CommandServices around a fake runner and an explicit environment."""

    def _make(env=None, runner=None, base_command=None):
        settings_service = SettingsService(project_dir)
        return CommandServices(
            logger=logger,
            settings_service=settings_service,
            runner=runner or CommandRunner(logger, cwd=project_dir),
            env=dict(env or {}),
            base_command=base_command or ["firebase"],
        )

    return _make
