import json

import pytest
from click.testing import CliRunner

from firebase_ci.main import cli


def flat(output):
    return " ".join(output.split())


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def firebaserc(write_json):
    return write_json(
        ".firebaserc",
        {
            "projects": {"default": "proj-prod", "stage": "proj-stage"},
            "ci": {
                "createConfig": {
                    "master": {"firebase": {"projectId": "prod-id"}},
                }
            },
        },
    )


def test_help_lists_commands(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for name in ("deploy", "createConfig", "copyVersion", "mapEnv", "setEnv", "projectId"):
        assert name in flat(result.output)


def test_branch(cli_runner, project_dir, monkeypatch):
    monkeypatch.setenv("GITHUB_REF", "refs/heads/stage")
    result = cli_runner.invoke(cli, ["branch"])
    assert result.exit_code == 0
    assert result.output == "stage\n"


def test_project(cli_runner, firebaserc, monkeypatch):
    monkeypatch.setenv("TRAVIS_BRANCH", "stage")
    result = cli_runner.invoke(cli, ["project"])
    assert result.exit_code == 0
    assert result.output == "proj-stage\n"


def test_project_for_master(cli_runner, firebaserc):
    result = cli_runner.invoke(cli, ["project"])
    assert result.output == "proj-prod\n"


def test_project_id(cli_runner, firebaserc):
    result = cli_runner.invoke(cli, ["projectId"])
    assert result.exit_code == 0
    assert result.output == "prod-id\n"


def test_project_without_settings_fails(cli_runner, project_dir):
    result = cli_runner.invoke(cli, ["project"])
    assert result.exit_code == 1
    assert ".firebaserc file is required" in flat(result.output)


def test_deploy_outside_ci_is_skipped(cli_runner, project_dir):
    result = cli_runner.invoke(cli, ["deploy"])
    assert result.exit_code == 0
    assert "Skipping Firebase Deploy" in flat(result.output)
    assert "Not a supported CI environment" in flat(result.output)


def test_deploy_pull_request_is_skipped(cli_runner, project_dir, monkeypatch):
    monkeypatch.setenv("TRAVIS", "true")
    monkeypatch.setenv("TRAVIS_PULL_REQUEST", "7")
    result = cli_runner.invoke(cli, ["deploy"])
    assert result.exit_code == 0
    assert "Build is a Pull Request" in flat(result.output)


def test_deploy_unmapped_project_is_skipped(cli_runner, project_dir, write_json, monkeypatch):
    write_json(".firebaserc", {"projects": {"stage": "proj-stage"}})
    monkeypatch.setenv("TRAVIS", "true")
    monkeypatch.setenv("TRAVIS_BRANCH", "feature")
    result = cli_runner.invoke(cli, ["deploy"])
    assert result.exit_code == 0
    assert "is not an alias" in flat(result.output)


def test_deploy_without_settings_fails(cli_runner, project_dir, monkeypatch):
    monkeypatch.setenv("TRAVIS", "true")
    result = cli_runner.invoke(cli, ["deploy"])
    assert result.exit_code == 1
    assert ".firebaserc file is required" in flat(result.output)


def test_create_config(cli_runner, firebaserc, project_dir):
    result = cli_runner.invoke(cli, ["createConfig", "--path", "config.json"])
    assert result.exit_code == 0
    data = json.loads((project_dir / "config.json").read_text())
    assert data == {"firebase": {"projectId": "prod-id"}}


def test_copy_version(cli_runner, write_json, project_dir):
    write_json("package.json", {"version": "9.9.9"})
    write_json("functions/package.json", {"version": "1.0.0"})
    result = cli_runner.invoke(cli, ["copyVersion"])
    assert result.exit_code == 0
    data = json.loads((project_dir / "functions" / "package.json").read_text())
    assert data["version"] == "9.9.9"


def test_log_file(cli_runner, project_dir, monkeypatch):
    log_path = project_dir / "logs" / "firebase-ci.log"
    monkeypatch.setenv("FIREBASE_CI_LOG_FILE", str(log_path))
    result = cli_runner.invoke(cli, ["deploy"])
    assert result.exit_code == 0
    assert "Skipping Firebase Deploy" in log_path.read_text()
