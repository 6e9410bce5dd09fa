from unittest.mock import MagicMock

from firebase_ci.commands.map_env import MapEnvCommand
from firebase_ci.commands.run_actions import RunActionsCommand

SETTINGS = {
    "projects": {"default": "proj-prod", "stage": "proj-stage"},
    "ci": {"mapEnv": {"SOME_TOKEN": "some.token", "OTHER_KEY": "other.key"}},
}


def test_sets_functions_config(make_services, write_json):
    write_json(".firebaserc", SETTINGS)
    runner = MagicMock()
    services = make_services(
        env={"TRAVIS_BRANCH": "stage", "SOME_TOKEN": "abc", "OTHER_KEY": "xyz"},
        runner=runner,
    )

    assert MapEnvCommand(services).map_env() is True

    args = runner.run.call_args[0][0]
    assert args == [
        "firebase",
        "functions:config:set",
        "some.token=abc",
        "other.key=xyz",
        "-P",
        "stage",
    ]
    assert runner.run.call_args[1]["redact"] == ["some.token=abc", "other.key=xyz"]


def test_missing_variables_are_skipped(make_services, write_json, output):
    write_json(".firebaserc", SETTINGS)
    runner = MagicMock()
    services = make_services(env={"SOME_TOKEN": "abc"}, runner=runner)

    MapEnvCommand(services).map_env()

    args = runner.run.call_args[0][0]
    assert "some.token=abc" in args
    assert args[-2:] == ["-P", "default"]
    assert "OTHER_KEY does not exist" in output.export_text()


def test_without_map_env_settings(make_services, write_json, output):
    write_json(".firebaserc", {"projects": {"default": "proj"}})
    runner = MagicMock()

    assert MapEnvCommand(make_services(runner=runner)).map_env() is False

    runner.run.assert_not_called()
    assert "mapEnv parameter with settings needed" in output.export_text()


def test_unmapped_project_is_skipped(make_services, write_json):
    write_json(".firebaserc", {"projects": {"stage": "proj"}, "ci": SETTINGS["ci"]})
    runner = MagicMock()
    services = make_services(env={"TRAVIS_BRANCH": "feature", "SOME_TOKEN": "abc"}, runner=runner)

    assert MapEnvCommand(services).map_env() is False
    runner.run.assert_not_called()


def test_run_actions_copies_version_and_maps_env(make_services, write_json, project_dir):
    write_json(".firebaserc", SETTINGS)
    write_json("package.json", {"version": "1.2.3"})
    write_json("functions/package.json", {"version": "0.0.0"})
    runner = MagicMock()
    services = make_services(env={"SOME_TOKEN": "abc"}, runner=runner)

    RunActionsCommand(services).run_actions()

    assert '"version": "1.2.3"' in (project_dir / "functions" / "package.json").read_text()
    assert runner.run.call_args[0][0][1] == "functions:config:set"


def test_run_actions_without_functions(make_services, write_json, output):
    write_json(".firebaserc", SETTINGS)
    runner = MagicMock()

    RunActionsCommand(make_services(runner=runner)).run_actions()

    runner.run.assert_not_called()
    assert "Skipping action phase" in output.export_text()
