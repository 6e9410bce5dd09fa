from unittest.mock import MagicMock

from firebase_ci.commands.serve import ServeCommand


def test_serve_project(make_services, write_json):
    write_json(".firebaserc", {"projects": {"default": "proj-prod"}})
    runner = MagicMock()

    ServeCommand(make_services(runner=runner)).execute(only="functions")

    assert runner.run.call_args[0][0] == [
        "firebase",
        "serve",
        "-P",
        "default",
        "--only",
        "functions",
    ]


def test_serve_unmapped_project(make_services, write_json, output):
    write_json(".firebaserc", {"projects": {"stage": "proj-stage"}})
    runner = MagicMock()

    ServeCommand(make_services(env={"TRAVIS_BRANCH": "feature"}, runner=runner)).execute()

    runner.run.assert_not_called()
    assert "skipping serve" in output.export_text()
