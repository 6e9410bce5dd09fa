from unittest.mock import MagicMock

import pytest

from firebase_ci.core.orchestrator import (
    DeployOptions,
    DeployOrchestrator,
    build_deploy_args,
    decide,
)
from firebase_ci.exceptions import ConfigMissingError, DeployError
from firebase_ci.models.context import CIContext
from firebase_ci.models.decision import (
    DecisionKind,
    Proceed,
    ResolvedProject,
    SkipNonCI,
    SkipPullRequest,
    SkipUnmappedProject,
)
from firebase_ci.models.settings import FirebaseRc
from firebase_ci.services.settings_service import SettingsService


def ci_context(**kwargs):
    kwargs.setdefault("branch_name", "master")
    kwargs.setdefault("provider", "travis")
    return CIContext(**kwargs)


def settings_loader(data):
    return lambda: FirebaseRc.from_dict(data)


def fail_loader():
    raise AssertionError("settings must not be loaded")


def test_non_ci_build_is_skipped():
    decision = decide(DeployOptions(), CIContext(branch_name="master"), fail_loader)
    assert isinstance(decision, SkipNonCI)
    assert decision.kind is DecisionKind.SKIP_NON_CI


def test_assume_ci_bypasses_detection():
    decision = decide(
        DeployOptions(assume_ci=True),
        CIContext(branch_name="master"),
        settings_loader({"projects": {"default": "proj-1"}}),
    )
    assert isinstance(decision, Proceed)


def test_pull_request_is_skipped_before_reading_settings():
    decision = decide(DeployOptions(), ci_context(is_pull_request=True), fail_loader)
    assert isinstance(decision, SkipPullRequest)


def test_unmapped_project_is_skipped():
    decision = decide(
        DeployOptions(),
        ci_context(branch_name="feature", environment_slug="review"),
        settings_loader({"projects": {"stage": "proj-stage"}}),
    )
    assert isinstance(decision, SkipUnmappedProject)
    assert decision.key == "feature"
    assert decision.fallback_key == "review"


def test_master_branch_deploys_default_project():
    decision = decide(
        DeployOptions(),
        ci_context(branch_name="master", raw_commit_message="Fix bug"),
        settings_loader({"projects": {"default": "proj-1"}}),
    )
    assert isinstance(decision, Proceed)
    assert decision.project.name == "proj-1"
    assert decision.project.key == "default"
    assert decision.message == "'Fix bug'"
    assert decision.extra_args == []
    assert decision.debug is False


def test_only_and_token_are_passed():
    decision = decide(
        DeployOptions(only="hosting"),
        ci_context(token="secret"),
        settings_loader({"projects": {"default": "proj-1"}}),
    )
    assert decision.extra_args == ["--only", "hosting", "--token", "secret"]


def test_debug_from_settings():
    decision = decide(
        DeployOptions(),
        ci_context(),
        settings_loader({"projects": {"default": "proj-1"}, "debug": True}),
    )
    assert decision.debug is True


def test_build_deploy_args():
    decision = Proceed(
        project=ResolvedProject(key="stage", name="proj-stage"),
        message="Update",
        extra_args=["--only", "hosting"],
        debug=True,
    )
    assert build_deploy_args(decision, ["npx", "firebase"]) == [
        "npx",
        "firebase",
        "deploy",
        "--only",
        "hosting",
        "--non-interactive",
        "--project",
        "stage",
        "--message",
        "Update",
        "--debug",
    ]


@pytest.fixture
def orchestrator_factory(project_dir, logger):
    def _make(context, run_actions=None):
        runner = MagicMock()
        installer = MagicMock()
        orchestrator = DeployOrchestrator(
            context=context,
            settings_service=SettingsService(project_dir),
            runner=runner,
            installer=installer,
            logger=logger,
            base_command=["firebase"],
            run_actions=run_actions,
        )
        return orchestrator, runner, installer

    return _make


def test_skip_does_not_run_anything(orchestrator_factory, output):
    orchestrator, runner, installer = orchestrator_factory(CIContext(branch_name="master"))

    decision = orchestrator.run(DeployOptions())

    assert isinstance(decision, SkipNonCI)
    runner.run.assert_not_called()
    installer.install.assert_not_called()
    assert "Skipping Firebase Deploy" in output.export_text()


def test_deploy_runs_install_actions_and_deploy(orchestrator_factory, write_json, output):
    write_json(".firebaserc", {"projects": {"default": "proj-1"}})
    write_json("firebase.json", {})
    actions = MagicMock()
    orchestrator, runner, installer = orchestrator_factory(
        ci_context(token="secret"), run_actions=actions
    )

    decision = orchestrator.run(DeployOptions(debug=True))

    assert isinstance(decision, Proceed)
    installer.install.assert_called_once()
    actions.assert_called_once_with()
    args = runner.run.call_args[0][0]
    assert args[:2] == ["firebase", "deploy"]
    assert "--token" in args
    assert runner.run.call_args[1]["error_cls"] is DeployError
    assert runner.run.call_args[1]["redact"] == ["secret"]
    assert "secret" not in output.export_text()


def test_simple_mode_skips_actions(orchestrator_factory, write_json):
    write_json(".firebaserc", {"projects": {"default": "proj-1"}, "skipDependencyInstall": True})
    write_json("firebase.json", {})
    actions = MagicMock()
    orchestrator, runner, installer = orchestrator_factory(ci_context(), run_actions=actions)

    orchestrator.run(DeployOptions(simple=True))

    actions.assert_not_called()
    installer.install.assert_not_called()
    runner.run.assert_called_once()


def test_missing_firebase_json_fails(orchestrator_factory, write_json):
    write_json(".firebaserc", {"projects": {"default": "proj-1"}})
    orchestrator, runner, _ = orchestrator_factory(ci_context())

    with pytest.raises(ConfigMissingError):
        orchestrator.run(DeployOptions())
    runner.run.assert_not_called()


def test_missing_settings_fails(orchestrator_factory):
    orchestrator, _, _ = orchestrator_factory(ci_context())

    with pytest.raises(ConfigMissingError) as exc_info:
        orchestrator.run(DeployOptions())
    assert exc_info.value.message == ".firebaserc file is required"


def test_missing_token_warns(orchestrator_factory, write_json, output):
    write_json(".firebaserc", {"projects": {"default": "proj-1"}})
    write_json("firebase.json", {})
    orchestrator, _, _ = orchestrator_factory(ci_context())

    orchestrator.run(DeployOptions(simple=True))

    assert "FIREBASE_TOKEN" in output.export_text()
