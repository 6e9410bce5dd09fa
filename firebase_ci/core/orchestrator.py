"""
Deploy Orchestrator

Decides whether a build deploys, builds the deploy argv and runs it.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from rich.markup import escape

from firebase_ci.core.message import sanitize_message
from firebase_ci.core.projects import resolve_context_project
from firebase_ci.exceptions import DeployError
from firebase_ci.logger import CiLogger
from firebase_ci.models.context import CIContext
from firebase_ci.models.decision import (
    DeployDecision,
    Proceed,
    SkipNonCI,
    SkipPullRequest,
    SkipUnmappedProject,
)
from firebase_ci.models.settings import FirebaseRc
from firebase_ci.services.command_runner import REDACTED, CommandRunner
from firebase_ci.services.dependency_installer import DependencyInstaller
from firebase_ci.services.settings_service import SettingsService

SKIP_PREFIX = "Skipping Firebase Deploy"


@dataclass
class DeployOptions:
    """Options for the deploy command."""

    project: Optional[str] = None
    only: Optional[str] = None
    simple: bool = False
    debug: bool = False
    info: bool = False
    assume_ci: bool = False


def decide(
    options: DeployOptions,
    context: CIContext,
    load_settings: Callable[[], FirebaseRc],
    logger: Optional[CiLogger] = None,
) -> DeployDecision:
    """
    Decide whether the current build should deploy.

    Checks run in order: CI detection, pull request, project alias. Settings
    are only loaded once the build is known to be a CI push build.

    Args:
        options: Deploy options
        context: CI context snapshot
        load_settings: Returns parsed .firebaserc settings
        logger: Logger for message sanitization warnings

    Returns:
        Exactly one deploy decision
    """
    if not context.is_ci and not options.assume_ci:
        return SkipNonCI()

    if context.is_pull_request:
        return SkipPullRequest()

    settings = load_settings()
    project = resolve_context_project(context, settings.projects, options.project)
    if not project.is_mapped:
        return SkipUnmappedProject(
            key=project.key, fallback_key=context.environment_slug
        )

    extra_args: List[str] = []
    if options.only:
        extra_args.extend(["--only", options.only])
    if context.token:
        extra_args.extend(["--token", context.token])

    return Proceed(
        project=project,
        message=sanitize_message(context.raw_commit_message, logger),
        extra_args=extra_args,
        debug=options.debug or context.debug or settings.debug,
    )


def build_deploy_args(decision: Proceed, base_command: List[str]) -> List[str]:
    """
    Build the argv for the deploy command.

    Returns:
        e.g. ["npx", "firebase", "deploy", "--only", "hosting",
        "--non-interactive", "--project", "prod", "--message", "Update"]
    """
    args = [
        *base_command,
        "deploy",
        *decision.extra_args,
        "--non-interactive",
        "--project",
        decision.project.key,
        "--message",
        decision.message,
    ]
    if decision.debug:
        args.append("--debug")
    return args


class DeployOrchestrator:
    """
    Run a deploy from decision to finished firebase process.

    Flow:
    1. decide() -> skip decisions are logged and end successfully
    2. Warn when FIREBASE_TOKEN is missing (ambient credentials are used)
    3. Require firebase.json
    4. Install dependencies unless skipDependencyInstall is set
    5. Run CI actions unless simple mode is enabled
    6. Run the deploy command
    """

    def __init__(
        self,
        context: CIContext,
        settings_service: SettingsService,
        runner: CommandRunner,
        installer: DependencyInstaller,
        logger: CiLogger,
        base_command: List[str],
        run_actions: Optional[Callable[[], None]] = None,
    ):
        self.context = context
        self.settings_service = settings_service
        self.runner = runner
        self.installer = installer
        self.logger = logger
        self.base_command = base_command
        self.run_actions = run_actions

    def run(self, options: DeployOptions) -> DeployDecision:
        """
        Run the deploy.

        Returns:
            The decision that was acted on

        Raises:
            ConfigurationError: If a required settings file is missing or invalid
            InstallError: If dependency installation fails
            DeployError: If the deploy command fails
        """
        decision = decide(
            options, self.context, self.settings_service.load_settings, self.logger
        )

        if isinstance(decision, SkipNonCI):
            self.logger.warning(
                f"[cyan]{SKIP_PREFIX}[/cyan] - Not a supported CI environment"
            )
            return decision

        if isinstance(decision, SkipPullRequest):
            self.logger.info(f"[cyan]{SKIP_PREFIX}[/cyan] - Build is a Pull Request")
            return decision

        if isinstance(decision, SkipUnmappedProject):
            fallback = decision.fallback_key or ""
            self.logger.info(
                f"{SKIP_PREFIX} - Project [cyan]{decision.key}[/cyan] is not an alias "
                f"and Fallback Project: [cyan]{fallback}[/cyan] is not an alias, exiting..."
            )
            return decision

        self._deploy(decision, options)
        return decision

    def _deploy(self, decision: Proceed, options: DeployOptions) -> None:
        project = decision.project

        if project.used_fallback:
            self.logger.info(
                f"Project [cyan]{project.requested_key}[/cyan] is not an alias, "
                f"using fallback alias [cyan]{project.key}[/cyan]"
            )

        if not self.context.token:
            self.logger.warning(
                "[cyan]FIREBASE_TOKEN[/cyan] environment variable not found, "
                "falling back to current Firebase auth"
            )

        self.settings_service.require_firebase_json()
        settings = self.settings_service.load_settings()

        if not settings.skip_dependency_install:
            self.installer.install(settings, info=options.info)
        else:
            self.logger.info("firebase-tools and functions dependencies installs skipped")

        if options.simple:
            self.logger.info("Simple mode enabled. Skipping CI actions")
        elif self.run_actions is not None:
            self.run_actions()

        args = build_deploy_args(decision, self.base_command)
        secrets = [self.context.token] if self.context.token else []
        if decision.debug:
            printable = [REDACTED if arg in secrets else arg for arg in args]
            self.logger.info(f"Calling deploy with: {escape(' '.join(printable))}")

        branch = self.context.branch_name
        self.runner.run(
            args,
            before_msg=(
                f"Deploying {branch} branch to {project.key} "
                f'Firebase project "{project.name}"'
            ),
            error_msg="Error deploying to firebase.",
            success_msg=(
                f"Successfully Deployed {branch} branch to {project.key} "
                f'Firebase project "{project.name}"'
            ),
            error_cls=DeployError,
            redact=secrets,
        )
