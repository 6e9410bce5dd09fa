"""
Deploy Command

Deploy the current branch to its Firebase project.
"""

import click

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.commands.run_actions import RunActionsCommand
from firebase_ci.core.orchestrator import DeployOptions, DeployOrchestrator
from firebase_ci.models.decision import DeployDecision
from firebase_ci.services.dependency_installer import DependencyInstaller


class DeployCommand(BaseCommand):
    """
    Deploy to Firebase from CI.

    Features:
    - Skips non-CI, pull request and unmapped builds
    - Installs firebase-tools and functions dependencies
    - Runs CI actions unless --simple is passed
    """

    def __init__(self, services: CommandServices, options: DeployOptions):
        super().__init__(services)
        self.options = options

    def build_orchestrator(self) -> DeployOrchestrator:
        installer = DependencyInstaller(
            self.runner, self.settings_service, self.logger, self.base_command
        )
        return DeployOrchestrator(
            context=self.resolve_context(fetch_message=True),
            settings_service=self.settings_service,
            runner=self.runner,
            installer=installer,
            logger=self.logger,
            base_command=self.base_command,
            run_actions=lambda: RunActionsCommand(self.services).run_actions(
                project=self.options.project
            ),
        )

    def execute(self) -> DeployDecision:
        context = self.resolve_context(fetch_message=True)
        details = {"Only": self.options.only} if self.options.only else None
        self.show_header(
            title="Deploy",
            project=self.options.project,
            branch=context.branch_name,
            details=details,
        )
        return self.build_orchestrator().run(self.options)


@click.command(name="deploy")
@click.option("--project", "-p", help="Project alias to deploy to")
@click.option("--only", "-o", help="Only deploy these targets (e.g. hosting,functions)")
@click.option("--simple", "-s", is_flag=True, help="Skip CI actions, only deploy")
@click.option("--debug", "-d", is_flag=True, help="Pass --debug to firebase-tools")
@click.option("--info", "-i", is_flag=True, help="Show full npm install output")
@click.option("--assume-ci", is_flag=True, hidden=True, help="Deploy outside of CI")
def deploy(project, only, simple, debug, info, assume_ci):
    """
    Deploy to Firebase

    The project alias is chosen from FIREBASE_CI_PROJECT, --project or the
    branch name. Pull request builds and builds outside CI are skipped.

    Examples:
        firebase-ci deploy
        firebase-ci deploy -o hosting
        firebase-ci deploy -s -p stage
    """
    options = DeployOptions(
        project=project,
        only=only,
        simple=simple,
        debug=debug,
        info=info,
        assume_ci=assume_ci,
    )
    cmd = DeployCommand(CommandServices.create(verbose=debug), options)
    cmd.run()
