"""
Run Actions Command

Run the CI actions configured in .firebaserc (copyVersion, mapEnv).
"""

from typing import Optional

import click

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.commands.copy_version import CopyVersionCommand
from firebase_ci.commands.map_env import MapEnvCommand


class RunActionsCommand(BaseCommand):
    """Run pre-deploy actions."""

    def run_actions(self, project: Optional[str] = None) -> None:
        CopyVersionCommand(self.services).copy_version()

        settings = self.settings_service.load_settings(required=False)
        if self.settings_service.functions_exists() and settings.ci.map_env:
            MapEnvCommand(self.services).map_env(project=project)
        else:
            self.logger.info(
                "No ci action settings found in .firebaserc. Skipping action phase."
            )

    def execute(self, project: Optional[str] = None) -> None:
        self.run_actions(project=project)


@click.command(name="run")
@click.option("--project", "-p", help="Project alias")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def run(project, verbose):
    """
    Run CI actions (copyVersion, mapEnv)

    Examples:
        firebase-ci run
    """
    cmd = RunActionsCommand(CommandServices.create(verbose=verbose))
    cmd.run(project=project)
