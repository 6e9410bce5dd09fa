"""
Map Env Command

Map CI environment variables into Firebase functions config.
"""

from typing import List, Optional

import click

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.core.projects import resolve_context_project


class MapEnvCommand(BaseCommand):
    """
    Set functions config from CI environment variables.

    The ci.mapEnv block of .firebaserc maps environment variable names to
    functions config paths, e.g. {"SOME_TOKEN": "some.token"}.
    """

    def config_pairs(self, map_env: dict) -> List[str]:
        """Build name=value pairs for every mapped variable that is set."""
        pairs = []
        for env_name, functions_name in map_env.items():
            value = self.env.get(env_name)
            if not value:
                self.logger.warning(
                    f"[cyan]{env_name}[/cyan] does not exist on within environment variables"
                )
                continue
            pairs.append(f"{functions_name}={value}")
        return pairs

    def map_env(self, project: Optional[str] = None) -> bool:
        """
        Run functions:config:set for the resolved project.

        Returns:
            True when functions config was set
        """
        settings = self.settings_service.load_settings(required=False)
        if not settings.ci.map_env:
            self.logger.warning("mapEnv parameter with settings needed in .firebaserc!")
            return False

        context = self.resolve_context()
        resolved = resolve_context_project(context, settings.projects, project)
        if not resolved.is_mapped:
            self.logger.warning(
                f"Project [cyan]{resolved.key}[/cyan] is not an alias, skipping mapEnv"
            )
            return False

        pairs = self.config_pairs(settings.ci.map_env)
        if not pairs:
            self.logger.warning("No mapped environment variables are set, skipping mapEnv")
            return False

        self.runner.run(
            [*self.base_command, "functions:config:set", *pairs, "-P", resolved.key],
            before_msg="Mapping Environment to Firebase Functions...",
            error_msg="Error setting Firebase functions config from environment variables",
            success_msg="Successfully set functions config from variables in CI environment",
            redact=pairs,
        )
        return True

    def execute(self, project: Optional[str] = None) -> None:
        self.map_env(project=project)


@click.command(name="mapEnv")
@click.option("--project", "-p", help="Project alias to set config for")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def map_env(project, verbose):
    """
    Map environment variables to Firebase functions config

    Reads the ci.mapEnv block of .firebaserc.

    Examples:
        firebase-ci mapEnv
        firebase-ci mapEnv -p stage
    """
    cmd = MapEnvCommand(CommandServices.create(verbose=verbose))
    cmd.run(project=project)
