"""
Project Commands

Print the branch, project name or projectId for the current build.
Output is a bare value so it can be captured in CI scripts.
"""

from typing import Optional

import click

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.core.projects import resolve_project_id, resolve_project_key, resolve_project_name


class BranchCommand(BaseCommand):
    """Print the branch name."""

    def execute(self) -> None:
        click.echo(self.resolve_context().branch_name)


class ProjectCommand(BaseCommand):
    """Print the Firebase project name mapped to the current branch."""

    def execute(self, project: Optional[str] = None) -> None:
        context = self.resolve_context()
        settings = self.settings_service.load_settings()
        key = resolve_project_key(context, project)
        name = resolve_project_name(key, settings.projects, context.environment_slug)
        if not name:
            self.exit_with_error(
                f"Project [cyan]{key}[/cyan] is not an alias in .firebaserc"
            )
        click.echo(name)


class ProjectIdCommand(BaseCommand):
    """Print the Firebase projectId for the current build."""

    def execute(
        self, project: Optional[str] = None, default_env: Optional[str] = None
    ) -> None:
        context = self.resolve_context()
        settings = self.settings_service.load_settings(required=False)
        project_id = resolve_project_id(context, settings, project, default_env)
        if not project_id:
            self.exit_with_error("Unable to determine projectId for the current build")
        click.echo(project_id)


@click.command(name="branch")
def branch():
    """
    Print the current branch name

    Examples:
        firebase-ci branch
    """
    BranchCommand(CommandServices.create()).run()


@click.command(name="project")
@click.option("--project", "-p", help="Project alias")
def project(project):
    """
    Print the Firebase project name for the current branch

    Examples:
        PROJECT=$(firebase-ci project)
    """
    ProjectCommand(CommandServices.create()).run(project=project)


@click.command(name="projectId")
@click.option("--project", "-p", help="Project alias")
@click.option("--default-env", help="Environment to fall back to in ci.createConfig")
def project_id(project, default_env):
    """
    Print the Firebase projectId for the current build

    Examples:
        firebase-ci projectId
    """
    ProjectIdCommand(CommandServices.create()).run(
        project=project, default_env=default_env
    )
