"""
Serve Command

Serve the project locally with firebase-tools.
"""

from typing import Optional

import click

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.core.projects import resolve_context_project


class ServeCommand(BaseCommand):
    """Run firebase serve for the project mapped to the current branch."""

    def execute(self, project: Optional[str] = None, only: Optional[str] = None) -> None:
        settings = self.settings_service.load_settings(required=False)
        resolved = resolve_context_project(self.resolve_context(), settings.projects, project)
        if not resolved.is_mapped:
            self.logger.warning(
                f"Project [cyan]{resolved.key}[/cyan] is not an alias, skipping serve"
            )
            return

        args = [*self.base_command, "serve", "-P", resolved.key]
        if only:
            args.extend(["--only", only])

        label = f"{resolved.name} (alias {resolved.key})"
        self.runner.run(
            args,
            before_msg=f"Calling serve for project {label}",
            error_msg=f"Error calling serve for project {label}",
            success_msg=f"Serve finished for project {label}",
        )


@click.command(name="serve")
@click.option("--project", "-p", help="Project alias to serve")
@click.option("--only", "-o", help="Only serve these targets")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def serve(project, only, verbose):
    """
    Serve the Firebase project locally

    Examples:
        firebase-ci serve
        firebase-ci serve -o functions
    """
    cmd = ServeCommand(CommandServices.create(verbose=verbose))
    cmd.run(project=project, only=only)
