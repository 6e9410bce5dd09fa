#!/usr/bin/env python3
"""firebase-ci - Main entry point"""

import functools
import os
import sys

import rich_click as click
from click.exceptions import Abort, ClickException, UsageError
from rich.markup import escape

from firebase_ci import __version__
from firebase_ci.commands.copy_version import copy_version
from firebase_ci.commands.create_config import create_config
from firebase_ci.commands.deploy import deploy
from firebase_ci.commands.map_env import map_env
from firebase_ci.commands.project import branch, project, project_id
from firebase_ci.commands.run_actions import run
from firebase_ci.commands.serve import serve
from firebase_ci.commands.set_env import set_env
from firebase_ci.constants import ENV_DEBUG
from firebase_ci.logger import console

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100

# COMMANDS / OPTIONS
click.rich_click.STYLE_COMMAND = "bold cyan"
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_ARGUMENT = "bold yellow"

# HEADERS
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_USAGE = "bold yellow"
click.rich_click.STYLE_USAGE_COMMAND = "bold cyan"

# HELP TEXT
click.rich_click.STYLE_HELPTEXT_FIRST_LINE = "bold white"
click.rich_click.STYLE_HELPTEXT = ""
click.rich_click.STYLE_OPTION_DEFAULT = "dim cyan"
click.rich_click.STYLE_OPTIONS_PANEL_BORDER = "cyan"
click.rich_click.STYLE_COMMANDS_PANEL_BORDER = "cyan"
click.rich_click.ERRORS_EPILOGUE = ""


def handle_cli_errors(func):
    """Decorator to handle CLI errors gracefully."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except UsageError as e:
            message = escape(e.format_message())
            console.print(f"\n[bold red]✖ Error:[/bold red] {message}\n")
            if e.ctx and e.ctx.command:
                console.print(
                    f"[dim]Run[/dim] [cyan]firebase-ci {e.ctx.command.name} --help[/cyan] "
                    "[dim]for usage information[/dim]\n"
                )
            sys.exit(e.exit_code)
        except ClickException as e:
            e.show()
            sys.exit(e.exit_code)
        except (Abort, KeyboardInterrupt):
            console.print("\n[yellow]⚠ Operation cancelled by user[/yellow]")
            sys.exit(130)
        except Exception as e:
            console.print(f"\n[bold red]✖ Unexpected error:[/bold red] {escape(str(e))}\n")
            if os.environ.get(ENV_DEBUG):
                import traceback

                traceback.print_exc()
            sys.exit(1)

    return wrapper


@click.group(cls=click.RichGroup)
@click.version_option(version=__version__)
def cli() -> None:
    """
    firebase-ci - Deploy to Firebase from CI builds.

    \b
    The branch being built picks the project alias from .firebaserc:
      firebase-ci deploy            # Deploy the current branch
      firebase-ci deploy -o hosting # Deploy only hosting
      firebase-ci createConfig      # Write ./src/config.js
      firebase-ci project           # Print the project for this branch
    """


cli.add_command(deploy)
cli.add_command(run)
cli.add_command(create_config)
cli.add_command(copy_version)
cli.add_command(map_env)
cli.add_command(set_env)
cli.add_command(serve)
cli.add_command(branch)
cli.add_command(project)
cli.add_command(project_id)


@handle_cli_errors
def main():
    """Main entry point with error handling."""
    cli(standalone_mode=False)


if __name__ == "__main__":
    main()
