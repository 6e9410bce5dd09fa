"""
Set Env Command

Export variables from the ci.setEnv block of .firebaserc to the current
process and, on GitHub Actions, to later workflow steps.
"""

import json
import os
from pathlib import Path
from typing import Optional

import click
from dotenv import set_key

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.constants import ENV_GITHUB_ACTIONS, ENV_GITHUB_ENV
from firebase_ci.core.environment import env_flag
from firebase_ci.core.projects import resolve_environment_block
from firebase_ci.core.templating import build_template_context, render_settings
from firebase_ci.exceptions import ConfigurationError


class SetEnvCommand(BaseCommand):
    """Set environment variables for the environment matching the current build."""

    def github_env_file(self) -> Optional[Path]:
        if not env_flag(self.env, ENV_GITHUB_ACTIONS):
            return None
        github_env = self.env.get(ENV_GITHUB_ENV)
        return Path(github_env) if github_env else None

    def execute(self, project: Optional[str] = None) -> None:
        settings = self.settings_service.load_settings()
        if not settings.ci.set_env:
            self.logger.error("no setEnv settings found")
            return

        match = resolve_environment_block(
            self.resolve_context(), settings.ci.set_env, project
        )
        if match is None:
            raise ConfigurationError("Valid setEnv settings could not be loaded")

        environment, block = match
        self.logger.info(f"Setting environment from config for [cyan]{environment}[/cyan]")
        context = build_template_context(self.env, self.settings_service.package_version())
        values = render_settings(block, context, on_warning=self.logger.warning)

        github_env = self.github_env_file()
        if github_env is not None:
            github_env.touch(exist_ok=True)

        for name, value in values.items():
            if isinstance(value, dict):
                value = json.dumps(value)
            os.environ[name] = value
            self.env[name] = value
            if github_env is not None:
                set_key(str(github_env), name, value, quote_mode="never")
            self.logger.debug(f"Set {name}")

        self.logger.success(f"Set {len(values)} environment variable(s)")


@click.command(name="setEnv")
@click.option("--project", "-p", help="Project alias")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def set_env(project, verbose):
    """
    Set environment variables from ci.setEnv in .firebaserc

    On GitHub Actions variables are also written to $GITHUB_ENV.

    Examples:
        firebase-ci setEnv
    """
    cmd = SetEnvCommand(CommandServices.create(verbose=verbose))
    cmd.run(project=project)
