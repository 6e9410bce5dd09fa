"""
Create Config Command

Write a config file (JS module or JSON) from the ci.createConfig block of
.firebaserc, filling ${VAR} placeholders from the environment.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import click

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.constants import DEFAULT_CONFIG_PATH
from firebase_ci.core.projects import resolve_environment_block
from firebase_ci.core.templating import build_template_context, render_settings
from firebase_ci.exceptions import ConfigurationError


def to_js_module(config: Dict[str, Any]) -> str:
    """
    Render config as an ES module with one named export per top level key.

    Example:
        export const firebase = {
          apiKey: "abc",
        };

        export default { firebase }
    """
    parts = []
    for name, value in config.items():
        if isinstance(value, dict):
            children = "".join(
                f"  {child_key}: {json.dumps(child, ensure_ascii=False)},\n"
                for child_key, child in value.items()
            )
            parts.append(f"export const {name} = {{\n{children}}};\n\n")
        else:
            parts.append(
                f"export const {name} = {json.dumps(value, ensure_ascii=False)};\n\n"
            )
    parts.append(f"export default {{ {', '.join(config)} }}")
    return "".join(parts)


class CreateConfigCommand(BaseCommand):
    """Create a config file for the environment matching the current build."""

    def build_config(self, project: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Render the matching createConfig block.

        Returns:
            Rendered config, or None when there is no createConfig block

        Raises:
            ConfigurationError: If no block matches the current build
        """
        settings = self.settings_service.load_settings()
        if not settings.ci.create_config:
            self.logger.error("no createConfig settings found")
            return None

        match = resolve_environment_block(
            self.resolve_context(), settings.ci.create_config, project
        )
        if match is None:
            raise ConfigurationError("Valid create config settings could not be loaded")

        environment, block = match
        self.logger.info(f"Creating config for environment [cyan]{environment}[/cyan]")
        context = build_template_context(self.env, self.settings_service.package_version())
        return render_settings(block, context, on_warning=self.logger.warning)

    def write_config(self, config: Dict[str, Any], path: str) -> Path:
        target = self.settings_service.path(path)
        if target.suffix == ".json":
            content = json.dumps(config, indent=2, ensure_ascii=False)
        else:
            content = to_js_module(config)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError("Error writing config file", context=str(e)) from e
        return target

    def execute(self, project: Optional[str] = None, path: str = DEFAULT_CONFIG_PATH) -> None:
        config = self.build_config(project=project)
        if config is None:
            return
        self.write_config(config, path)
        self.logger.success(f"{path} created successfully")


@click.command(name="createConfig")
@click.option("--project", "-p", help="Project alias")
@click.option(
    "--path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Output file (.json writes JSON, anything else a JS module)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def create_config(project, path, verbose):
    """
    Create a config file from ci.createConfig in .firebaserc

    Examples:
        firebase-ci createConfig
        firebase-ci createConfig --path ./src/config.json
    """
    cmd = CreateConfigCommand(CommandServices.create(verbose=verbose))
    cmd.run(project=project, path=path)
