"""
Copy Version Command

Copy the version from package.json to functions/package.json.
"""

import click

from firebase_ci.base import BaseCommand, CommandServices
from firebase_ci.constants import FUNCTIONS_DIR, PACKAGE_JSON_FILE

FUNCTIONS_PACKAGE_JSON = f"{FUNCTIONS_DIR}/{PACKAGE_JSON_FILE}"


class CopyVersionCommand(BaseCommand):
    """Keep the functions package version in step with the root package."""

    def copy_version(self, silence: bool = False) -> bool:
        """
        Copy the version field.

        Args:
            silence: Do not warn when there is no functions folder

        Returns:
            True when the version was copied
        """
        if not self.settings_service.functions_exists():
            if not silence:
                self.logger.warning("Functions folder does not exist. Exiting...")
            return False

        self.logger.info("Copying version from package.json to functions/package.json...")
        package = self.settings_service.read_json(PACKAGE_JSON_FILE, required=True)
        functions_package = self.settings_service.read_json(
            FUNCTIONS_PACKAGE_JSON, required=True
        )
        functions_package["version"] = package.get("version")
        self.settings_service.write_json(FUNCTIONS_PACKAGE_JSON, functions_package)
        self.logger.success("Version copied successfully")
        return True

    def execute(self, silence: bool = False) -> None:
        self.copy_version(silence=silence)


@click.command(name="copyVersion")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def copy_version(verbose):
    """
    Copy version from package.json to functions/package.json

    Examples:
        firebase-ci copyVersion
    """
    cmd = CopyVersionCommand(CommandServices.create(verbose=verbose))
    cmd.run()
