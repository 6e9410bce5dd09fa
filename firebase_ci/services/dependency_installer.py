"""
Dependency Installer

Installs firebase-tools and functions dependencies before deploying.
"""

import shutil
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, List, Optional

from firebase_ci.constants import FIREBASE_TOOLS_PACKAGE, FUNCTIONS_DIR, NPM_BIN
from firebase_ci.exceptions import InstallError
from firebase_ci.logger import CiLogger
from firebase_ci.models.settings import FirebaseRc
from firebase_ci.services.command_runner import CommandRunner
from firebase_ci.services.settings_service import SettingsService


class DependencyInstaller:
    """
    Install firebase-tools and functions folder dependencies.

    The tools install and the functions install touch disjoint locations,
    so they run concurrently. Both are awaited and the first failure is
    raised once both have finished.
    """

    def __init__(
        self,
        runner: CommandRunner,
        settings_service: SettingsService,
        logger: CiLogger,
        base_command: List[str],
        which: Callable[[str], Optional[str]] = shutil.which,
    ):
        self.runner = runner
        self.which = which
        self.settings_service = settings_service
        self.logger = logger
        self.base_command = base_command

    def tools_version(self) -> Optional[str]:
        """
        Get the installed firebase-tools version.

        Returns:
            Version string, or None when the binary is not available

        Raises:
            InstallError: If the version check runs but fails
        """
        self.logger.info("Checking to see if firebase-tools is installed...")
        if self.which(self.base_command[0]) is None:
            return None

        try:
            result = self.runner.run(
                [*self.base_command, "--version"],
                pipe_output=False,
                error_cls=InstallError,
            )
        except InstallError as e:
            raise InstallError(
                "Error attempting to check for firebase-tools version.",
                returncode=e.returncode,
                stdout=e.stdout,
                stderr=e.stderr,
            ) from e
        return result.stdout.strip() or None

    def pending_installs(
        self, settings: FirebaseRc, info: bool = False
    ) -> List[Callable[[], object]]:
        """Build the list of install steps required by the current project."""
        installs: List[Callable[[], object]] = []
        version = self.tools_version()

        if settings.skip_tools_install:
            if not version:
                raise InstallError(
                    "firebase-tools install skipped, and no existing version found!"
                )
            self.logger.info("Installing of firebase-tools skipped based on config settings.")
        elif version:
            self.logger.info(f"firebase-tools already exists, version: {version}")
        else:
            package = FIREBASE_TOOLS_PACKAGE
            if settings.tools_version:
                package = f"{package}@{settings.tools_version}"
            args = [NPM_BIN, "i", package]
            if not info:
                args.append("-q")
            installs.append(
                lambda: self.runner.run(
                    args,
                    before_msg="firebase-tools does not already exist, installing...",
                    error_msg="Error installing firebase-tools.",
                    success_msg="Firebase tools installed successfully!",
                    error_cls=InstallError,
                )
            )

        if (
            self.settings_service.functions_exists()
            and not self.settings_service.functions_node_modules_exist()
            and not settings.skip_functions_install
        ):
            installs.append(
                lambda: self.runner.run(
                    [NPM_BIN, "i", "--prefix", FUNCTIONS_DIR],
                    before_msg="Running npm install in functions folder...",
                    error_msg="Error installing functions dependencies.",
                    success_msg="Functions dependencies installed successfully!",
                    error_cls=InstallError,
                )
            )

        return installs

    def install(self, settings: FirebaseRc, info: bool = False) -> None:
        """
        Install everything the deploy step needs.

        Args:
            settings: Parsed .firebaserc settings
            info: Show full npm output instead of quiet installs

        Raises:
            InstallError: If any install fails
        """
        installs = self.pending_installs(settings, info=info)
        if not installs:
            return

        with ThreadPoolExecutor(max_workers=len(installs)) as executor:
            futures = [executor.submit(install) for install in installs]
            wait(futures)

        for future in futures:
            error = future.exception()
            if error is not None:
                raise error
