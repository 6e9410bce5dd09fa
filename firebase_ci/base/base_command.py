"""
Base Command Class

Abstract base for all firebase-ci commands.
Provides shared services, context resolution and error handling.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from firebase_ci.constants import ENV_LOG_FILE
from firebase_ci.core.environment import resolve_ci_context
from firebase_ci.exceptions import FirebaseCiError
from firebase_ci.logger import CiLogger
from firebase_ci.models.context import CIContext
from firebase_ci.services.command_runner import CommandRunner
from firebase_ci.services.firebase_tools import firebase_base_command
from firebase_ci.services.settings_service import SettingsService
from firebase_ci.ui_components import show_header


@dataclass
class CommandServices:
    """Services shared by a command and the actions it runs."""

    logger: CiLogger
    settings_service: SettingsService
    runner: CommandRunner
    env: Dict[str, str] = field(default_factory=dict)
    base_command: List[str] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        verbose: bool = False,
        env: Optional[Dict[str, str]] = None,
        project_root: Optional[Path] = None,
    ) -> "CommandServices":
        """
        Build the services for one CLI invocation.

        Args:
            verbose: Show debug output
            env: Environment mapping (os.environ by default)
            project_root: Project directory (cwd by default)
        """
        env = dict(os.environ if env is None else env)
        log_file = env.get(ENV_LOG_FILE)
        logger = CiLogger(Path(log_file) if log_file else None, verbose=verbose)
        settings_service = SettingsService(project_root)
        runner = CommandRunner(logger, cwd=settings_service.project_root)
        return cls(
            logger=logger,
            settings_service=settings_service,
            runner=runner,
            env=env,
            base_command=firebase_base_command(),
        )


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Shared logger, settings, runner
    - Lazy CI context resolution
    - Header display
    - Error handling with exit codes
    """

    def __init__(self, services: CommandServices):
        self.services = services
        self.console: Console = services.logger.console
        self.logger = services.logger
        self.settings_service = services.settings_service
        self.runner = services.runner
        self.env = services.env
        self.base_command = services.base_command
        self._context: Optional[CIContext] = None

    def resolve_context(self, fetch_message: bool = False) -> CIContext:
        """
        Get the CI context for this invocation (resolved once).

        Args:
            fetch_message: Allow git to be called for the commit message
        """
        if self._context is None:
            self._context = resolve_ci_context(
                self.env,
                runner=self.runner if fetch_message else None,
                logger=self.logger,
            )
        return self._context

    def show_header(
        self,
        title: str,
        project: Optional[str] = None,
        branch: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> None:
        """Show command header."""
        show_header(
            title=title,
            project=project,
            branch=branch,
            details=details,
            console=self.console,
        )

    def exit_with_error(self, message: str, code: int = 1) -> None:
        """
        Log an error and exit.

        Args:
            message: Error message
            code: Exit code
        """
        self.logger.error(message)
        raise SystemExit(code)

    @abstractmethod
    def execute(self, **kwargs) -> None:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self, **kwargs) -> None:
        """
        Run command with error handling.

        Args:
            **kwargs: Command arguments
        """
        try:
            self.execute(**kwargs)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠ Operation cancelled by user[/yellow]")
            raise SystemExit(130)
        except SystemExit:
            raise
        except FirebaseCiError as e:
            self.logger.error(escape(e.message), context=e.context)
            raise SystemExit(1)
        except FileNotFoundError as e:
            self.logger.error(f"File not found: {escape(str(e))}")
            raise SystemExit(1)
        except PermissionError as e:
            self.logger.error(f"Permission denied: {escape(str(e))}")
            raise SystemExit(1)
        except Exception as e:
            self.logger.error(f"{type(e).__name__}: {escape(str(e))}")
            raise SystemExit(1)
        finally:
            self.logger.close()
