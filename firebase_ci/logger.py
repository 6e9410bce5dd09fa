"""
Logging system for firebase-ci
Provides color-coded console output with an optional plain-text log file
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

from firebase_ci.constants import LOG_TIME_FORMAT

console = Console(highlight=False)

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
MARKUP_TAG = re.compile(r"\[/?[a-z0-9 #()_.,]*\]")


class CiLogger:
    """
    Console logger used by every firebase-ci command.

    - One line per message, prefixed with a colored icon
    - Warnings and errors carry a "Warning:" / "Error:" prefix
    - Every line is also appended to the log file when one is configured
    """

    def __init__(
        self,
        log_path: Optional[Path] = None,
        verbose: bool = False,
        output: Optional[Console] = None,
    ):
        """
        Initialize logger

        Args:
            log_path: Optional file that receives a plain-text copy of all output
            verbose: If True, debug messages are shown in the console
            output: Console to print to (module console by default)
        """
        self.verbose = verbose
        self.console = output or console
        self.log_path = log_path
        self.log_file: Optional[TextIO] = None

        if log_path is not None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self.log_file = open(log_path, "a", buffering=1, encoding="utf-8")

    def _write(self, message: str, level: str) -> None:
        if not self.log_file:
            return
        timestamp = datetime.now().strftime(LOG_TIME_FORMAT)
        clean = ANSI_ESCAPE.sub("", MARKUP_TAG.sub("", message))
        self.log_file.write(f"[{timestamp}] [{level}] {clean}\n")

    def info(self, message: str) -> None:
        """Log an informational message"""
        self._write(message, "INFO")
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def success(self, message: str) -> None:
        """Log a success message"""
        self._write(message, "INFO")
        self.console.print(f"[green]✔[/green] {message}")

    def warning(self, message: str) -> None:
        """Log a warning message"""
        self._write(message, "WARNING")
        self.console.print(f"[yellow]⚠ Warning:[/yellow] {message}")

    def error(self, message: str, context: Optional[str] = None) -> None:
        """
        Log an error with optional context

        Args:
            message: Error message
            context: Additional detail (e.g. stderr of a failed command)
        """
        self._write(message, "ERROR")
        self.console.print(f"[red]✖ Error:[/red] {message}")
        if context:
            self._write(context, "ERROR")
            self.console.print(f"  [color(208)]{escape(context)}[/color(208)]")

    def debug(self, message: str) -> None:
        """Log a debug message (console only when verbose)"""
        self._write(message, "DEBUG")
        if self.verbose:
            self.console.print(f"[dim]{message}[/dim]")

    def log_command(self, args: list) -> None:
        """Log a command being executed"""
        self.debug(f"Executing: {' '.join(escape(str(a)) for a in args)}")

    def close(self) -> None:
        """Close log file"""
        if self.log_file:
            self.log_file.close()
            self.log_file = None
