"""
firebase-ci Exception Hierarchy

Clean exception hierarchy for consistent error handling across the CLI.
"""

from typing import Optional


class FirebaseCiError(Exception):
    """Base exception for all firebase-ci errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class ConfigurationError(FirebaseCiError):
    """Raised when configuration is invalid or missing."""

    pass


class ConfigMissingError(ConfigurationError):
    """Raised when a required settings file does not exist."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"{file_name} file is required")


class ConfigInvalidError(ConfigurationError):
    """Raised when a settings file can not be parsed as JSON."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        super().__init__(
            f"Unable to parse {file_name} - JSON is most likely not valid",
            context=reason,
        )


class CommandError(FirebaseCiError):
    """Raised when an external command exits with a non-zero code."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        details = (stderr or stdout).strip()
        super().__init__(message, context=details or None)


class InstallError(CommandError):
    """Raised when installing firebase-tools or functions dependencies fails."""

    pass


class DeployError(CommandError):
    """Raised when the deploy command fails."""

    pass
