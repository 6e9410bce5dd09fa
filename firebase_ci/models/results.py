"""
Result Models

Dataclass models for command execution results.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ExecutionResult:
    """Result of a subprocess execution."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    args: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        """Check if execution succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if execution failed."""
        return self.returncode != 0

    def __repr__(self) -> str:
        command = " ".join(self.args)
        return f"ExecutionResult(returncode={self.returncode}, command='{command[:50]}')"
