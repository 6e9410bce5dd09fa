"""
CI Context Model

Immutable snapshot of the CI environment, taken once per invocation.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CIContext:
    """Normalized view of the CI provider environment."""

    branch_name: str
    is_pull_request: bool = False
    raw_commit_message: Optional[str] = None
    provider: Optional[str] = None
    environment_slug: Optional[str] = None
    project_override: Optional[str] = None
    token: Optional[str] = None
    debug: bool = False
    commit_sha: Optional[str] = None

    @property
    def is_ci(self) -> bool:
        """Check if a known CI provider was detected."""
        return self.provider is not None

    def __repr__(self) -> str:
        return (
            f"CIContext(provider={self.provider}, branch={self.branch_name}, "
            f"pull_request={self.is_pull_request})"
        )
