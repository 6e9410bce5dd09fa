"""
firebase-ci Domain Models

Dataclass-based models for type-safe data handling.
"""

from .context import CIContext
from .decision import (
    DecisionKind,
    DeployDecision,
    Proceed,
    ResolvedProject,
    SkipNonCI,
    SkipPullRequest,
    SkipUnmappedProject,
)
from .results import ExecutionResult
from .settings import CiSettings, FirebaseRc

__all__ = [
    # Context
    "CIContext",
    # Decisions
    "DecisionKind",
    "DeployDecision",
    "Proceed",
    "ResolvedProject",
    "SkipNonCI",
    "SkipPullRequest",
    "SkipUnmappedProject",
    # Results
    "ExecutionResult",
    # Settings
    "CiSettings",
    "FirebaseRc",
]
