"""
Deploy Decision Models

Tagged outcomes produced by the deploy orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class DecisionKind(Enum):
    """Tag of a deploy decision."""

    PROCEED = "proceed"
    SKIP_NON_CI = "skip_non_ci"
    SKIP_PULL_REQUEST = "skip_pull_request"
    SKIP_UNMAPPED_PROJECT = "skip_unmapped_project"


@dataclass(frozen=True)
class ResolvedProject:
    """
    Project alias resolved from the settings file.

    `key` is the alias passed to the deploy tool. When the alias was found
    through a fallback entry, `requested_key` holds the key that was asked for.
    `name` is None when no alias matched.
    """

    key: str
    name: Optional[str] = None
    requested_key: Optional[str] = None

    @property
    def is_mapped(self) -> bool:
        return bool(self.name)

    @property
    def used_fallback(self) -> bool:
        return self.requested_key is not None and self.requested_key != self.key


@dataclass(frozen=True)
class Proceed:
    project: ResolvedProject
    message: str
    extra_args: List[str] = field(default_factory=list)
    debug: bool = False
    kind: DecisionKind = field(default=DecisionKind.PROCEED, init=False)


@dataclass(frozen=True)
class SkipNonCI:
    kind: DecisionKind = field(default=DecisionKind.SKIP_NON_CI, init=False)


@dataclass(frozen=True)
class SkipPullRequest:
    kind: DecisionKind = field(default=DecisionKind.SKIP_PULL_REQUEST, init=False)


@dataclass(frozen=True)
class SkipUnmappedProject:
    key: str
    fallback_key: Optional[str] = None
    kind: DecisionKind = field(
        default=DecisionKind.SKIP_UNMAPPED_PROJECT, init=False
    )


DeployDecision = Union[Proceed, SkipNonCI, SkipPullRequest, SkipUnmappedProject]
