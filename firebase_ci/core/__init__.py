"""
firebase-ci Core

CI detection, project resolution, message sanitization and deploy decisions.
"""

from .environment import get_branch, is_pull_request, resolve_ci_context
from .message import sanitize_message, shellescape
from .orchestrator import DeployOptions, DeployOrchestrator, build_deploy_args, decide
from .projects import (
    resolve_context_project,
    resolve_environment_block,
    resolve_project,
    resolve_project_id,
    resolve_project_key,
    resolve_project_name,
)

__all__ = [
    "get_branch",
    "is_pull_request",
    "resolve_ci_context",
    "sanitize_message",
    "shellescape",
    "DeployOptions",
    "DeployOrchestrator",
    "build_deploy_args",
    "decide",
    "resolve_context_project",
    "resolve_environment_block",
    "resolve_project",
    "resolve_project_id",
    "resolve_project_key",
    "resolve_project_name",
]
