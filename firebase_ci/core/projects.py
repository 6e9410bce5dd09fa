"""
Project Alias Resolver

Maps the branch (or an explicit override) to a project alias in .firebaserc.
"""

from typing import Any, Mapping, Optional, Tuple

from firebase_ci.constants import DEFAULT_KEY, MASTER_KEY
from firebase_ci.models.context import CIContext
from firebase_ci.models.decision import ResolvedProject
from firebase_ci.models.settings import FirebaseRc


def resolve_project_key(context: CIContext, project: Optional[str] = None) -> str:
    """
    Get the project key for the current build.

    FIREBASE_CI_PROJECT wins over the --project option, which wins over the
    branch name. The "master" key is looked up as "default".

    Args:
        context: CI context snapshot
        project: Project passed on the command line

    Returns:
        Project key
    """
    key = context.project_override or project or context.branch_name
    if key == MASTER_KEY:
        return DEFAULT_KEY
    return key


def _lookup_order(key: str, fallback_key: Optional[str]) -> list:
    order = [key]
    for candidate in (fallback_key, MASTER_KEY, DEFAULT_KEY):
        if candidate and candidate not in order:
            order.append(candidate)
    return order


def resolve_project_name(
    key: str,
    aliases: Mapping[str, str],
    fallback_key: Optional[str] = None,
) -> Optional[str]:
    """
    Get the project name for a key.

    Lookup order: key, fallback key (CI_ENVIRONMENT_SLUG), "master", "default".

    Returns:
        Project name, or None when no alias matches
    """
    return resolve_project(key, aliases, fallback_key).name


def resolve_project(
    key: str,
    aliases: Mapping[str, str],
    fallback_key: Optional[str] = None,
) -> ResolvedProject:
    """
    Resolve a project key to the alias entry used for deploying.

    Returns:
        ResolvedProject; `name` is None when nothing matched
    """
    for candidate in _lookup_order(key, fallback_key):
        name = aliases.get(candidate)
        if name:
            return ResolvedProject(key=candidate, name=name, requested_key=key)
    return ResolvedProject(key=key, name=None, requested_key=key)


def resolve_context_project(
    context: CIContext,
    aliases: Mapping[str, str],
    project: Optional[str] = None,
) -> ResolvedProject:
    """Resolve the project for the current CI context."""
    key = resolve_project_key(context, project)
    return resolve_project(key, aliases, context.environment_slug)


def resolve_project_id(
    context: CIContext,
    settings: FirebaseRc,
    project: Optional[str] = None,
    default_project: Optional[str] = None,
) -> Optional[str]:
    """
    Get the Firebase projectId for the current build.

    Checks FIREBASE_CI_PROJECT, then ci.createConfig.<key>.firebase.projectId
    ("default" is looked up as "master"), then the same under the default
    project and "master", then falls back to the project name.

    Returns:
        projectId, or None when nothing is configured
    """
    if context.project_override:
        return context.project_override

    key = resolve_project_key(context, project)
    config_key = MASTER_KEY if key == DEFAULT_KEY else key

    for environment in (config_key, default_project, MASTER_KEY):
        if not environment:
            continue
        project_id = settings.create_config_value(environment, "firebase", "projectId")
        if project_id:
            return str(project_id)

    fallback_key = default_project or context.environment_slug
    return resolve_project_name(key, settings.projects, fallback_key)


def resolve_environment_block(
    context: CIContext,
    blocks: Mapping[str, Any],
    project: Optional[str] = None,
) -> Optional[Tuple[str, Any]]:
    """
    Pick the ci.createConfig / ci.setEnv block for the current build.

    The project key (without the master -> default substitution) is tried
    first, then CI_ENVIRONMENT_SLUG, then "master" (or "default" when there
    is no "master" block).

    Returns:
        Tuple of (environment name, block), or None when nothing matches
    """
    key = context.project_override or project or context.branch_name
    fallback = context.environment_slug or (
        MASTER_KEY if MASTER_KEY in blocks else DEFAULT_KEY
    )
    for environment in (key, fallback):
        if blocks.get(environment):
            return environment, blocks[environment]
    return None
