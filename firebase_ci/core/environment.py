"""
Environment Resolver

Normalizes CI provider environment variables into a CIContext.
"""

import os
from typing import Mapping, Optional

from firebase_ci.constants import (
    BRANCH_ENV_VARS,
    CI_PROVIDER_ENV_VARS,
    COMMIT_MESSAGE_ENV_VARS,
    DEFAULT_BRANCH,
    ENV_DEBUG,
    ENV_ENVIRONMENT_SLUG,
    ENV_GITHUB_ACTIONS,
    ENV_GITHUB_SHA,
    ENV_PROJECT_OVERRIDE,
    ENV_TOKEN,
    GITHUB_REF_PREFIX,
    PULL_REQUEST_ENV_VARS,
)
from firebase_ci.exceptions import CommandError
from firebase_ci.logger import CiLogger
from firebase_ci.models.context import CIContext
from firebase_ci.services.command_runner import CommandRunner

FALSE_VALUES = ("", "0", "false")


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name)
    return value if value else None


def env_flag(env: Mapping[str, str], name: str) -> bool:
    """Check if an environment variable is set to a truthy value."""
    return (env.get(name) or "").strip().lower() not in FALSE_VALUES


def get_branch(env: Mapping[str, str]) -> str:
    """
    Get the name of the current branch from CI provider variables.

    GitHub Actions exposes GITHUB_HEAD_REF for pull requests and GITHUB_REF
    (e.g. refs/heads/master) for pushes.

    Returns:
        Branch name, "master" when no provider variable is set
    """
    for name, _ in BRANCH_ENV_VARS:
        value = _get(env, name)
        if not value:
            continue
        if name == "GITHUB_REF" and value.startswith(GITHUB_REF_PREFIX):
            value = value[len(GITHUB_REF_PREFIX):]
        return value
    return DEFAULT_BRANCH


def detect_provider(env: Mapping[str, str]) -> Optional[str]:
    """Get the name of the first CI provider whose variables are present."""
    for provider, names in CI_PROVIDER_ENV_VARS.items():
        if any(_get(env, name) for name in names):
            return provider
    return None


def is_pull_request(env: Mapping[str, str]) -> bool:
    """Check if the build is for a pull request."""
    for name in PULL_REQUEST_ENV_VARS:
        value = _get(env, name)
        if value and value != "false":
            return True
    return False


def get_commit_message(
    env: Mapping[str, str],
    runner: Optional[CommandRunner] = None,
    logger: Optional[CiLogger] = None,
) -> Optional[str]:
    """
    Get the commit message for the current ref.

    Provider variables are used when present. On GitHub Actions only the
    commit SHA is available, so the message is read with git log.

    Returns:
        Commit message, or None when it can not be determined
    """
    for name in COMMIT_MESSAGE_ENV_VARS:
        value = _get(env, name)
        if value:
            return value

    sha = _get(env, ENV_GITHUB_SHA)
    if not _get(env, ENV_GITHUB_ACTIONS) or not sha or runner is None:
        return None

    try:
        result = runner.run(
            ["git", "--no-pager", "log", "--format=%B", "-n", "1", sha],
            pipe_output=False,
        )
    except CommandError as e:
        if logger:
            logger.error(
                f"Error getting commit message through git log for SHA: {sha}",
                context=e.context,
            )
        return None

    return result.stdout.strip() or None


def resolve_ci_context(
    env: Optional[Mapping[str, str]] = None,
    runner: Optional[CommandRunner] = None,
    logger: Optional[CiLogger] = None,
) -> CIContext:
    """
    Build the CI context snapshot for this invocation.

    Args:
        env: Environment mapping (os.environ by default)
        runner: Command runner used to fetch the commit message on GitHub Actions
        logger: Logger for non-fatal failures

    Returns:
        Immutable CIContext
    """
    env = dict(os.environ if env is None else env)
    return CIContext(
        branch_name=get_branch(env),
        is_pull_request=is_pull_request(env),
        raw_commit_message=get_commit_message(env, runner=runner, logger=logger),
        provider=detect_provider(env),
        environment_slug=_get(env, ENV_ENVIRONMENT_SLUG),
        project_override=_get(env, ENV_PROJECT_OVERRIDE),
        token=_get(env, ENV_TOKEN),
        debug=env_flag(env, ENV_DEBUG),
        commit_sha=_get(env, ENV_GITHUB_SHA),
    )
