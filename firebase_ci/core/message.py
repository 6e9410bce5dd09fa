"""
Message Sanitizer

Turns a free-text commit message into a safe deploy message.
"""

import re
from typing import Iterable, Optional

from firebase_ci.constants import DEFAULT_DEPLOY_MESSAGE, MAX_MESSAGE_LENGTH
from firebase_ci.logger import CiLogger

UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9_/:=-]")
LEADING_EMPTY_QUOTES = re.compile(r"^(?:'')+")
STRIPPED_CHARACTERS = str.maketrans("", "", "`\n\r\t")


def shellescape(args: Iterable[str]) -> str:
    """
    Escape arguments for a POSIX shell and join them with spaces.

    Arguments containing anything outside [A-Za-z0-9_/:=-] are wrapped in
    single quotes, embedded single quotes becoming '\\''.
    """
    escaped = []
    for arg in args:
        if UNSAFE_CHARACTERS.search(arg):
            arg = "'" + arg.replace("'", "'\\''") + "'"
            arg = LEADING_EMPTY_QUOTES.sub("", arg)
            arg = arg.replace("\\'''", "\\'")
        escaped.append(arg)
    return " ".join(escaped)


def clean_message(raw: str) -> str:
    """Replace double quotes, strip backticks and line breaks, and truncate."""
    cleaned = raw.replace('"', "'").translate(STRIPPED_CHARACTERS)
    return cleaned[:MAX_MESSAGE_LENGTH]


def sanitize_message(raw: Optional[str], logger: Optional[CiLogger] = None) -> str:
    """
    Build the deploy message from a raw commit message.

    Args:
        raw: Commit message (None when not available)
        logger: Logger for the fallback warning

    Returns:
        Shell-safe message, "Update" when there is nothing usable
    """
    if not raw:
        return DEFAULT_DEPLOY_MESSAGE
    try:
        cleaned = clean_message(raw)
        if not cleaned.strip():
            return DEFAULT_DEPLOY_MESSAGE
        return shellescape([cleaned])
    except Exception as e:
        if logger:
            logger.warning(
                "Threw an error when trying to create deploy message, "
                f"falling back to default message. Error: {e}"
            )
        return DEFAULT_DEPLOY_MESSAGE
