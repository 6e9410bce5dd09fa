"""
Firebase Tools

Locates the firebase-tools binary to invoke.
"""

import shutil
from typing import Callable, List, Optional

from firebase_ci.constants import FIREBASE_BIN, NPX_BIN


def npx_exists(which: Callable[[str], Optional[str]] = shutil.which) -> bool:
    return which(NPX_BIN) is not None


def firebase_base_command(
    which: Callable[[str], Optional[str]] = shutil.which,
) -> List[str]:
    """
    Get the argv prefix used to call firebase-tools.

    npx is preferred so locally and globally installed versions of
    firebase-tools are both found, falling back to the firebase binary.

    Returns:
        ["npx", "firebase"] or ["firebase"]
    """
    if npx_exists(which):
        return [NPX_BIN, FIREBASE_BIN]
    return [FIREBASE_BIN]
