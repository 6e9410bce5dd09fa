"""
firebase-ci Services Layer

Process execution, settings access and dependency installation.
"""

from .command_runner import CommandRunner
from .dependency_installer import DependencyInstaller
from .firebase_tools import firebase_base_command
from .settings_service import SettingsService

__all__ = [
    "CommandRunner",
    "DependencyInstaller",
    "SettingsService",
    "firebase_base_command",
]
