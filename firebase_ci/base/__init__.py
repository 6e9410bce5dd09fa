"""
firebase-ci Base Command Classes

Abstract base classes for consistent command structure.
"""

from .base_command import BaseCommand, CommandServices

__all__ = [
    "BaseCommand",
    "CommandServices",
]
