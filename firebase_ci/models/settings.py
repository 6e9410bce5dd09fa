"""
Settings Models

Dataclass models for the .firebaserc settings file.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class CiSettings:
    """The "ci" section of .firebaserc."""

    map_env: Dict[str, str] = field(default_factory=dict)
    create_config: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    set_env: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CiSettings":
        data = data or {}
        return cls(
            map_env=dict(data.get("mapEnv") or {}),
            create_config=dict(data.get("createConfig") or {}),
            set_env=dict(data.get("setEnv") or {}),
        )


@dataclass
class FirebaseRc:
    """Parsed .firebaserc settings."""

    projects: Dict[str, str] = field(default_factory=dict)
    ci: CiSettings = field(default_factory=CiSettings)
    skip_dependency_install: bool = False
    skip_tools_install: bool = False
    skip_functions_install: bool = False
    debug: bool = False
    tools_version: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FirebaseRc":
        """
        Build settings from the parsed JSON document.

        Args:
            data: Parsed .firebaserc contents

        Returns:
            FirebaseRc instance
        """
        projects = {
            str(key): str(value)
            for key, value in (data.get("projects") or {}).items()
            if value
        }
        return cls(
            projects=projects,
            ci=CiSettings.from_dict(data.get("ci")),
            skip_dependency_install=bool(data.get("skipDependencyInstall", False)),
            skip_tools_install=bool(data.get("skipToolsInstall", False)),
            skip_functions_install=bool(data.get("skipFunctionsInstall", False)),
            debug=bool(data.get("debug", False)),
            tools_version=data.get("toolsVersion") or None,
            raw=data,
        )

    def create_config_value(self, environment: str, *path: str) -> Optional[Any]:
        """Look up a nested value under ci.createConfig.<environment>."""
        value: Any = self.ci.create_config.get(environment)
        for part in path:
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value or None
