"""
Settings Service

Loads .firebaserc, firebase.json and package.json relative to the project
working directory.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from firebase_ci.constants import (
    FIREBASE_JSON_FILE,
    FUNCTIONS_DIR,
    PACKAGE_JSON_FILE,
    SETTINGS_FILE,
)
from firebase_ci.exceptions import ConfigInvalidError, ConfigMissingError
from firebase_ci.models.settings import FirebaseRc


class SettingsService:
    """
    File access for the project being deployed.

    Responsibilities:
    - Parse JSON settings files (missing optional files load as empty)
    - Cache the parsed .firebaserc for the lifetime of a command
    - Answer questions about the functions folder
    """

    def __init__(self, project_root: Optional[Path] = None):
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self._settings: Optional[FirebaseRc] = None

    def path(self, relative: str) -> Path:
        return self.project_root / relative

    def read_json(self, relative: str, required: bool = False) -> Dict[str, Any]:
        """
        Read a JSON file from the project root.

        Args:
            relative: Path relative to the project root
            required: Raise if the file does not exist

        Returns:
            Parsed JSON object (empty dict when an optional file is missing)

        Raises:
            ConfigMissingError: If a required file does not exist
            ConfigInvalidError: If the file is not valid JSON
        """
        file_path = self.path(relative)
        if not file_path.exists():
            if required:
                raise ConfigMissingError(relative)
            return {}

        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigInvalidError(relative, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigInvalidError(relative, "Top level value must be an object")
        return data

    def write_json(self, relative: str, data: Dict[str, Any]) -> None:
        """Write a JSON file (2-space indent) relative to the project root."""
        self.path(relative).write_text(json.dumps(data, indent=2), encoding="utf-8")

    def load_settings(self, required: bool = True) -> FirebaseRc:
        """
        Load .firebaserc settings with caching.

        Args:
            required: Raise ConfigMissingError when the file is absent

        Returns:
            FirebaseRc settings
        """
        if required and not self.path(SETTINGS_FILE).exists():
            raise ConfigMissingError(SETTINGS_FILE)
        if self._settings is None:
            data = self.read_json(SETTINGS_FILE)
            self._settings = FirebaseRc.from_dict(data)
        return self._settings

    def require_firebase_json(self) -> Dict[str, Any]:
        """Ensure firebase.json exists and parses."""
        return self.read_json(FIREBASE_JSON_FILE, required=True)

    def package_version(self) -> Optional[str]:
        """Get version from package.json (None if not present)."""
        return self.read_json(PACKAGE_JSON_FILE).get("version")

    def functions_exists(self) -> bool:
        return self.path(FUNCTIONS_DIR).is_dir()

    def functions_node_modules_exist(self) -> bool:
        return (self.path(FUNCTIONS_DIR) / "node_modules").is_dir()
