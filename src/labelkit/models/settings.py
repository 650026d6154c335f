"""Application settings document.

The settings file is owned by the labeling tool; labelkit only reads it.
"""

import json
from pathlib import Path

from pydantic import Field, ValidationError

from labelkit.errors import SettingsError
from labelkit.logging_config import get_logger
from labelkit.models.project import (
    Connection,
    ProjectReference,
    SecurityToken,
    _CamelModel,
)

logger = get_logger(__name__)


class AppSettings(_CamelModel):
    """Security tokens, known connections and the recent projects list."""

    security_tokens: list[SecurityToken] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)
    recent_projects: list[ProjectReference] = Field(default_factory=list)

    def find_recent_project(self, id_or_name: str) -> ProjectReference | None:
        for reference in self.recent_projects:
            if reference.id == id_or_name:
                return reference
        for reference in self.recent_projects:
            if reference.name == id_or_name:
                return reference
        return None


def load_app_settings(path: Path) -> AppSettings:
    """Load and validate the settings file.

    Raises:
        SettingsError: If the file is missing, not JSON, or fails validation.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Cannot read settings file {path}: {e}") from e

    try:
        settings = AppSettings.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise SettingsError(f"Invalid settings file {path}: {e}") from e

    logger.debug(
        "app_settings_loaded",
        path=str(path),
        security_tokens=len(settings.security_tokens),
        recent_projects=len(settings.recent_projects),
    )
    return settings
