from .project import Connection, ProjectDefinition, ProjectReference, SecurityToken, Tag
from .settings import AppSettings, load_app_settings

__all__ = [
    "AppSettings",
    "Connection",
    "ProjectDefinition",
    "ProjectReference",
    "SecurityToken",
    "Tag",
    "load_app_settings",
]
