"""Project resolution and activation."""

from .home import RecentProjectsPage
from .loader import HistoryNavigator, Navigator, ProjectLoader, ProjectSession
from .outcomes import ProjectNotFound, Resolved, ResolutionOutcome
from .resolver import ProjectResolver

__all__ = [
    "HistoryNavigator",
    "Navigator",
    "ProjectLoader",
    "ProjectNotFound",
    "ProjectResolver",
    "ProjectSession",
    "RecentProjectsPage",
    "Resolved",
    "ResolutionOutcome",
]
