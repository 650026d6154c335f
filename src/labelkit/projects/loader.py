from dataclasses import dataclass, field
from typing import Protocol

from labelkit.constants import HOME_ROUTE, edit_project_route
from labelkit.logging_config import get_logger
from labelkit.models import ProjectDefinition, ProjectReference

logger = get_logger(__name__)


class Navigator(Protocol):
    """Protocol for the routing layer."""

    @property
    def location(self) -> str: ...

    def push(self, route: str) -> None: ...


@dataclass
class HistoryNavigator(Navigator):
    """In-memory route history."""

    history: list[str] = field(default_factory=lambda: [HOME_ROUTE])

    @property
    def location(self) -> str:
        return self.history[-1]

    def push(self, route: str) -> None:
        self.history.append(route)


@dataclass
class ProjectSession:
    """Application state owned by the project screens."""

    current_project: ProjectDefinition | None = None
    recent_projects: list[ProjectReference] = field(default_factory=list)


class ProjectLoader:
    """Makes a resolved project the current one and opens its editor."""

    def __init__(self, session: ProjectSession, navigator: Navigator):
        self.session = session
        self.navigator = navigator

    def activate(self, project: ProjectDefinition) -> None:
        """Set ``project`` as current and navigate to its edit route.

        Activating the project that is already current and already shown
        is a no-op.
        """
        route = edit_project_route(project.id)
        if self.session.current_project == project and self.navigator.location == route:
            logger.debug("project_already_active", project_id=project.id)
            return

        self.session.current_project = project
        self.navigator.push(route)
        logger.info("project_activated", project_id=project.id, project_name=project.name)

    def close(self) -> None:
        if self.session.current_project is None:
            return
        logger.info("project_closed", project_id=self.session.current_project.id)
        self.session.current_project = None

