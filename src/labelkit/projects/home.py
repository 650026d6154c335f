"""Recent projects screen logic.

Thin caller around the resolver and loader: it decides what the user sees
when a project is opened, created or removed from the recent list.
"""

from labelkit.constants import CREATE_PROJECT_ROUTE
from labelkit.logging_config import get_logger
from labelkit.models import AppSettings, ProjectDefinition, ProjectReference
from labelkit.notifications import LogNotifier, Notifier
from labelkit.security import ProjectDecryptor, SecurityTokenStore
from labelkit.storage import StorageProviderFactory

from .loader import Navigator, ProjectLoader, ProjectSession
from .outcomes import ProjectNotFound, ResolutionOutcome
from .resolver import ProjectResolver

logger = get_logger(__name__)


class RecentProjectsPage:
    def __init__(
        self,
        token_store: SecurityTokenStore,
        resolver: ProjectResolver,
        loader: ProjectLoader,
        notifier: Notifier | None = None,
        decryptor: ProjectDecryptor | None = None,
    ):
        self.token_store = token_store
        self.resolver = resolver
        self.loader = loader
        self.notifier = notifier or LogNotifier()
        self.decryptor = decryptor or ProjectDecryptor()

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        navigator: Navigator,
        notifier: Notifier | None = None,
        storage_factory: StorageProviderFactory | None = None,
    ) -> "RecentProjectsPage":
        """Wire the page from an application settings document."""
        token_store = SecurityTokenStore.from_settings(settings)
        decryptor = ProjectDecryptor()
        session = ProjectSession(recent_projects=list(settings.recent_projects))
        return cls(
            token_store=token_store,
            resolver=ProjectResolver(token_store, decryptor, storage_factory),
            loader=ProjectLoader(session, navigator),
            notifier=notifier,
            decryptor=decryptor,
        )

    @property
    def session(self) -> ProjectSession:
        return self.loader.session

    async def open_project(self, reference: ProjectReference) -> ResolutionOutcome:
        """Load the latest stored version of a recent project and open it.

        A missing project file is reported through the notifier and the
        current screen is kept. Other errors propagate to the caller.
        """
        outcome = await self.resolver.resolve(reference)
        if isinstance(outcome, ProjectNotFound):
            self.notifier.error(outcome.message)
            return outcome

        self.loader.activate(outcome.project)
        return outcome

    def open_cached_project(self, reference: ProjectReference) -> ProjectDefinition:
        """Open a recent project from its cached entry, without reading storage."""
        token = self.token_store.resolve(reference.security_token_name)
        project = self.decryptor.decrypt(reference, token)
        self.loader.activate(project)
        return project

    def create_new_project(self) -> None:
        self.loader.close()
        self.loader.navigator.push(CREATE_PROJECT_ROUTE)

    def delete_project(self, reference: ProjectReference) -> None:
        """Drop a project from the recent list, closing it if it is open."""
        session = self.session
        session.recent_projects = [r for r in session.recent_projects if r.id != reference.id]
        current = session.current_project
        if current is not None and current.id == reference.id:
            self.loader.close()
        logger.info("recent_project_removed", project_id=reference.id)
