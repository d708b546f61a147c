"""
Builder Session
One project-editing session: a fresh store plus the coordinator, editors
and gateway bound to it. Created on entering the builder, disposed on
leaving it.
"""

from typing import Any

from .clients import BackendClient
from .core import LogContext, Settings, get_logger, get_settings
from .dnd import DragCoordinator
from .editor import PropertyEditor
from .gateway import CreditAccount, ExportFramework, LoggingNotifier, Notifier, OperationResult, PersistenceGateway
from .registry import ComponentRegistry, get_registry
from .state import BuilderStore

logger = get_logger(__name__)


class SessionClosedError(RuntimeError):
    """Session used after close()"""


class BuilderSession:
    """
    Scoped builder state for a single project.

    Never shared across projects: ``close`` resets the store and the
    session refuses further use.
    """

    def __init__(
        self,
        project_id: str,
        client: BackendClient,
        registry: ComponentRegistry | None = None,
        settings: Settings | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.project_id = project_id
        self.client = client
        self.registry = registry or get_registry()
        self.settings = settings or get_settings()
        self.notifier = notifier or LoggingNotifier()

        self._store = BuilderStore.create(self.settings.history_limit)
        self._coordinator = DragCoordinator(self._store, self.registry)
        self._gateway = PersistenceGateway(
            self._store,
            client,
            project_id,
            credits=CreditAccount(export_cost=self.settings.export_credit_cost),
            notifier=self.notifier,
        )
        self._log_context = LogContext(project_id=project_id)
        self._closed = False
        self.project: dict[str, Any] = {}

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def store(self) -> BuilderStore:
        self._ensure_open()
        return self._store

    @property
    def coordinator(self) -> DragCoordinator:
        self._ensure_open()
        return self._coordinator

    @property
    def gateway(self) -> PersistenceGateway:
        self._ensure_open()
        return self._gateway

    def open(self) -> "BuilderSession":
        """
        Load the project and hydrate the store.

        Raises:
            BackendError: If the project cannot be fetched
            HydrationError: If its content is malformed
        """
        self._ensure_open()
        self._log_context.bind()

        try:
            self.project = self.client.fetch_project(self.project_id)
            self._store.initialize_from_project(self.project)
        except Exception:
            self._log_context.unbind()
            raise

        self._gateway.project_name = str(self.project.get("name") or "project")

        # A failed refresh leaves the last known balance
        self._gateway.refresh_credits()

        logger.info("session_opened", components=len(self._store))
        return self

    def editor(self, component_id: str | None = None) -> PropertyEditor:
        """
        Property editor for ``component_id``, defaulting to the selection.

        Raises:
            ValueError: If no id is given and nothing is selected
        """
        self._ensure_open()
        target = component_id or self._store.selected_id
        if target is None:
            raise ValueError("No component selected")
        return PropertyEditor(self._store, self.registry, target)

    def save(self) -> OperationResult:
        return self.gateway.save()

    def export(self, framework: ExportFramework | str | None = None) -> OperationResult:
        return self.gateway.export(framework or self.settings.default_framework)

    def close(self) -> None:
        """Reset the store and end the session. Safe to call twice."""
        if self._closed:
            return
        self._store.dispose()
        self._closed = True
        logger.info("session_closed")
        self._log_context.unbind()

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError(f"Session for project {self.project_id} is closed")

    def __enter__(self) -> "BuilderSession":
        return self.open()

    def __exit__(self, *args: object) -> None:
        self.close()
