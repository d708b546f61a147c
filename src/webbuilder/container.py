"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .clients import BackendClient
from .core import Settings, configure_logging, get_settings
from .gateway import LoggingNotifier, Notifier
from .registry import ComponentRegistry
from .session import BuilderSession


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings, from the environment unless given."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_component_registry(self) -> ComponentRegistry:
        """Provide component registry singleton."""
        return ComponentRegistry()

    @singleton
    @provider
    def provide_backend_client(self, settings: Settings) -> BackendClient:
        """Provide backend client with circuit breaker."""
        return BackendClient(
            settings.backend_url,
            timeout=settings.backend_timeout,
            export_timeout=settings.export_timeout,
            token=settings.api_token,
            fail_max=settings.breaker_fail_max,
            reset_timeout=settings.breaker_reset_timeout,
        )

    @singleton
    @provider
    def provide_notifier(self) -> Notifier:
        """Provide notifier that reports to the log."""
        return LoggingNotifier()


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    container = Injector([CoreModule(settings)])
    resolved = container.get(Settings)
    configure_logging(resolved.log_level, resolved.json_logs)
    return container


def create_session(project_id: str, container: Injector | None = None) -> BuilderSession:
    """Build an unopened session for ``project_id`` from the container."""
    container = container or create_container()
    return BuilderSession(
        project_id,
        client=container.get(BackendClient),
        registry=container.get(ComponentRegistry),
        settings=container.get(Settings),
        notifier=container.get(Notifier),
    )
