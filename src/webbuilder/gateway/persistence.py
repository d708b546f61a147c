"""
Persistence & Export Gateway
Saves the builder's component list to the project service and runs the
credit-gated export.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ..clients import BackendClient, BackendError
from ..core import get_logger
from ..state import BuilderStore
from .credits import CreditAccount
from .notify import LoggingNotifier, Notifier

logger = get_logger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9]")


class ExportFramework(str, Enum):
    """CSS framework of the generated site"""
    TAILWIND = "tailwind"
    BOOTSTRAP = "bootstrap"
    VANILLA = "vanilla"


class OperationResult(BaseModel):
    """Result of a gateway operation"""
    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class ExportArtifact:
    """Downloaded export archive"""
    filename: str
    content: bytes
    framework: ExportFramework


def export_filename(project_name: str) -> str:
    """Archive name: every non-alphanumeric character becomes ``_``."""
    return f"{_UNSAFE_FILENAME_CHARS.sub('_', project_name)}.zip"


class PersistenceGateway:
    """
    Bridge between a ``BuilderStore`` and the backend.

    Network failures never raise out of the gateway: they are reported
    through the notifier and returned as a failed ``OperationResult``,
    leaving the dirty flag and the credit balance as they were.
    """

    def __init__(
        self,
        store: BuilderStore,
        client: BackendClient,
        project_id: str,
        credits: CreditAccount | None = None,
        notifier: Notifier | None = None,
        project_name: str = "project",
    ) -> None:
        self.store = store
        self.client = client
        self.project_id = project_id
        self.credits = credits or CreditAccount()
        self.notifier = notifier or LoggingNotifier()
        self.project_name = project_name

    # ========================================================================
    # Save
    # ========================================================================

    def save(self, notify: bool = True) -> OperationResult:
        """
        Persist the current component list.

        Rejected while another save is in flight.
        """
        if self.store.is_saving:
            logger.debug("save_already_in_flight", project_id=self.project_id)
            return OperationResult(success=False, error="Save already in progress")

        revision = self.store.revision
        self.store.set_saving(True)
        try:
            self.client.update_project(self.project_id, {"content": self.store.serialize()})
        except BackendError as e:
            logger.warning("save_failed", project_id=self.project_id, error=str(e))
            if notify:
                self.notifier.error("Save failed")
            return OperationResult(success=False, error=str(e))
        finally:
            self.store.set_saving(False)

        self.store.mark_as_saved()
        if notify:
            self.notifier.success("Project saved!")
        logger.info("project_saved", project_id=self.project_id, revision=revision)
        return OperationResult(success=True, metadata={"revision": revision})

    def save_version(self) -> OperationResult:
        """Store the persisted project as a numbered version."""
        try:
            version = self.client.save_version(self.project_id)
        except BackendError as e:
            logger.warning("save_version_failed", project_id=self.project_id, error=str(e))
            self.notifier.error("Saving version failed")
            return OperationResult(success=False, error=str(e))

        self.notifier.success(f"Version {version - 1} saved")
        return OperationResult(success=True, data=version)

    # ========================================================================
    # Export
    # ========================================================================

    def export(self, framework: ExportFramework | str = ExportFramework.TAILWIND) -> OperationResult:
        """
        Save, generate the archive, then settle credits.

        Insufficient balance is rejected before any network call. On success
        ``data`` holds an ``ExportArtifact``.
        """
        try:
            framework = ExportFramework(framework)
        except ValueError:
            return OperationResult(success=False, error=f"Unsupported framework: {framework}")

        if self.store.is_exporting:
            logger.debug("export_already_in_flight", project_id=self.project_id)
            return OperationResult(success=False, error="Export already in progress")

        if not self.credits.can_afford():
            message = f"Insufficient credits! Export requires {self.credits.export_cost} credits."
            logger.info("export_rejected", balance=self.credits.balance, cost=self.credits.export_cost)
            self.notifier.error(message)
            return OperationResult(success=False, error=message)

        self.store.set_exporting(True)
        try:
            saved = self.save(notify=False)
            if not saved.success:
                self.notifier.error("Export failed")
                return OperationResult(success=False, error=saved.error)

            try:
                content = self.client.generate_export(self.project_id, framework.value)
            except BackendError as e:
                logger.warning("export_failed", project_id=self.project_id, error=str(e))
                self.notifier.error(str(e) or "Export failed")
                return OperationResult(success=False, error=str(e))

            self.credits.deduct()
            self._reconcile_credits()
        finally:
            self.store.set_exporting(False)

        artifact = ExportArtifact(
            filename=export_filename(self.project_name),
            content=content,
            framework=framework,
        )
        self.notifier.success("Project exported successfully!")
        logger.info("project_exported", project_id=self.project_id, framework=framework.value, size=len(content))
        return OperationResult(success=True, data=artifact, metadata={"balance": self.credits.balance})

    def refresh_credits(self) -> OperationResult:
        """Pull the authoritative balance from the credits service."""
        try:
            balance = self.client.get_balance()
        except BackendError as e:
            logger.warning("credit_refresh_failed", error=str(e))
            return OperationResult(success=False, error=str(e))
        self.credits.reconcile(balance.credits, balance.export_cost)
        return OperationResult(success=True, data=balance.credits)

    def _reconcile_credits(self) -> None:
        result = self.refresh_credits()
        if not result.success:
            # Keep the optimistic value until the next refresh
            logger.info("credits_unreconciled", balance=self.credits.balance)
