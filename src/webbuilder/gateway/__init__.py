"""
Persistence and export gateway.
"""

from .credits import CreditAccount
from .notify import LoggingNotifier, Notifier
from .persistence import (
    ExportArtifact,
    ExportFramework,
    OperationResult,
    PersistenceGateway,
    export_filename,
)

__all__ = [
    "CreditAccount",
    "LoggingNotifier",
    "Notifier",
    "ExportArtifact",
    "ExportFramework",
    "OperationResult",
    "PersistenceGateway",
    "export_filename",
]
