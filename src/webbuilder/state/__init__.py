"""
Builder state package - component model, snapshot history and the store.
"""

from .models import Component, PreviewMode, ProjectContent
from .history import History, Snapshot
from .store import BuilderStore

__all__ = [
    "Component",
    "PreviewMode",
    "ProjectContent",
    "History",
    "Snapshot",
    "BuilderStore",
]
