"""
Builder state engine for a component-based website builder.
"""

from .container import create_container, create_session
from .session import BuilderSession, SessionClosedError

__version__ = "0.1.0"

__all__ = [
    "BuilderSession",
    "SessionClosedError",
    "create_container",
    "create_session",
]
