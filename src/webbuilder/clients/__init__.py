"""
Client modules for external service communication
"""

from .backend import BackendClient, BackendError, CreditBalance

__all__ = ["BackendClient", "BackendError", "CreditBalance"]
