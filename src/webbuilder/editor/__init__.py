"""
Property editing for the selected component.
"""

from .property_editor import PropertyEditor

__all__ = ["PropertyEditor"]
