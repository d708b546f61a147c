"""
Drag and drop coordination between the palette, the canvas and the store.
"""

from .coordinator import CANVAS_DROP_ID, DragCoordinator, DropOutcome

__all__ = ["CANVAS_DROP_ID", "DragCoordinator", "DropOutcome"]
