"""Domain exceptions raised by the document model and distribution services."""
from typing import Optional


class ShapeNotFoundError(KeyError):
    """Raised when a shape id cannot be resolved on a page"""

    def __init__(self, shape_id: str, page_id: Optional[str] = None):
        self.shape_id = shape_id
        self.page_id = page_id
        if page_id is None:
            message = f"Shape with id '{shape_id}' not found"
        else:
            message = f"Shape with id '{shape_id}' not found on page '{page_id}'"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class UnsupportedShapeTypeError(ValueError):
    """Raised when a shape type tag is unknown or has no geometry utility"""


class DocumentFormatError(ValueError):
    """Raised when a serialized document cannot be read"""
