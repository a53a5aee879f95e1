"""
Query Mixin for Document Model

Provides read-only query methods for shape lookup and geometry.

All query methods follow these conventions:
- Prefix with get_ for retrieving data
- Accept an optional page_id (current page when None)
- Raise ShapeNotFoundError if an id is not on the page
- Return copies of mutable data (no direct access to internal state)
"""

from typing import List, Optional

from models.errors import ShapeNotFoundError
from models.transform import Bounds, Vec2
from ._internal.shape import Shape


class DocumentQueryMixin:
    """Mixin providing query API for Document model

    This mixin assumes the class has:
    - self._page_shapes(page_id): Shapes collection of a page
    - self._resolve_page_id(page_id): page id defaulting to current page
    """

    # ========================================
    # Shape Lookup
    # ========================================

    def get_shape(self, shape_id: str, page_id: Optional[str] = None) -> Shape:
        """Get a shape record by id

        The returned Shape is the live record; callers that only read should
        not keep it across mutations.

        Raises:
            ShapeNotFoundError: If the id is not on the page
        """
        page_id = self._resolve_page_id(page_id)
        shape = self._page_shapes(page_id).get_by_id(shape_id)
        if shape is None:
            raise ShapeNotFoundError(shape_id, page_id)
        return shape

    def get_shapes(self, shape_ids: List[str], page_id: Optional[str] = None) -> List[Shape]:
        """Resolve several ids in order

        Raises:
            ShapeNotFoundError: On the first id that is not on the page
        """
        return [self.get_shape(shape_id, page_id) for shape_id in shape_ids]

    def has_shape(self, shape_id: str, page_id: Optional[str] = None) -> bool:
        return shape_id in self._page_shapes(page_id)

    def get_all_shape_ids(self, page_id: Optional[str] = None) -> List[str]:
        return self._page_shapes(page_id).ids()

    def get_shape_count(self, page_id: Optional[str] = None) -> int:
        return len(self._page_shapes(page_id))

    def get_shape_point(self, shape_id: str, page_id: Optional[str] = None) -> Vec2:
        return self.get_shape(shape_id, page_id).point

    # ========================================
    # Bounds Queries
    # ========================================

    def get_shape_bounds(self, shape_id: str, page_id: Optional[str] = None) -> Bounds:
        """Calculate shape bounds (AABB) via its type's geometry utility

        Raises:
            ShapeNotFoundError: If the id is not on the page
        """
        from services.shape_utils import get_bounds
        return get_bounds(self.get_shape(shape_id, page_id))

    def get_shapes_bounds(self, shape_ids: List[str], page_id: Optional[str] = None) -> Bounds:
        """Calculate combined bounds of several shapes (AABB)

        Raises:
            ValueError: If the list is empty
            ShapeNotFoundError: If any id is not on the page
        """
        if not shape_ids:
            raise ValueError("Need at least one shape id")
        return Bounds.common(self.get_shape_bounds(shape_id, page_id) for shape_id in shape_ids)

    def get_shape_center(self, shape_id: str, page_id: Optional[str] = None) -> Vec2:
        from services.shape_utils import get_center
        return get_center(self.get_shape(shape_id, page_id))
