"""Base class for per-type shape geometry utilities.

Each shape type registers one utility that knows how to derive:
- The axis-aligned bounding box of a shape
- The center of a shape
"""

from abc import ABC, abstractmethod

from models.document import Shape
from models.transform import Bounds, Vec2


class ShapeUtil(ABC):
    """Abstract geometry capability for one shape type.

    Subclasses must implement:
    - get_bounds(): Return the shape's bounds in page space
    """

    @abstractmethod
    def get_bounds(self, shape: Shape) -> Bounds:
        """Calculate the axis-aligned bounds of a shape.

        Args:
            shape: Shape record of this utility's type

        Returns:
            Bounds in page space
        """
        pass

    def get_center(self, shape: Shape) -> Vec2:
        """Center of the shape's bounds."""
        return self.get_bounds(shape).center


class SizedShapeUtil(ShapeUtil):
    """Shapes whose extent is point .. point + size."""

    def get_bounds(self, shape: Shape) -> Bounds:
        return Bounds.from_point_and_size(shape.point, shape.size)
