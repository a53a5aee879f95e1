"""Freehand draw geometry - bounding box of the stroke points."""

from models.document import Shape
from models.transform import Bounds
from .base_util import ShapeUtil


class DrawUtil(ShapeUtil):
    """Draw shapes store their stroke relative to the shape point.

    The stroke's own bounding box does not have to start at (0, 0), so the
    bounds of a draw shape may be offset from its point.
    """

    def get_bounds(self, shape: Shape) -> Bounds:
        origin = shape.point
        points = shape.points
        if not points:
            # An empty stroke collapses to its origin
            return Bounds.from_corners(origin.x, origin.y, origin.x, origin.y)

        return Bounds.from_corners(
            origin.x + min(p.x for p in points),
            origin.y + min(p.y for p in points),
            origin.x + max(p.x for p in points),
            origin.y + max(p.y for p in points),
        )
