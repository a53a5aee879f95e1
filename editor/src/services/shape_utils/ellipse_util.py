"""Ellipse geometry - extent is the radius box anchored at the shape point."""

from models.document import Shape
from models.transform import Bounds, Vec2
from .base_util import ShapeUtil


class EllipseUtil(ShapeUtil):

    def get_bounds(self, shape: Shape) -> Bounds:
        radius = shape.radius
        return Bounds.from_point_and_size(shape.point, Vec2(radius.x * 2, radius.y * 2))
