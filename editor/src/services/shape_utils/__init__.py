"""Shape geometry registry.

Geometry is dispatched on the shape's type tag: every ShapeType maps to one
utility instance that derives bounds and centers for shapes of that type.
"""

from typing import Iterable

from models.document import Shape, ShapeType
from models.errors import UnsupportedShapeTypeError
from models.transform import Bounds, Vec2
from .base_util import ShapeUtil, SizedShapeUtil
from .ellipse_util import EllipseUtil
from .draw_util import DrawUtil

# Registry of geometry utilities by type tag
SHAPE_UTILS = {
    ShapeType.RECTANGLE: SizedShapeUtil(),
    ShapeType.TRIANGLE: SizedShapeUtil(),
    ShapeType.TEXT: SizedShapeUtil(),
    ShapeType.STICKY: SizedShapeUtil(),
    ShapeType.GROUP: SizedShapeUtil(),
    ShapeType.ELLIPSE: EllipseUtil(),
    ShapeType.DRAW: DrawUtil(),
}


def get_shape_util(shape: Shape) -> ShapeUtil:
    """Get the geometry utility for a shape's type.

    Args:
        shape: Shape record

    Returns:
        ShapeUtil instance

    Raises:
        UnsupportedShapeTypeError: If no utility is registered for the type
    """
    util = SHAPE_UTILS.get(shape.type)
    if util is None:
        raise UnsupportedShapeTypeError(f"No geometry utility for shape type '{shape.type}'")
    return util


def get_bounds(shape: Shape) -> Bounds:
    return get_shape_util(shape).get_bounds(shape)


def get_center(shape: Shape) -> Vec2:
    return get_shape_util(shape).get_center(shape)


def get_common_bounds(bounds_list: Iterable[Bounds]) -> Bounds:
    """Smallest box covering all bounds (ValueError when empty)"""
    return Bounds.common(bounds_list)


__all__ = [
    'ShapeUtil',
    'SizedShapeUtil',
    'EllipseUtil',
    'DrawUtil',
    'SHAPE_UTILS',
    'get_shape_util',
    'get_bounds',
    'get_center',
    'get_common_bounds',
]
