"""Geometry value types for shape positions and extents."""
from dataclasses import dataclass
from typing import Iterable, List, Sequence


@dataclass
class Vec2:
    """2D vector for points and offsets.

    Used for any x/y pair in page space:
    - Shape origins (top-left point)
    - Shape sizes and radii
    - Deltas between two points
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def add(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x - other.x, self.y - other.y)

    def on(self, axis: int) -> float:
        """Coordinate on an axis index (0 = x, 1 = y)"""
        return self.x if axis == 0 else self.y

    @classmethod
    def along(cls, axis: int, length: float) -> 'Vec2':
        """Vector of the given length along an axis index"""
        return cls(length, 0.0) if axis == 0 else cls(0.0, length)

    def to_list(self) -> List[float]:
        return [self.x, self.y]

    @classmethod
    def from_list(cls, values: Sequence[float]) -> 'Vec2':
        """Build from a two-item sequence such as [x, y] from JSON"""
        if len(values) != 2:
            raise ValueError(f"Expected 2 coordinates, got {len(values)}")
        return cls(float(values[0]), float(values[1]))


@dataclass
class Bounds:
    """Axis-aligned bounding box in page space.

    width and height are stored alongside the corners, matching what the
    geometry utilities hand out; they are not re-derived on access.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> 'Bounds':
        return cls(min_x, min_y, max_x, max_y, max_x - min_x, max_y - min_y)

    @classmethod
    def from_point_and_size(cls, point: Vec2, size: Vec2) -> 'Bounds':
        return cls(point.x, point.y, point.x + size.x, point.y + size.y, size.x, size.y)

    @property
    def center(self) -> Vec2:
        return Vec2((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def min_on(self, axis: int) -> float:
        return self.min_x if axis == 0 else self.min_y

    def max_on(self, axis: int) -> float:
        return self.max_x if axis == 0 else self.max_y

    def extent(self, axis: int) -> float:
        """Width (axis 0) or height (axis 1)"""
        return self.width if axis == 0 else self.height

    @property
    def min_point(self) -> Vec2:
        return Vec2(self.min_x, self.min_y)

    @classmethod
    def common(cls, bounds_list: Iterable['Bounds']) -> 'Bounds':
        """Smallest box covering every box in bounds_list

        Raises:
            ValueError: If bounds_list is empty
        """
        bounds_list = list(bounds_list)
        if not bounds_list:
            raise ValueError("Need at least one bounds to combine")

        return cls.from_corners(
            min(b.min_x for b in bounds_list),
            min(b.min_y for b in bounds_list),
            max(b.max_x for b in bounds_list),
            max(b.max_y for b in bounds_list),
        )

    def to_dict(self) -> dict:
        return {
            'min_x': self.min_x,
            'min_y': self.min_y,
            'max_x': self.max_x,
            'max_y': self.max_y,
            'width': self.width,
            'height': self.height,
        }
