"""
Shape Distribution Editor - Shape Data Model

Provides object-oriented interface to shape records with:
- A type tag (rectangle, ellipse, group, ...) selecting the geometry utility
- Vec2 access to point-like fields, stored as plain [x, y] lists
- Flat dict storage suitable for JSON import/export and patching
- Id-based identification (stable across reordering)

This is part of the MODEL layer - pure data, no geometry or UI logic.

Usage:
    shape = Shape({'id': 'a', 'type': 'rectangle', 'point': [0, 0], 'size': [10, 10]})
    x = shape.point.x
    shape.point = Vec2(20.0, shape.point.y)
    data = shape.to_dict()
"""

import copy
import uuid as uuid_module
from enum import Enum
from typing import Dict, Iterator, List, Optional

from constants import DEFAULT_POINT, DEFAULT_SHAPE_SIZE, DEFAULT_ELLIPSE_RADIUS, DEFAULT_PAGE_ID
from models.errors import UnsupportedShapeTypeError
from models.transform import Vec2


class ShapeType(str, Enum):
    """Type tag of a shape record"""
    RECTANGLE = 'rectangle'
    ELLIPSE = 'ellipse'
    TRIANGLE = 'triangle'
    TEXT = 'text'
    STICKY = 'sticky'
    DRAW = 'draw'
    GROUP = 'group'


class Shape:
    """Object-oriented wrapper for a shape record

    Shared fields:
        id, type, parent_id, name, point (Vec2)

    Type-specific fields:
        size (Vec2)          rectangle, triangle, text, sticky, group
        radius (Vec2)        ellipse
        points (List[Vec2])  draw, relative to point
        children (List[str]) group
    """

    def __init__(self, data: Optional[Dict] = None):
        """Initialize shape from dictionary or create a default rectangle

        Args:
            data: Existing shape dictionary (taken over, not copied), or None

        Raises:
            UnsupportedShapeTypeError: If the type tag is not a known ShapeType
        """
        self._data = data if data is not None else {'type': ShapeType.RECTANGLE.value}

        if 'id' not in self._data:
            self._data['id'] = str(uuid_module.uuid4())

        # Normalise the type tag to its string value
        type_tag = self._data.get('type', ShapeType.RECTANGLE.value)
        try:
            self._data['type'] = ShapeType(type_tag).value
        except ValueError as e:
            raise UnsupportedShapeTypeError(f"Unknown shape type '{type_tag}'") from e
        self._data.setdefault('parent_id', DEFAULT_PAGE_ID)
        self._data.setdefault('name', self._data['type'])
        self._data['point'] = _float_pair(self._data.get('point', DEFAULT_POINT))

        if self.type == ShapeType.ELLIPSE:
            self._data['radius'] = _float_pair(self._data.get('radius', DEFAULT_ELLIPSE_RADIUS))
        elif self.type == ShapeType.DRAW:
            self._data['points'] = [_float_pair(p) for p in self._data.get('points', [])]
        else:
            self._data['size'] = _float_pair(self._data.get('size', DEFAULT_SHAPE_SIZE))

        if self.type == ShapeType.GROUP:
            self._data['children'] = list(self._data.get('children', []))

    @property
    def id(self) -> str:
        return self._data['id']

    @property
    def type(self) -> ShapeType:
        return ShapeType(self._data['type'])

    @property
    def is_group(self) -> bool:
        return self._data['type'] == ShapeType.GROUP.value

    @property
    def name(self) -> str:
        return self._data['name']

    @name.setter
    def name(self, value: str):
        self._data['name'] = value

    @property
    def parent_id(self) -> str:
        """Page id for top-level shapes, group id for grouped shapes"""
        return self._data['parent_id']

    @parent_id.setter
    def parent_id(self, value: str):
        self._data['parent_id'] = value

    # ========================================
    # Geometry fields
    # ========================================

    @property
    def point(self) -> Vec2:
        """Origin (top-left) of the shape in page space"""
        return Vec2.from_list(self._data['point'])

    @point.setter
    def point(self, value: Vec2):
        self._data['point'] = [float(value.x), float(value.y)]

    @property
    def size(self) -> Vec2:
        return Vec2.from_list(self._data.get('size', DEFAULT_SHAPE_SIZE))

    @size.setter
    def size(self, value: Vec2):
        self._data['size'] = [float(value.x), float(value.y)]

    @property
    def radius(self) -> Vec2:
        return Vec2.from_list(self._data.get('radius', DEFAULT_ELLIPSE_RADIUS))

    @property
    def points(self) -> List[Vec2]:
        return [Vec2.from_list(p) for p in self._data.get('points', [])]

    @property
    def children(self) -> List[str]:
        """Ordered child ids (empty for non-group shapes)"""
        return list(self._data.get('children', []))

    @children.setter
    def children(self, value: List[str]):
        if not self.is_group:
            raise ValueError(f"Shape '{self.id}' is not a group and cannot have children")
        self._data['children'] = list(value)

    # ========================================
    # Partial updates
    # ========================================

    def get_partial(self, keys) -> Dict:
        """Copy of the given fields, e.g. {'point': [x, y]}"""
        return {key: copy.deepcopy(self._data[key]) for key in keys if key in self._data}

    def apply_partial(self, partial: Dict):
        """Overwrite fields from a partial shape dict

        Point-like fields are normalised to float pairs so that what the
        store holds is exactly what later reads hand out.

        Raises:
            ValueError: If the partial tries to change id or type
        """
        for key, value in partial.items():
            if key in ('id', 'type') and value != self._data.get(key):
                raise ValueError(f"Cannot change '{key}' of shape '{self.id}'")
            if key in ('point', 'size', 'radius'):
                self._data[key] = _float_pair(value)
            elif key == 'points':
                self._data[key] = [_float_pair(p) for p in value]
            else:
                self._data[key] = copy.deepcopy(value)

    def to_dict(self) -> Dict:
        """Export to dictionary format (deep copy)"""
        return copy.deepcopy(self._data)

    def copy(self) -> 'Shape':
        return Shape(self.to_dict())

    def __repr__(self) -> str:
        return f"Shape(id='{self.id}', type='{self._data['type']}', point={self._data['point']})"


class Shapes:
    """Ordered, id-keyed shape collection for one page"""

    def __init__(self, data_list: Optional[List[Dict]] = None):
        self._shapes: Dict[str, Shape] = {}
        for data in data_list or []:
            self.add(Shape(data))

    def add(self, shape: Shape):
        if shape.id in self._shapes:
            raise ValueError(f"Shape with id '{shape.id}' already exists")
        self._shapes[shape.id] = shape

    def remove(self, shape_id: str) -> Optional[Shape]:
        return self._shapes.pop(shape_id, None)

    def get_by_id(self, shape_id: str) -> Optional[Shape]:
        return self._shapes.get(shape_id)

    def ids(self) -> List[str]:
        return list(self._shapes.keys())

    def clear(self):
        self._shapes.clear()

    def to_dict_list(self) -> List[Dict]:
        return [shape.to_dict() for shape in self._shapes.values()]

    @classmethod
    def from_dict_list(cls, data_list: List[Dict]) -> 'Shapes':
        return cls(data_list)

    def __contains__(self, shape_id: str) -> bool:
        return shape_id in self._shapes

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes.values())

    def __len__(self) -> int:
        return len(self._shapes)


def _float_pair(values) -> List[float]:
    if isinstance(values, Vec2):
        return [float(values.x), float(values.y)]
    if len(values) != 2:
        raise ValueError(f"Expected 2 coordinates, got {len(values)}")
    return [float(values[0]), float(values[1])]
