"""
Container Management Mixin for Document Model

Provides methods for managing group shapes. A group is a shape whose
visual position is represented by its children: its point and size are
kept equal to the common bounds of its children.
"""

import uuid as uuid_module
from typing import List, Optional

from models.transform import Bounds, Vec2
from ._internal.shape import Shape, ShapeType


class DocumentContainerMixin:
    """Mixin providing group management functionality for Document model"""

    def is_group(self, shape_id: str, page_id: Optional[str] = None) -> bool:
        """Check whether a shape is a group

        Raises:
            ShapeNotFoundError: If the id is not on the page
        """
        return self.get_shape(shape_id, page_id).is_group

    def get_children(self, group_id: str, page_id: Optional[str] = None) -> List[str]:
        """Get the ordered child ids of a group (empty for other shapes)

        Raises:
            ShapeNotFoundError: If the id is not on the page
        """
        return self.get_shape(group_id, page_id).children

    def get_parent_group(self, shape_id: str, page_id: Optional[str] = None) -> Optional[str]:
        """Get the id of the group containing a shape, None at page level"""
        page_id = self._resolve_page_id(page_id)
        parent_id = self.get_shape(shape_id, page_id).parent_id
        parent = self._page_shapes(page_id).get_by_id(parent_id)
        if parent is not None and parent.is_group:
            return parent_id
        return None

    def create_group(self, child_ids: List[str], group_id: Optional[str] = None,
                     page_id: Optional[str] = None) -> str:
        """Group shapes under a new group shape

        The group is sized to the common bounds of its children and the
        children are re-parented to it.

        Args:
            child_ids: Shapes to group (order kept as child order)
            group_id: Id for the group, generated if None
            page_id: Target page, current page if None

        Returns:
            Id of the new group

        Raises:
            ValueError: If child_ids is empty
            ShapeNotFoundError: If any child id is not on the page
        """
        if not child_ids:
            raise ValueError("Cannot create group from empty shape list")

        page_id = self._resolve_page_id(page_id)
        children = self.get_shapes(child_ids, page_id)

        group = Shape({
            'id': group_id or f"group_{uuid_module.uuid4()}",
            'type': ShapeType.GROUP.value,
            'parent_id': page_id,
            'children': list(child_ids),
        })
        self._page_shapes(page_id).add(group)

        for child in children:
            old_parent = self._page_shapes(page_id).get_by_id(child.parent_id)
            if old_parent is not None and old_parent.is_group:
                old_parent.children = [cid for cid in old_parent.children if cid != child.id]
            child.parent_id = group.id

        self.refresh_group(group.id, page_id)
        self._logger.info(f"Created group {group.id} with {len(child_ids)} shapes")
        return group.id

    def ungroup(self, group_id: str, page_id: Optional[str] = None) -> List[str]:
        """Remove a group, moving its children back to the page

        Returns:
            The former child ids

        Raises:
            ValueError: If the shape is not a group
        """
        page_id = self._resolve_page_id(page_id)
        group = self.get_shape(group_id, page_id)
        if not group.is_group:
            raise ValueError(f"Shape '{group_id}' is not a group")

        child_ids = group.children
        for child_id in child_ids:
            self.get_shape(child_id, page_id).parent_id = page_id
        group.children = []
        self.remove_shape(group_id, page_id)
        self._logger.info(f"Ungrouped {group_id} ({len(child_ids)} shapes)")
        return child_ids

    def refresh_group(self, group_id: str, page_id: Optional[str] = None):
        """Recompute a group's point and size from its children

        Groups without resolvable children keep their current geometry.
        """
        from services.shape_utils import get_bounds

        page_id = self._resolve_page_id(page_id)
        group = self.get_shape(group_id, page_id)
        shapes = self._page_shapes(page_id)
        children = [shapes.get_by_id(cid) for cid in group.children]
        children = [child for child in children if child is not None]
        if not children:
            return

        bounds = Bounds.common(get_bounds(child) for child in children)
        group.point = bounds.min_point
        group.size = Vec2(bounds.width, bounds.height)
        self._logger.debug(f"Refreshed group {group_id}: point={group.point}, size={group.size}")
