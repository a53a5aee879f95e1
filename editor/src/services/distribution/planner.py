"""Distribution planner - computes evenly spaced positions for shapes.

Two strategies, chosen per call:

- Slack case (sum of extents fits inside the common bounds): shapes are
  packed edge-to-edge from the common minimum with equal gaps between them.
- Overlap case (sum of extents exceeds the common bounds): the two extreme
  shapes stay fixed and the others are centered at equal steps between the
  anchors' centers.

Orderings are deterministic: ties on a bound or center are broken by the
input order of the shapes.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from constants import MIN_DISTRIBUTE_COUNT
from models.command import DistributeType
from models.document import Shape
from models.transform import Bounds, Vec2
from services.shape_utils import get_shape_util, get_common_bounds

logger = logging.getLogger('Distribute')


@dataclass
class DistributionEntry:
    """Geometry of one shape for a single planner call"""
    id: str
    point: Vec2
    bounds: Bounds
    center: Vec2


@dataclass
class PlannedMove:
    """Target position for one shape"""
    id: str
    prev: Vec2
    next: Vec2


def build_entries(shapes: Sequence[Shape]) -> List[DistributionEntry]:
    """Derive bounds and center for each shape through its geometry utility."""
    entries = []
    for shape in shapes:
        util = get_shape_util(shape)
        entries.append(DistributionEntry(
            id=shape.id,
            point=shape.point,
            bounds=util.get_bounds(shape),
            center=util.get_center(shape),
        ))
    return entries


def plan_distribution(entries: Sequence[DistributionEntry],
                      distribute_type: DistributeType) -> List[PlannedMove]:
    """Plan new positions that distribute entries evenly along an axis.

    Args:
        entries: One entry per shape, in selection order
        distribute_type: HORIZONTAL or VERTICAL

    Returns:
        One PlannedMove per repositioned entry. Overlap-case anchors are
        omitted; every other entry is included even when it stays put.
        Fewer than MIN_DISTRIBUTE_COUNT entries yield an empty list.
    """
    count = len(entries)
    if count < MIN_DISTRIBUTE_COUNT:
        logger.debug(f"Distribute skipped: {count} shape(s), need {MIN_DISTRIBUTE_COUNT}")
        return []

    distribute_type = DistributeType(distribute_type)
    axis = distribute_type.axis

    mins = np.array([e.bounds.min_on(axis) for e in entries], dtype=float)
    maxs = np.array([e.bounds.max_on(axis) for e in entries], dtype=float)
    extents = np.array([e.bounds.extent(axis) for e in entries], dtype=float)
    centers = np.array([e.center.on(axis) for e in entries], dtype=float)

    common = get_common_bounds(e.bounds for e in entries)
    common_min = common.min_on(axis)
    common_extent = common.extent(axis)
    span = float(extents.sum())

    # Stable sort keeps input order among equal centers
    by_center = [int(i) for i in np.argsort(centers, kind='stable')]

    moves = []
    if span > common_extent:
        # argmin/argmax return the first occurrence on ties
        low = int(np.argmin(mins))
        high = int(np.argmax(maxs))
        if high == low:
            # One shape spans everything; the high anchor comes from the rest
            others = maxs.copy()
            others[low] = -np.inf
            high = int(np.argmax(others))

        step = (centers[high] - centers[low]) / (count - 1)
        remaining = [i for i in by_center if i not in (low, high)]
        for rank, i in enumerate(remaining):
            new_center = centers[low] + step * (rank + 1)
            moves.append(_planned_move(entries[i], axis, float(new_center - extents[i] / 2)))

        logger.debug(
            f"Distribute {distribute_type.value} (overlap): anchors {entries[low].id}, "
            f"{entries[high].id}, step {float(step):.4f}"
        )
    else:
        gap = (common_extent - span) / (count - 1)
        cursor = common_min
        for i in by_center:
            moves.append(_planned_move(entries[i], axis, cursor))
            cursor += float(extents[i]) + gap

        logger.debug(f"Distribute {distribute_type.value} (slack): gap {gap:.4f}")

    return moves


def _planned_move(entry: DistributionEntry, axis: int, new_min: float) -> PlannedMove:
    """Move an entry so its bounds start at new_min on the axis.

    The origin is shifted by the same amount as the bounds, so shapes whose
    geometry is offset from their point keep that offset. The cross-axis
    coordinate is copied unchanged.
    """
    point = entry.point
    shift = Vec2.along(axis, new_min - entry.bounds.min_on(axis))
    return PlannedMove(id=entry.id, prev=Vec2(point.x, point.y), next=point.add(shift))
