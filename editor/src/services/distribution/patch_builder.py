"""Distribute command builder.

Turns planned moves into an undoable Command:

1. Resolve every selected id and every child of a moved group
   (fails before anything is written)
2. Plan target points (pure, see planner.py)
3. Redirect group moves onto the group's children
4. Write all target points as one batch and read back the realized
   before/after
5. Wrap the shape maps into page-scoped, selection-preserving patches

The document is left in the command's "after" state.
"""

import logging
from typing import Dict, List, Optional, Set

from constants import DISTRIBUTE_COMMAND_ID
from models.command import Command, DistributeType, make_page_patch
from models.document import Document, Shape
from models.transform import Vec2
from .planner import PlannedMove, build_entries, plan_distribution

logger = logging.getLogger('Distribute')


def distribute_shapes(document: Document, ids: List[str], distribute_type: DistributeType,
                      page_id: Optional[str] = None) -> Command:
    """Evenly distribute shapes along an axis and return the undoable change

    Args:
        document: Document holding the shapes (mutated in place)
        ids: Shapes to distribute, in selection order
        distribute_type: HORIZONTAL or VERTICAL
        page_id: Page of the shapes, current page if None

    Returns:
        Command with id 'distribute'. Selections too small to distribute
        give a command whose shape maps are empty.

    Raises:
        ShapeNotFoundError: If any id, or any child of a moved group, is
            not on the page. Nothing is written in that case.
    """
    page_id = page_id if page_id is not None else document.current_page_id
    distribute_type = DistributeType(distribute_type)

    initial_shapes = document.get_shapes(ids, page_id)
    moves = plan_distribution(build_entries(initial_shapes), distribute_type)

    targets = _resolve_targets(document, initial_shapes, moves, page_id)

    def mutator(shape: Shape) -> Optional[Dict]:
        return {'point': targets[shape.id].to_list()}

    # One batch: groups above the moved shapes are refreshed from their children
    result = document.mutate_shapes(list(targets.keys()), mutator, page_id)

    logger.info(f"Distributed {len(ids)} shape(s) {distribute_type.value}: {len(result['after'])} entries")

    return Command(
        id=DISTRIBUTE_COMMAND_ID,
        before=make_page_patch(page_id, result['before'], ids),
        after=make_page_patch(page_id, result['after'], ids),
    )


def _resolve_targets(document: Document, shapes: List[Shape], moves: List[PlannedMove],
                     page_id: str) -> Dict[str, Vec2]:
    """Final point of every shape the command writes, computed from the
    unmodified store

    A moved group gets no entry of its own; its delta is carried by its
    direct children instead. A child that already has a target gets the
    delta on top of it. A child group that was itself expanded passes the
    delta on to the children that replaced it. Other child groups are
    moved as plain entries.

    Raises:
        ShapeNotFoundError: If a child of a moved group is not on the page
    """
    targets = {move.id: move.next for move in moves}
    origins = {move.id: move.prev for move in moves}
    expanded: Dict[str, List[str]] = {}

    def carry(shape_id: str, delta: Vec2, seen: Set[str]):
        if shape_id in seen:
            return
        seen.add(shape_id)
        if shape_id in expanded:
            for child_id in expanded[shape_id]:
                carry(child_id, delta, seen)
            return
        targets[shape_id] = targets.get(shape_id, origins[shape_id]).add(delta)

    for shape in shapes:
        if not shape.is_group or shape.id not in targets:
            continue

        children = document.get_shapes(shape.children, page_id)
        for child in children:
            origins.setdefault(child.id, child.point)

        delta = targets.pop(shape.id).sub(origins[shape.id])
        expanded[shape.id] = [child.id for child in children]
        for child in children:
            carry(child.id, delta, {shape.id})

        logger.debug(f"Moved {len(children)} child(ren) of group {shape.id} by {delta}")

    return targets
