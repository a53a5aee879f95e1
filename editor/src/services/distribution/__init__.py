"""Shape distribution service.

planner.py computes target points; patch_builder.py turns them into an
undoable distribute command.
"""

from .planner import DistributionEntry, PlannedMove, build_entries, plan_distribution
from .patch_builder import distribute_shapes

__all__ = [
    'DistributionEntry',
    'PlannedMove',
    'build_entries',
    'plan_distribution',
    'distribute_shapes',
]
