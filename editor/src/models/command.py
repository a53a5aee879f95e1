"""
Shape Distribution Editor - Command Model

A Command is the unit the history stack stores: a pair of document patches,
one restoring the state before an action (undo) and one producing the state
after it (redo).

Patch layout (plain dicts, JSON-serializable):

    {
        'document': {
            'pages': {page_id: {'shapes': {shape_id: {'point': [x, y]}}}},
            'page_states': {page_id: {'selected_ids': [...]}},
        }
    }
"""

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class DistributeType(str, Enum):
    """Axis along which shapes are evenly spaced"""
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'

    @property
    def axis(self) -> int:
        """Axis index used by Vec2 and Bounds accessors (0 = x, 1 = y)"""
        return 0 if self is DistributeType.HORIZONTAL else 1


def make_page_patch(page_id: str, shapes: Dict[str, Dict], selected_ids: List[str]) -> Dict:
    """Wrap per-shape partials into a page-scoped, selection-preserving patch

    Args:
        page_id: Page the shapes live on
        shapes: Mapping shape id -> partial shape dict (e.g. {'point': [x, y]})
        selected_ids: Selection to record in the page state

    Returns:
        Document patch dict
    """
    return {
        'document': {
            'pages': {
                page_id: {'shapes': shapes},
            },
            'page_states': {
                page_id: {'selected_ids': list(selected_ids)},
            },
        },
    }


@dataclass
class Command:
    """Undoable document change

    Attributes:
        id: Command identifier (e.g. 'distribute')
        before: Patch that restores the previous state
        after: Patch that produces the new state
    """
    id: str
    before: Dict = field(default_factory=dict)
    after: Dict = field(default_factory=dict)

    def get_shape_patches(self, page_id: str) -> Dict[str, Dict[str, Dict]]:
        """Get the before/after shape maps for a page

        Returns:
            {'before': {id: partial}, 'after': {id: partial}}
        """
        return {
            'before': _page_shapes(self.before, page_id),
            'after': _page_shapes(self.after, page_id),
        }

    def is_empty(self) -> bool:
        """True when neither patch touches any shape"""
        for patch in (self.before, self.after):
            pages = patch.get('document', {}).get('pages', {})
            if any(page.get('shapes') for page in pages.values()):
                return False
        return True

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'before': deepcopy(self.before),
            'after': deepcopy(self.after),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Command':
        return cls(
            id=data['id'],
            before=deepcopy(data.get('before', {})),
            after=deepcopy(data.get('after', {})),
        )


def _page_shapes(patch: Dict, page_id: str) -> Dict[str, Dict]:
    return patch.get('document', {}).get('pages', {}).get(page_id, {}).get('shapes', {})
