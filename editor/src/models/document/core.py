"""
Shape Distribution Editor - Document Data Model

THE MODEL of the editor. Owns all shape records and page state.

This class handles:
- Pages, each holding an id-keyed collection of shapes
- Page state (selected shape ids) per page
- The current page
- Shape lookup and bounds queries
- Group membership and group geometry
- Batched point mutation and patch application (for commands)
- Snapshot API and dict/JSON serialization

The Document is INDEPENDENT of UI:
- No rendering logic
- No undo stack (HistoryManager applies command patches)

Usage:
    doc = Document()
    doc.add_shape(Shape({'id': 'a', 'type': 'rectangle', 'point': [0, 0], 'size': [10, 10]}))
    shape = doc.get_shape('a')

    # Apply a command patch
    doc.apply_patch(command.after)

    # Snapshot support
    snapshot = doc.get_snapshot()
    doc.set_snapshot(snapshot)
"""

import copy
import logging
from typing import Dict, List, Optional

from constants import DEFAULT_PAGE_ID, DEFAULT_PAGE_NAME
from ._internal.shape import Shape, Shapes
from .query_mixin import DocumentQueryMixin
from .container_mixin import DocumentContainerMixin
from .mutation_mixin import DocumentMutationMixin
from .serialization_mixin import DocumentSerializationMixin


class Document(DocumentMutationMixin, DocumentContainerMixin, DocumentSerializationMixin, DocumentQueryMixin):
    """Editor document with pages, shapes and page state

    Properties:
        current_page_id: Page that page-less calls operate on
    """

    def __init__(self):
        """Create new document with one empty page"""
        self._logger = logging.getLogger('Document')

        self._pages: Dict[str, Dict] = {}
        self._page_states: Dict[str, Dict] = {}
        self._current_page_id = DEFAULT_PAGE_ID
        self.add_page(DEFAULT_PAGE_ID, DEFAULT_PAGE_NAME)

        self._logger.debug("Created new Document")

    def clear(self):
        """Reset to a single empty default page"""
        self._pages.clear()
        self._page_states.clear()
        self._current_page_id = DEFAULT_PAGE_ID
        self.add_page(DEFAULT_PAGE_ID, DEFAULT_PAGE_NAME)
        self._logger.debug("Cleared Document to defaults")

    # ========================================
    # Pages
    # ========================================

    @property
    def current_page_id(self) -> str:
        return self._current_page_id

    @current_page_id.setter
    def current_page_id(self, page_id: str):
        if page_id not in self._pages:
            raise ValueError(f"Page with id '{page_id}' not found")
        self._current_page_id = page_id
        self._logger.debug(f"Set current page: {page_id}")

    def add_page(self, page_id: str, name: str = "") -> str:
        """Add an empty page

        Raises:
            ValueError: If a page with this id already exists
        """
        if page_id in self._pages:
            raise ValueError(f"Page with id '{page_id}' already exists")

        self._pages[page_id] = {'name': name or page_id, 'shapes': Shapes()}
        self._page_states[page_id] = {'selected_ids': []}
        self._logger.debug(f"Added page: {page_id}")
        return page_id

    def get_page_ids(self) -> List[str]:
        return list(self._pages.keys())

    def _resolve_page_id(self, page_id: Optional[str]) -> str:
        page_id = self._current_page_id if page_id is None else page_id
        if page_id not in self._pages:
            raise ValueError(f"Page with id '{page_id}' not found")
        return page_id

    def _page_shapes(self, page_id: Optional[str] = None) -> Shapes:
        return self._pages[self._resolve_page_id(page_id)]['shapes']

    # ========================================
    # Shapes
    # ========================================

    def add_shape(self, shape: Shape, page_id: Optional[str] = None) -> str:
        """Add a shape record to a page

        Args:
            shape: Shape to add (owned by the document from now on)
            page_id: Target page, current page if None

        Returns:
            Id of the added shape
        """
        page_id = self._resolve_page_id(page_id)
        if shape.parent_id != page_id and shape.parent_id not in self._page_shapes(page_id):
            # Unknown parent: attach to the page
            shape.parent_id = page_id
        self._page_shapes(page_id).add(shape)
        self._logger.debug(f"Added shape {shape.id} to page {page_id}")
        return shape.id

    def remove_shape(self, shape_id: str, page_id: Optional[str] = None):
        """Remove a shape, dropping it from its group and the selection

        Raises:
            ShapeNotFoundError: If the id is not on the page
        """
        page_id = self._resolve_page_id(page_id)
        shape = self.get_shape(shape_id, page_id)

        parent = self._page_shapes(page_id).get_by_id(shape.parent_id)
        if parent is not None and parent.is_group:
            parent.children = [cid for cid in parent.children if cid != shape_id]

        self._page_shapes(page_id).remove(shape_id)
        state = self._page_states[page_id]
        state['selected_ids'] = [sid for sid in state['selected_ids'] if sid != shape_id]
        self._logger.debug(f"Removed shape {shape_id} from page {page_id}")

    # ========================================
    # Page state
    # ========================================

    def set_selected_ids(self, ids: List[str], page_id: Optional[str] = None):
        """Set the selection of a page (order kept)

        Raises:
            ShapeNotFoundError: If any id is not on the page
        """
        page_id = self._resolve_page_id(page_id)
        for shape_id in ids:
            self.get_shape(shape_id, page_id)
        self._page_states[page_id]['selected_ids'] = list(ids)
        self._logger.debug(f"Set selection on page {page_id}: {list(ids)}")

    def get_selected_ids(self, page_id: Optional[str] = None) -> List[str]:
        page_id = self._resolve_page_id(page_id)
        return list(self._page_states[page_id]['selected_ids'])

    # ========================================
    # Snapshot API
    # ========================================

    def get_snapshot(self) -> Dict:
        """Get complete state snapshot

        Returns:
            Deep-copied dictionary containing all document state
        """
        return {
            'current_page_id': self._current_page_id,
            'pages': {
                page_id: {'name': page['name'], 'shapes': page['shapes'].to_dict_list()}
                for page_id, page in self._pages.items()
            },
            'page_states': copy.deepcopy(self._page_states),
        }

    def set_snapshot(self, snapshot: Dict):
        """Restore state from snapshot

        Args:
            snapshot: Dictionary from get_snapshot()
        """
        snapshot = copy.deepcopy(snapshot)
        self._pages = {
            page_id: {'name': page['name'], 'shapes': Shapes.from_dict_list(page['shapes'])}
            for page_id, page in snapshot['pages'].items()
        }
        self._page_states = {
            page_id: snapshot['page_states'].get(page_id, {'selected_ids': []})
            for page_id in self._pages
        }
        self._current_page_id = snapshot['current_page_id']
        self._logger.debug("Restored from snapshot")

    def __repr__(self) -> str:
        counts = {page_id: len(page['shapes']) for page_id, page in self._pages.items()}
        return f"Document(current_page='{self._current_page_id}', shapes={counts})"
