"""
Mutation Mixin for Document Model

Provides the two write paths used by commands:
- mutate_shapes(): apply a batch of per-shape changes and report what the
  store held before and after
- apply_patch(): apply a command's before/after document patch

Both validate every id before writing anything, so a failed call leaves
the document untouched.
"""

from typing import Callable, Dict, List, Optional

from ._internal.shape import Shape

Mutator = Callable[[Shape], Optional[Dict]]


class DocumentMutationMixin:
    """Mixin providing batched mutation for Document model"""

    def mutate_shapes(self, shape_ids: List[str], mutator: Mutator,
                      page_id: Optional[str] = None) -> Dict[str, Dict[str, Dict]]:
        """Apply a mutator to each shape as one batch

        The mutator receives a detached copy of each shape and returns a
        partial shape dict (e.g. {'point': [x, y]}), or None/{} for no change.
        All partials are computed before any of them is written.

        Args:
            shape_ids: Shapes to mutate
            mutator: Function Shape -> partial dict
            page_id: Page of the shapes, current page if None

        Returns:
            {'before': {id: partial}, 'after': {id: partial}} holding only the
            changed keys, read back from the store

        Raises:
            ShapeNotFoundError: If any id is not on the page (nothing written)
        """
        page_id = self._resolve_page_id(page_id)
        shapes = self.get_shapes(shape_ids, page_id)

        changes = {}
        for shape in shapes:
            partial = mutator(shape.copy())
            if partial:
                shape.copy().apply_partial(partial)
                changes[shape.id] = partial

        before = {}
        after = {}
        for shape in shapes:
            partial = changes.get(shape.id)
            if partial is None:
                continue
            before[shape.id] = shape.get_partial(partial.keys())
            shape.apply_partial(partial)
            after[shape.id] = shape.get_partial(partial.keys())

        self._refresh_parent_groups(list(changes.keys()), page_id)
        self._logger.debug(f"Mutated {len(changes)} shape(s) on page {page_id}")
        return {'before': before, 'after': after}

    def apply_patch(self, patch: Dict):
        """Apply a document patch (e.g. Command.before or Command.after)

        Shape partials are written as-is; page-state entries replace the
        recorded selection. Groups containing a patched shape are refreshed.

        Raises:
            ShapeNotFoundError: If a patched shape is missing (nothing written)
            ValueError: If a patched page is missing or a partial is invalid
        """
        document = patch.get('document', {})
        pages = document.get('pages', {})
        page_states = document.get('page_states', {})

        # Validate everything up front
        for page_id, page_patch in pages.items():
            self._resolve_page_id(page_id)
            for shape_id, partial in page_patch.get('shapes', {}).items():
                self.get_shape(shape_id, page_id).copy().apply_partial(partial)
        for page_id in page_states:
            self._resolve_page_id(page_id)

        for page_id, page_patch in pages.items():
            shape_patches = page_patch.get('shapes', {})
            for shape_id, partial in shape_patches.items():
                self.get_shape(shape_id, page_id).apply_partial(partial)
            self._refresh_parent_groups(list(shape_patches.keys()), page_id)
            self._logger.debug(f"Applied patch to {len(shape_patches)} shape(s) on page {page_id}")

        for page_id, state in page_states.items():
            if 'selected_ids' in state:
                self._page_states[page_id]['selected_ids'] = list(state['selected_ids'])

    def _refresh_parent_groups(self, shape_ids: List[str], page_id: str):
        """Refresh every group above the given shapes, innermost first

        Groups that are themselves in shape_ids were positioned explicitly
        and are left as written.
        """
        touched = set(shape_ids)
        depths = {}
        for shape_id in shape_ids:
            ancestors = []
            group_id = self.get_parent_group(shape_id, page_id)
            while group_id is not None and group_id not in ancestors:
                ancestors.append(group_id)
                group_id = self.get_parent_group(group_id, page_id)
            for depth, ancestor in enumerate(reversed(ancestors)):
                depths[ancestor] = max(depth, depths.get(ancestor, 0))

        for group_id in sorted(depths, key=depths.get, reverse=True):
            if group_id not in touched:
                self.refresh_group(group_id, page_id)
