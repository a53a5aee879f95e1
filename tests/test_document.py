"""
Tests for the Document model.

Verifies:
- Default construction and pages
- Shape CRUD and lookup errors
- Selection (page state)
- Groups (creation, refresh, ungroup)
- Batched mutation and patch application
- Snapshot and dict round-trip
"""
import pytest

from models.document import Document, Shape, ShapeType
from models.errors import DocumentFormatError, ShapeNotFoundError
from models.transform import Bounds, Vec2
from conftest import make_document, points_of, rect


# ══════════════════════════════════════════════════════════════════════════
# Construction and Lookup
# ══════════════════════════════════════════════════════════════════════════

class TestDocumentBasics:

    def test_default_page(self, fresh_document):
        assert fresh_document.current_page_id == 'page'
        assert fresh_document.get_page_ids() == ['page']
        assert fresh_document.get_shape_count() == 0

    def test_add_and_get_shape(self, fresh_document):
        fresh_document.add_shape(Shape(rect('a', 1, 2, 3, 4)))
        shape = fresh_document.get_shape('a')
        assert shape.type == ShapeType.RECTANGLE
        assert shape.point == Vec2(1.0, 2.0)
        assert shape.size == Vec2(3.0, 4.0)

    def test_duplicate_id_rejected(self, fresh_document):
        fresh_document.add_shape(Shape(rect('a', 0, 0, 1, 1)))
        with pytest.raises(ValueError):
            fresh_document.add_shape(Shape(rect('a', 5, 5, 1, 1)))

    def test_missing_shape_raises(self, fresh_document):
        with pytest.raises(ShapeNotFoundError) as exc_info:
            fresh_document.get_shape('nope')
        assert exc_info.value.shape_id == 'nope'
        assert exc_info.value.page_id == 'page'
        assert "nope" in str(exc_info.value)

    def test_missing_shape_is_a_key_error(self, fresh_document):
        with pytest.raises(KeyError):
            fresh_document.get_shape('nope')

    def test_shape_lookup_is_page_scoped(self, fresh_document):
        fresh_document.add_page('other')
        fresh_document.add_shape(Shape(rect('a', 0, 0, 1, 1)), page_id='other')
        assert fresh_document.has_shape('a', 'other')
        with pytest.raises(ShapeNotFoundError):
            fresh_document.get_shape('a')

    def test_unknown_page_rejected(self, fresh_document):
        with pytest.raises(ValueError):
            fresh_document.current_page_id = 'missing'

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            Shape({'id': 'x', 'type': 'hexagon'})

    def test_remove_shape_drops_selection(self):
        doc = make_document(rect('a', 0, 0, 1, 1), rect('b', 0, 0, 1, 1))
        doc.set_selected_ids(['a', 'b'])
        doc.remove_shape('a')
        assert doc.get_selected_ids() == ['b']
        assert not doc.has_shape('a')

    def test_selection_requires_known_ids(self, fresh_document):
        with pytest.raises(ShapeNotFoundError):
            fresh_document.set_selected_ids(['ghost'])

    def test_shapes_bounds(self):
        doc = make_document(rect('a', 0, 0, 10, 10), rect('b', 30, 20, 10, 5))
        assert doc.get_shapes_bounds(['a', 'b']) == Bounds(0.0, 0.0, 40.0, 25.0, 40.0, 25.0)
        assert doc.get_shape_center('b') == Vec2(35.0, 22.5)

    def test_shapes_bounds_requires_ids(self, fresh_document):
        with pytest.raises(ValueError):
            fresh_document.get_shapes_bounds([])


# ══════════════════════════════════════════════════════════════════════════
# Groups
# ══════════════════════════════════════════════════════════════════════════

class TestGroups:

    def test_create_group_covers_children(self, grouped_document):
        group = grouped_document.get_shape('group')
        assert group.is_group
        assert group.children == ['g1', 'g2']
        assert group.point == Vec2(20.0, 0.0)
        assert group.size == Vec2(20.0, 30.0)

    def test_children_are_reparented(self, grouped_document):
        assert grouped_document.get_parent_group('g1') == 'group'
        assert grouped_document.get_parent_group('a') is None

    def test_create_group_requires_children(self, fresh_document):
        with pytest.raises(ValueError):
            fresh_document.create_group([])

    def test_ungroup(self, grouped_document):
        children = grouped_document.ungroup('group')
        assert children == ['g1', 'g2']
        assert not grouped_document.has_shape('group')
        assert grouped_document.get_parent_group('g1') is None

    def test_ungroup_rejects_plain_shape(self, grouped_document):
        with pytest.raises(ValueError):
            grouped_document.ungroup('a')

    def test_children_setter_rejects_plain_shape(self):
        with pytest.raises(ValueError):
            Shape(rect('a', 0, 0, 1, 1)).children = ['x']


# ══════════════════════════════════════════════════════════════════════════
# Mutation and Patches
# ══════════════════════════════════════════════════════════════════════════

class TestMutation:

    def test_mutate_shapes_reports_before_and_after(self):
        doc = make_document(rect('a', 0, 0, 10, 10), rect('b', 5, 5, 10, 10))
        result = doc.mutate_shapes(['a', 'b'], lambda shape: {'point': [shape.point.x + 1, 7]})
        assert result['before'] == {'a': {'point': [0.0, 0.0]}, 'b': {'point': [5.0, 5.0]}}
        assert result['after'] == {'a': {'point': [1.0, 7.0]}, 'b': {'point': [6.0, 7.0]}}
        assert points_of(doc, ['a', 'b']) == {'a': [1.0, 7.0], 'b': [6.0, 7.0]}

    def test_mutator_returning_none_skips_shape(self):
        doc = make_document(rect('a', 0, 0, 10, 10), rect('b', 5, 5, 10, 10))
        result = doc.mutate_shapes(['a', 'b'], lambda shape: {'point': [9, 9]} if shape.id == 'a' else None)
        assert set(result['after']) == {'a'}

    def test_mutator_sees_detached_copy(self):
        doc = make_document(rect('a', 0, 0, 10, 10))

        def mutator(shape):
            shape.point = Vec2(100, 100)
            return None

        doc.mutate_shapes(['a'], mutator)
        assert doc.get_shape('a').point == Vec2(0.0, 0.0)

    def test_mutate_unknown_id_writes_nothing(self):
        doc = make_document(rect('a', 0, 0, 10, 10))
        with pytest.raises(ShapeNotFoundError):
            doc.mutate_shapes(['a', 'ghost'], lambda shape: {'point': [9, 9]})
        assert doc.get_shape('a').point == Vec2(0.0, 0.0)

    def test_mutating_child_refreshes_group(self, grouped_document):
        grouped_document.mutate_shapes(['g1'], lambda shape: {'point': [10, 0]})
        assert grouped_document.get_shape('group').point == Vec2(10.0, 0.0)
        assert grouped_document.get_shape('group').size == Vec2(30.0, 30.0)

    def test_apply_patch_sets_points_and_selection(self):
        doc = make_document(rect('a', 0, 0, 10, 10), rect('b', 5, 5, 10, 10))
        doc.apply_patch({'document': {
            'pages': {'page': {'shapes': {'b': {'point': [50, 60]}}}},
            'page_states': {'page': {'selected_ids': ['b', 'a']}},
        }})
        assert doc.get_shape('b').point == Vec2(50.0, 60.0)
        assert doc.get_selected_ids() == ['b', 'a']

    def test_apply_patch_unknown_shape_writes_nothing(self):
        doc = make_document(rect('a', 0, 0, 10, 10))
        with pytest.raises(ShapeNotFoundError):
            doc.apply_patch({'document': {'pages': {'page': {'shapes': {
                'a': {'point': [1, 1]},
                'ghost': {'point': [2, 2]},
            }}}}})
        assert doc.get_shape('a').point == Vec2(0.0, 0.0)

    def test_patch_cannot_change_type(self):
        doc = make_document(rect('a', 0, 0, 10, 10))
        with pytest.raises(ValueError):
            doc.apply_patch({'document': {'pages': {'page': {'shapes': {'a': {'type': 'ellipse'}}}}}})


# ══════════════════════════════════════════════════════════════════════════
# Snapshot and Serialization
# ══════════════════════════════════════════════════════════════════════════

class TestSerialization:

    def test_snapshot_round_trip(self, grouped_document):
        grouped_document.set_selected_ids(['a', 'z'])
        snapshot = grouped_document.get_snapshot()
        grouped_document.mutate_shapes(['a'], lambda shape: {'point': [500, 500]})
        grouped_document.set_snapshot(snapshot)
        assert grouped_document.get_shape('a').point == Vec2(0.0, 0.0)
        assert grouped_document.get_selected_ids() == ['a', 'z']

    def test_snapshot_is_isolated(self, grouped_document):
        snapshot = grouped_document.get_snapshot()
        grouped_document.set_snapshot(snapshot)
        snapshot['pages']['page']['shapes'][0]['point'][0] = 999
        assert grouped_document.get_shape('a').point.x == 0.0

    def test_dict_round_trip(self, grouped_document):
        data = grouped_document.to_dict()
        assert data['version'] == 1
        restored = Document.from_dict(data)
        assert restored.to_dict() == data
        assert restored.get_children('group') == ['g1', 'g2']

    @pytest.mark.parametrize("data", [
        None,
        {},
        {'pages': {}},
        {'pages': {'page': {'shapes': {}}}},
        {'pages': {'page': {'shapes': []}}, 'current_page_id': 'elsewhere'},
        {'pages': {'page': {'shapes': [{'id': 'a', 'type': 'hexagon'}]}}},
        {'pages': {'page': {'shapes': [{'id': 'a', 'point': [1, 2, 3]}]}}},
        {'pages': {'page': {'shapes': []}}, 'version': 99},
    ])
    def test_invalid_documents_rejected(self, data):
        with pytest.raises(DocumentFormatError):
            Document.from_dict(data)
