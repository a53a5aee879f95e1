"""
Shared fixtures for Shape Distribution Editor tests.

Provides document builders and sample documents with ungrouped and grouped shapes.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Shape helpers ───────────────────────────────────────────────────────

def rect(shape_id, x, y, w, h, **extra):
    """Rectangle shape dict at (x, y) with size (w, h)"""
    data = {'id': shape_id, 'type': 'rectangle', 'point': [x, y], 'size': [w, h]}
    data.update(extra)
    return data


def make_document(*shape_dicts):
    """Document on the default page holding the given shapes"""
    from models.document import Document, Shape
    doc = Document()
    for data in shape_dicts:
        doc.add_shape(Shape(dict(data)))
    return doc


def points_of(doc, ids):
    """Map id -> [x, y] for the given shapes"""
    return {shape_id: doc.get_shape(shape_id).point.to_list() for shape_id in ids}


# ── Fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def fresh_document():
    """Empty document with its default page"""
    from models.document import Document
    return Document()


@pytest.fixture
def slack_document():
    """Widths 10/20/10 inside a 60-wide box starting at x=0 (selection in reverse order)"""
    doc = make_document(
        rect('a', 0, 0, 10, 10),
        rect('b', 30, 5, 20, 10),
        rect('c', 50, 10, 10, 10),
    )
    doc.set_selected_ids(['c', 'a', 'b'])
    return doc


@pytest.fixture
def overlap_document():
    """Four shapes whose widths add up to more than their common width"""
    return make_document(
        rect('left', 0, 0, 40, 10),
        rect('mid1', 50, 20, 40, 10),
        rect('mid2', 20, 40, 40, 10),
        rect('right', 60, 60, 40, 10),
    )


@pytest.fixture
def grouped_document():
    """Two loose rectangles and a group of two rectangles between them"""
    doc = make_document(
        rect('a', 0, 0, 10, 10),
        rect('g1', 20, 0, 10, 10),
        rect('g2', 30, 20, 10, 10),
        rect('z', 90, 0, 10, 10),
    )
    doc.create_group(['g1', 'g2'], group_id='group')
    return doc
