"""Document model mixins package"""

from ._internal.shape import Shape, Shapes, ShapeType
from .query_mixin import DocumentQueryMixin
from .container_mixin import DocumentContainerMixin
from .mutation_mixin import DocumentMutationMixin
from .serialization_mixin import DocumentSerializationMixin
from .core import Document

__all__ = [
    'Document',
    'Shape',
    'Shapes',
    'ShapeType',
    'DocumentQueryMixin',
    'DocumentContainerMixin',
    'DocumentMutationMixin',
    'DocumentSerializationMixin',
]
