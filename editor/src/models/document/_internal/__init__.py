"""
Document Internal Package - DO NOT IMPORT FROM HERE

This package contains INTERNAL implementation for the Document model:
- shape.py: Shape, Shapes and ShapeType data structures

Import from models.document (the public API) instead:
    from models.document import Document, Shape, ShapeType
"""

# This package is internal - do not populate __all__
# External code must use models.document
