"""
Shape Distribution Editor - Data Models

This module contains the data model classes for the editor document.

Public API: Import Document, Shape, ShapeType from models.document
The models/document/_internal/ subdirectory contains internal implementation only.
"""

from .document import Document, Shape, ShapeType
from .command import Command, DistributeType

__all__ = ['Document', 'Shape', 'ShapeType', 'Command', 'DistributeType']
