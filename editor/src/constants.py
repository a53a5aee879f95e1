"""
Shape Distribution Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Document and page defaults
- Default shape geometry
- Distribution command settings
- History and file format settings
"""

# ======================================================================
# DOCUMENT DEFAULTS
# ======================================================================

# Page created for every new document
DEFAULT_PAGE_ID = 'page'
DEFAULT_PAGE_NAME = 'Page 1'

# ======================================================================
# DEFAULT SHAPE GEOMETRY
# ======================================================================
# Used when a shape record omits its geometry fields

DEFAULT_POINT = [0.0, 0.0]
DEFAULT_SHAPE_SIZE = [100.0, 100.0]
DEFAULT_ELLIPSE_RADIUS = [50.0, 50.0]

# ======================================================================
# DISTRIBUTION
# ======================================================================

# Command id recorded in every distribute command (used by history descriptions)
DISTRIBUTE_COMMAND_ID = 'distribute'

# Fewer shapes than this cannot be distributed; the command becomes a no-op.
# With two shapes both are extremes, so nothing would move anyway.
MIN_DISTRIBUTE_COUNT = 3

# ======================================================================
# HISTORY
# ======================================================================

DEFAULT_MAX_HISTORY = 50

# ======================================================================
# FILE FORMAT
# ======================================================================

DOCUMENT_FORMAT_VERSION = 1
JSON_INDENT = 2
