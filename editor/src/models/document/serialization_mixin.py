"""
Serialization Mixin for Document Model

Converts documents to and from plain dicts (the JSON file format):

    {
        'version': 1,
        'current_page_id': 'page',
        'pages': {'page': {'name': 'Page 1', 'shapes': [{...}, ...]}},
        'page_states': {'page': {'selected_ids': [...]}}
    }
"""

from typing import Dict

from constants import DOCUMENT_FORMAT_VERSION
from models.errors import DocumentFormatError


class DocumentSerializationMixin:
    """Mixin providing dict import/export for Document model"""

    def to_dict(self) -> Dict:
        """Export the document to a JSON-serializable dict"""
        data = self.get_snapshot()
        data['version'] = DOCUMENT_FORMAT_VERSION
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'DocumentSerializationMixin':
        """Create a document from a dict produced by to_dict()

        Raises:
            DocumentFormatError: If the dict is not a valid document
        """
        if not isinstance(data, dict) or not isinstance(data.get('pages'), dict) or not data['pages']:
            raise DocumentFormatError("Document must contain a non-empty 'pages' mapping")

        version = data.get('version', DOCUMENT_FORMAT_VERSION)
        if version > DOCUMENT_FORMAT_VERSION:
            raise DocumentFormatError(f"Unsupported document version: {version}")

        current_page_id = data.get('current_page_id', next(iter(data['pages'])))
        if current_page_id not in data['pages']:
            raise DocumentFormatError(f"Current page '{current_page_id}' is not in the document")

        snapshot = {
            'current_page_id': current_page_id,
            'pages': {},
            'page_states': {},
        }
        for page_id, page in data['pages'].items():
            shapes = page.get('shapes', [])
            if not isinstance(shapes, list):
                raise DocumentFormatError(f"Shapes of page '{page_id}' must be a list")
            snapshot['pages'][page_id] = {'name': page.get('name', page_id), 'shapes': shapes}
            state = data.get('page_states', {}).get(page_id, {})
            snapshot['page_states'][page_id] = {'selected_ids': list(state.get('selected_ids', []))}

        document = cls()
        try:
            document.set_snapshot(snapshot)
        except (KeyError, TypeError, ValueError) as e:
            raise DocumentFormatError(f"Invalid shape data: {e}") from e

        document._logger.debug(f"Loaded document with {len(snapshot['pages'])} page(s)")
        return document
