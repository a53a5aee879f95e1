"""
Shape Distribution Editor - File Operations Service

This module handles file I/O for documents and commands (JSON, UTF-8).
Separates file operations from the model.
"""

import json
import logging

from constants import JSON_INDENT
from models.document import Document
from models.errors import DocumentFormatError

logger = logging.getLogger('FileOperations')


def save_document_to_file(document, filename):
    """Save a document to a JSON file
    
    Args:
        document: Document to save
        filename: Path to save file
        
    Raises:
        OSError: If file write fails
    """
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(document.to_dict(), f, indent=JSON_INDENT)
    
    logger.info(f"Document saved to {filename}")


def load_document_from_file(filename):
    """Load a document from a JSON file
    
    Args:
        filename: Path to document file
        
    Returns:
        Document instance
        
    Raises:
        OSError: If file read fails
        DocumentFormatError: If the file is not a valid document
    """
    with open(filename, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"Not a valid JSON document: {e}") from e
    
    document = Document.from_dict(data)
    logger.info(f"Document loaded from {filename}")
    return document


def save_command_to_file(command, filename):
    """Save a command (before/after patches) to a JSON file
    
    Args:
        command: Command to save
        filename: Path to save file
    """
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(command.to_dict(), f, indent=JSON_INDENT)
    
    logger.info(f"Command '{command.id}' saved to {filename}")
