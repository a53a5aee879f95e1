"""Headless shape distribution - CLI entry point.

Loads a JSON document, evenly distributes shapes along an axis and writes
the updated document (and optionally the undoable command) back as JSON.

Usage:
    python editor/src/headless.py <input_file> --axis {horizontal,vertical}
        [--ids ID [ID ...]] [-o OUTPUT_FILE] [--command-out FILE] [-v]

Examples:
    python editor/src/headless.py drawing.json --axis horizontal
    python editor/src/headless.py drawing.json --axis vertical --ids a b c -o out.json
    python editor/src/headless.py drawing.json --axis horizontal --command-out cmd.json
"""

import sys
import os
import argparse
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from models.command import DistributeType
from models.errors import DocumentFormatError, ShapeNotFoundError
from services.distribution import distribute_shapes
from services.file_operations import (
    load_document_from_file, save_document_to_file, save_command_to_file,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Evenly distribute shapes of a JSON document along an axis.',
    )
    parser.add_argument(
        'input_file',
        help='Path to the JSON document.',
    )
    parser.add_argument(
        '-a', '--axis',
        required=True,
        choices=[t.value for t in DistributeType],
        help='Axis to distribute along.',
    )
    parser.add_argument(
        '--ids',
        nargs='+',
        help='Shape ids to distribute (default: the current page selection).',
    )
    parser.add_argument(
        '-o', '--output',
        help='Output document path (default: overwrite the input file).',
    )
    parser.add_argument(
        '--command-out',
        help='Also write the undoable command (before/after patches) to this path.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    input_path = os.path.abspath(args.input_file)
    output_path = os.path.abspath(args.output) if args.output else input_path

    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}")
        return 1

    try:
        document = load_document_from_file(input_path)
    except DocumentFormatError as e:
        print(f"Error: {e}")
        return 1

    ids = args.ids if args.ids else document.get_selected_ids()

    try:
        command = distribute_shapes(document, ids, DistributeType(args.axis))
    except ShapeNotFoundError as e:
        print(f"Error: {e}")
        return 1

    if command.is_empty():
        print(f"Nothing to distribute ({len(ids)} shape(s) given).")

    save_document_to_file(document, output_path)
    print(f"Saved {output_path}")

    if args.command_out:
        command_path = os.path.abspath(args.command_out)
        save_command_to_file(command, command_path)
        print(f"Saved {command_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
