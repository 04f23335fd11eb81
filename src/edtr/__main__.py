"""Command-line entry point: decode an EDTR document and print it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from edtr.config import EDTR_MAX_DEPTH, EDTR_SCHEMA_REVISION
from edtr.decoder import CodecOptions, decode
from edtr.encoder import encode
from edtr.exceptions import SchemaError
from edtr.revisions import SchemaRevision

logger = logging.getLogger("edtr")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="edtr", description="Decode an EDTR document and print the tree.")
    parser.add_argument("file", help="EDTR JSON file, or - for stdin")
    parser.add_argument(
        "--schema-revision",
        choices=[revision.value for revision in SchemaRevision],
        default=EDTR_SCHEMA_REVISION,
        help="Schema revision to accept (default: %(default)s)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=EDTR_MAX_DEPTH,
        help="Deepest allowed nesting (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=["repr", "json"],
        default="repr",
        help="Print the tree as Python repr or re-encoded JSON",
    )
    parser.add_argument("--check", action="store_true", help="Only validate; print nothing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.max_depth < 1:
        parser.error("--max-depth must be >= 1")

    try:
        data = load_document(args.file)
    except FileNotFoundError as exc:
        parser.error(str(exc))
    options = CodecOptions(schema_revision=SchemaRevision(args.schema_revision), max_depth=args.max_depth)
    try:
        tree = decode(data, options)
    except SchemaError as exc:
        logger.error("%s: %s: %s", args.file, exc.kind.value, exc)
        return 1

    if args.check:
        return 0
    if args.format == "json":
        print(encode(tree, indent=2).decode("utf-8"))
    else:
        print(repr(tree))
    return 0


def load_document(file_path: str) -> bytes:
    if file_path == "-":
        return sys.stdin.buffer.read()
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"EDTR file not found: {path}")
    return path.read_bytes()


if __name__ == "__main__":
    sys.exit(main())
