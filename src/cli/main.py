"""CodableFiles CLI entry points.
This module exposes inspection and maintenance commands for a store.
It maps argparse commands onto ObjectStore calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
from pathlib import Path
from typing import Any, Sequence

from core.config import StoreConfig
from core.errors import CodableFilesError
from store.object_store import ObjectStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="codable-files",
        description="Inspect and maintain a CodableFiles document store",
    )
    parser.add_argument("--root", help="Override CODABLE_FILES_ROOT for this command")
    parser.add_argument(
        "--default-directory",
        help="Override CODABLE_FILES_DEFAULT_DIRECTORY for this command",
    )
    parser.add_argument("--bundle-dir", help="Override CODABLE_FILES_BUNDLE_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_document_command(subparsers, "path", "Print the path of an existing document")
    show_parser = _add_document_command(subparsers, "show", "Print a document as JSON")
    show_parser.add_argument(
        "--many",
        action="store_true",
        help="Treat the document as an array of values",
    )
    _add_document_command(subparsers, "exists", "Exit 0 when the document exists, else 1")
    _add_document_command(subparsers, "delete", "Delete one document")
    _add_document_command(subparsers, "seed", "Copy a document in from the bundle")
    delete_directory_parser = subparsers.add_parser(
        "delete-directory",
        help="Recursively delete a document directory",
    )
    delete_directory_parser.add_argument("--directory", help="Directory name (default directory when omitted)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CodableFiles CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        store = _build_store(args)
        return _dispatch(store, args)
    except CodableFilesError as error:
        print(f"error={error}")
        return 1


def _add_document_command(subparsers: Any, name: str, help_text: str) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text)
    parser.add_argument("filename", help="Document filename without extension")
    parser.add_argument("--directory", help="Directory name (default directory when omitted)")
    return parser


def _build_store(args: argparse.Namespace) -> ObjectStore:
    """Build a store with optional CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Configured object store.
    """
    config = StoreConfig.from_env()
    if args.root:
        config = replace(config, documents_root=Path(args.root).expanduser().resolve())
    if args.default_directory:
        config = replace(config, default_directory_name=args.default_directory)
    if args.bundle_dir:
        config = replace(config, bundle_dir=Path(args.bundle_dir).expanduser().resolve())
    return ObjectStore(config)


def _dispatch(store: ObjectStore, args: argparse.Namespace) -> int:
    if args.command == "path":
        print(store.document_path(args.filename, args.directory))
        return 0
    if args.command == "show":
        return _run_show_command(store, args)
    if args.command == "exists":
        found = store.exists(args.filename, args.directory)
        print("true" if found else "false")
        return 0 if found else 1
    if args.command == "delete":
        store.delete(args.filename, args.directory)
        return 0
    if args.command == "seed":
        print(store.copy_from_bundle(args.filename, args.directory))
        return 0
    if args.command == "delete-directory":
        store.delete_directory(args.directory)
        return 0
    raise CodableFilesError(f"Unsupported command: {args.command}")


def _run_show_command(store: ObjectStore, args: argparse.Namespace) -> int:
    """Handle show command.

    Args:
        store: Object store.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if args.many:
        payload: Any = store.load_many(args.filename, args.directory)
    else:
        payload = store.load(args.filename, args.directory)
    print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))
    return 0
