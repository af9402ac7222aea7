"""CLI entry point for flatstore."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from flatstore.collection import ContentFile, FileCollection
from flatstore.config import StoreConfig
from flatstore.content import ContentDocument
from flatstore.sources import FolderSource
from flatstore.utils import SortMode

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> StoreConfig:
    """Build the store configuration from environment and CLI overrides."""
    overrides = {}
    if args.multilang:
        overrides["multilang"] = True
    if args.languages:
        overrides["languages"] = args.languages
    if args.default_language:
        overrides["default_language"] = args.default_language
    if args.language:
        overrides["current_language"] = args.language
    return StoreConfig(**overrides)


def open_document(file: str, config: StoreConfig) -> Optional[ContentDocument]:
    """Return the document for a content/meta file, or the meta of any other file."""
    path = Path(file)
    source = FolderSource(path.parent, config)
    record = source.collection().find(path.name)
    if record is None:
        logger.error(f"File not found: {file}")
        sys.exit(1)

    if isinstance(record, ContentFile):
        return record.content()
    return record.meta(config.current_language)


def ls(folder: str, config: StoreConfig, file_type: str = "", sort: str = "", desc: bool = False, natural: bool = False) -> None:
    """List the classified files of a folder.

    Args:
        folder: Path to the folder
        config: Store configuration
        file_type: Only list files of this type
        sort: Record attribute to sort by
        desc: Sort descending
        natural: Use natural sorting
    """
    files: FileCollection = FolderSource(folder, config).collection()

    if file_type:
        files = files.filter_by("type", file_type)
    if sort:
        mode = SortMode.NATURAL if natural else SortMode.REGULAR
        files = files.sort_by(sort, "desc" if desc else "asc", mode)

    for record in files:
        print(f"{record.filename:<50} {record.type.value}")


def info(folder: str, config: StoreConfig) -> None:
    """Show file counts per type for a folder."""
    counts = FolderSource(folder, config).collection().summary()

    print(f"Folder: {folder}")
    print(f"  Total: {counts.pop('total')}")
    for name, count in counts.items():
        if count:
            print(f"  {name}: {count}")


def fields(file: str, config: StoreConfig) -> None:
    """Print all fields of a record file."""
    document = open_document(file, config)
    if document is None:
        logger.error(f"No content for {file}")
        sys.exit(1)

    for key in document.field_names():
        print(f"{key}: {document.get(key, '')}")


def get(file: str, key: str, config: StoreConfig) -> None:
    """Print a single field value."""
    document = open_document(file, config)
    value = document.get(key) if document is not None else None
    if value is None:
        logger.error(f"No field '{key}' in {file}")
        sys.exit(1)
    print(value)


def set_fields(file: str, assignments: list[str], config: StoreConfig) -> None:
    """Set fields from KEY=VALUE pairs and save the file.

    Creates the meta file when a non-record file has none yet.
    """
    data = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep:
            logger.error(f"Expected KEY=VALUE, got: {assignment}")
            sys.exit(1)
        data[key] = value

    path = Path(file)
    source = FolderSource(path.parent, config)
    record = source.collection().find(path.name)
    if record is None:
        logger.error(f"File not found: {file}")
        sys.exit(1)

    if isinstance(record, ContentFile):
        document = record.content()
    else:
        document = record.meta(config.current_language)
        if document is None:
            document = ContentDocument.create(record)

    document.set(data)
    if not document.save():
        logger.error(f"Could not save {document.path}")
        sys.exit(1)
    logger.info(f"Saved {len(data)} fields to {document.path}")


def serve(folder: str, config: StoreConfig, transport: str = "stdio") -> None:
    """Start MCP server for a folder.

    Args:
        folder: Path to the content folder
        config: Store configuration
        transport: Transport protocol (stdio or sse)
    """
    folder_path = Path(folder)
    if not folder_path.is_dir():
        logger.error(f"Folder not found: {folder}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from flatstore.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {folder} via {transport}")
    mcp = create_mcp_server(folder_path, config)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="flatstore",
        description="flatstore - flat-file content without a database",
    )
    parser.add_argument("--multilang", action="store_true", help="Enable language-suffixed content files")
    parser.add_argument("--languages", help="Comma-separated language codes (e.g. en,de)")
    parser.add_argument("--default-language", help="Default language code")
    parser.add_argument("--language", help="Language to read and write")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ls command
    ls_parser = subparsers.add_parser("ls", help="List the classified files of a folder")
    ls_parser.add_argument("folder", help="Content folder path")
    ls_parser.add_argument("--type", default="", help="Only list files of this type")
    ls_parser.add_argument("--sort", default="", help="Attribute to sort by (filename, size, type, ...)")
    ls_parser.add_argument("--desc", action="store_true", help="Sort descending")
    ls_parser.add_argument("--natural", action="store_true", help="Natural sort order")

    # info command
    info_parser = subparsers.add_parser("info", help="Show file counts per type")
    info_parser.add_argument("folder", help="Content folder path")

    # fields command
    fields_parser = subparsers.add_parser("fields", help="Print all fields of a file")
    fields_parser.add_argument("file", help="Content, meta or media file")

    # get command
    get_parser = subparsers.add_parser("get", help="Print one field")
    get_parser.add_argument("file", help="Content, meta or media file")
    get_parser.add_argument("key", help="Field name")

    # set command
    set_parser = subparsers.add_parser("set", help="Set fields and save")
    set_parser.add_argument("file", help="Content, meta or media file")
    set_parser.add_argument("assignments", nargs="+", metavar="KEY=VALUE")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start MCP server for a folder")
    serve_parser.add_argument("folder", help="Content folder path")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    args = parser.parse_args()
    config = build_config(args)
    logging.getLogger().setLevel(config.log_level.upper())

    if args.command == "ls":
        ls(args.folder, config, args.type, args.sort, args.desc, args.natural)
    elif args.command == "info":
        info(args.folder, config)
    elif args.command == "fields":
        fields(args.file, config)
    elif args.command == "get":
        get(args.file, args.key, config)
    elif args.command == "set":
        set_fields(args.file, args.assignments, config)
    elif args.command == "serve":
        serve(args.folder, config, args.transport)


if __name__ == "__main__":
    main()
