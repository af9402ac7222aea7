"""FastMCP server implementation for flatstore."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from flatstore.collection import ContentFile
from flatstore.config import StoreConfig
from flatstore.sources import FolderSource


def create_mcp_server(folder: Path, config: StoreConfig) -> FastMCP:
    """Create an MCP server for one content folder.

    Args:
        folder: Folder whose files are served
        config: Store configuration

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="flatstore",
    )

    source = FolderSource(folder, config)

    def document_for(filename: str):
        source.reset()
        record = source.collection().find(filename)
        if record is None:
            return None
        if isinstance(record, ContentFile):
            return record.content()
        return record.meta()

    @mcp.tool()
    def ls(type: str = "") -> str:
        """List the files of the folder with their type.

        Args:
            type: Optional type filter (content, meta, thumb, image, video, document, audio, code, unknown)

        Returns:
            One line per file
        """
        source.reset()
        files = source.collection()
        if type:
            files = files.filter_by("type", type)

        if not len(files):
            return f"No files found of type '{type}'" if type else "No files found"

        lines = []
        for record in files:
            size = record.size
            size_str = f"{size} B" if size is not None else "?"
            lines.append(f"{record.filename:<50} {record.type.value:<9} {size_str:>10}")
        return "\n".join(lines)

    @mcp.tool()
    def fields(filename: str) -> str:
        """Read all fields of a content or meta file.

        Args:
            filename: Name of a record file, or of a file that has a meta file

        Returns:
            One ``key: value`` line per field
        """
        document = document_for(filename)
        if document is None:
            return f"Error: No content found for: {filename}"

        return "\n".join(f"{key}: {document.get(key, '')}" for key in document.field_names())

    @mcp.tool()
    def get(filename: str, key: str) -> str:
        """Read one field, using the default language as fallback.

        Args:
            filename: Name of a record file, or of a file that has a meta file
            key: Field name

        Returns:
            The field value
        """
        document = document_for(filename)
        if document is None:
            return f"Error: No content found for: {filename}"

        value = document.get(key)
        if value is None:
            return f"Error: No field '{key}' in {filename}"
        return value

    return mcp
