"""Initial file typing by extension and media family."""

import mimetypes
from pathlib import Path

from flatstore.models.file_type import FileType

THUMB_EXTENSION = "thumb"

# Extension lists per type
TYPE_EXTENSIONS = {
    FileType.IMAGE: {
        "jpeg", "jpg", "jpe", "gif", "png", "svg", "ico", "tif", "tiff",
        "bmp", "psd", "ai", "webp", "avif", "heic",
    },
    FileType.DOCUMENT: {
        "txt", "text", "mdown", "md", "markdown", "pdf", "doc", "docx",
        "word", "xl", "xls", "xlsx", "dotx", "dot", "rtf", "pages",
        "keynote", "numbers", "ppt", "pptx", "odt", "ods", "odp", "csv",
    },
    FileType.CODE: {
        "js", "css", "scss", "htm", "html", "shtml", "xhtml", "php", "php3",
        "php4", "rb", "xml", "json", "java", "py", "yml", "yaml", "toml",
    },
    FileType.VIDEO: {"mov", "avi", "ogg", "ogv", "webm", "flv", "swf", "mp4", "m4v", "mkv"},
    FileType.AUDIO: {"mp3", "m4a", "wav", "aif", "aiff", "midi", "mid", "flac", "oga"},
}

EXTENSION_TYPES: dict[str, FileType] = {
    ext: file_type for file_type, extensions in TYPE_EXTENSIONS.items() for ext in extensions
}

# Fallback for extensions missing from the table
MIME_FAMILIES = {
    "image": FileType.IMAGE,
    "video": FileType.VIDEO,
    "audio": FileType.AUDIO,
}


def file_extension(filename: str) -> str:
    """Lowercased last extension without the dot."""
    return Path(filename).suffix[1:].lower()


def file_stem(filename: str) -> str:
    """Filename without its last extension."""
    suffix = Path(filename).suffix
    return filename[: -len(suffix)] if suffix else filename


def detect_type(filename: str, content_extension: str = "txt") -> FileType:
    """Pick the initial type of a file.

    Files with the content extension are ``content``. A ``.thumb`` file whose
    inner extension is an image extension (``photo.jpg.thumb``) is an image.
    Everything else is looked up by extension, then by MIME family, and ends
    up ``unknown`` when neither matches.
    """
    ext = file_extension(filename)
    if ext == content_extension:
        return FileType.CONTENT

    if ext == THUMB_EXTENSION:
        inner = file_extension(file_stem(filename))
        if EXTENSION_TYPES.get(inner) is FileType.IMAGE:
            return FileType.IMAGE

    if ext in EXTENSION_TYPES:
        return EXTENSION_TYPES[ext]

    mime_type, _ = mimetypes.guess_type(filename, strict=False)
    if mime_type:
        return MIME_FAMILIES.get(mime_type.split("/", 1)[0], FileType.UNKNOWN)
    return FileType.UNKNOWN
