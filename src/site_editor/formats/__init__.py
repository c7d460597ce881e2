"""Document format handlers for Site Editor."""

from site_editor.formats.base import FormatHandler
from site_editor.formats.json_handler import JSONHandler, ParseError
from site_editor.formats.html_handler import HTMLHandler

__all__ = [
    "FormatHandler",
    "JSONHandler",
    "HTMLHandler",
    "ParseError",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".json": JSONHandler,
    ".html": HTMLHandler,
    ".htm": HTMLHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
