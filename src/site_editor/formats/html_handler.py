"""Standalone HTML export handler."""

import logging
from typing import Optional
from urllib.parse import urlsplit

from site_editor.config import get_settings
from site_editor.document.model import Document, Section
from site_editor.formats.base import FormatHandler

logger = logging.getLogger(__name__)

# URL used in place of an image source with a disallowed scheme
BLOCKED_URL = "about:blank"

SAFE_URL_SCHEMES = ("http", "https")

STYLESHEET = """
        body { font-family: Arial, sans-serif; margin: 0; padding: 20px; }
        .container { max-width: 1200px; margin: 0 auto; }
        img { max-width: 100%; height: auto; }"""


class HTMLHandler(FormatHandler):
    """Handler for exporting a document as a self-contained HTML page.

    Export is one-way; the page has no section ids or editor state, so it
    cannot be loaded back.
    """

    media_type = "text/html; charset=utf-8"

    def __init__(self, image_alt: Optional[str] = None) -> None:
        self.image_alt = image_alt if image_alt is not None else get_settings().image_alt

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".html", ".htm")

    def dumps(self, document: Document) -> str:
        """Render a document to a complete HTML page."""
        title = self._escape_html(document.title)
        html_parts: list[str] = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{title}</title>",
            f"<style>{STYLESHEET}\n</style>",
            "</head>",
            "<body>",
            '<div class="container">',
            f"<h1>{title}</h1>",
        ]

        for section in document.sections:
            if section.is_text:
                html_parts.append(self._render_text_html(section))
            else:
                html_parts.append(self._render_image_html(section))

        html_parts.extend(["</div>", "</body>", "</html>"])

        return "\n".join(html_parts) + "\n"

    def _render_text_html(self, section: Section) -> str:
        """Render a text section as a styled paragraph."""
        style = section.style
        css = (
            f"font-weight: {'bold' if style.bold else 'normal'}; "
            f"font-style: {'italic' if style.italic else 'normal'}; "
            f"font-size: {style.font_size.value}; "
            f"color: {style.color};"
        )
        text = self._escape_html(section.content)
        return f'<p style="{self._escape_attribute(css)}">{text}</p>'

    def _render_image_html(self, section: Section) -> str:
        """Render an image section; its style is not used."""
        src = self._escape_attribute(safe_image_url(section.content))
        alt = self._escape_attribute(self.image_alt)
        return f'<img src="{src}" alt="{alt}">'

    def _escape_html(self, text: str) -> str:
        """Escape HTML special characters."""
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
        )

    def _escape_attribute(self, text: str) -> str:
        """Escape text for use inside a double-quoted attribute."""
        return (
            self._escape_html(text)
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )


def safe_image_url(url: str) -> str:
    """Return ``url`` if it is safe as an image source, else BLOCKED_URL.

    Allowed: http(s) URLs, ``data:image/...`` URIs and relative URLs.
    """
    candidate = url.strip()
    # Browsers drop control characters and whitespace inside a scheme
    compact = "".join(ch for ch in candidate if ch > " ")
    try:
        scheme = urlsplit(compact).scheme.lower()
    except ValueError:
        logger.warning("Blocked unparseable image URL: %r", url)
        return BLOCKED_URL

    if not scheme:
        return candidate
    if scheme in SAFE_URL_SCHEMES:
        return candidate
    if scheme == "data" and compact[len("data:"):].lower().startswith("image/"):
        return candidate

    logger.warning("Blocked image URL with scheme %r", scheme)
    return BLOCKED_URL
