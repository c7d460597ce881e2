"""Document model and the pure operations that edit it."""

from site_editor.document.model import (
    Document,
    Section,
    SectionType,
    Style,
    StyleDelta,
    FontSize,
)
from site_editor.document.operations import (
    SectionIndexError,
    new_document,
    add_section,
    update_section,
    delete_section,
    move_section,
    set_title,
    find_section,
)

__all__ = [
    "Document",
    "Section",
    "SectionType",
    "Style",
    "StyleDelta",
    "FontSize",
    "SectionIndexError",
    "new_document",
    "add_section",
    "update_section",
    "delete_section",
    "move_section",
    "set_title",
    "find_section",
]
