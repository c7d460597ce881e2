"""Pure editing operations on a Document.

Every function takes a Document and returns a new one; the input is never
modified. Sections that an operation does not touch are carried over as the
same objects.
"""

import logging
import time
from dataclasses import replace
from typing import Optional

from site_editor.config import Settings, get_settings
from site_editor.document.model import (
    Document,
    Section,
    SectionType,
    Style,
    StyleDelta,
)

logger = logging.getLogger(__name__)


class SectionIndexError(IndexError):
    """A move referenced a position outside the section list."""

    pass


def new_document(
    title: Optional[str] = None, settings: Optional[Settings] = None
) -> Document:
    """Create the document a fresh editing session starts with."""
    settings = settings or get_settings()
    return Document(
        title=settings.default_title if title is None else title,
        sections=(
            Section(
                id="1",
                type=SectionType.TEXT,
                content=settings.default_text,
                style=Style(),
            ),
        ),
    )


def _next_section_id(doc: Document) -> str:
    """Generate an id from the current time, bumped past existing numeric ids."""
    candidate = time.time_ns() // 1_000_000
    numeric_ids = [int(s.id) for s in doc.sections if s.id.isascii() and s.id.isdigit()]
    if numeric_ids:
        candidate = max(candidate, max(numeric_ids) + 1)

    existing = set(doc.section_ids)
    while str(candidate) in existing:
        candidate += 1
    return str(candidate)


def placeholder_content(
    section_type: SectionType, settings: Optional[Settings] = None
) -> str:
    """Get the content a newly added section starts with."""
    settings = settings or get_settings()
    if section_type is SectionType.TEXT:
        return settings.text_placeholder
    return settings.image_placeholder


def add_section(
    doc: Document,
    section_type: SectionType,
    settings: Optional[Settings] = None,
) -> Document:
    """Append a new section of the given type with default content and style."""
    section_type = SectionType(section_type)
    section = Section(
        id=_next_section_id(doc),
        type=section_type,
        content=placeholder_content(section_type, settings),
        style=Style(),
    )
    logger.debug("Adding %s section %s", section_type.value, section.id)
    return replace(doc, sections=doc.sections + (section,))


def find_section(doc: Document, section_id: str) -> Optional[Section]:
    """Get the section with the given id, or None."""
    index = doc.index_of(section_id)
    return None if index is None else doc.sections[index]


def update_section(
    doc: Document,
    section_id: str,
    new_content: str,
    style_delta: Optional[StyleDelta] = None,
) -> Document:
    """Replace a section's content and merge a partial style over its style.

    An unknown id returns ``doc`` unchanged.
    """
    index = doc.index_of(section_id)
    if index is None:
        logger.debug("Update ignored, no section %s", section_id)
        return doc

    target = doc.sections[index]
    updated = replace(
        target,
        content=new_content,
        style=target.style.merge(style_delta),
    )
    sections = doc.sections[:index] + (updated,) + doc.sections[index + 1:]
    return replace(doc, sections=sections)


def delete_section(doc: Document, section_id: str) -> Document:
    """Remove the section with the given id.

    An unknown id returns ``doc`` unchanged. Callers holding a selection
    must clear it after a delete.
    """
    index = doc.index_of(section_id)
    if index is None:
        logger.debug("Delete ignored, no section %s", section_id)
        return doc

    logger.debug("Deleting section %s", section_id)
    return replace(doc, sections=doc.sections[:index] + doc.sections[index + 1:])


def move_section(doc: Document, source_index: int, dest_index: int) -> Document:
    """Move a section by removing it and reinserting it at ``dest_index``.

    ``dest_index`` counts positions in the list after the removal, so both
    indices must lie in ``[0, len(sections))``.

    Raises:
        SectionIndexError: If either index is out of range
    """
    count = len(doc.sections)
    for name, value in (("source", source_index), ("destination", dest_index)):
        if not 0 <= value < count:
            raise SectionIndexError(
                f"{name} index {value} out of range for {count} section(s)"
            )

    sections = list(doc.sections)
    moved = sections.pop(source_index)
    sections.insert(dest_index, moved)
    return replace(doc, sections=tuple(sections))


def set_title(doc: Document, title: str) -> Document:
    """Replace the document title."""
    return replace(doc, title=title)
