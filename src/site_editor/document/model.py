"""Data model for an editable one-page website.

A ``Document`` is a title plus an ordered tuple of ``Section`` blocks.
All types here are frozen: editing operations build new values instead of
mutating existing ones, so a document can be handed around, persisted or
exported without copying.
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

DEFAULT_COLOR = "#000000"


class SectionType(str, Enum):
    """Kind of content block."""

    TEXT = "text"
    IMAGE = "image"


class FontSize(str, Enum):
    """Font sizes offered for text sections.

    The value is the literal CSS size used for rendering and persistence.
    """

    SMALL = "12px"
    MEDIUM = "16px"
    LARGE = "20px"

    @classmethod
    def from_name(cls, name: str) -> "FontSize":
        """Look up a size by name ("small") or CSS value ("12px")."""
        key = name.strip()
        for size in cls:
            if key.lower() == size.name.lower() or key == size.value:
                return size
        raise ValueError(
            f"Unknown font size: {name}. "
            f"Choose from: {', '.join(s.name.lower() for s in cls)}"
        )


def is_hex_color(value: str) -> bool:
    """Check whether a string is a #rgb or #rrggbb color."""
    return bool(HEX_COLOR_PATTERN.match(value))


@dataclass(frozen=True)
class Style:
    """Visual formatting of a text section.

    Attributes:
        bold: Render with bold weight
        italic: Render in italics
        font_size: One of the fixed FontSize values
        color: Hex color (#rgb or #rrggbb)
    """

    bold: bool = False
    italic: bool = False
    font_size: FontSize = FontSize.MEDIUM
    color: str = DEFAULT_COLOR

    def __post_init__(self) -> None:
        if not isinstance(self.font_size, FontSize):
            raise ValueError(f"Invalid font size: {self.font_size!r}")
        if not isinstance(self.color, str) or not is_hex_color(self.color):
            raise ValueError(f"Invalid hex color: {self.color!r}")

    def merge(self, delta: Optional["StyleDelta"]) -> "Style":
        """Return a new style with the fields present in ``delta`` applied."""
        if delta is None or delta.is_empty:
            return self
        return replace(self, **delta.changes())


@dataclass(frozen=True)
class StyleDelta:
    """A partial style update. ``None`` fields are left untouched."""

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    font_size: Optional[FontSize] = None
    color: Optional[str] = None

    def changes(self) -> dict:
        """Get only the fields that are set."""
        values = {
            "bold": self.bold,
            "italic": self.italic,
            "font_size": self.font_size,
            "color": self.color,
        }
        return {key: value for key, value in values.items() if value is not None}

    @property
    def is_empty(self) -> bool:
        return not self.changes()


@dataclass(frozen=True)
class Section:
    """One content block of a document.

    Attributes:
        id: Identifier, unique within the document and stable across moves
        type: Whether the block is text or an image
        content: Plain text for text sections, a URL for image sections
        style: Formatting (only rendered for text sections)
    """

    id: str
    type: SectionType
    content: str
    style: Style = field(default_factory=Style)

    @property
    def is_text(self) -> bool:
        return self.type is SectionType.TEXT

    @property
    def is_image(self) -> bool:
        return self.type is SectionType.IMAGE


@dataclass(frozen=True)
class Document:
    """Complete editable unit: a title and its ordered sections.

    The order of ``sections`` is the render and export order.
    """

    title: str
    sections: tuple[Section, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        if not isinstance(self.sections, tuple):
            object.__setattr__(self, "sections", tuple(self.sections))

        seen: set[str] = set()
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"Duplicate section id: {section.id}")
            seen.add(section.id)

    @property
    def section_ids(self) -> list[str]:
        """Get section ids in document order."""
        return [section.id for section in self.sections]

    def index_of(self, section_id: str) -> Optional[int]:
        """Get the position of a section, or None if it is not present."""
        for index, section in enumerate(self.sections):
            if section.id == section_id:
                return index
        return None
