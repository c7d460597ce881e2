"""JSON persistence handler.

The stored layout matches what the browser editor wrote to local storage::

    {"title": "...", "sections": [{"id": "1", "type": "text",
      "content": "...", "style": {"bold": false, "italic": false,
      "fontSize": "16px", "color": "#000000"}}]}

Loading validates against explicit pydantic schemas, so structural
mismatches surface as ``ParseError`` instead of a half-built document.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from site_editor.document.model import (
    HEX_COLOR_PATTERN,
    Document,
    FontSize,
    Section,
    SectionType,
    Style,
)
from site_editor.formats.base import FormatHandler

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Persisted text is not a valid document."""

    pass


class StyleSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, populate_by_name=True)

    bold: bool
    italic: bool
    font_size: FontSize = Field(alias="fontSize")
    color: str = Field(pattern=HEX_COLOR_PATTERN.pattern)


class SectionSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    id: str
    type: SectionType
    content: str
    style: StyleSchema


class DocumentSchema(BaseModel):
    """Persisted shape of a Document."""

    model_config = ConfigDict(extra="forbid", strict=True)

    title: str
    sections: list[SectionSchema]

    @classmethod
    def from_document(cls, document: Document) -> "DocumentSchema":
        return cls(
            title=document.title,
            sections=[
                SectionSchema(
                    id=section.id,
                    type=section.type,
                    content=section.content,
                    style=StyleSchema(
                        bold=section.style.bold,
                        italic=section.style.italic,
                        font_size=section.style.font_size,
                        color=section.style.color,
                    ),
                )
                for section in document.sections
            ],
        )

    def to_document(self) -> Document:
        return Document(
            title=self.title,
            sections=tuple(
                Section(
                    id=section.id,
                    type=section.type,
                    content=section.content,
                    style=Style(
                        bold=section.style.bold,
                        italic=section.style.italic,
                        font_size=section.style.font_size,
                        color=section.style.color,
                    ),
                )
                for section in self.sections
            ),
        )


class JSONHandler(FormatHandler):
    """Handler for the JSON persistence format."""

    media_type = "application/json; charset=utf-8"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def dumps(self, document: Document) -> str:
        """Serialize a document to JSON text."""
        return DocumentSchema.from_document(document).model_dump_json(by_alias=True)

    def loads(self, text: str) -> Document:
        """Parse and validate JSON text into a Document.

        Raises:
            ParseError: If the text is not JSON or does not have the
                document shape
        """
        try:
            schema = DocumentSchema.model_validate_json(text)
        except ValidationError as e:
            raise ParseError(
                f"Invalid document data ({e.error_count()} error(s)): "
                f"{_summarize(e)}"
            ) from e

        try:
            document = schema.to_document()
        except ValueError as e:
            raise ParseError(f"Invalid document data: {e}") from e

        logger.debug(
            "Loaded document %r with %d section(s)",
            document.title,
            len(document.sections),
        )
        return document


def _summarize(error: ValidationError) -> str:
    """Get the first validation problem as 'location: message'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    return f"{location}: {first['msg']}"
