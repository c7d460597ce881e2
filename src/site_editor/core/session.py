"""Editing session: the current document plus the events that change it."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from site_editor.config import Settings, get_settings
from site_editor.document.model import Document, SectionType, StyleDelta
from site_editor.document import operations
from site_editor.formats.html_handler import HTMLHandler
from site_editor.formats.json_handler import JSONHandler, ParseError
from site_editor.storage import LocalStore, StorageError

logger = logging.getLogger(__name__)

LOAD_PROMPT = "Found saved content. Load it?"
SAVED_MESSAGE = "Saved!"
LOADED_MESSAGE = "Loaded the last saved content!"
LOAD_FAILED_MESSAGE = "Saved content could not be loaded: {error}"


# =============================================================================
# UI Events
# =============================================================================

@dataclass(frozen=True)
class AddSection:
    type: SectionType


@dataclass(frozen=True)
class UpdateSection:
    id: str
    content: str
    style_delta: Optional[StyleDelta] = None


@dataclass(frozen=True)
class DeleteSection:
    id: str


@dataclass(frozen=True)
class SelectSection:
    id: Optional[str]


@dataclass(frozen=True)
class ReorderSections:
    """A completed drag. ``dest_index`` is None when dropped outside the list."""

    source_index: int
    dest_index: Optional[int]


@dataclass(frozen=True)
class SetTitle:
    text: str


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Load:
    pass


@dataclass(frozen=True)
class Export:
    path: Optional[Path] = None


Event = Union[
    AddSection,
    UpdateSection,
    DeleteSection,
    SelectSection,
    ReorderSections,
    SetTitle,
    Save,
    Load,
    Export,
]


# =============================================================================
# Session
# =============================================================================

class EditorSession:
    """Owns the document being edited and the section selection.

    The document is replaced, never mutated, by each event. Deleting a
    section always clears the selection.
    """

    def __init__(
        self,
        store: Optional[LocalStore] = None,
        settings: Optional[Settings] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        notify: Optional[Callable[[str], None]] = None,
        document: Optional[Document] = None,
    ) -> None:
        """Initialize the session.

        Args:
            store: Key-value store for save/load (default: settings.storage_dir)
            settings: Settings to use (default: global settings)
            confirm: Yes/no prompt, asked before loading saved content on start
            notify: Callback for user-facing messages
            document: Starting document (default: a new document)
        """
        self.settings = settings or get_settings()
        self.store = store or LocalStore(self.settings.storage_dir)
        self.confirm = confirm or (lambda message: True)
        self.notify = notify or (lambda message: None)
        self.json_handler = JSONHandler()
        self.html_handler = HTMLHandler(image_alt=self.settings.image_alt)

        self.document = document or operations.new_document(settings=self.settings)
        self.selected_section_id: Optional[str] = None
        self.dirty = False

    def _replace(self, document: Document) -> Document:
        if document is not self.document:
            self.document = document
            self.dirty = True
        return self.document

    # Editing ----------------------------------------------------------------

    def add_section(self, section_type: SectionType) -> Document:
        return self._replace(
            operations.add_section(self.document, section_type, self.settings)
        )

    def update_section(
        self,
        section_id: str,
        content: str,
        style_delta: Optional[StyleDelta] = None,
    ) -> Document:
        return self._replace(
            operations.update_section(self.document, section_id, content, style_delta)
        )

    def delete_section(self, section_id: str) -> Document:
        document = self._replace(operations.delete_section(self.document, section_id))
        self.selected_section_id = None
        return document

    def select_section(self, section_id: Optional[str]) -> None:
        self.selected_section_id = section_id

    def reorder_sections(self, source_index: int, dest_index: Optional[int]) -> Document:
        if dest_index is None:
            return self.document
        return self._replace(
            operations.move_section(self.document, source_index, dest_index)
        )

    def set_title(self, text: str) -> Document:
        return self._replace(operations.set_title(self.document, text))

    # Persistence ------------------------------------------------------------

    def has_saved_content(self) -> bool:
        return self.store.exists(self.settings.storage_key)

    def start(self) -> bool:
        """Offer to load saved content, as at the start of an editing session.

        Returns True if saved content was loaded.
        """
        if not self.has_saved_content():
            return False
        if not self.confirm(LOAD_PROMPT):
            logger.info("User declined to load saved content")
            return False
        return self.load(announce=False)

    def save(self) -> None:
        """Write the document to the storage slot, overwriting it."""
        self.store.set(self.settings.storage_key, self.json_handler.dumps(self.document))
        self.dirty = False
        self.notify(SAVED_MESSAGE)

    def load(self, announce: bool = True) -> bool:
        """Replace the document with the saved one.

        Returns False, keeping the current document, when the slot is empty
        or its content cannot be read as a valid document.
        """
        try:
            saved = self.store.get(self.settings.storage_key)
            if saved is None:
                return False
            document = self.json_handler.loads(saved)
        except (ParseError, StorageError) as e:
            logger.error(f"Discarding saved content: {e}")
            self.notify(LOAD_FAILED_MESSAGE.format(error=e))
            return False

        self.document = document
        self.selected_section_id = None
        self.dirty = False
        if announce:
            self.notify(LOADED_MESSAGE)
        return True

    def export(self, path: Optional[Path] = None) -> Path:
        """Write the document as a standalone HTML page. Returns the path."""
        target = Path(path) if path is not None else Path(self.settings.export_filename)
        self.html_handler.write(self.document, target)
        logger.info(f"Exported {len(self.document.sections)} section(s) to {target}")
        return target

    # Event dispatch ---------------------------------------------------------

    def dispatch(self, event: Event) -> Document:
        """Apply one UI event and return the resulting document."""
        if isinstance(event, AddSection):
            self.add_section(event.type)
        elif isinstance(event, UpdateSection):
            self.update_section(event.id, event.content, event.style_delta)
        elif isinstance(event, DeleteSection):
            self.delete_section(event.id)
        elif isinstance(event, SelectSection):
            self.select_section(event.id)
        elif isinstance(event, ReorderSections):
            self.reorder_sections(event.source_index, event.dest_index)
        elif isinstance(event, SetTitle):
            self.set_title(event.text)
        elif isinstance(event, Save):
            self.save()
        elif isinstance(event, Load):
            self.load()
        elif isinstance(event, Export):
            self.export(event.path)
        else:
            raise TypeError(f"Unknown event: {event!r}")
        return self.document
