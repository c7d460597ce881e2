"""Tests for the editing session and its UI events."""

import pytest
from pathlib import Path
from unittest.mock import Mock

from site_editor.config import Settings
from site_editor.core.session import (
    LOAD_PROMPT,
    LOADED_MESSAGE,
    SAVED_MESSAGE,
    AddSection,
    DeleteSection,
    EditorSession,
    Export,
    Load,
    ReorderSections,
    Save,
    SelectSection,
    SetTitle,
    UpdateSection,
)
from site_editor.document.model import Document, SectionType, StyleDelta
from site_editor.document.operations import SectionIndexError, new_document
from site_editor.formats.json_handler import JSONHandler
from site_editor.storage import LocalStore


@pytest.fixture
def notify() -> Mock:
    return Mock()


@pytest.fixture
def session(store: LocalStore, notify: Mock, three_sections: Document) -> EditorSession:
    return EditorSession(store=store, notify=notify, document=three_sections)


class TestEditing:
    """Tests for editing events."""

    def test_starts_with_new_document(self, store: LocalStore):
        session = EditorSession(store=store)

        assert session.document == new_document()
        assert session.selected_section_id is None
        assert session.dirty is False

    def test_add(self, session: EditorSession):
        doc = session.dispatch(AddSection(SectionType.IMAGE))

        assert len(doc.sections) == 4
        assert session.document is doc
        assert session.dirty is True

    def test_update(self, session: EditorSession):
        session.dispatch(UpdateSection("a", "Changed", StyleDelta(bold=True)))

        assert session.document.sections[0].content == "Changed"
        assert session.document.sections[0].style.bold is True

    def test_update_missing_keeps_clean(self, session: EditorSession):
        before = session.document
        session.dispatch(UpdateSection("nope", "x"))

        assert session.document is before
        assert session.dirty is False

    def test_delete_clears_selection(self, session: EditorSession):
        session.dispatch(SelectSection("a"))
        session.dispatch(DeleteSection("a"))

        assert session.selected_section_id is None
        assert session.document.section_ids == ["b", "c"]

    def test_delete_other_section_also_clears_selection(self, session: EditorSession):
        session.dispatch(SelectSection("c"))
        session.dispatch(DeleteSection("a"))

        assert session.selected_section_id is None

    def test_add_uses_session_settings(self, store: LocalStore, tmp_path: Path):
        """Test that new sections take placeholders from the session settings."""
        settings = Settings(
            _env_file=None, storage_dir=tmp_path / "other", text_placeholder="Custom text"
        )
        session = EditorSession(store=store, settings=settings)

        doc = session.dispatch(AddSection(SectionType.TEXT))

        assert doc.sections[-1].content == "Custom text"

    def test_reorder(self, session: EditorSession):
        session.dispatch(ReorderSections(0, 2))

        assert session.document.section_ids == ["b", "c", "a"]

    def test_reorder_dropped_outside_list(self, session: EditorSession):
        before = session.document
        session.dispatch(ReorderSections(0, None))

        assert session.document is before

    def test_reorder_invalid_leaves_document(self, session: EditorSession):
        before = session.document

        with pytest.raises(SectionIndexError):
            session.dispatch(ReorderSections(0, 7))

        assert session.document is before

    def test_set_title(self, session: EditorSession):
        session.dispatch(SetTitle("New title"))

        assert session.document.title == "New title"

    def test_unknown_event(self, session: EditorSession):
        with pytest.raises(TypeError):
            session.dispatch("add")  # type: ignore[arg-type]


class TestPersistence:
    """Tests for save, load and start-up prompts."""

    def test_save_writes_slot(
        self, session: EditorSession, store: LocalStore, notify: Mock,
        isolated_settings: Settings, three_sections: Document,
    ):
        session.dispatch(SetTitle("Saved"))
        session.dispatch(Save())

        saved = store.get(isolated_settings.storage_key)
        assert JSONHandler().loads(saved).title == "Saved"
        assert session.dirty is False
        notify.assert_called_with(SAVED_MESSAGE)

    def test_load_replaces_document(
        self, store: LocalStore, notify: Mock, three_sections: Document
    ):
        EditorSession(store=store, document=three_sections).save()
        session = EditorSession(store=store, notify=notify)
        session.select_section("1")

        session.dispatch(Load())

        assert session.document == three_sections
        assert session.selected_section_id is None
        notify.assert_called_with(LOADED_MESSAGE)

    def test_load_empty_slot(self, store: LocalStore, notify: Mock):
        session = EditorSession(store=store, notify=notify)

        assert session.load() is False
        assert session.document == new_document()
        notify.assert_not_called()

    def test_load_corrupt_slot_falls_back(
        self, store: LocalStore, notify: Mock, isolated_settings: Settings
    ):
        """Test that invalid saved data keeps the current document."""
        store.set(isolated_settings.storage_key, '{"title": 1}')
        session = EditorSession(store=store, notify=notify)

        assert session.load() is False
        assert session.document == new_document()
        message = notify.call_args[0][0]
        assert "could not be loaded" in message

    def test_load_undecodable_slot_falls_back(
        self, store: LocalStore, notify: Mock, isolated_settings: Settings
    ):
        """Test that a slot holding bytes that are not UTF-8 keeps the current document."""
        isolated_settings.storage_dir.mkdir(parents=True, exist_ok=True)
        (isolated_settings.storage_dir / "websiteContent.json").write_bytes(b"\xff\xfe{")
        session = EditorSession(store=store, notify=notify)

        assert session.load() is False
        assert session.document == new_document()
        assert "could not be loaded" in notify.call_args[0][0]

    def test_start_with_undecodable_slot(
        self, store: LocalStore, notify: Mock, isolated_settings: Settings
    ):
        isolated_settings.storage_dir.mkdir(parents=True, exist_ok=True)
        (isolated_settings.storage_dir / "websiteContent.json").write_bytes(b"\xff\xfe{")
        session = EditorSession(store=store, notify=notify, confirm=Mock(return_value=True))

        assert session.start() is False
        assert session.document == new_document()

    def test_start_confirm_accepted(self, store: LocalStore, three_sections: Document):
        EditorSession(store=store, document=three_sections).save()
        confirm = Mock(return_value=True)
        session = EditorSession(store=store, confirm=confirm)

        assert session.start() is True
        confirm.assert_called_once_with(LOAD_PROMPT)
        assert session.document == three_sections

    def test_start_confirm_declined(self, store: LocalStore, three_sections: Document):
        EditorSession(store=store, document=three_sections).save()
        session = EditorSession(store=store, confirm=Mock(return_value=False))

        assert session.start() is False
        assert session.document == new_document()

    def test_start_without_saved_content_does_not_prompt(self, store: LocalStore):
        confirm = Mock(return_value=True)
        session = EditorSession(store=store, confirm=confirm)

        assert session.start() is False
        confirm.assert_not_called()

    def test_default_store_uses_settings(self, isolated_settings: Settings):
        session = EditorSession()
        session.save()

        assert (isolated_settings.storage_dir / "websiteContent.json").exists()


class TestExport:
    """Tests for HTML export from a session."""

    def test_export_to_path(self, session: EditorSession, tmp_path: Path):
        target = tmp_path / "out.html"
        session.dispatch(Export(target))

        html = target.read_text(encoding="utf-8")
        assert "<h1>Three</h1>" in html

    def test_export_default_filename(
        self, session: EditorSession, isolated_settings: Settings
    ):
        path = session.export()

        assert path == Path(isolated_settings.export_filename)
        assert path.exists()

    def test_export_does_not_touch_storage(self, session: EditorSession, store: LocalStore):
        session.export()

        assert store.get("websiteContent") is None
