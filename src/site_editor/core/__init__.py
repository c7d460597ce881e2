"""Editing session and the UI events it applies."""

from site_editor.core.session import (
    EditorSession,
    Event,
    AddSection,
    UpdateSection,
    DeleteSection,
    SelectSection,
    ReorderSections,
    SetTitle,
    Save,
    Load,
    Export,
)

__all__ = [
    "EditorSession",
    "Event",
    "AddSection",
    "UpdateSection",
    "DeleteSection",
    "SelectSection",
    "ReorderSections",
    "SetTitle",
    "Save",
    "Load",
    "Export",
]
