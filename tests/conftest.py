"""Pytest fixtures for Site Editor tests."""

import pytest
from pathlib import Path

from site_editor import config
from site_editor.config import Settings
from site_editor.document.model import (
    Document,
    FontSize,
    Section,
    SectionType,
    Style,
)
from site_editor.storage import LocalStore


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Point the global settings at a temporary storage directory."""
    settings = Settings(
        _env_file=None,
        storage_dir=tmp_path / "storage",
        export_filename=str(tmp_path / "my-website.html"),
    )
    monkeypatch.setattr(config, "_settings", settings)
    return settings


@pytest.fixture
def store(isolated_settings: Settings) -> LocalStore:
    """Store rooted at the temporary storage directory."""
    return LocalStore(isolated_settings.storage_dir)


@pytest.fixture
def site_document() -> Document:
    """Single text section document used by the editing scenario."""
    return Document(
        title="Site",
        sections=(
            Section(
                id="1",
                type=SectionType.TEXT,
                content="Hello",
                style=Style(
                    bold=False,
                    italic=False,
                    font_size=FontSize.MEDIUM,
                    color="#000000",
                ),
            ),
        ),
    )


@pytest.fixture
def three_sections() -> Document:
    """Document with sections a, b and c in order."""
    return Document(
        title="Three",
        sections=(
            Section(id="a", type=SectionType.TEXT, content="First"),
            Section(id="b", type=SectionType.IMAGE, content="https://example.com/b.png"),
            Section(
                id="c",
                type=SectionType.TEXT,
                content="Third",
                style=Style(bold=True, font_size=FontSize.LARGE, color="#ff0000"),
            ),
        ),
    )


@pytest.fixture
def browser_saved_json() -> str:
    """Content as the browser editor stored it in local storage."""
    return (
        '{"title":"我的網站","sections":[{"id":"1","type":"text",'
        '"content":"歡迎來到我的網站","style":{"bold":false,"italic":false,'
        '"fontSize":"16px","color":"#000000"}},{"id":"1718000000000",'
        '"type":"image","content":"https://placeholder.com/image.jpg",'
        '"style":{"bold":false,"italic":false,"fontSize":"16px",'
        '"color":"#000000"}}]}'
    )
