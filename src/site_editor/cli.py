"""Command-line interface for Site Editor."""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from site_editor import __version__
from site_editor.config import get_settings
from site_editor.core.session import EditorSession
from site_editor.document.model import Document, FontSize, SectionType, StyleDelta
from site_editor.document.operations import SectionIndexError, find_section, new_document
from site_editor.formats import get_handler
from site_editor.storage import StorageError

app = typer.Typer(
    name="site-editor",
    help="Compose a one-page website from text and image sections and export it as HTML.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Site Editor v{__version__}")
        raise typer.Exit()


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise typer.Exit(1)


def notify(message: str) -> None:
    console.print(message, markup=False, highlight=False)


def open_session() -> EditorSession:
    """Create a session holding the saved document, or a new one."""
    session = EditorSession(notify=notify)
    if session.has_saved_content():
        if not session.load(announce=False):
            fail("The saved document is invalid. Run 'new --force' to replace it.")
    return session


def save_session(session: EditorSession) -> None:
    try:
        session.save()
    except StorageError as e:
        fail(str(e))


def render_table(document: Document) -> Table:
    """Build a table listing the sections of a document."""
    table = Table(title=escape(document.title), show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("ID", no_wrap=True)
    table.add_column("Type")
    table.add_column("Content")
    table.add_column("Style")

    for index, section in enumerate(document.sections):
        if section.is_text:
            flags = [
                name
                for name, enabled in (("bold", section.style.bold), ("italic", section.style.italic))
                if enabled
            ]
            style_text = " ".join(
                flags + [section.style.font_size.name.lower(), section.style.color]
            )
        else:
            style_text = "-"
        table.add_row(
            str(index),
            escape(section.id),
            section.type.value,
            escape(section.content),
            style_text,
        )
    return table


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Edit a one-page website stored in the local editor slot.

    Examples:

        site-editor new --title "My Website"

        site-editor add text

        site-editor edit 1 --content "Hello" --bold --size large

        site-editor move 2 0

        site-editor export -o index.html
    """
    level = logging.INFO if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command()
def new(
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Title of the new document",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Replace an existing saved document",
    ),
) -> None:
    """Start a new document with one text section."""
    session = EditorSession(notify=notify)
    if session.has_saved_content() and not force:
        fail("A saved document already exists. Use --force to replace it.")

    session.document = new_document(title, settings=session.settings)
    save_session(session)


@app.command()
def show() -> None:
    """List the sections of the saved document."""
    session = open_session()
    console.print(render_table(session.document))


@app.command()
def add(
    section_type: SectionType = typer.Argument(
        ...,
        help="Kind of section to append",
        case_sensitive=False,
    ),
) -> None:
    """Append a new text or image section."""
    session = open_session()
    document = session.add_section(section_type)
    added = document.sections[-1]
    console.print(f"[green]Added:[/green] {added.type.value} section {added.id}")
    save_session(session)


@app.command()
def edit(
    section_id: str = typer.Argument(..., help="ID of the section to edit"),
    content: Optional[str] = typer.Option(
        None,
        "--content",
        "-c",
        help="New text, or the image URL for image sections",
    ),
    bold: Optional[bool] = typer.Option(None, "--bold/--no-bold", help="Bold text"),
    italic: Optional[bool] = typer.Option(None, "--italic/--no-italic", help="Italic text"),
    size: Optional[str] = typer.Option(
        None,
        "--size",
        "-s",
        help="Font size: small, medium or large",
    ),
    color: Optional[str] = typer.Option(
        None,
        "--color",
        help="Text color as #rgb or #rrggbb",
    ),
) -> None:
    """Change a section's content or style."""
    session = open_session()
    section = find_section(session.document, section_id)
    if section is None:
        console.print(f"[yellow]Warning:[/yellow] No section with ID {escape(section_id)}")
        raise typer.Exit(1)

    try:
        delta = StyleDelta(
            bold=bold,
            italic=italic,
            font_size=FontSize.from_name(size) if size is not None else None,
            color=color,
        )
        session.update_section(
            section_id,
            section.content if content is None else content,
            delta,
        )
    except ValueError as e:
        fail(str(e))

    save_session(session)


@app.command()
def delete(
    section_id: str = typer.Argument(..., help="ID of the section to delete"),
) -> None:
    """Delete a section."""
    session = open_session()
    if find_section(session.document, section_id) is None:
        console.print(f"[yellow]Warning:[/yellow] No section with ID {escape(section_id)}")
        raise typer.Exit(1)

    session.delete_section(section_id)
    save_session(session)


@app.command()
def move(
    source: int = typer.Argument(..., help="Current position of the section"),
    destination: int = typer.Argument(
        ...,
        help="Position after the move, counted with the section removed",
    ),
) -> None:
    """Move a section to another position."""
    session = open_session()
    try:
        session.reorder_sections(source, destination)
    except SectionIndexError as e:
        fail(str(e))

    save_session(session)


@app.command()
def title(
    text: str = typer.Argument(..., help="New document title"),
) -> None:
    """Set the document title."""
    session = open_session()
    session.set_title(text)
    save_session(session)


@app.command()
def export(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (default: my-website.html)",
    ),
) -> None:
    """Export the document as a standalone HTML page."""
    session = open_session()
    try:
        path = session.export(output)
    except OSError as e:
        fail(f"Could not write export: {e}")
    console.print(f"[green]Exported:[/green] {escape(str(path))}")


@app.command("import")
def import_document(
    path: Path = typer.Argument(
        ...,
        help="JSON file to load into the editor slot",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Replace the saved document with one read from a file."""
    try:
        handler = get_handler(path.suffix)()
        document = handler.read(path)
    except (ValueError, NotImplementedError) as e:
        # ParseError and unsupported formats both land here
        message = str(e) or f"Cannot import {path.suffix} files"
        fail(message)

    session = EditorSession(notify=notify, document=document)
    save_session(session)
    console.print(f"[green]Imported:[/green] {escape(str(path))}")


if __name__ == "__main__":
    app()
