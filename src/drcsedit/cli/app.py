"""CLI application entry point for drcsedit.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import structlog
import typer

from drcsedit import __version__
from drcsedit.cli.output import (
    console,
    print_error,
    print_font_info,
    print_glyph,
    print_header,
    print_step,
    print_success,
)
from drcsedit.config import DisplayConfig, EditorSettings, LoggingConfig
from drcsedit.core import (
    EditorStatus,
    FontDocument,
    FontUsage,
    RenderDiffer,
    ScreenSize,
    TargetDevice,
    TextSurface,
    Viewport,
    VtSurface,
    build_parameters,
)
from drcsedit.domain import PixelRange, charsets
from drcsedit.exceptions import DrcsEditError, FontFormatError, FontLoadError, FontSaveError
from drcsedit.io import FontReader, FontWriter
from drcsedit.session import EditorSession
from drcsedit.utils import SessionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="drcsedit",
    help="Inspect, preview and create DEC soft fonts (DRCS).",
    add_completion=False,
    no_args_is_help=True,
)

_DEVICES = {
    "vt420": TargetDevice.VT420,
    "vt382": TargetDevice.VT382,
    "vt340": TargetDevice.VT340,
    "vt320": TargetDevice.VT320,
    "vt2x0": TargetDevice.VT2X0,
    "custom": TargetDevice.CUSTOM,
}

# Preview rectangle that contains no cell
_NO_FOCUS = PixelRange(0, -1, 0, -1)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]drcsedit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect, preview and create DEC soft fonts (DRCS)."""
    settings = LoggingConfig(log_file=log_file, log_level=log_level)
    configure_logging(
        log_file=settings.log_file,
        console_level=settings.log_level,
        file_level=settings.file_log_level,
        quiet=log_file is None,
    )


def _load(font: Path) -> FontDocument:
    """Load a font, turning errors into CLI exits."""
    try:
        return FontReader(font).load()
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontFormatError as e:
        print_error(f"Could not load font: {font.name}", details=e.details)
        raise typer.Exit(code=1)


@app.command()
def info(
    font: Annotated[Path, typer.Argument(help="Path to a soft font file", show_default=False)],
) -> None:
    """Show the format, parameters and detected cell size of a font."""
    document = _load(font)
    cs = charsets.find(document.charset_id, document.size)
    print_header(__version__)
    print_font_info(str(font), document, cs.name if cs else None)


@app.command()
def show(
    font: Annotated[Path, typer.Argument(help="Path to a soft font file", show_default=False)],
    index: Annotated[
        int | None,
        typer.Option("--index", "-i", help="Show only this glyph index"),
    ] = None,
    used: Annotated[
        bool,
        typer.Option("--used", "-u", help="Show only glyphs with pixels set"),
    ] = False,
    vt: Annotated[
        bool,
        typer.Option("--vt", help="Draw the glyph on a VT420+ terminal instead"),
    ] = False,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", help="Use the light colour scheme with --vt"),
    ] = False,
) -> None:
    """Print glyph bitmaps."""
    document = _load(font)
    differ = RenderDiffer(document.cell_width, document.cell_height)

    if vt:
        if index is None:
            print_error("--vt needs --index")
            raise typer.Exit(code=1)
        display = DisplayConfig(reverse_video=reverse)
        viewport = Viewport.layout(
            document.cell_width, document.cell_height, document.pixel_aspect_ratio, display
        )
        surface = VtSurface(sys.stdout, viewport, reverse_video=display.reverse_video)
        surface.draw_grid(document.cell_height, document.cell_width)
        for command in differ.render_all(document.get_pixels(index), _NO_FOCUS):
            surface.paint(command)
        surface.flush()
        return

    status = EditorStatus()
    status.character_set(document.charset_id, document.size)
    if index is not None:
        indices = [index]
    else:
        indices = list(range(document.min_index, document.max_index + 1))
    for i in indices:
        if used and not document.is_used(i):
            continue
        surface = TextSurface()
        surface.draw_grid(document.cell_height, document.cell_width)
        for command in differ.render_all(document.get_pixels(i), _NO_FOCUS):
            surface.paint(command)
        status.index(i)
        print_glyph(i, status.character_label, surface.lines())


@app.command()
def new(
    output: Annotated[Path, typer.Argument(help="Path of the font file to create", show_default=False)],
    device: Annotated[
        str,
        typer.Option("--device", "-d", help="Target device (vt420|vt382|vt340|vt320|vt2x0|custom)"),
    ] = "vt420",
    screen: Annotated[
        str,
        typer.Option("--screen", "-s", help="Screen size (80x24|132x24|80x36|132x36|80x48|132x48)"),
    ] = "80x24",
    usage: Annotated[
        str,
        typer.Option("--usage", "-u", help="Font usage (text|full)"),
    ] = "full",
    charset: Annotated[
        str,
        typer.Option("--charset", "-c", help="Character set name, e.g. 'ASCII'"),
    ] = "Unregistered/94",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create an empty font file for a target terminal."""
    if output.exists() and not force:
        print_error(f"Output file exists: {output}", details="Use --force to overwrite it.")
        raise typer.Exit(code=1)

    target = _DEVICES.get(device.lower())
    if target is None:
        print_error(f"Invalid device: {device}", details=f"Valid values: {', '.join(_DEVICES)}")
        raise typer.Exit(code=1)
    try:
        font_usage = FontUsage(usage.lower())
    except ValueError:
        print_error(f"Invalid usage: {usage}", details="Valid values: text, full")
        raise typer.Exit(code=1)
    cs = charsets.find_by_name(charset)
    if cs is None:
        print_error(f"Unknown character set: {charset}", details=", ".join(charsets.names()))
        raise typer.Exit(code=1)

    try:
        params = build_parameters(target, ScreenSize.from_label(screen), font_usage, cs)
        session = EditorSession(
            EditorSettings(), logger=SessionLogger(structlog.get_logger("drcsedit"))
        )
        session.new(params, cs.id)
        path = session.save(output)
    except DrcsEditError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    document = session.document
    print_step(f"{document.cell_width}x{document.cell_height} cell ({document.params.text})")
    print_success("Font created", str(path))


@app.command()
def convert(
    font: Annotated[Path, typer.Argument(help="Path to a soft font file", show_default=False)],
    c1: Annotated[
        str,
        typer.Option("--c1", help="Control format to write (7bit|8bit)"),
    ] = "7bit",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}-{c1}.{ext})"),
    ] = None,
) -> None:
    """Rewrite a font with 7-bit or 8-bit control framing."""
    if c1 not in ("7bit", "8bit"):
        print_error(f"Invalid control format: {c1}", details="Valid values: 7bit, 8bit")
        raise typer.Exit(code=1)

    document = _load(font)
    if document.c1_controls is None:
        print_error("Font is not framed with control sequences", details="It cannot be converted.")
        raise typer.Exit(code=1)
    document.c1_controls = c1 == "8bit"

    output_path = output or FontWriter.get_converted_path(font, c1)
    try:
        FontWriter(document, output_path).save()
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    print_success(f"Converted to {c1} controls", str(output_path))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
