"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, glyph previews and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from drcsedit.core import FontDocument

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_C1_FORMATS = {True: "8-bit controls", False: "7-bit controls", None: "source literal"}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]drcsedit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, document: FontDocument, charset_name: str | None) -> None:
    """Print a summary of a loaded font.

    Args:
        font_path: Path to the font file
        document: Loaded font document
        charset_name: Registered name of the font's charset, if any
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    line.append(f" ({_C1_FORMATS[document.c1_controls]})")
    console.print(line)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    charset = Text(repr(document.charset_id))
    if charset_name:
        charset.append(f" {SYM_DOT} {charset_name}")
    table.add_row("Character set", charset)
    table.add_row("Set size", str(document.size))
    table.add_row("Parameters", Text(document.params.text or "(none)"))
    table.add_row("Cell size", f"{document.cell_width}x{document.cell_height}")
    table.add_row("Pixel aspect", f"{document.pixel_aspect_ratio / 100:.2f}:1")
    last = document.first_index + document.glyph_count - 1
    table.add_row(
        "Glyphs",
        f"{document.glyph_count} stored ({document.first_index}-{last}) "
        f"{SYM_DOT} {document.used_count()} used",
    )
    console.print(table)


def print_glyph(index: int, label: str, lines: list[str]) -> None:
    """Print a glyph preview.

    Args:
        index: Glyph index
        label: Character the glyph replaces
        lines: Preview rows
    """
    console.print(f"\n[bold]{index}[/bold] {SYM_DOT} 0x{0x20 + index:02X} {label}")
    for line in lines:
        console.print(Text("  " + line))


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: What was done
        output_path: File that was written, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
