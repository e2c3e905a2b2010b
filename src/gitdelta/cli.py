"""gitdelta CLI — Typer application: the pager itself plus init and list commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

import typer
from rich.console import Console

from gitdelta import __version__

app = typer.Typer(
    name="gitdelta",
    help="A syntax-highlighting pager for git diffs. Usage: git diff | gitdelta",
    add_completion=False,
)

console = Console(stderr=True)


def _read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from *stream* without their line terminators."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def _configure_streams() -> None:
    """Decode stdin leniently and write UTF-8 to stdout."""
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


def _output_console(color: str) -> Console:
    options = dict(highlight=False, markup=False, emoji=False, soft_wrap=True)
    if color == "always":
        return Console(force_terminal=True, **options)
    if color == "never":
        return Console(color_system=None, **options)
    return Console(**options)


def _invalid(kind: str, value: str) -> typer.Exit:
    console.print(f"[bold red]Invalid {kind}:[/bold red] {value}")
    return typer.Exit(code=2)


# ── pager ─────────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitdelta {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    commit_style: Optional[str] = typer.Option(None, "--commit-style", help="Commit header: plain | box | underline"),
    file_style: Optional[str] = typer.Option(None, "--file-style", help="File header: plain | box | underline"),
    hunk_style: Optional[str] = typer.Option(None, "--hunk-style", help="Hunk header: plain | box | underline"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Pad changed lines to this width"),
    theme: Optional[str] = typer.Option(None, "--theme", help="Syntax theme (see list-themes)"),
    light: bool = typer.Option(False, "--light", help="Use colours for a light terminal background"),
    dark: bool = typer.Option(False, "--dark", help="Use colours for a dark terminal background"),
    color: Optional[str] = typer.Option(None, "--color", help="Colour output: auto | always | never"),
    minus_color: Optional[str] = typer.Option(None, "--minus-color", help="Background of removed lines"),
    minus_emph_color: Optional[str] = typer.Option(None, "--minus-emph-color", help="Background of removed text"),
    plus_color: Optional[str] = typer.Option(None, "--plus-color", help="Background of added lines"),
    plus_emph_color: Optional[str] = typer.Option(None, "--plus-emph-color", help="Background of added text"),
    highlight_removed: bool = typer.Option(False, "--highlight-removed", help="Syntax-highlight removed lines"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitdelta.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Read a git diff on stdin and write it, styled, to stdout."""
    if ctx.invoked_subcommand is not None:
        return

    from gitdelta.config.loader import ConfigError, load_config
    from gitdelta.config.schema import COLOR_MODES, SECTION_STYLES, SectionStyle, check_color
    from gitdelta.log import configure_logging
    from gitdelta.output.painter import TerminalPainter
    from gitdelta.output.syntax import list_themes
    from gitdelta.stream.driver import StreamDriver

    configure_logging(verbose=verbose, debug=debug)

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    for attr, value in (
        ("commit_style", commit_style),
        ("file_style", file_style),
        ("hunk_style", hunk_style),
    ):
        if value is None:
            continue
        if value not in SECTION_STYLES:
            raise _invalid(attr.replace("_", "-"), value)
        setattr(cfg.sections, attr, SectionStyle(value))
    if width is not None:
        if width <= 0:
            raise _invalid("width", str(width))
        cfg.output.width = width
    if color:
        if color not in COLOR_MODES:
            raise _invalid("color mode", color)
        cfg.output.color = color  # type: ignore[assignment]
    if light and dark:
        console.print("[bold red]Error:[/bold red] --light and --dark are mutually exclusive")
        raise typer.Exit(code=2)
    if light or dark:
        cfg.theme.light = light
    if theme:
        if theme not in list_themes():
            raise _invalid("theme", theme)
        cfg.theme.theme = theme
    for attr, value in (
        ("minus_color", minus_color),
        ("minus_emph_color", minus_emph_color),
        ("plus_color", plus_color),
        ("plus_emph_color", plus_emph_color),
    ):
        if value is None:
            continue
        try:
            check_color(value)
        except ValueError:
            raise _invalid(attr.replace("_", "-"), value) from None
        setattr(cfg.theme, attr, value)
    if highlight_removed:
        cfg.theme.highlight_removed = True

    if verbose or debug:
        sections = cfg.sections
        console.print(
            f"[dim]Sections: commit={sections.commit_style.value} "
            f"file={sections.file_style.value} hunk={sections.hunk_style.value}[/dim]"
        )
        console.print(f"[dim]Theme: {cfg.theme.theme} ({'light' if cfg.theme.light else 'dark'})[/dim]")
        console.print(f"[dim]Width: {cfg.output.width or 'variable'}[/dim]")

    # --- Page ---
    _configure_streams()
    try:
        painter = TerminalPainter(_output_console(cfg.output.color), cfg)
        stats = StreamDriver(cfg, painter).run(_read_lines(sys.stdin))
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); nothing left to do.
        raise typer.Exit(code=0)
    except OSError as exc:
        console.print(f"[bold red]Write error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if debug:
        console.print(f"[dim]Lines read: {stats.lines_read}[/dim]")
        console.print(f"[dim]Lines suppressed: {stats.lines_suppressed}[/dim]")
        console.print(f"[dim]Files: {stats.files_seen}  Headers: {stats.headers_drawn}[/dim]")
        console.print(f"[dim]Flushes: {stats.flushes} ({stats.paired_flushes} paired)[/dim]")
        console.print(f"[dim]Duration: {stats.duration_ms:.0f}ms[/dim]")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitdelta.toml in the current directory."""
    from gitdelta.config.defaults import DEFAULT_TOML
    from gitdelta.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── list-languages / list-themes ──────────────────────────────────────────────


@app.command("list-languages")
def list_languages_command() -> None:
    """List the languages that can be syntax highlighted."""
    from gitdelta.output.syntax import list_languages

    for name, patterns in list_languages():
        print(f"{name:<30} {', '.join(patterns)}")


@app.command("list-themes")
def list_themes_command() -> None:
    """List the available syntax themes."""
    from gitdelta.output.syntax import list_themes

    for name in list_themes():
        print(name)
