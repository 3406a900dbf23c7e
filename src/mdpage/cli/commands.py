"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpage.config import Settings, load_config
from mdpage.core.layouts import LayoutEngine
from mdpage.core.pipeline import render_file, run_build, run_check
from mdpage.core.utils.logger import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to render")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML here instead of stdout")] = None,
    layout: Annotated[Optional[str], typer.Option("--layout", help="Layout used when front matter names none")] = None,
    style_mode: Annotated[Optional[str], typer.Option("--style-mode", help="inline or link")] = None,
    layouts_dir: Annotated[Optional[str], typer.Option("--layouts-dir", help="Directory of custom layouts")] = None,
    ):
    """Render a single document to stdout or a file."""
    settings = _settings(overrides={
        "default_layout": layout, "style_mode": style_mode, "layouts_dir": layouts_dir,
    })
    if not path.is_file():
        _fail(f"No such file: {path}")
    try:
        html = render_file(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    if out is None:
        typer.echo(html, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    typer.echo(f"  {path} -> {out}")


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    layout: Annotated[Optional[str], typer.Option("--layout", help="Layout used when front matter names none")] = None,
    style_mode: Annotated[Optional[str], typer.Option("--style-mode", help="inline or link")] = None,
    layouts_dir: Annotated[Optional[str], typer.Option("--layouts-dir", help="Directory of custom layouts")] = None,
    ):
    """Render every Markdown file under path into the output directory."""
    settings = _settings(overrides={
        "output_dir": out, "default_layout": layout,
        "style_mode": style_mode, "layouts_dir": layouts_dir,
    })
    if not Path(path).exists():
        _fail(f"No such file or directory: {path}")
    output_dir = Path(settings.output_dir)
    try:
        results = run_build(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))

    counts = {"created": 0, "updated": 0, "unchanged": 0}
    for status, src, out_file in results:
        counts[status] += 1
        if status != "unchanged":
            typer.echo(f"  {status}: {src} -> {out_file}")
    typer.echo(
        f"Build complete - "
        f"{counts['created']} created, "
        f"{counts['updated']} updated, "
        f"{counts['unchanged']} unchanged"
    )


def check_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to check")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    show_diff: Annotated[bool, typer.Option("--diff", help="Print unified diffs for stale files")] = False,
    layout: Annotated[Optional[str], typer.Option("--layout", help="Layout used when front matter names none")] = None,
    style_mode: Annotated[Optional[str], typer.Option("--style-mode", help="inline or link")] = None,
    layouts_dir: Annotated[Optional[str], typer.Option("--layouts-dir", help="Directory of custom layouts")] = None,
    ):
    """Exit 1 when any rendered output is missing or out of date."""
    settings = _settings(overrides={
        "output_dir": out, "default_layout": layout,
        "style_mode": style_mode, "layouts_dir": layouts_dir,
    })
    if not Path(path).exists():
        _fail(f"No such file or directory: {path}")
    try:
        results = run_check(path, settings, Path(settings.output_dir))
    except RuntimeError as e:
        _fail(str(e))

    stale = [r for r in results if r.status != "ok"]
    for r in stale:
        typer.echo(f"  {r.status}: {r.source} -> {r.output}")
        if show_diff and r.diff:
            typer.echo("".join(r.diff), nl=False)
    if stale:
        typer.echo(f"{len(stale)} of {len(results)} document(s) need rebuilding.")
        raise typer.Exit(1)
    typer.echo(f"All {len(results)} document(s) up to date.")


def layouts_cmd(
    layouts_dir: Annotated[Optional[str], typer.Option("--layouts-dir", help="Directory of custom layouts")] = None,
    ):
    """List available layouts."""
    settings = _settings(overrides={"layouts_dir": layouts_dir})
    for name in LayoutEngine(settings.layouts_dir).list_layouts():
        marker = " (default)" if name == settings.default_layout else ""
        typer.echo(f"{name}{marker}")
    typer.echo("none")
