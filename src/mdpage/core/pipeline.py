"""Pipeline step functions: render, build, and check orchestration"""

from dataclasses import dataclass, field
from pathlib import Path

from mdpage.config import Settings
from mdpage.core.layouts import LayoutEngine
from mdpage.core.models import Document, RenderedPage
from mdpage.core.parse import discover_files, read_document
from mdpage.core.render import render_document
from mdpage.core.utils.diff import unified_diff
from mdpage.core.utils.hashing import sha256
from mdpage.core.utils.logger import get_logger


logger = get_logger(__name__)


@dataclass
class CheckResult:
    source: Path
    output: Path
    status: str                                     # ok | missing | stale
    diff:   list[str] = field(default_factory=list)


def output_path(doc: Document, root: Path, output_dir: Path) -> Path:
    """Mirror the source directory relative to root: output_dir / rel_parent / slug.html"""
    rel_parent = Path()
    if doc.path is not None and root.is_dir():
        rel_parent = doc.path.relative_to(root).parent
    return output_dir / rel_parent / f"{doc.slug}.html"


def _render(path: Path, settings: Settings, engine: LayoutEngine) -> RenderedPage:
    """Read and render one file, wrapping any failure with the source path."""
    try:
        return render_document(read_document(path), settings, engine)
    except Exception as e:
        raise RuntimeError(f"Failed to render {path}: {e}") from e


def render_file(path: Path, settings: Settings) -> str:
    """Render a single source file and return the HTML."""
    return _render(path, settings, LayoutEngine(settings.layouts_dir)).html


def _plan(root: Path, settings: Settings, output_dir: Path) -> list[tuple[Path, RenderedPage, Path]]:
    """Render every file under root and map it to its output path.

    Raises RuntimeError before anything is written when two sources share an output path.
    """
    engine = LayoutEngine(settings.layouts_dir)
    claimed: dict[Path, Path] = {}
    plan = []
    for p in discover_files(root):
        page = _render(p, settings, engine)
        out_file = output_path(page.document, root, output_dir)
        if out_file in claimed:
            raise RuntimeError(f"{claimed[out_file]} and {p} both render to {out_file}")
        claimed[out_file] = p
        plan.append((p, page, out_file))
    return plan


def run_build(
    path: str | Path,
    settings: Settings,
    output_dir: Path,
    ) -> list[tuple[str, Path, Path]]:
    """Render every file under path into output_dir.

    Files are rewritten only when their content hash changes. Returns
    (status, source, output) triples with status created, updated, or unchanged.
    """
    results = []
    for p, page, out_file in _plan(Path(path), settings, output_dir):
        if out_file.exists():
            old = out_file.read_text(encoding='utf-8')
            status = 'unchanged' if sha256(old) == sha256(page.html) else 'updated'
        else:
            status = 'created'
        if status != 'unchanged':
            try:
                out_file.parent.mkdir(parents=True, exist_ok=True)
                out_file.write_text(page.html, encoding='utf-8')
            except OSError as e:
                raise RuntimeError(f"Failed to write {out_file}: {e}") from e
        logger.info("%s: %s -> %s", status, p, out_file)
        results.append((status, p, out_file))
    return results


def run_check(
    path: str | Path,
    settings: Settings,
    output_dir: Path,
    ) -> list[CheckResult]:
    """Render every file under path without writing and compare against output_dir."""
    results = []
    for p, page, out_file in _plan(Path(path), settings, output_dir):
        if not out_file.exists():
            results.append(CheckResult(p, out_file, 'missing'))
            continue
        old = out_file.read_text(encoding='utf-8')
        diff = unified_diff(old, page.html, from_label=str(out_file), to_label=f"{p} (rendered)")
        results.append(CheckResult(p, out_file, 'stale' if diff else 'ok', diff))
    return results
