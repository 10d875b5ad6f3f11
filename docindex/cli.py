# docindex/cli.py
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Optional

import typer

from docindex import config
from docindex.log import err
from docindex.policy.loader import load_policy
from docindex.tools.build import Indexer, build_index
from docindex.index.writer import read_index
from docindex.parsers.html_parser import load_document
from docindex.cleaning.sanitizer import sanitize


app = typer.Typer(help="Build a searchable section index from a documentation tree.")


# -----------------------
# Helpers
# -----------------------
def _policy(policy_file: Optional[Path], scan_dirs: Optional[str], exclude_dirs: Optional[str]):
    try:
        policy = load_policy(policy_file or config.POLICY_PATH)
    except (OSError, ValueError) as e:
        err(f"Cannot load policy: {e}")
        raise typer.Exit(code=1)
    if scan_dirs is not None:
        policy.walk.scan_dirs = config.split_csv(scan_dirs)
    if exclude_dirs is not None:
        policy.walk.exclude_dirs = config.split_csv(exclude_dirs)
    return policy


# -----------------------
# Commands
# -----------------------
@app.command()
def build(
    doc_base_dir: Path = typer.Option(config.BASE_DIR, "--doc-base-dir", help="Path of the documentation directory"),
    output_file: Path = typer.Option(config.OUTPUT_FILE, "--output-file-path", help="Path of generated index"),
    scan_dirs: Optional[str] = typer.Option(
        None, "--scan-dirs",
        help="Comma separated directory names relative to --doc-base-dir that will be scanned for html files",
    ),
    exclude_dirs: Optional[str] = typer.Option(
        None, "--exclude-dirs", help="Comma separated directory names that are skipped wherever found",
    ),
    policy_file: Optional[Path] = typer.Option(None, "--policy", help="YAML policy overriding cleaning/scoping rules"),
) -> None:
    """
    Walk the documentation tree, split every page into sections and write the JSON index.
    """
    policy = _policy(policy_file, scan_dirs, exclude_dirs)
    try:
        indexer = build_index(doc_base_dir, output_file, policy)
    except OSError as e:
        err(f"Index not written: {e}")
        raise typer.Exit(code=1)
    typer.echo(f"Indexed {indexer.processed} document(s) into {len(indexer.index)} section(s): {output_file}")


@app.command()
def peek(
    html_file: Path,
    policy_file: Optional[Path] = typer.Option(None, "--policy"),
) -> None:
    """
    Show the sections one HTML page would contribute (nothing is written).
    """
    policy = _policy(policy_file, None, None)
    indexer = Indexer(html_file.parent, policy)
    try:
        soup = load_document(html_file)
    except OSError as e:
        err(f"Cannot read {html_file}: {e}")
        raise typer.Exit(code=1)
    sanitize(soup, policy.cleaning.remove_selectors)
    if not indexer.process_document(soup, html_file.name):
        typer.echo("(no content root)")
        return

    for entry in indexer.entries():
        content = entry.content
        if len(content) > 160:
            content = content[:160] + "…"
        typer.echo(f"- {entry.title}  [{entry.url}]")
        typer.echo(f"  {content or '(empty)'}")


@app.command()
def stats(index_file: Path = typer.Argument(config.OUTPUT_FILE)) -> None:
    """
    Summarise a written index: entries, pages, empty sections.
    """
    try:
        entries = read_index(index_file)
    except (OSError, ValueError) as e:
        err(f"Cannot read index: {e}")
        raise typer.Exit(code=1)

    pages = Counter(e.url.split("#", 1)[0] for e in entries)
    empty = sum(1 for e in entries if not e.content)

    typer.echo("=== Index Stats ===")
    typer.echo(f"entries:          {len(entries)}")
    typer.echo(f"pages:            {len(pages)}")
    typer.echo(f"empty sections:   {empty}")
    typer.echo("\nTop pages by sections:")
    for url, c in pages.most_common(10):
        typer.echo(f" - {url}: {c}")


# -----------------------
# Entrypoint
# -----------------------
if __name__ == "__main__":
    app()
