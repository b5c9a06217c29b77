from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, TypedDict

import typer
import yaml

from .aggregator import DocumentStatistics
from .config import StatisticsConfig, load_config
from .document import TextDocument
from .epub import EPUBParseError, extract_text_from_epub
from .labels import snapshot_labels
from .models import StatisticsSnapshot
from .segmenters import SentenceSegmenter, build_segmenter_from_config

app = typer.Typer(help="Document statistics CLI.", no_args_is_help=True)

# File types the CLI knows how to load into a TextDocument.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".markdown", ".epub"}


class DocumentSummary(TypedDict, total=False):
    doc_id: str
    statistics: Dict[str, Any]
    labels: Dict[str, str]


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log recompute details to stderr."
    ),
) -> None:
    """Compute word counts and readability scores for text documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    segmenter: str | None = typer.Option(
        None,
        "--segmenter",
        "-s",
        help="Sentence segmenter to use ('unicode', 'punkt' or 'punctuation').",
    ),
    full_rescan: bool = typer.Option(
        False, "--full-rescan", help="Recompute every block on each change."
    ),
    labels: bool = typer.Option(
        True, "--labels/--no-labels", help="Include human-readable labels."
    ),
) -> None:
    """Analyze text or EPUB files and emit their statistics as JSON."""
    cfg, sentence_segmenter = _resolve_config(config, segmenter, full_rescan)
    summary: List[DocumentSummary] = []
    for doc_id, text in _load_documents(input_path):
        statistics = DocumentStatistics(
            TextDocument(text), segmenter=sentence_segmenter, config=cfg
        )
        summary.append(_summary_entry(doc_id, statistics.attach(), labels))
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def select(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    start: int = typer.Option(..., "--start", min=0, help="Selection start offset."),
    end: int = typer.Option(..., "--end", min=0, help="Selection end offset."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    segmenter: str | None = typer.Option(None, "--segmenter", "-s"),
    labels: bool = typer.Option(True, "--labels/--no-labels"),
) -> None:
    """Emit statistics for a character range of a single file."""
    cfg, sentence_segmenter = _resolve_config(config, segmenter, False)
    [(doc_id, text)] = _load_documents(input_path)
    document = TextDocument(text)
    if max(start, end) > document.character_count():
        raise typer.BadParameter(
            f"Selection {start}-{end} exceeds document length {document.character_count()}."
        )
    statistics = DocumentStatistics(document, segmenter=sentence_segmenter, config=cfg)
    statistics.attach()
    snapshot = statistics.select_range(start, end)
    typer.echo(json.dumps(_summary_entry(doc_id, snapshot, labels), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = StatisticsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _resolve_config(
    config_path: Path | None, segmenter: str | None, full_rescan: bool
) -> Tuple[StatisticsConfig, SentenceSegmenter]:
    """Load configuration, apply CLI overrides and build the segmenter."""
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if segmenter:
        cfg.segmenter = segmenter
    if full_rescan:
        cfg.incremental = False
    try:
        return cfg, build_segmenter_from_config(cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path) -> List[Tuple[str, str]]:
    """Expand the input path into (doc_id, text) pairs."""
    if input_path.is_file():
        return [(input_path.name, _read_text(input_path))]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    # Relative paths keep doc ids unique across subdirectories.
    return [(str(file.relative_to(input_path)), _read_text(file)) for file in files]


def _read_text(path: Path) -> str:
    try:
        if path.suffix.lower() == ".epub":
            return extract_text_from_epub(path)
        return path.read_text(encoding="utf-8")
    except EPUBParseError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _summary_entry(
    doc_id: str, snapshot: StatisticsSnapshot, include_labels: bool
) -> DocumentSummary:
    entry: DocumentSummary = {"doc_id": doc_id, "statistics": snapshot.to_dict()}
    if include_labels:
        entry["labels"] = snapshot_labels(
            snapshot.lix_score,
            snapshot.coleman_liau_score,
            snapshot.reading_time_minutes,
        )
    return entry


if __name__ == "__main__":
    main()
