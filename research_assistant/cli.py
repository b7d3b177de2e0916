from __future__ import annotations
import argparse
import json
from typing import List

from rich import print
from rich.console import Console
from rich.table import Table

from .container import Container
from .error_handler import safe_execute
from .exceptions import DocumentProcessingError, ResearchAssistantError


def ingest_files(container: Container, paths: List[str]) -> List[int]:
    """Ingest each file, skipping the ones that fail; returns new document IDs."""
    ingestion = container.ingestion_service()
    ids: List[int] = []
    for path in paths:
        document = safe_execute(
            lambda: ingestion.ingest_file(path),
            f"Ingest {path}",
            exception_type=DocumentProcessingError
        )
        if document is None:
            print(f"[red]Skipped {path}[/]")
            continue
        print(f"[green]Ingested[/] {document.name} as #{document.id} "
              f"({len(document.chunks)} chunks, key terms: {', '.join(document.metadata.key_terms[:5])})")
        ids.append(document.id)
    return ids


def render_results(results: List[dict]) -> None:
    table = Table(title="Research results")
    table.add_column("#", justify="right")
    table.add_column("Relevance", justify="right")
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Source")
    table.add_column("Page", justify="right")
    for rank, result in enumerate(results, start=1):
        table.add_row(
            str(rank),
            f"{result['relevance']:.2f}",
            result["type"],
            result["title"],
            result["source"],
            str(result.get("pageNumber", "")),
        )
    Console().print(table)


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Search documents and live sources for a research question")
    ap.add_argument("query", help="Research question")
    ap.add_argument("--files", nargs="*", default=[], help="Files to ingest before searching")
    ap.add_argument("--seed", type=int, default=None, help="Seed for result titles and page numbers")
    ap.add_argument("--json", action="store_true", help="Print raw JSON instead of a table")
    args = ap.parse_args(argv)

    container = Container(seed=args.seed)
    ids = ingest_files(container, args.files)
    try:
        response = container.research_use_case().search(args.query, ids)
    except ResearchAssistantError as e:
        print(f"[red]Error:[/] {e.message}")
        return 1

    if args.json:
        Console().print_json(json.dumps(response))
    else:
        render_results(response["results"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
