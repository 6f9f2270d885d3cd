"""
Synthetic subscription data generator for subgrid.

Writes a deterministic pseudo-random JSON array of subscriptions in the
camelCase shape the record source accepts, ready for `subgrid show --data`.
"""

from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

import typer

from subgrid.domain.sample import generate_records

app = typer.Typer(help="Generate synthetic subscriptions as a JSON file.")


def _generate_rows_json(json_path: Path, rows: int, seed: int) -> int:
    records = generate_records(rows, random.Random(seed))
    payload: List[Dict[str, Any]] = [r.model_dump(mode="json", by_alias=True) for r in records]
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    return len(payload)


@app.command()
def main(
    output: Path = typer.Option(Path("data/subscriptions.json"), "--output", "-o"),
    rows: int = typer.Option(1_000, "--rows", "-r", min=0, help="Number of subscriptions."),
    seed: int = typer.Option(42, "--seed", help="RNG seed for reproducible output."),
) -> None:
    start = time.perf_counter()
    written = _generate_rows_json(output, rows=rows, seed=seed)
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {written} subscriptions to {output} in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
