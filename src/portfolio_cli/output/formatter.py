"""Output dispatcher — renders data in table, JSON, YAML, or CSV format."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from rich.console import Console

from portfolio_cli.output.tables import kv_table, make_table

console = Console()

FORMATS = ("table", "json", "yaml", "csv")


def to_plain(data: Any) -> Any:
    """Convert models (or lists of models) to JSON-ready data with wire names."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, (list, tuple)):
        return [to_plain(item) for item in data]
    return data


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    console.print_json(json.dumps(to_plain(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    import yaml

    console.print(
        yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False),
        end="",
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print data as CSV."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows(
        [[str(v) if v is not None else "" for v in row] for row in rows]
    )
    console.print(buf.getvalue(), end="", markup=False, highlight=False, soft_wrap=True)


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
    kv: bool = False,
) -> None:
    """Print data as a Rich table."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    if kv and isinstance(data, dict):
        console.print(kv_table(data, title=title))
    elif columns and rows is not None:
        console.print(make_table(title, columns, rows))
    elif isinstance(data, dict):
        console.print(kv_table(data, title=title))
    else:
        console.print(data)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
    kv: bool = False,
) -> None:
    """Dispatch output to the appropriate formatter."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'. Choose from: {', '.join(FORMATS)}")
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        if columns and rows is not None:
            output_csv(columns, rows)
        else:
            output_json(data)
    else:
        output_table(data, columns=columns, rows=rows, title=title, kv=kv)
