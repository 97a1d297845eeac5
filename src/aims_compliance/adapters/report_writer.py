"""
Report Writers.

Export report rows for the BI tool as CSV or JSON lines. Columns use the
BI names and order from REPORT_COLUMNS; dates are ISO formatted and
missing values are empty (CSV) or null (JSON).
"""

from __future__ import annotations

import csv
import json
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, TextIO

from aims_compliance.domain.entities import REPORT_COLUMNS, ReportRow


class OutputFormat(str, Enum):
    """Supported export formats."""

    CSV = "csv"
    JSONL = "jsonl"


def _format_value(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def serialize_row(row: ReportRow) -> Dict[str, Any]:
    """Row keyed by BI column with JSON-friendly values."""
    return {column: _format_value(v) for column, v in row.to_record().items()}


def write_csv(rows: Iterable[ReportRow], stream: TextIO) -> int:
    """Write rows as CSV with a header. Returns the number of rows written."""
    writer = csv.DictWriter(stream, fieldnames=REPORT_COLUMNS)
    writer.writeheader()
    count = 0
    for row in rows:
        record = serialize_row(row)
        writer.writerow({k: "" if v is None else v for k, v in record.items()})
        count += 1
    return count


def write_jsonl(rows: Iterable[ReportRow], stream: TextIO) -> int:
    """Write one JSON object per row. Returns the number of rows written."""
    count = 0
    for row in rows:
        stream.write(json.dumps(serialize_row(row)) + "\n")
        count += 1
    return count


def write_report(
    rows: Iterable[ReportRow],
    stream: TextIO,
    format: OutputFormat = OutputFormat.CSV,
) -> int:
    """Write rows in the requested format."""
    if format == OutputFormat.CSV:
        return write_csv(rows, stream)
    if format == OutputFormat.JSONL:
        return write_jsonl(rows, stream)
    raise ValueError(f"Unsupported format: {format}")
