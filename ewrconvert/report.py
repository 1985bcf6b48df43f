"""Diagnostics text and preview table for the command-line front end."""
from __future__ import annotations

import platform
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ewrconvert.config import PREVIEW_LIMIT
from ewrconvert.dat.constants import RECORD_MARKER, RECORD_SIZE
from ewrconvert.dat.enums import (
    decode_finisher_type,
    format_dollars,
    gender_name,
    nationality_name,
    weight_name,
)
from ewrconvert.dat.records import MarkerStats, Worker

PREVIEW_HEADERS = (
    "#", "ID", "Full Name", "Short Name", "Gender", "Age",
    "Weight", "Nationality", "Wage", "Primary Finisher", "Type",
)


def diagnostics_text(
    schema_version: str,
    file_path: Optional[Path],
    file_size: int,
    marker_stats: Optional[MarkerStats],
    worker_count: int,
    now: Optional[datetime] = None,
) -> str:
    """Build the plain-text diagnostics block users paste into bug reports."""
    lines: list[str] = []
    lines.append("EWR Converter Diagnostics")
    lines.append(f"Version: {schema_version}")
    lines.append(f"File: {file_path.name if file_path else '(not selected)'}")
    lines.append(f"File size: {f'{file_size} bytes' if file_size else '(unknown)'}")
    lines.append(f"Record size: {RECORD_SIZE} bytes")
    lines.append(f"Marker: 0x{RECORD_MARKER:x} ('{chr(RECORD_MARKER)}')")

    if marker_stats is not None:
        lines.append(f"Markers valid: {marker_stats}")
    else:
        lines.append("Markers valid: (not computed)")

    lines.append(f"Workers parsed: {worker_count}")
    lines.append(f"Python: {platform.python_version()}")
    lines.append(f"Platform: {platform.platform()}")
    lines.append(f"Time: {(now or datetime.now(timezone.utc)).isoformat()}")

    return "\n".join(lines)


def preview_rows(workers: list[Worker], limit: int = PREVIEW_LIMIT) -> list[tuple[str, ...]]:
    """Labeled rows for the first `limit` workers."""
    rows = []
    for w in workers[:limit]:
        rows.append((
            str(w.index),
            str(w.id),
            w.full_name,
            w.short_name,
            gender_name(w.gender),
            str(w.age),
            weight_name(w.weight),
            nationality_name(w.nationality),
            format_dollars(w.wage_dollars),
            w.primary_finisher_name,
            str(decode_finisher_type(*w.primary_finisher_flags)),
        ))
    return rows


def format_table(headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> str:
    """Render rows as a fixed-width text table."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    def fmt(values) -> str:
        return "  ".join(v.ljust(widths[i]) for i, v in enumerate(values)).rstrip()

    lines = [fmt(headers), "-" * (sum(widths) + 2 * (len(widths) - 1))]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)
