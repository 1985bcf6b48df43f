"""Export workers as a two-sheet .xlsx workbook (Workers + Schema)."""
from __future__ import annotations

import io
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font

from ewrconvert.config import SCHEMA_VERSION, SOURCE_DESCRIPTION
from ewrconvert.dat.records import Worker
from ewrconvert.export.columns import WORKER_COLUMNS, worker_row

WORKERS_SHEET = "Workers"
SCHEMA_SHEET = "Schema"


def schema_rows() -> list[list[str]]:
    """Static key/value metadata describing the Workers sheet encoding."""
    return [
        ["key", "value"],
        ["schemaVersion", SCHEMA_VERSION],
        ["source", SOURCE_DESCRIPTION],
        ["notes", "Do not edit Workers headers."],
        ["wageScale", "wageRaw is thousands; wageDollars = wageRaw * 1000"],
        ["genderEncoding", "0=Female, 65535=Male, other=Unknown"],
        ["yesNoEncoding", "0=No, 65535=Yes"],
        ["weightEncoding", "72=Heavyweight, 76=Lightweight, other=Unknown"],
        ["finisherTypeEncoding",
         "A,B,C flags: none=Impact, A=Submission, A+B=Top Rope Standing, "
         "B=Top Rope, C=Ground, B+C=Corner, other=UNMAPPED"],
        ["workersColumns", " | ".join(WORKER_COLUMNS)],
    ]


def _clean_row(row: list) -> list:
    """Drop control characters openpyxl refuses to store in cells."""
    return [
        ILLEGAL_CHARACTERS_RE.sub("", v) if isinstance(v, str) else v
        for v in row
    ]


def build_workbook(workers: list[Worker]) -> Workbook:
    """Build the Workers and Schema sheets."""
    wb = Workbook()

    ws = wb.active
    ws.title = WORKERS_SHEET
    ws.append(WORKER_COLUMNS)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for w in workers:
        ws.append(_clean_row(worker_row(w)))
    ws.freeze_panes = "A2"

    schema = wb.create_sheet(SCHEMA_SHEET)
    for row in schema_rows():
        schema.append(row)
    for cell in schema[1]:
        cell.font = Font(bold=True)

    return wb


def workbook_bytes(workers: list[Worker]) -> bytes:
    """Serialize the workbook to .xlsx bytes."""
    output = io.BytesIO()
    build_workbook(workers).save(output)
    return output.getvalue()


def export_xlsx(workers: list[Worker], path: Path) -> Path:
    """Write the workbook to `path`."""
    build_workbook(workers).save(path)
    return path
