"""Export workers as CSV."""
from __future__ import annotations

import csv
import io

from ewrconvert.dat.records import Worker
from ewrconvert.export.columns import WORKER_COLUMNS, worker_row


def export_csv(workers: list[Worker]) -> str:
    """Export workers as CSV string, one row per worker in Workers column order."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")

    writer.writerow(WORKER_COLUMNS)
    for w in workers:
        writer.writerow(worker_row(w))

    return output.getvalue()
