"""Export workers as JSON."""
from __future__ import annotations

import json

from ewrconvert.config import SCHEMA_VERSION
from ewrconvert.dat.records import Worker
from ewrconvert.export.columns import WORKER_COLUMNS, worker_dict


def export_json(workers: list[Worker]) -> str:
    """Export workers as JSON string.

    Top-level object carries the schema version and column order so the
    file can be checked against the xlsx export.
    """
    data = {
        "schemaVersion": SCHEMA_VERSION,
        "columns": WORKER_COLUMNS,
        "workers": [worker_dict(w) for w in workers],
    }
    return json.dumps(data, indent=2)
