"""Default names, schema version and output path derivation."""
from __future__ import annotations

from datetime import date
from pathlib import Path

# Shown in diagnostics and written to the Schema sheet of every export
SCHEMA_VERSION = "ewr-wrestler-dat-py-v1.0.0"

SOURCE_DESCRIPTION = "EWR 4.2 wrestler.dat (ewrconvert)"

# Only this roster file is supported (compared case-insensitively)
DEFAULT_DAT_NAME = "wrestler.dat"

# Export format -> file extension
EXPORT_EXTENSIONS = {
    "xlsx": ".xlsx",
    "csv": ".csv",
    "json": ".json",
}

PREVIEW_LIMIT = 25


def is_supported_dat_name(path: Path) -> bool:
    """Check the file name against the single supported roster file."""
    return path.name.lower() == DEFAULT_DAT_NAME


def derive_dat_path(data_dir: Path) -> Path:
    """Derive the roster file path from a game data directory."""
    return data_dir / DEFAULT_DAT_NAME


def derive_output_path(dat: Path, fmt: str, today: date | None = None) -> Path:
    """Derive the export path: wrestlers_YYYY-MM-DD.<ext> next to the .dat file."""
    stamp = (today or date.today()).isoformat()
    return dat.parent / f"wrestlers_{stamp}{EXPORT_EXTENSIONS[fmt]}"
