"""Low-level parser for EWR 4.2 wrestler.dat roster files.

The file is a flat run of 307-byte records with no header or footer. Each
record starts with the marker byte 0x34; slots with any other first byte are
skipped individually so one damaged record never sinks the whole file.
"""
from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Iterator, Union

from ewrconvert.dat.constants import (
    KIND_TEXT,
    KIND_UINT8,
    KIND_UINT16,
    RECORD_MARKER,
    RECORD_SIZE,
    WORKER_LAYOUT,
)
from ewrconvert.dat.records import MarkerStats, SkippedRecord, Worker

logger = logging.getLogger(__name__)

_UINT16 = struct.Struct("<H")

# Trimmed from text field edges; 0x1C-0x1F and 0x85 stay in the name
_TEXT_WHITESPACE = " \t\n\r\x0b\x0c\xa0"

Buffer = Union[bytes, bytearray, memoryview]
Slot = Union[Worker, SkippedRecord]


def _as_bytes(data: Buffer) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected a bytes-like buffer, got {type(data).__name__}")


def read_uint8(data: bytes, offset: int) -> int:
    """Read one byte; 0 if the offset is outside the buffer."""
    if offset < 0 or offset >= len(data):
        return 0
    return data[offset]


def read_uint16(data: bytes, offset: int) -> int:
    """Read a little-endian uint16; 0 if either byte is outside the buffer."""
    if offset < 0 or offset + 1 >= len(data):
        return 0
    return _UINT16.unpack_from(data, offset)[0]


def read_text(data: bytes, offset: int, length: int) -> str:
    """Read a fixed-width text field.

    NUL bytes are dropped wherever they appear, each remaining byte maps to
    the code point of the same value, and surrounding whitespace is
    stripped. A slice that runs past the buffer yields "".
    """
    if offset < 0 or offset + length > len(data):
        return ""
    raw = data[offset:offset + length].replace(b"\x00", b"")
    return raw.decode("latin-1").strip(_TEXT_WHITESPACE)


_READERS = {
    KIND_UINT8: lambda data, pos, width: read_uint8(data, pos),
    KIND_UINT16: lambda data, pos, width: read_uint16(data, pos),
    KIND_TEXT: read_text,
}


def _decode_worker(data: bytes, start: int, index: int) -> Worker:
    """Extract every layout field of the record beginning at `start`."""
    values = {
        name: _READERS[spec.kind](data, start + spec.offset, spec.width)
        for name, spec in WORKER_LAYOUT.items()
    }
    return Worker(index=index, **values)


def iter_slots(data: Buffer) -> Iterator[Slot]:
    """Iterate over every full 307-byte slot in the buffer.

    Yields a Worker for slots that start with the marker byte and a
    SkippedRecord for the rest. A trailing partial slot is dropped.
    """
    data = _as_bytes(data)
    size = len(data)
    pos = 0
    index = 0

    while pos + RECORD_SIZE <= size:
        marker = data[pos]
        if marker != RECORD_MARKER:
            logger.debug(
                "Skipping slot %d at offset %d: marker 0x%02X",
                index, pos, marker,
            )
            yield SkippedRecord(index=index, marker=marker)
        else:
            yield _decode_worker(data, pos, index)
        pos += RECORD_SIZE
        index += 1

    if pos < size:
        logger.debug("Dropping %d trailing bytes (partial record)", size - pos)


def decode(data: Buffer) -> list[Worker]:
    """Decode all valid records from a wrestler.dat buffer.

    Never raises on malformed content; a wrong file simply yields few or no
    workers.
    """
    workers = []
    skipped = 0
    for slot in iter_slots(data):
        if isinstance(slot, Worker):
            workers.append(slot)
        else:
            skipped += 1
    logger.info("Decoded %d workers (%d slots skipped)", len(workers), skipped)
    return workers


def validate_markers(data: Buffer) -> MarkerStats:
    """Count full slots and how many of them carry the marker byte."""
    data = _as_bytes(data)
    total = len(data) // RECORD_SIZE
    valid = sum(1 for i in range(total) if data[i * RECORD_SIZE] == RECORD_MARKER)
    return MarkerStats(valid=valid, total=total)


class DatReader:
    """Reader for a wrestler.dat file on disk.

    The file is read once, on first use; decoding is pure after that.
    """

    def __init__(self, path: Path):
        self.path = path
        self._data: bytes | None = None

    @property
    def data(self) -> bytes:
        if self._data is None:
            self._data = self.path.read_bytes()
        return self._data

    @property
    def file_size(self) -> int:
        return len(self.data)

    def parse_all(self) -> list[Worker]:
        """Parse all valid records into a list."""
        return decode(self.data)

    def iter_slots(self) -> Iterator[Slot]:
        return iter_slots(self.data)

    def marker_stats(self) -> MarkerStats:
        return validate_markers(self.data)


def main():
    """Quick test: parse a wrestler.dat and print the first few workers."""
    import sys
    if len(sys.argv) < 2:
        print("Usage: python -m ewrconvert.dat.reader <path/to/wrestler.dat>")
        sys.exit(1)

    path = Path(sys.argv[1])
    reader = DatReader(path)
    print(f"Parsing {path} ({reader.file_size:,} bytes)...")

    workers = reader.parse_all()
    print(f"Markers valid: {reader.marker_stats()}")
    print(f"Parsed {len(workers):,} workers\n")

    for w in workers[:10]:
        print(f"  #{w.index:<4} id={w.id:<5} {w.full_name:<25} ({w.short_name})")


if __name__ == "__main__":
    main()
