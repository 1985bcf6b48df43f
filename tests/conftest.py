"""Shared fixtures: synthetic wrestler.dat records built from the field layout."""
from __future__ import annotations

import struct

import pytest

from ewrconvert.dat.constants import (
    KIND_TEXT,
    KIND_UINT8,
    RECORD_MARKER,
    RECORD_SIZE,
    WORKER_LAYOUT,
)


def _make_record(marker: int = RECORD_MARKER, **values) -> bytes:
    """Build one 307-byte record with the given fields set (rest zeroed)."""
    buf = bytearray(RECORD_SIZE)
    buf[0] = marker
    for name, value in values.items():
        spec = WORKER_LAYOUT[name]
        if spec.kind == KIND_TEXT:
            raw = value.encode("latin-1") if isinstance(value, str) else value
            assert len(raw) <= spec.width, f"{name} wider than {spec.width} bytes"
            buf[spec.offset:spec.offset + len(raw)] = raw
        elif spec.kind == KIND_UINT8:
            buf[spec.offset] = value
        else:
            struct.pack_into("<H", buf, spec.offset, value)
    return bytes(buf)


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def austin(make_record) -> bytes:
    return make_record(
        id=17,
        full_name="Steve Austin",
        short_name="Austin",
        gender=0xFFFF,
        birth_month=12,
        age=35,
        weight=72,
        nationality=1,
        speaks=0xFFFF,
        wage_raw=450,
        primary_finisher_name="Stone Cold Stunner",
        secondary_finisher_name="Lou Thesz Press",
        secondary_finisher_flag_b=0xFFFF,
        brawling=95,
        technical=60,
        speed=55,
        stiffness=80,
        selling=70,
        overness=100,
        charisma=98,
        attitude=40,
        behaviour=50,
        menacing=0xFFFF,
        superstar_look=0xFFFF,
    )


@pytest.fixture
def roster(make_record, austin) -> bytes:
    """Three valid workers with a corrupt slot between the second and third."""
    return b"".join([
        austin,
        make_record(id=2, full_name="Lita", short_name="Lita", gender=0, weight=76),
        make_record(marker=0x00, id=3, full_name="Corrupt"),
        make_record(id=4, full_name="Taka Michinoku", nationality=6),
    ])


@pytest.fixture
def dat_file(tmp_path, roster):
    path = tmp_path / "wrestler.dat"
    path.write_bytes(roster)
    return path
