"""wrestler.dat format constants and the fixed field layout (EWR 4.2).

Offsets were found by diffing known rosters byte-for-byte; there is no
published format document. Every offset is relative to the start of its
307-byte record.
"""
from __future__ import annotations

from typing import NamedTuple

RECORD_SIZE = 307
RECORD_MARKER = 0x34  # ASCII '4'

# Field kinds
KIND_UINT8 = "u8"
KIND_UINT16 = "u16"     # little-endian
KIND_TEXT = "text"      # fixed width, NUL-padded, single-byte chars

WAGE_SCALE = 1000       # wage is stored in thousands


class FieldSpec(NamedTuple):
    offset: int
    width: int
    kind: str


def _u8(offset: int) -> FieldSpec:
    return FieldSpec(offset, 1, KIND_UINT8)


def _u16(offset: int) -> FieldSpec:
    return FieldSpec(offset, 2, KIND_UINT16)


def _text(offset: int, width: int) -> FieldSpec:
    return FieldSpec(offset, width, KIND_TEXT)


# Field name -> layout. Order matches the Worker dataclass.
WORKER_LAYOUT: dict[str, FieldSpec] = {
    "id": _u16(1),

    # Names
    "full_name": _text(3, 25),
    "short_name": _text(28, 10),

    # Core
    "birth_month": _u8(40),         # 0=Unknown, 1-12
    "age": _u8(42),
    "gender": _u16(38),             # 0=Female, 65535=Male
    "weight": _u8(44),              # 72=Heavyweight, 76=Lightweight
    "nationality": _u8(275),        # 0-7
    "speaks": _u16(187),
    "wage_raw": _u16(80),           # thousands

    # Primary finisher
    "primary_finisher_name": _text(189, 25),
    "primary_finisher_flag_a": _u16(214),
    "primary_finisher_flag_b": _u16(216),
    "primary_finisher_flag_c": _u16(218),
    "primary_finisher_flag_d": _u16(249),

    # Secondary finisher (flag C shares +249 with primary flag D)
    "secondary_finisher_name": _text(220, 25),
    "secondary_finisher_flag_a": _u16(245),
    "secondary_finisher_flag_b": _u16(247),
    "secondary_finisher_flag_c": _u16(249),

    # Skills
    "brawling": _u16(147),
    "speed": _u16(151),
    "technical": _u16(149),
    "stiffness": _u16(153),
    "selling": _u16(155),
    "overness": _u16(157),
    "charisma": _u16(159),
    "attitude": _u16(163),
    "behaviour": _u16(255),

    # Toggles
    "diva": _u16(293),
    "trainer": _u16(271),
    "superstar_look": _u16(273),
    "menacing": _u16(277),
    "fonz_factor": _u16(279),
    "announcer": _u16(281),
    "booker": _u16(283),
    "high_spots": _u16(161),
    "shooting_ability": _u16(165),
}
