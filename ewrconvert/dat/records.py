"""Decoded roster records and decode-pass results."""
from __future__ import annotations

from dataclasses import dataclass

from ewrconvert.dat.constants import RECORD_SIZE, WAGE_SCALE


@dataclass(frozen=True, slots=True)
class Worker:
    """One roster entry decoded from a 307-byte wrestler.dat record.

    All numeric fields hold the raw stored value; labels are applied on
    demand by ewrconvert.dat.enums.
    """
    index: int              # slot position in the file, counts skipped slots
    id: int

    full_name: str
    short_name: str

    birth_month: int
    age: int
    gender: int
    weight: int
    nationality: int
    speaks: int
    wage_raw: int

    primary_finisher_name: str
    primary_finisher_flag_a: int
    primary_finisher_flag_b: int
    primary_finisher_flag_c: int
    primary_finisher_flag_d: int

    secondary_finisher_name: str
    secondary_finisher_flag_a: int
    secondary_finisher_flag_b: int
    secondary_finisher_flag_c: int

    brawling: int
    speed: int
    technical: int
    stiffness: int
    selling: int
    overness: int
    charisma: int
    attitude: int
    behaviour: int

    diva: int
    trainer: int
    superstar_look: int
    menacing: int
    fonz_factor: int
    announcer: int
    booker: int
    high_spots: int
    shooting_ability: int

    @property
    def wage_dollars(self) -> int:
        return self.wage_raw * WAGE_SCALE

    @property
    def primary_finisher_flags(self) -> tuple[int, int, int]:
        """Raw (A, B, C) flags used for type classification."""
        return (
            self.primary_finisher_flag_a,
            self.primary_finisher_flag_b,
            self.primary_finisher_flag_c,
        )

    @property
    def secondary_finisher_flags(self) -> tuple[int, int, int]:
        return (
            self.secondary_finisher_flag_a,
            self.secondary_finisher_flag_b,
            self.secondary_finisher_flag_c,
        )


@dataclass(frozen=True, slots=True)
class SkippedRecord:
    """A 307-byte slot rejected because its first byte is not the marker."""
    index: int
    marker: int

    @property
    def offset(self) -> int:
        return self.index * RECORD_SIZE


@dataclass(frozen=True, slots=True)
class MarkerStats:
    """How many full record slots carried a valid marker byte."""
    valid: int
    total: int

    @property
    def percent(self) -> int:
        if not self.total:
            return 0
        # Half rounds up (12.5% -> 13%)
        return int(self.valid * 100 / self.total + 0.5)

    def __str__(self) -> str:
        return f"{self.valid}/{self.total} ({self.percent}%)"
