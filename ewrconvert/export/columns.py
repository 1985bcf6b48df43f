"""Locked Workers column order shared by every exporter.

Spreadsheets built from this order are read back by other tools, so the
headers and their order must not change within a schema version.
"""
from __future__ import annotations

from typing import Any

from ewrconvert.dat.enums import (
    birth_month_name,
    decode_finisher_type,
    format_dollars,
    gender_name,
    nationality_name,
    weight_name,
    yes_no,
)
from ewrconvert.dat.records import Worker

WORKER_COLUMNS: list[str] = [
    "Index",
    "ID",
    "Full Name",
    "Short Name",
    "Birth Month (Raw)",
    "Birth Month",
    "Age",
    "Gender (Raw)",
    "Gender",
    "Weight (Raw)",
    "Weight",
    "Nationality (Raw)",
    "Nationality",
    "Speaks (Raw)",
    "Speaks",
    "Wage (Raw, Thousands)",
    "Wage ($)",
    "Primary Finisher Name",
    "PF Type Flag A (Raw)",
    "PF Type Flag B (Raw)",
    "PF Type Flag C (Raw)",
    "PF Type Flag D (Raw)",
    "Primary Finisher Type",
    "Secondary Finisher Name",
    "SF Type Flag A (Raw)",
    "SF Type Flag B (Raw)",
    "SF Type Flag C (Raw)",
    "Secondary Finisher Type",
    "Brawling",
    "Speed",
    "Technical",
    "Stiffness",
    "Selling",
    "Overness",
    "Charisma",
    "Attitude",
    "Behaviour",
    "Diva (Raw)",
    "Diva",
    "Trainer (Raw)",
    "Trainer",
    "Superstar Look (Raw)",
    "Superstar Look",
    "Menacing (Raw)",
    "Menacing",
    "Fonz Factor (Raw)",
    "Fonz Factor",
    "Announcer (Raw)",
    "Announcer",
    "Booker (Raw)",
    "Booker",
    "High Spots (Raw)",
    "High Spots",
    "Shooting Ability (Raw)",
    "Shooting Ability",
]


def worker_row(w: Worker) -> list[Any]:
    """Build one Workers row, values in WORKER_COLUMNS order."""
    return [
        w.index,
        w.id,
        w.full_name,
        w.short_name,
        w.birth_month,
        birth_month_name(w.birth_month),
        w.age,
        w.gender,
        gender_name(w.gender),
        w.weight,
        weight_name(w.weight),
        w.nationality,
        nationality_name(w.nationality),
        w.speaks,
        yes_no(w.speaks),
        w.wage_raw,
        format_dollars(w.wage_dollars),
        w.primary_finisher_name,
        w.primary_finisher_flag_a,
        w.primary_finisher_flag_b,
        w.primary_finisher_flag_c,
        w.primary_finisher_flag_d,
        decode_finisher_type(*w.primary_finisher_flags).value,
        w.secondary_finisher_name,
        w.secondary_finisher_flag_a,
        w.secondary_finisher_flag_b,
        w.secondary_finisher_flag_c,
        decode_finisher_type(*w.secondary_finisher_flags).value,
        w.brawling,
        w.speed,
        w.technical,
        w.stiffness,
        w.selling,
        w.overness,
        w.charisma,
        w.attitude,
        w.behaviour,
        w.diva,
        yes_no(w.diva),
        w.trainer,
        yes_no(w.trainer),
        w.superstar_look,
        yes_no(w.superstar_look),
        w.menacing,
        yes_no(w.menacing),
        w.fonz_factor,
        yes_no(w.fonz_factor),
        w.announcer,
        yes_no(w.announcer),
        w.booker,
        yes_no(w.booker),
        w.high_spots,
        yes_no(w.high_spots),
        w.shooting_ability,
        yes_no(w.shooting_ability),
    ]


def worker_dict(w: Worker) -> dict[str, Any]:
    """Row as a header -> value mapping (insertion order = column order)."""
    return dict(zip(WORKER_COLUMNS, worker_row(w)))
