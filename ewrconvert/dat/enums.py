"""Label lookups for integer-coded wrestler.dat fields."""
from __future__ import annotations

from enum import Enum


def lookup_enum(table: dict[int, str], value: int, default: str) -> str:
    """Return the label for a coded value, or `default` for unknown codes."""
    return table.get(value, default)


UNKNOWN = "Unknown"

# Gender (uint16)
GENDER: dict[int, str] = {
    0: "Female",
    0xFFFF: "Male",
}

# Weight class (uint8)
WEIGHT: dict[int, str] = {
    72: "Heavyweight",
    76: "Lightweight",
}

# Birth month (uint8); 0 means not set
BIRTH_MONTH: dict[int, str] = {
    0: UNKNOWN,
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}

# Nationality (uint8)
NATIONALITY: dict[int, str] = {
    0: "Other",
    1: "American",
    2: "Australian",
    3: "British",
    4: "Canadian",
    5: "European",
    6: "Japanese",
    7: "Mexican",
}


def gender_name(raw: int) -> str:
    return lookup_enum(GENDER, raw, UNKNOWN)


def weight_name(raw: int) -> str:
    return lookup_enum(WEIGHT, raw, UNKNOWN)


def birth_month_name(raw: int) -> str:
    return lookup_enum(BIRTH_MONTH, raw, UNKNOWN)


def nationality_name(raw: int) -> str:
    return lookup_enum(NATIONALITY, raw, NATIONALITY[0])


def yes_no(raw: int) -> str:
    """Toggle fields: 0 is No, anything else (normally 65535) is Yes."""
    return "No" if raw == 0 else "Yes"


def format_dollars(amount: int) -> str:
    """Format a whole-dollar amount as "$1,234,000"."""
    return f"${int(amount):,}"


class FinisherType(str, Enum):
    IMPACT = "Impact"
    SUBMISSION = "Submission"
    TOP_ROPE_STANDING = "Top Rope Standing"
    TOP_ROPE = "Top Rope"
    GROUND = "Ground"
    CORNER = "Corner"
    UNMAPPED = "UNMAPPED"

    def __str__(self) -> str:
        return self.value


# (A, B, C) flag triple -> finisher type. All 8 combinations are listed;
# the two never seen in real rosters map to UNMAPPED.
FINISHER_TYPES: dict[tuple[bool, bool, bool], FinisherType] = {
    (False, False, False): FinisherType.IMPACT,
    (True, False, False): FinisherType.SUBMISSION,
    (True, True, False): FinisherType.TOP_ROPE_STANDING,
    (False, True, False): FinisherType.TOP_ROPE,
    (False, False, True): FinisherType.GROUND,
    (False, True, True): FinisherType.CORNER,
    (True, False, True): FinisherType.UNMAPPED,
    (True, True, True): FinisherType.UNMAPPED,
}


def decode_finisher_type(flag_a: int, flag_b: int, flag_c: int) -> FinisherType:
    """Classify a finisher from its raw A/B/C flags (nonzero = set).

    Flag D is not part of the classification.
    """
    return FINISHER_TYPES[(flag_a != 0, flag_b != 0, flag_c != 0)]
