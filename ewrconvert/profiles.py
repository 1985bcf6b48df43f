"""Roster profiles: one per EWR install or mod folder, with export defaults.

Stored as TOML under the click app dir:

    default = "main"

    [profiles.main]
    game_dir = 'C:\\Games\\EWR 4.2'
    export_dir = 'D:\\Rosters'
    format = "xlsx"

The roster file itself is always <game_dir>/wrestler.dat.
"""
from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

import click

from ewrconvert.config import EXPORT_EXTENSIONS, derive_dat_path, derive_output_path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


@dataclass
class Profile:
    name: str
    game_dir: Path
    export_dir: Optional[Path] = None
    export_format: str = "xlsx"

    @property
    def dat(self) -> Path:
        return derive_dat_path(self.game_dir)

    def output_path(self, fmt: str, today: date | None = None) -> Path:
        """Export file path; export_dir overrides the folder next to the roster."""
        path = derive_output_path(self.dat, fmt, today)
        if self.export_dir is None:
            return path
        return self.export_dir / path.name


@dataclass
class ProfileStore:
    default: Optional[str] = None
    profiles: dict[str, Profile] = field(default_factory=dict)

    def add(self, profile: Profile, make_default: bool = False) -> None:
        if not _NAME_RE.match(profile.name):
            raise click.BadParameter(
                f"'{profile.name}': use letters, digits, hyphens, underscores",
                param_hint="NAME",
            )
        if profile.export_format not in EXPORT_EXTENSIONS:
            raise click.BadParameter(f"unknown format '{profile.export_format}'")
        self.profiles[profile.name] = profile
        if make_default or self.default is None:
            self.default = profile.name

    def remove(self, name: str) -> Profile:
        profile = self.profiles.pop(name, None)
        if profile is None:
            raise click.UsageError(self._missing(name))
        if self.default == name:
            self.default = next(iter(self.profiles), None)
        return profile

    def get(self, name: Optional[str] = None) -> Profile:
        """Named profile, or the default one when name is None."""
        name = name or self.default
        if name is None:
            raise click.UsageError(
                "No roster given. Pass --dat <path/to/wrestler.dat>, or register "
                "your EWR folder with 'ewrconvert profile add <name> <folder>'."
            )
        if name not in self.profiles:
            raise click.UsageError(self._missing(name))
        return self.profiles[name]

    def _missing(self, name: str) -> str:
        available = ", ".join(self.profiles) or "(none)"
        return f"Profile '{name}' not found. Available profiles: {available}"


def profiles_path() -> Path:
    return Path(click.get_app_dir("ewrconvert")) / "profiles.toml"


def load_profiles() -> ProfileStore:
    """Read the profile file; a missing file is an empty store."""
    path = profiles_path()
    if not path.exists():
        return ProfileStore()

    doc = tomllib.loads(path.read_text(encoding="utf-8"))
    store = ProfileStore(default=doc.get("default"))
    for name, entry in doc.get("profiles", {}).items():
        export_dir = entry.get("export_dir")
        store.profiles[name] = Profile(
            name=name,
            game_dir=Path(entry["game_dir"]),
            export_dir=Path(export_dir) if export_dir else None,
            export_format=entry.get("format", "xlsx"),
        )
    return store


def _toml_path(path: Path) -> str:
    # Literal strings keep Windows backslashes; fall back to a basic string
    # only when the path itself contains a single quote.
    text = str(path)
    if "'" not in text:
        return f"'{text}'"
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def save_profiles(store: ProfileStore) -> Path:
    path = profiles_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    out = [f'default = "{store.default}"'] if store.default else []
    for p in store.profiles.values():
        out += ["", f"[profiles.{p.name}]", f"game_dir = {_toml_path(p.game_dir)}"]
        if p.export_dir is not None:
            out.append(f"export_dir = {_toml_path(p.export_dir)}")
        out.append(f'format = "{p.export_format}"')

    path.write_text("\n".join(out) + "\n", encoding="utf-8")
    return path


def resolve_roster(dat: Optional[Path], profile_name: Optional[str]) -> tuple[Path, Optional[Profile]]:
    """Pick the roster file: --dat wins, else the named or default profile.

    The profile (if one was used) is returned so export can apply its
    defaults.
    """
    if dat is not None:
        if not dat.is_file():
            raise click.UsageError(f"Roster file not found: {dat}")
        return dat, None

    profile = load_profiles().get(profile_name)
    if not profile.dat.is_file():
        raise click.UsageError(
            f"Profile '{profile.name}' points at {profile.game_dir}, "
            f"but {profile.dat.name} is not there."
        )
    return profile.dat, profile
