"""Click CLI for the EWR wrestler.dat converter."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import click

from ewrconvert.config import (
    DEFAULT_DAT_NAME,
    EXPORT_EXTENSIONS,
    PREVIEW_LIMIT,
    SCHEMA_VERSION,
    derive_output_path,
    is_supported_dat_name,
)
from ewrconvert.dat.reader import DatReader
from ewrconvert.dat.records import Worker
from ewrconvert.profiles import Profile, load_profiles, resolve_roster, save_profiles

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FORMATS = list(EXPORT_EXTENSIONS)


class Context:
    """Lazily resolves the roster from --dat or a profile."""

    def __init__(self, dat: Path | None = None, profile: str | None = None,
                 any_name: bool = False):
        self._explicit_dat = dat
        self._profile_name = profile
        self._any_name = any_name
        self._reader: DatReader | None = None
        self.profile: Profile | None = None

    @property
    def dat(self) -> Path:
        return self.reader.path

    @property
    def reader(self) -> DatReader:
        if self._reader is None:
            path, self.profile = resolve_roster(self._explicit_dat, self._profile_name)
            if not self._any_name and not is_supported_dat_name(path):
                raise click.UsageError(
                    f'Only "{DEFAULT_DAT_NAME}" is supported (got "{path.name}"). '
                    "Pass --any-name to convert a renamed copy."
                )
            self._reader = DatReader(path)
        return self._reader

    def load_workers(self) -> list[Worker]:
        """Parse the roster; an empty result is reported as a user error."""
        workers = self.reader.parse_all()
        if not workers:
            raise click.ClickException(
                f"Parsed 0 workers. This usually means the file is not a valid {DEFAULT_DAT_NAME}."
            )
        return workers

    def output_path(self, fmt: str) -> Path:
        if self.profile is not None:
            return self.profile.output_path(fmt)
        return derive_output_path(self.dat, fmt)


pass_ctx = click.make_pass_decorator(Context)


@click.group()
@click.option(
    "--dat", required=False, default=None,
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    help="Path to wrestler.dat (overrides profiles)",
)
@click.option(
    "--profile", "-p", default=None, type=str,
    help="Profile to use instead of the default one",
)
@click.option("--any-name", is_flag=True, help="Accept roster files not named wrestler.dat")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="ewrconvert")
@click.pass_context
def cli(ctx, dat: Optional[Path], profile: Optional[str], any_name: bool, verbose: bool):
    """ewrconvert - EWR 4.2 wrestler.dat converter.

    Decode the roster file, preview workers, and export them to
    a spreadsheet, CSV or JSON.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    ctx.obj = Context(dat=dat, profile=profile, any_name=any_name)


@cli.group("profile")
def profile_group():
    """Manage EWR install folders and their export defaults."""


@profile_group.command("add")
@click.argument("name")
@click.argument("game_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--export-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Where exports go (default: the EWR folder)")
@click.option("--format", "fmt", type=click.Choice(FORMATS), default="xlsx", show_default=True,
              help="Default export format")
@click.option("--default", "make_default", is_flag=True, help="Make this the default profile")
def profile_add(name: str, game_dir: Path, export_dir: Optional[Path], fmt: str,
                make_default: bool):
    """Register an EWR folder containing wrestler.dat."""
    profile = Profile(name=name, game_dir=game_dir, export_dir=export_dir, export_format=fmt)
    if not profile.dat.is_file():
        raise click.UsageError(f"No {DEFAULT_DAT_NAME} in {game_dir}")

    store = load_profiles()
    store.add(profile, make_default=make_default)
    path = save_profiles(store)
    marker = " (default)" if store.default == name else ""
    click.echo(f"Saved profile '{name}'{marker} to {path}")


@profile_group.command("list")
def profile_list():
    """List profiles."""
    store = load_profiles()
    if not store.profiles:
        click.echo("No profiles. Add one with 'ewrconvert profile add <name> <EWR folder>'.")
        return
    for p in store.profiles.values():
        marker = "*" if p.name == store.default else " "
        target = p.export_dir or p.game_dir
        click.echo(f"{marker} {p.name:<16} {p.game_dir}  -> {p.export_format} in {target}")


@profile_group.command("use")
@click.argument("name")
def profile_use(name: str):
    """Make NAME the default profile."""
    store = load_profiles()
    store.default = store.get(name).name
    save_profiles(store)
    click.echo(f"Default profile: {name}")


@profile_group.command("remove")
@click.argument("name")
def profile_remove(name: str):
    """Forget a profile (the EWR folder is untouched)."""
    store = load_profiles()
    store.remove(name)
    save_profiles(store)
    click.echo(f"Removed profile '{name}'")


@cli.command()
@pass_ctx
def info(ctx: Context):
    """Show file size, marker validity and worker count."""
    reader = ctx.reader
    click.echo(f"File:    {reader.path}")
    click.echo(f"Size:    {reader.file_size:,} bytes")
    click.echo(f"Markers: {reader.marker_stats()}")

    t0 = time.perf_counter()
    workers = reader.parse_all()
    click.echo(f"Workers: {len(workers):,} ({time.perf_counter() - t0:.3f}s)")


@cli.command()
@click.option("--limit", "-n", type=int, default=PREVIEW_LIMIT, show_default=True,
              help="Number of workers to show")
@pass_ctx
def preview(ctx: Context, limit: int):
    """Print a table of the first workers with labeled fields."""
    from ewrconvert.report import PREVIEW_HEADERS, format_table, preview_rows

    workers = ctx.load_workers()
    click.echo(format_table(PREVIEW_HEADERS, preview_rows(workers, limit)))
    if len(workers) > limit:
        click.echo(f"\n... {len(workers) - limit:,} more")


@cli.command()
@pass_ctx
def diagnostics(ctx: Context):
    """Print a diagnostics block for bug reports."""
    from ewrconvert.report import diagnostics_text

    reader = ctx.reader
    click.echo(diagnostics_text(
        schema_version=SCHEMA_VERSION,
        file_path=reader.path,
        file_size=reader.file_size,
        marker_stats=reader.marker_stats(),
        worker_count=len(reader.parse_all()),
    ))


@cli.command()
@click.option("--format", "fmt", type=click.Choice(FORMATS), default=None,
              help="Export format (default: the profile's, else xlsx)")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Output file (default: wrestlers_<date> in the profile's export folder "
                   "or next to the roster)")
@click.option("--stdout", "to_stdout", is_flag=True, help="Write CSV/JSON to stdout instead of a file")
@pass_ctx
def export(ctx: Context, fmt: Optional[str], output: Optional[Path], to_stdout: bool):
    """Export workers as XLSX, CSV or JSON."""
    workers = ctx.load_workers()
    if fmt is None:
        fmt = ctx.profile.export_format if ctx.profile else "xlsx"
    if to_stdout and fmt == "xlsx":
        raise click.UsageError("--stdout is only available for csv and json.")

    path = output or ctx.output_path(fmt)
    if fmt == "xlsx":
        from ewrconvert.export.xlsx_export import export_xlsx
        path.parent.mkdir(parents=True, exist_ok=True)
        export_xlsx(workers, path)
        click.echo(f"Exported {len(workers):,} workers to {path}")
        return

    if fmt == "csv":
        from ewrconvert.export.csv_export import export_csv
        data = export_csv(workers)
    else:
        from ewrconvert.export.json_export import export_json
        data = export_json(workers)

    if to_stdout:
        click.echo(data, nl=False)
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding="utf-8", newline="")
    click.echo(f"Exported {len(workers):,} workers to {path}")


def main():
    cli()


if __name__ == "__main__":
    main()
