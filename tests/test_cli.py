import csv
import io
import json

import pytest
from click.testing import CliRunner
from openpyxl import load_workbook

from ewrconvert import profiles
from ewrconvert.cli import cli
from ewrconvert.export.columns import WORKER_COLUMNS


@pytest.fixture(autouse=True)
def isolated_profiles(tmp_path, monkeypatch):
    monkeypatch.setattr(profiles, "profiles_path", lambda: tmp_path / "app" / "profiles.toml")


@pytest.fixture
def runner():
    return CliRunner()


class TestInfo:
    def test_summary(self, runner, dat_file):
        result = runner.invoke(cli, ["--dat", str(dat_file), "info"])

        assert result.exit_code == 0, result.output
        assert "Size:    1,228 bytes" in result.output
        assert "Markers: 3/4 (75%)" in result.output
        assert "Workers: 3 " in result.output

    def test_wrong_file_name(self, runner, tmp_path, roster):
        other = tmp_path / "promos.dat"
        other.write_bytes(roster)

        result = runner.invoke(cli, ["--dat", str(other), "info"])

        assert result.exit_code == 2
        assert 'Only "wrestler.dat" is supported' in result.output

    def test_any_name(self, runner, tmp_path, roster):
        other = tmp_path / "wrestler-backup.dat"
        other.write_bytes(roster)

        result = runner.invoke(cli, ["--dat", str(other), "--any-name", "info"])

        assert result.exit_code == 0, result.output

    def test_no_roster_configured(self, runner):
        result = runner.invoke(cli, ["info"])

        assert result.exit_code == 2
        assert "No roster given" in result.output


class TestPreview:
    def test_table(self, runner, dat_file):
        result = runner.invoke(cli, ["--dat", str(dat_file), "preview"])

        assert result.exit_code == 0, result.output
        assert "Steve Austin" in result.output
        assert "Taka Michinoku" in result.output
        assert "Corrupt" not in result.output

    def test_limit(self, runner, dat_file):
        result = runner.invoke(cli, ["--dat", str(dat_file), "preview", "-n", "1"])

        assert result.exit_code == 0, result.output
        assert "Lita" not in result.output
        assert "... 2 more" in result.output

    def test_not_a_roster(self, runner, tmp_path):
        junk = tmp_path / "wrestler.dat"
        junk.write_bytes(b"\x00" * 1000)

        result = runner.invoke(cli, ["--dat", str(junk), "preview"])

        assert result.exit_code == 1
        assert "Parsed 0 workers" in result.output


def test_diagnostics(runner, dat_file):
    result = runner.invoke(cli, ["--dat", str(dat_file), "diagnostics"])

    assert result.exit_code == 0, result.output
    assert "EWR Converter Diagnostics" in result.output
    assert "Markers valid: 3/4 (75%)" in result.output
    assert "Workers parsed: 3" in result.output


class TestExport:
    def test_xlsx(self, runner, dat_file, tmp_path):
        out = tmp_path / "roster.xlsx"

        result = runner.invoke(cli, ["--dat", str(dat_file), "export", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert "Exported 3 workers" in result.output
        wb = load_workbook(out)
        assert wb.sheetnames == ["Workers", "Schema"]
        assert wb["Workers"].max_row == 4

    def test_default_output_path(self, runner, dat_file):
        result = runner.invoke(cli, ["--dat", str(dat_file), "export", "--format", "csv"])

        assert result.exit_code == 0, result.output
        written = list(dat_file.parent.glob("wrestlers_*.csv"))
        assert len(written) == 1
        rows = list(csv.reader(io.StringIO(written[0].read_text(encoding="utf-8"))))
        assert rows[0] == WORKER_COLUMNS

    def test_json_stdout(self, runner, dat_file):
        result = runner.invoke(cli, ["--dat", str(dat_file), "export", "--format", "json", "--stdout"])

        assert result.exit_code == 0, result.output
        doc = json.loads(result.output)
        assert [w["ID"] for w in doc["workers"]] == [17, 2, 4]

    def test_xlsx_stdout_rejected(self, runner, dat_file):
        result = runner.invoke(cli, ["--dat", str(dat_file), "export", "--stdout"])

        assert result.exit_code == 2


    def test_profile_export_defaults(self, runner, dat_file, tmp_path):
        out_dir = tmp_path / "out"
        runner.invoke(cli, ["profile", "add", "main", str(dat_file.parent),
                            "--export-dir", str(out_dir), "--format", "csv"])

        result = runner.invoke(cli, ["export"])

        assert result.exit_code == 0, result.output
        written = list(out_dir.glob("wrestlers_*.csv"))
        assert len(written) == 1
        assert "Exported 3 workers" in result.output

    def test_format_flag_beats_profile(self, runner, dat_file, tmp_path):
        out_dir = tmp_path / "out"
        runner.invoke(cli, ["profile", "add", "main", str(dat_file.parent),
                            "--export-dir", str(out_dir), "--format", "csv"])

        result = runner.invoke(cli, ["export", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert len(list(out_dir.glob("wrestlers_*.json"))) == 1
        assert not list(out_dir.glob("*.csv"))


class TestProfileCommands:
    def test_add_then_use_as_default(self, runner, dat_file):
        result = runner.invoke(cli, ["profile", "add", "main", str(dat_file.parent)])

        assert result.exit_code == 0, result.output
        assert "Saved profile 'main' (default)" in result.output
        assert profiles.load_profiles().profiles["main"].dat == dat_file

        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0, result.output
        assert "Workers: 3 " in result.output

    def test_add_folder_without_roster(self, runner, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()

        result = runner.invoke(cli, ["profile", "add", "main", str(empty)])

        assert result.exit_code == 2
        assert "No wrestler.dat in" in result.output
        assert profiles.load_profiles().profiles == {}

    def test_list(self, runner, dat_file):
        result = runner.invoke(cli, ["profile", "list"])
        assert "No profiles" in result.output

        runner.invoke(cli, ["profile", "add", "main", str(dat_file.parent)])
        runner.invoke(cli, ["profile", "add", "mod", str(dat_file.parent), "--format", "json"])
        result = runner.invoke(cli, ["profile", "list"])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].startswith("* main")
        assert lines[1].startswith("  mod")
        assert "-> json in" in lines[1]

    def test_use_and_remove(self, runner, dat_file):
        runner.invoke(cli, ["profile", "add", "main", str(dat_file.parent)])
        runner.invoke(cli, ["profile", "add", "mod", str(dat_file.parent)])

        result = runner.invoke(cli, ["profile", "use", "mod"])
        assert result.exit_code == 0, result.output
        assert profiles.load_profiles().default == "mod"

        result = runner.invoke(cli, ["profile", "remove", "mod"])
        assert result.exit_code == 0, result.output
        assert profiles.load_profiles().default == "main"

    def test_use_unknown(self, runner):
        result = runner.invoke(cli, ["profile", "use", "nope"])

        assert result.exit_code == 2
        assert "Profile 'nope' not found" in result.output

    def test_profile_option_selects_profile(self, runner, dat_file, tmp_path):
        gone = tmp_path / "gone"
        gone.mkdir()
        (gone / "wrestler.dat").write_bytes(dat_file.read_bytes())
        runner.invoke(cli, ["profile", "add", "main", str(dat_file.parent)])
        runner.invoke(cli, ["profile", "add", "other", str(gone)])
        (gone / "wrestler.dat").unlink()

        result = runner.invoke(cli, ["-p", "other", "info"])

        assert result.exit_code == 2
        assert "Profile 'other' points at" in result.output
