"""Tests for the command-line entry point."""

import json

import pandas as pd
import pytest

from festivos.src.cli import main


class TestYearListing:
    def test_table(self, capsys):
        main(["--year", "2010"])
        out = capsys.readouterr().out
        assert "Festivos en Colombia 2010:" in out
        assert "2010-01-11  [2]  Reyes Magos" in out
        assert "Total: 18" in out

    def test_json(self, capsys):
        main(["--year", "2010", "--format", "json"])
        holidays = json.loads(capsys.readouterr().out)
        assert len(holidays) == 18
        assert holidays[0] == {"date": "2010-01-01T00:00:00.000-05:00", "type": 1, "name": "Año Nuevo"}

    def test_json_offset(self, capsys):
        main(["--year", "2010", "--format", "json", "--offset", "+00:00"])
        holidays = json.loads(capsys.readouterr().out)
        assert holidays[0]["date"].endswith("+00:00")

    def test_csv_stdout(self, capsys):
        main(["--year", "2010", "--format", "csv"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "date,type,name,year"
        assert len(lines) == 19

    def test_csv_file(self, tmp_path, capsys):
        cfg = tmp_path / "config.yaml"
        target = tmp_path / "festivos.csv"
        cfg.write_text(f"output:\n  format: csv\n  csv_path: {target}\n")
        main(["--year", "2010", "--config", str(cfg)])
        assert "Saved 18 holidays" in capsys.readouterr().out
        assert len(pd.read_csv(target)) == 18

    def test_csv_does_not_build_dicts(self, capsys, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("dict listing not needed for csv")

        monkeypatch.setattr("festivos.src.cli.get_all_holidays", fail)
        main(["--year", "2010", "--format", "csv"])
        assert len(capsys.readouterr().out.splitlines()) == 19

    def test_invalid_year(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--year", "1983"])
        assert exc.value.code == 2
        assert "Invalid year" in capsys.readouterr().err


class TestDateLookup:
    def test_holiday(self, capsys):
        main(["--date", "2010-01-01"])
        assert capsys.readouterr().out.strip() == "2010-01-01: Año Nuevo"

    def test_working_day(self, capsys):
        main(["--date", "2010-01-02"])
        assert "no es festivo" in capsys.readouterr().out

    def test_json(self, capsys):
        main(["--date", "2010-06-07", "--format", "json"])
        assert json.loads(capsys.readouterr().out) == {"date": "2010-06-07", "name": "Corpus Christi"}

    def test_bad_offset(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--date", "2010-01-01", "--offset", "bogota"])
        assert exc.value.code == 2

    def test_empty_offset_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--date", "2010-01-01", "--offset="])
        assert exc.value.code == 2
        assert "Invalid UTC offset" in capsys.readouterr().err
