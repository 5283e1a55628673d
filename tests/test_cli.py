# tests/test_cli.py

import json

import pytest

from salat import cli

JAKARTA = ["--lat=-6.2", "--lon=106.8", "--tz=7", "--method=Kemenag"]


def test_show_json(capsys):
    rc = cli.main(["show", *JAKARTA, "--date=2024-03-15", "--json"])
    out = json.loads(capsys.readouterr().out)

    assert rc == 0
    assert out["date"] == "2024-03-15"
    assert out["Subuh"].startswith("2024-03-15T04:")
    assert out["Imsak"].endswith("+07:00")


def test_show_table(capsys):
    assert cli.main(["show", *JAKARTA, "--date=2024-03-15"]) == 0
    out = capsys.readouterr().out
    assert "UTC+07:00" in out
    for name in ("Imsak", "Subuh", "Dzuhur", "Ashar", "Maghrib", "Isya"):
        assert name in out


def test_now_and_next(capsys):
    assert cli.main(["now", *JAKARTA, "--at=2024-03-15T13:00:00"]) == 0
    out = capsys.readouterr().out
    assert "Active: ☀️ Dzuhur" in out
    assert "Next:" in out and "Ashar" in out

    assert cli.main(["next", *JAKARTA, "--at=2024-03-15T23:00:00"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Imsak (tomorrow)")


def test_now_before_imsak(capsys):
    assert cli.main(["now", *JAKARTA, "--at=2024-03-15T01:00:00"]) == 0
    assert "Active: none" in capsys.readouterr().out


def test_methods(capsys):
    assert cli.main(["methods"]) == 0
    out = capsys.readouterr().out
    assert "Makkah" in out and "90 min" in out
    assert len(out.strip().splitlines()) == 9


def test_solar(capsys):
    assert cli.main(["solar", *JAKARTA, "--date=2024-03-15"]) == 0
    out = capsys.readouterr().out
    assert "JD   = 2460384.500000" in out
    assert "sunrise" in out


def test_invalid_geometry_exit_code(capsys):
    rc = cli.main(["show", "--lat=80", "--lon=15", "--tz=1", "--date=2024-06-21"])
    assert rc == 2
    assert "sun never reaches" in capsys.readouterr().err


def test_annual_table(capsys):
    rc = cli.main(["diag", "annual-table", "--year=2024", *JAKARTA, "--every=30"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert rc == 0
    assert lines[0].split()[0] == "date"
    assert lines[1].startswith("2024-01-01")
    assert len(lines) == 1 + 13  # 366 days, every 30th


def test_missing_location_is_usage_error():
    with pytest.raises(SystemExit):
        cli.main(["show", "--tz=7"])
