"""Tests for the command line entry point."""

import json
import sys

import pytest

import analyze
from app.container import container


def run(monkeypatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["analyze.py", *args])
    return analyze.main()


class TestMain:
    def test_default(self, monkeypatch, capsys):
        assert run(monkeypatch) == 0
        out = capsys.readouterr().out
        assert "SEAT ALLOCATION (150 seats" in out
        assert "majority 76" in out

    def test_invalid_range(self, monkeypatch):
        assert run(monkeypatch, "--max-size", "9") == 2

    def test_invalid_seats(self, monkeypatch):
        assert run(monkeypatch, "--seats", "0") == 2

    def test_validation_fails_on_published_seats(self, monkeypatch, capsys):
        assert run(monkeypatch, "--validate") == 1
        assert "PVV: expected 37, got 29" in capsys.readouterr().out

    def test_help(self, monkeypatch, capsys):
        assert run(monkeypatch, "--help") == 0
        assert "Usage" in capsys.readouterr().out

    def test_missing_value(self, monkeypatch):
        with pytest.raises(SystemExit):
            run(monkeypatch, "--seats")

    def test_own_catalog(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "parties.json"
        path.write_text(
            json.dumps(
                {
                    "totalSeats": 10,
                    "parties": [
                        {"id": "A", "displayName": "Alpha", "ideologicalVector": [-2, 1], "votes": 600},
                        {"id": "B", "displayName": "Beta", "ideologicalVector": [1, 0], "votes": 300},
                        {"id": "C", "displayName": "Gamma", "ideologicalVector": [3, -1], "votes": 100},
                    ],
                }
            ),
            encoding="utf-8",
        )
        try:
            assert run(monkeypatch, "--catalog", str(path)) == 0
            out = capsys.readouterr().out
            assert "SEAT ALLOCATION (10 seats, 1,000 votes)" in out
            assert "majority 6" in out
            assert "Scenarios:" not in out
        finally:
            container.reset()
            container.init()

    def test_default_after_own_catalog(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "parties.json"
        parties = [{"id": pid, "displayName": pid, "ideologicalVector": [0], "votes": 1} for pid in "AB"]
        path.write_text(json.dumps({"parties": parties}), encoding="utf-8")
        assert run(monkeypatch, "--catalog", str(path)) == 0
        capsys.readouterr()
        assert run(monkeypatch) == 0
        assert "SEAT ALLOCATION (150 seats" in capsys.readouterr().out

    def test_missing_catalog_file(self, monkeypatch, tmp_path):
        assert run(monkeypatch, "--catalog", str(tmp_path / "absent.json")) == 2
