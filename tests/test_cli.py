from __future__ import annotations

import io
from pathlib import Path

import pytest

from montana_counties.cli import Prompter, main


class ScriptedInput:
    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def build_prompter(*answers: str) -> Prompter:
    return Prompter(ScriptedInput(*answers), out=io.StringIO(), err=io.StringIO())


def test_codes_lookup_session(codes_csv: Path):
    prompter = build_prompter("", "abc", "999", "56", "x", "b", "q")

    status = main(["codes", "--data", str(codes_csv)], prompter=prompter)

    out = prompter.out.getvalue()
    err = prompter.err.getvalue()
    assert status == 0
    assert "Please enter some text" in out
    assert "Invalid view mode" in out
    assert "Information for county number 56: " in out
    assert "County: Yellowstone" in out
    assert "County Seat: Billings" in out
    assert "Invalid input, please enter a number from 1-56." in err
    assert "Invalid county code, please enter a number from 1-56" in err


def test_cities_lookup_adds_unknown_city(cities_csv: Path):
    prompter = build_prompter(
        "b",
        "anaconda",
        "y",
        "l",
        "atlantis",
        "SILVER bow",
        "Anaconda",
        "q",
    )

    status = main(["cities", "--data", str(cities_csv)], prompter=prompter)

    out = prompter.out.getvalue()
    assert status == 0
    assert "The database doesn't have records for Anaconda" in out
    assert "Cascade\nSilver Bow\n" in out
    assert "atlantis is not a county in Montana" in out
    assert "Successfully added Anaconda to the database" in out
    assert "County: Silver Bow\nLicense Plate Prefix: 1" in out
    assert cities_csv.read_text(encoding="utf-8").splitlines()[-1] == "Silver Bow,Anaconda,1"


def test_cities_lookup_declines_add(cities_csv: Path):
    before = cities_csv.read_text(encoding="utf-8")
    prompter = build_prompter("l", "helena", "maybe", "n", "belt", "q")

    status = main(["cities", "--data", str(cities_csv)], prompter=prompter)

    out = prompter.out.getvalue()
    assert status == 0
    assert "Invalid option, please enter y or n." in out
    assert "License Plate Prefix: 2" in out
    assert cities_csv.read_text(encoding="utf-8") == before


def test_cities_rejects_unknown_view_mode_then_quits(cities_csv: Path):
    prompter = build_prompter("z", "q")

    assert main(["cities", "--data", str(cities_csv)], prompter=prompter) == 0
    assert "Invalid view mode: z" in prompter.out.getvalue()


def test_missing_dataset_exits_with_error(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    prompter = build_prompter()

    status = main(["codes", "--data", str(tmp_path / "missing.csv")], prompter=prompter)

    assert status == 1
    assert "Error reading file" in caplog.text


def test_malformed_dataset_exits_unless_skipped(tmp_path: Path):
    path = tmp_path / "codes.csv"
    path.write_text("Yellowstone,Billings,56\nBroken\n", encoding="utf-8")

    assert main(["codes", "--data", str(path)], prompter=build_prompter()) == 1
    assert main(["codes", "--data", str(path), "--skip-malformed"], prompter=build_prompter("56", "n")) == 0


def test_unknown_encoding_exits_with_error(cities_csv: Path, caplog: pytest.LogCaptureFixture):
    status = main(["cities", "--data", str(cities_csv), "--encoding", "nope"], prompter=build_prompter())

    assert status == 1
    assert "Unknown encoding: nope" in caplog.text
