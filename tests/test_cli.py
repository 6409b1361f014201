# -*- coding: utf-8 -*-
"""Tests for the command line interface."""

import io

import pandas as pd
from click.testing import CliRunner

from retrofield.cli import main

EVENT_FILE = """id,ANA201904040
info,visteam,SEA
info,hometeam,ANA
play,1,0,hanim001,22,BCFBX,S8/G4M
play,1,0,semim001,10,BX,8/F78
play,1,0,smitm002,01,CX,ZZZ
"""


def test_parse():
    result = CliRunner().invoke(main, ["parse", "S8/G4M.2-H;1-3", "SB3;SB2"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("S8/G/4M.2-H;1-3\t")
    assert lines[1].startswith("SB2;SB3\t")


def test_parse_assumes_batter_by_default():
    result = CliRunner().invoke(main, ["parse", "8/F78"])
    assert result.exit_code == 0
    assert result.output.startswith("8(B)/F/78")


def test_parse_strict():
    result = CliRunner().invoke(main, ["parse", "--strict", "8/F78"])
    assert result.exit_code == 1
    assert "1 of 1 fields could not be decoded" in result.output


def test_parse_reports_every_failure():
    result = CliRunner().invoke(main, ["parse", "ZZZ", "S8", "S0"])
    assert result.exit_code == 1
    assert "S8\t" in result.output


def test_table(tmp_path):
    path = tmp_path / "2019ANA.EVA"
    path.write_text(EVENT_FILE)
    result = CliRunner().invoke(main, ["table", str(path)])
    assert result.exit_code == 0
    frame = pd.read_csv(io.StringIO(result.output))
    assert list(frame["EVENT_TX"]) == ["S8/G4M", "8/F78"]


def test_table_to_file(tmp_path):
    path = tmp_path / "2019ANA.EVA"
    path.write_text(EVENT_FILE)
    out = tmp_path / "plays.csv"
    result = CliRunner().invoke(main, ["table", str(path), "-o", str(out)])
    assert result.exit_code == 0
    assert len(pd.read_csv(out)) == 2


def test_table_fail_fast(tmp_path):
    path = tmp_path / "2019ANA.EVA"
    path.write_text(EVENT_FILE)
    result = CliRunner().invoke(main, ["table", "--fail-fast", str(path)])
    assert result.exit_code == 1
    assert "ZZZ" in result.output
