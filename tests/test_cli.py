"""
Tests for the command line entry point.
"""

import pytest

from setcal import main


def write(tmp_path, text):
    path = tmp_path / "program.txt"
    path.write_text(text)
    return str(path)


def test_main_prints_listing(tmp_path, capsys):
    main(["-i", write(tmp_path, "U a b c\nS a b\nS b c\nC union 2 3\n")])
    out = capsys.readouterr().out
    assert out.splitlines() == ["U a b c", "S a b", "S b c", "S a b c"]


def test_main_writes_output_file(tmp_path, capsys):
    output = tmp_path / "out.txt"
    main(["-i", write(tmp_path, "U a b\nR a a b b\nC reflexive 2\n"),
          "-o", str(output), "-d"])
    assert output.read_text() == "U a b\nR a a b b\ntrue\n"
    assert capsys.readouterr().out == ""


def test_main_exits_on_violation(tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        main(["-i", write(tmp_path, "U a\nC empty 1\n")])
    assert e.value.code == 1
    assert capsys.readouterr().out == ""


def test_main_exits_on_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        main(["-i", str(tmp_path / "missing.txt")])
    assert e.value.code == 1
    assert capsys.readouterr().out == ""
