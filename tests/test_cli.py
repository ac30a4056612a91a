"""Smoke tests for the command-line front end (cli.py)."""

import io

import pytest
from greek_ime.cli import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Keep a stray greek_ime.toml in the repo from leaking into tests."""
    monkeypatch.chdir(tmp_path)


def test_text_flag(capsys):
    main(["--text", "lo/goj"])
    assert capsys.readouterr().out == "\u03bb\u03cc\u03b3\u03bf\u03c2\n"


def test_reads_stdin_line_by_line(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a)\n\\a\n"))
    main([])
    assert capsys.readouterr().out == "\u1f00\na\n"


def test_pending_keys_flushed_at_end_of_each_line(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\na)\n"))
    main([])
    assert capsys.readouterr().out.splitlines() == ["\u03b1", "\u1f00"]


def test_lookup(capsys):
    main(["--lookup", "a)"])
    assert capsys.readouterr().out == "'a)': exact-and-extendable -> \u1f00\n"


def test_lookup_prefix_only(capsys):
    main(["--lookup", "|"])
    assert capsys.readouterr().out == "'|': prefix-only\n"


def test_summary(capsys):
    main(["--summary"])
    out = capsys.readouterr().out
    assert "Rule table" in out
    assert "Longest key:    4" in out


def test_list(capsys):
    main(["--list"])
    out = capsys.readouterr().out
    assert "a)/|" in out
    assert "\u1f84" in out


def test_escape_flag_disables_marker(capsys):
    main(["--escape", "", "--text", "\\a"])
    assert capsys.readouterr().out == "\\\u03b1\n"


def test_escape_flag_custom_marker(capsys):
    main(["--escape", "#", "--text", "#aa"])
    assert capsys.readouterr().out == "a\u03b1\n"


def test_escape_flag_too_long():
    with pytest.raises(SystemExit) as exc:
        main(["--escape", "##", "--text", "a"])
    assert exc.value.code == 2


def test_escape_clashing_with_table_is_reported():
    with pytest.raises(SystemExit) as exc:
        main(["--escape", "a", "--text", "a"])
    assert exc.value.code == 2


def test_config_file(tmp_path, capsys):
    cfg = tmp_path / "my.toml"
    cfg.write_text('[matcher]\nescape = "#"\n', encoding="utf-8")
    main(["--config", str(cfg), "--text", "#a\\"])
    assert capsys.readouterr().out == "a\\\n"


def test_missing_config_file_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "missing.toml"), "--text", "a"])
    assert exc.value.code == 2


def test_invalid_config_is_usage_error(tmp_path):
    cfg = tmp_path / "bad.toml"
    cfg.write_text('[logging]\nlevel = "shouting"\n', encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg), "--text", "a"])
    assert exc.value.code == 2


def test_each_line_is_its_own_session(capsys, monkeypatch):
    """A line ending on a pending key does not combine with the next line."""
    monkeypatch.setattr("sys.stdin", io.StringIO("a\n)\n"))
    main([])
    assert capsys.readouterr().out.splitlines() == ["α", ")"]


def test_remember_is_not_a_config_setting(tmp_path):
    cfg = tmp_path / "mem.toml"
    cfg.write_text("[matcher]\nremember = true\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg), "--text", "a"])
    assert exc.value.code == 2
