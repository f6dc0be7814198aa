"""The console entry point wires the container and runs the app."""

from pathlib import Path

import pytest

from check_typo.__main__ import main


def test_list_rules(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--list-rules"])
    assert excinfo.value.code == 0
    assert "missing-header" in capsys.readouterr().out


def test_explicit_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "a.ml"
    path.write_bytes(b"x")
    with pytest.raises(SystemExit) as excinfo:
        main(["-missing-header", str(path)])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == f"{path}:1.1: [missing-lf] missing linefeed at EOF\n"


def test_unknown_rule(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-no-such-rule", "."])
    assert excinfo.value.code == 2
