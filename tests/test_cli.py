import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from blparse import bl_cli
from blparse.bl_ast import StatementKind
from blparse.bl_errors import BLSyntaxError

SOURCE = "WHILE next-is-empty DO move END WHILE"
PRETTY = "WHILE next-is-empty DO\n    move\nEND WHILE\n"


def test_run_bl_string_input_prints(capsys: pytest.CaptureFixture[str]) -> None:
    tree = bl_cli.run_bl(SOURCE, is_string=True)
    assert tree.kind is StatementKind.WHILE
    assert capsys.readouterr().out == PRETTY


def test_run_bl_file_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "prog.bl"
    path.write_text("# comment\n" + SOURCE + "\n")
    bl_cli.run_bl(str(path))
    assert capsys.readouterr().out == PRETTY


def test_run_bl_rejects_other_extensions(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match=r"Only \.bl files"):
        bl_cli.run_bl(str(tmp_path / "prog.txt"))


def test_run_bl_block_mode(capsys: pytest.CaptureFixture[str]) -> None:
    tree = bl_cli.run_bl("move turnleft move", is_string=True, block=True)
    assert tree.length_of_block() == 3
    assert capsys.readouterr().out == "move\nturnleft\nmove\n"


def test_run_bl_json_to_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "tree.json"
    bl_cli.run_bl(SOURCE, is_string=True, target="json", out=str(out))
    assert capsys.readouterr().out == ""
    data = json.loads(out.read_text())
    assert data["kind"] == "while"
    assert data["condition"] == "next-is-empty"


def test_run_bl_warns_on_leftover_tokens(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="blparse.bl_cli"):
        bl_cli.run_bl("move jump", is_string=True)
    assert "1 token(s) left unparsed, starting at 'jump'" in caplog.text


def test_run_bl_propagates_syntax_error() -> None:
    with pytest.raises(BLSyntaxError, match="Expected DO"):
        bl_cli.run_bl("WHILE true move END WHILE", is_string=True)


def test_main_string_source(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["blparse", "-s", SOURCE])
    bl_cli.main()
    assert capsys.readouterr().out == PRETTY


def test_main_syntax_error_exits_1(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(sys, "argv", ["blparse", "-s", "IF true THEN move END"])
    with pytest.raises(SystemExit) as exc:
        bl_cli.main()
    assert exc.value.code == 1
    assert "Error: Expected IF" in caplog.text


def test_main_missing_file_exits_2(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(sys, "argv", ["blparse", str(tmp_path / "missing.bl")])
    with pytest.raises(SystemExit) as exc:
        bl_cli.main()
    assert exc.value.code == 2
    assert "Error:" in caplog.text


def test_main_prompts_for_file_name(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "prog.bl"
    path.write_text("turnright")
    monkeypatch.setattr(sys, "argv", ["blparse"])
    monkeypatch.setattr("builtins.input", lambda prompt: f" {path} ")
    bl_cli.main()
    assert capsys.readouterr().out == "turnright\n"


def test_cli_subprocess_block_json(tmp_path: Path) -> None:
    path = tmp_path / "prog.bl"
    path.write_text("IF random THEN move ELSE turnleft END IF\nskip\n")
    env = {**os.environ, "PYTHONPATH": str(Path(bl_cli.__file__).parents[1])}
    result = subprocess.run(
        [sys.executable, "-m", "blparse.bl_cli", str(path), "-b", "-f", "json"],
        capture_output=True,
        text=True,
        check=True,
        env=env,
    )
    data = json.loads(result.stdout)
    assert [c["kind"] for c in data["children"]] == ["if_else", "call"]
    assert "Parsing input" in result.stderr


def test_main_deep_nesting_exits_1(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    source = "WHILE true DO " * 400 + "move" + " END WHILE" * 400
    monkeypatch.setattr(sys, "argv", ["blparse", "-s", source])
    with pytest.raises(SystemExit) as exc:
        bl_cli.main()
    assert exc.value.code == 1
    assert "Error: Statements nested too deeply" in caplog.text


@pytest.mark.parametrize("interrupt", [EOFError, KeyboardInterrupt])  # type: ignore[misc]
def test_main_prompt_without_answer_exits_2(
    interrupt: type[BaseException],
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def no_answer(prompt: str) -> str:
        raise interrupt()

    monkeypatch.setattr(sys, "argv", ["blparse"])
    monkeypatch.setattr("builtins.input", no_answer)
    with pytest.raises(SystemExit) as exc:
        bl_cli.main()
    assert exc.value.code == 2
    assert "Error: no file name given" in caplog.text
