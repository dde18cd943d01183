from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from pyvms.cli import build_parser, main
from pyvms.codec import encode_vehicles
from pyvms.models.vehicle import Car, Truck


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("VMS_DATA_FILE", "VMS_LOG_LEVEL", "VMS_CLEAR_SCREEN", "VMS_PAUSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "vehicles.json"
    path.write_text(
        encode_vehicles([Car(id="c1", make="Toyota"), Truck(id="t1", make="Ford")]),
        encoding="utf-8",
    )
    return path


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.command == "shell"
    assert args.type is None
    assert args.no_clear is False


def test_list_empty(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "new" / "vehicles.json"
    assert main(["list", "--data-file", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "No vehicles found."
    assert path.read_text(encoding="utf-8") == "[]"


def test_list_all(data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list", "--data-file", str(data_file)]) == 0
    out = capsys.readouterr().out
    assert "CARS" in out
    assert "TRUCKS" in out
    assert "| Toyota " in out
    assert "| Ford " in out


def test_list_by_type(data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list", "--type", "truck", "--data-file", str(data_file)]) == 0
    out = capsys.readouterr().out
    assert "TRUCKS" in out
    assert "CARS" not in out


def test_bad_log_level(data_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["list", "--data-file", str(data_file), "--log-level", "chatty"])
    assert exc_info.value.code == 2


def test_shell(data_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main(["--data-file", str(data_file), "--no-clear", "--no-pause"]) == 0
    assert "Goodbye!" in capsys.readouterr().out
