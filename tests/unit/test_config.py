from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

import mdshell.config as config_mod
from mdshell.config import display_width, snapshot_path, working_directory


def test_snapshot_path_default(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_mod.Path, "home", staticmethod(lambda: tmp_path))
    assert snapshot_path() == tmp_path / ".mdshell" / "snapshot.json"


def test_snapshot_path_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MDSHELL_SNAPSHOT", str(tmp_path / "cluster.json"))
    assert snapshot_path() == tmp_path / "cluster.json"


def test_working_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    assert working_directory() == "/"
    monkeypatch.setenv("MDSHELL_CWD", "/topics")
    assert working_directory() == "/topics"


def test_width_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MDSHELL_WIDTH", "57")
    assert display_width() == 57


def test_width_zero_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MDSHELL_WIDTH", "0")
    assert display_width() == 0


@pytest.mark.parametrize("raw", ["wide", "-3"])
def test_invalid_width_env_ignored(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    monkeypatch.setenv("MDSHELL_WIDTH", raw)
    monkeypatch.setattr(config_mod, "_stdout_is_tty", lambda: False)
    with caplog.at_level(logging.WARNING, logger="mdshell.config"):
        assert display_width() is None
    assert "MDSHELL_WIDTH" in caplog.text


def test_width_absent_when_not_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_mod, "_stdout_is_tty", lambda: False)
    assert display_width() is None


def test_width_from_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_mod, "_stdout_is_tty", lambda: True)
    monkeypatch.setattr(
        config_mod.shutil, "get_terminal_size", lambda: os.terminal_size((123, 40))
    )
    assert display_width() == 123
