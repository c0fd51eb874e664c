#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
CLI tests ▸ gpt_edit.cli.main
===============================================================================

`main()` is driven in‑process with the git backend and OpenAI client factory
monkeypatched, so argument parsing, wiring and exit codes are checked without
a repository or network access.
"""
from __future__ import annotations

import importlib
import io
from pathlib import Path

import pytest

import gpt_edit.cli as cli
from gpt_edit import get_version


@pytest.fixture
def wired(monkeypatch, make_vcs, make_client):
    """
    Patch GitOps / create_client in the CLI module; returns a dict the test
    fills with the fakes to use.
    """
    state = {"vcs": make_vcs(tracked=True), "client": make_client(["REVISED"]), "configs": []}

    def fake_create_client(config):
        state["configs"].append(config)
        return state["client"]

    monkeypatch.setattr(cli, "GitOps", lambda cwd: state["vcs"])
    monkeypatch.setattr(cli, "create_client", fake_create_client)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    for var in ("GPT_EDIT_API_KEY", "GPT_EDIT_BASE_URL", "GPT_EDIT_API_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    return state


def _target(tmp_path: Path) -> Path:
    p = tmp_path / "notes.txt"
    p.write_text("old text", encoding="utf-8")
    return p


def test_happy_path_writes_and_stages(tmp_path, wired) -> None:
    path = _target(tmp_path)
    rc = cli.main([str(path), "uppercase it"])

    assert rc == 0
    assert path.read_text(encoding="utf-8") == "REVISED\n"
    assert wired["vcs"].staged == [path]
    assert wired["client"].calls[0]["model"] == cli.DEFAULT_MODEL


def test_model_and_no_patch_flags(tmp_path, wired) -> None:
    path = _target(tmp_path)
    rc = cli.main([str(path), "p", "-m", "gpt-4o", "-n"])

    assert rc == 0
    assert wired["client"].calls[0]["model"] == "gpt-4o"
    assert wired["vcs"].staged == []


def test_long_flags(tmp_path, wired) -> None:
    path = _target(tmp_path)
    assert cli.main(["--model", "m2", "--no-patch", str(path), "p"]) == 0
    assert wired["client"].calls[0]["model"] == "m2"
    assert wired["vcs"].staged == []


@pytest.mark.parametrize("env_value", [None, ""], ids=["unset", "empty"])
def test_default_model_is_gpt_4o_mini(env_value, monkeypatch) -> None:
    if env_value is None:
        monkeypatch.delenv("GPT_EDIT_MODEL", raising=False)
    else:
        monkeypatch.setenv("GPT_EDIT_MODEL", env_value)
    try:
        importlib.reload(cli)
        args = cli._parser().parse_args(["f.txt", "p"])
        assert args.model == "gpt-4o-mini"
        assert args.no_patch is False
    finally:
        monkeypatch.undo()
        importlib.reload(cli)


@pytest.mark.parametrize("argv", [[], ["only-a-file.txt"]])
def test_missing_positionals_is_usage_error(argv, wired, capsys) -> None:
    assert cli.main(argv) == 2
    assert "usage: gpt-edit" in capsys.readouterr().err


def test_version_flag(capsys) -> None:
    assert cli.main(["--version"]) == 0
    assert get_version() in capsys.readouterr().out


def test_declined_untracked_exits_zero_without_credentials(tmp_path, wired, make_vcs, monkeypatch) -> None:
    path = _target(tmp_path)
    wired["vcs"] = make_vcs(tracked=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("no\n"))

    assert cli.main([str(path), "p"]) == 0
    assert wired["configs"] == []
    assert path.read_text(encoding="utf-8") == "old text"


def test_missing_file_is_fatal(tmp_path, wired) -> None:
    assert cli.main([str(tmp_path / "absent.txt"), "p"]) == 1


def test_empty_choices_is_fatal_and_file_kept(tmp_path, wired, make_client) -> None:
    path = _target(tmp_path)
    wired["client"] = make_client([])

    assert cli.main([str(path), "p"]) == 1
    assert path.read_text(encoding="utf-8") == "old text"


def test_transport_failure_is_fatal(tmp_path, wired, make_client) -> None:
    path = _target(tmp_path)
    wired["client"] = make_client(error=TimeoutError("timed out"))
    assert cli.main([str(path), "p"]) == 1


def test_config_from_env_reaches_client_factory(tmp_path, wired, monkeypatch) -> None:
    path = _target(tmp_path)
    monkeypatch.setenv("OPENAI_BASE_URL", "http://proxy.local/v1")
    monkeypatch.setenv("GPT_EDIT_API_TIMEOUT", "30")

    assert cli.main([str(path), "p", "-n"]) == 0
    (config,) = wired["configs"]
    assert config.api_key == "sk-test"
    assert config.base_url == "http://proxy.local/v1"
    assert wired["client"].calls[0]["timeout"] == 30.0


def test_invalid_timeout_is_fatal(tmp_path, wired, monkeypatch) -> None:
    monkeypatch.setenv("GPT_EDIT_API_TIMEOUT", "soon")
    assert cli.main([str(_target(tmp_path)), "p"]) == 1
