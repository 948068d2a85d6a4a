#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import textwrap

import pytest

import simmath
from simmath import cli


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def box_script(tmp_path):
    path = tmp_path / "bounds.py"
    path.write_text(
        textwrap.dedent(
            """
            Box = SIMMATH_ENV["Box"]
            total = Box(0, 0, 0, 1, 1, 1) + Box(2, 2, 2, 3, 3, 3)
            RESULT = str(total)
            """
        )
    )
    return path


def test_setup_environment():
    env = cli.setup_environment()
    assert env["Box"] is simmath.Box
    assert env["Vector3r"] is simmath.Vector3r
    assert env["version"] == simmath.__version__


def test_run_script_injects_environment(box_script):
    module = cli.run_script(str(box_script), cli.setup_environment())
    assert module.RESULT == "Min[0 0 0] Max[3 3 3]"


def test_run_script_reraises(tmp_path):
    path = tmp_path / "broken.py"
    path.write_text("raise RuntimeError('boom')\n")
    with pytest.raises(RuntimeError, match="boom"):
        cli.run_script(str(path), cli.setup_environment())


def test_main_runs_script_with_log_level(box_script, monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "run_script", lambda path, env: calls.append(path))
    cli.main([str(box_script), "--log-level", "DEBUG"])
    assert calls == [str(box_script)]
    assert logging.getLogger().getEffectiveLevel() == logging.DEBUG


def test_main_without_script_starts_shell(monkeypatch):
    seen = {}

    def fake_embed(banner1, user_ns):
        seen["banner"] = banner1
        seen["ns"] = user_ns

    monkeypatch.setattr(cli, "embed", fake_embed)
    cli.main([])
    assert seen["ns"]["Box"] is simmath.Box
    assert "SIMMATH_ENV" in seen["ns"]
    assert simmath.__version__ in seen["banner"]


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        cli.main(["--log-level", "LOUD"])
