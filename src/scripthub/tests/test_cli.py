# ---------------------------------------------------------------------------
# File: test_cli.py
# ---------------------------------------------------------------------------
# Description:
#	End-to-end tests for the scripthub command line.
#
# Notes:
#	- init_logging is stubbed so the root logger (and pytest's capture
#	  handlers) are left alone.
#	- All paths come from a SCRIPTHUB_* environment rooted in tmp_path.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial tests
# 10/15/2026	Paul G. LeDuc				--showcfg / --statereset tests
# 10/19/2026	Paul G. LeDuc				Verbose start / toggle-off tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from scripthub import __version__, cli
from scripthub.core.config import KeyValueFile
from scripthub.hub.console import HubConsole


@pytest.fixture(autouse=True)
def no_logging_init(monkeypatch):
	monkeypatch.setattr(cli, "init_logging", lambda cfg=None: None)


@pytest.fixture
def env(tmp_path):
	return {
		"SCRIPTHUB_HUB_ROOT": str(tmp_path / "hub"),
		"SCRIPTHUB_CONFIG_FILE": str(tmp_path / "scripthub.conf"),
		"SCRIPTHUB_STATE_FILE": str(tmp_path / "scripthub.state"),
	}


def _io(*answers: str) -> HubConsole:
	script = iter(answers or ("X",))
	return HubConsole(
		console=Console(file=io.StringIO(), width=200),
		prompt_fn=lambda label: next(script),
		sleep=lambda seconds: None,
	)


def _out(hub_io: HubConsole) -> str:
	return hub_io.console.file.getvalue()


def test_version(env):
	hub_io = _io()
	assert cli.main(["--version"], environ=env, io=hub_io) == 0
	assert f"scripthub {__version__}" in _out(hub_io)


def test_help_lists_script_and_builtin_options(env):
	hub_io = _io()
	assert cli.main(["--help"], environ=env, io=hub_io) == 0

	text = _out(hub_io)
	assert "Usage:" in text
	assert "--applet VALUE" in text
	assert "--dryrun" in text
	assert "Examples:" in text


def test_unknown_option_is_usage_error(env, capsys):
	assert cli.main(["--nope"], environ=env, io=_io()) == 2
	assert "Unknown option: --nope" in capsys.readouterr().err


def test_missing_value_is_usage_error(env, capsys):
	assert cli.main(["--title"], environ=env, io=_io()) == 2
	assert "Missing value for --title" in capsys.readouterr().err


def test_run_default_hub_creates_layout_and_exits(env, tmp_path):
	hub_io = _io("X")

	assert cli.main([], environ=env, io=hub_io) == 0

	assert (tmp_path / "hub" / "scripthub").is_dir()
	assert (tmp_path / "hub" / "scripthub.app.conf").is_file()
	text = _out(hub_io)
	assert "Script Hub" in text
	assert "Exiting..." in text


def test_run_with_applet_and_title(env, tmp_path):
	hub_io = _io("X")

	assert cli.main(["--dryrun", "--applet", "ops", "-t", "Ops Console"], environ=env, io=hub_io) == 0

	applet = KeyValueFile(tmp_path / "hub" / "ops.app.conf").load()
	assert applet["TITLE"] == "Ops Console"
	assert applet["HUB_ID"] == "ops"
	text = _out(hub_io)
	assert "Ops Console" in text
	assert "DRYRUN" in text


def test_run_loads_modules_from_moddir(env, tmp_path):
	mods = tmp_path / "mods"
	mods.mkdir()
	(mods / "hello.py").write_text(
		'MENU_SPECS = ["1|Greetings|Say hello|hello||0"]\n'
		'def hello():\n'
		'\tprint("hello")\n',
		encoding="utf-8",
	)
	hub_io = _io("X")

	assert cli.main(["--moddir", str(mods)], environ=env, io=hub_io) == 0
	assert "1) Say hello" in _out(hub_io)


def test_missing_absolute_moddir_is_usage_error(env, tmp_path):
	assert cli.main(["--moddir", str(tmp_path / "missing")], environ=env, io=_io()) == 2


def test_invalid_applet_name_is_usage_error(env):
	assert cli.main(["--applet", "../etc"], environ=env, io=_io()) == 2


def test_statereset(env, tmp_path):
	state = KeyValueFile(tmp_path / "scripthub.state")
	state.set("LAST_RUN", "yesterday")

	assert cli.main(["--statereset"], environ=env, io=_io("X")) == 0
	assert not state.exists()


def test_statereset_respects_dry_run(env, tmp_path, caplog):
	caplog.set_level(logging.INFO)
	state = KeyValueFile(tmp_path / "scripthub.state")
	state.set("LAST_RUN", "yesterday")

	assert cli.main(["--statereset", "--dryrun"], environ=env, io=_io("X")) == 0
	assert state.exists()
	assert "Would have reset state file." in caplog.text


def test_showcfg_reports_sources(env):
	hub_io = _io()

	assert cli.main(["--showcfg"], environ=env, io=hub_io) == 0

	text = _out(hub_io)
	assert "hub.root" in text
	assert "env" in text
	assert "default" in text


def test_showstate_lists_entries(env, tmp_path):
	KeyValueFile(tmp_path / "scripthub.state").set("LAST_APP", "ops")
	hub_io = _io()

	assert cli.main(["--showstate"], environ=env, io=hub_io) == 0
	assert "LAST_APP" in _out(hub_io)


def test_showargs_lists_parsed_values(env):
	hub_io = _io()

	assert cli.main(["--showargs", "--title", "Hi"], environ=env, io=hub_io) == 0

	text = _out(hub_io)
	assert "VAL_TITLE" in text
	assert "FLAG_SHOWARGS" in text


@pytest.fixture
def root_level():
	root = logging.getLogger()
	saved = root.level
	yield root
	root.setLevel(saved)


def test_verbose_start_can_be_toggled_off(env, root_level):
	env["SCRIPTHUB_LOG_LEVEL"] = "WARNING"
	root_level.setLevel(logging.DEBUG)

	assert cli.main(["--verbose"], environ=env, io=_io("V", "X")) == 0
	assert root_level.level == logging.WARNING


def test_debug_flag_keeps_debug_after_verbose_toggle(env, root_level):
	env["SCRIPTHUB_LOG_LEVEL"] = "WARNING"

	assert cli.main(["--debug"], environ=env, io=_io("V", "V", "X")) == 0
	assert root_level.level == logging.DEBUG
