# ---------------------------------------------------------------------------
# File: test_hub.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for the ScriptHub load cycle and interactive loop.
#
# Notes:
#	- Input is scripted through HubConsole.prompt_fn; sleeps are recorded.
#	- Running out of scripted input raises EOFError (ends the loop).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial tests
# 10/14/2026	Paul G. LeDuc				Verbose toggle / log level sync
# 10/19/2026	Paul G. LeDuc				Start verbose + toggle off
# ---------------------------------------------------------------------------

from __future__ import annotations

import io
import logging
import sys
import textwrap

import pytest
from rich.console import Console

from scripthub.hub.console import HubConsole
from scripthub.hub.render import MenuRenderer
from scripthub.hub.runmodes import RunModes
from scripthub.hub.hub import ScriptHub


TOOLS_MODULE = """
	CALLS = []

	MENU_SPECS = [
		"1|Tools|Say hi|say_hi||0",
		"2|Tools|Boom|boom||0",
		"3|Tools|Commit only|say_hi|disabled_if_dryrun|0",
	]

	def say_hi():
		CALLS.append("hi")

	def boom():
		raise RuntimeError("boom")
"""


@pytest.fixture
def module_dir(tmp_path):
	mods = tmp_path / "mods"
	mods.mkdir()
	(mods / "tools.py").write_text(textwrap.dedent(TOOLS_MODULE), encoding="utf-8")
	return mods


@pytest.fixture
def root_level():
	root = logging.getLogger()
	saved = root.level
	yield root
	root.setLevel(saved)


def _calls() -> list[str]:
	return sys.modules["scripthub_modules.tools"].CALLS


def _hub(module_dir, answers, *, modes=None, sync_log_level=False, base_log_level=None):
	script = iter(answers)
	sleeps: list[float] = []

	def prompt(label: str) -> str:
		try:
			return next(script)
		except StopIteration:
			raise EOFError from None

	console = Console(file=io.StringIO(), width=80)
	hub = ScriptHub(
		title="Test Hub",
		module_dir=module_dir,
		modes=modes or RunModes(),
		io=HubConsole(console=console, prompt_fn=prompt, sleep=sleeps.append),
		renderer=MenuRenderer(console=console, clear_screen=False),
		sync_log_level=sync_log_level,
		base_log_level=base_log_level,
	)
	hub.load()
	return hub, sleeps


def _output(hub: ScriptHub) -> str:
	return hub.io.console.file.getvalue()


def test_load_compiles_builtins_and_modules(module_dir):
	hub, _ = _hub(module_dir, [])

	assert hub.registry.compiled.keys == ["1", "2", "3", "V", "D", "X"]
	assert hub.registry.groups.groups == ["Tools", "Run modes"]
	assert hub.last_report.ok
	assert hub.unresolved_handlers() == []


def test_load_without_module_dir_has_builtins_only():
	hub = ScriptHub(io=HubConsole(console=Console(file=io.StringIO())), sync_log_level=False)
	hub.load()

	assert hub.registry.compiled.keys == ["V", "D", "X"]


def test_load_warns_for_unresolved_handlers(tmp_path, caplog):
	caplog.set_level(logging.WARNING)
	(tmp_path / "m.py").write_text('MENU_SPECS = ["|G|Ghost|nowhere|"]\n', encoding="utf-8")

	hub, _ = _hub(tmp_path, [])

	assert [e.label for e in hub.unresolved_handlers()] == ["Ghost"]
	assert "nowhere" in caplog.text


def test_run_dispatches_until_exit(module_dir):
	hub, sleeps = _hub(module_dir, ["1", "x"])

	assert hub.run() == 0
	assert hub.modes.exit_requested is True
	assert _calls() == ["hi"]
	assert sleeps == [1.0]
	assert "Exiting..." in _output(hub)


def test_run_continues_after_handler_exception(module_dir, caplog):
	caplog.set_level(logging.ERROR)
	hub, _ = _hub(module_dir, ["2", "1", "X"])

	assert hub.run() == 0
	assert _calls() == ["hi"]
	assert "Menu action '2' failed" in caplog.text


def test_run_ignores_unknown_and_empty_choices(module_dir, caplog):
	caplog.set_level(logging.WARNING)
	hub, sleeps = _hub(module_dir, ["", "zz", "X"])

	assert hub.run() == 0
	assert "No selection." in caplog.text
	assert "Invalid option: zz" in caplog.text
	assert sleeps == [1.0]


def test_run_ends_on_end_of_input(module_dir):
	hub, _ = _hub(module_dir, ["1"])

	assert hub.run() == 0
	assert hub.modes.exit_requested is False
	assert "Exiting..." in _output(hub)


def test_dry_run_toggle_disables_marked_items(module_dir):
	hub, _ = _hub(module_dir, ["D", "3", "D", "3", "X"])

	hub.run()

	assert _calls() == ["hi"]
	assert hub.modes.dry_run is False


def test_run_mode_labels_follow_state(module_dir):
	hub, _ = _hub(module_dir, [], modes=RunModes(dry_run=True))

	hub.refresh_run_mode_labels()

	assert hub.registry.compiled.find("V").label == "Toggle Verbose mode (OFF)"
	assert hub.registry.compiled.find("D").label == "Toggle Dry-Run mode (ON)"


def test_render_shows_run_mode(module_dir):
	hub, _ = _hub(module_dir, [], modes=RunModes(dry_run=True))

	hub.render()

	assert "DRYRUN" in _output(hub)


def test_verbose_toggle_drives_root_log_level(module_dir, root_level):
	root_level.setLevel(logging.WARNING)
	hub, _ = _hub(module_dir, [], sync_log_level=True)

	hub.step("V")
	assert root_level.level == logging.DEBUG

	hub.step("V")
	assert root_level.level == logging.WARNING


def test_start_verbose_then_toggle_off_restores_base_level(module_dir, root_level):
	root_level.setLevel(logging.DEBUG)
	hub, _ = _hub(module_dir, [], modes=RunModes(verbose=True), sync_log_level=True, base_log_level=logging.INFO)

	hub.step("V")

	assert hub.modes.verbose is False
	assert root_level.level == logging.INFO

	hub.step("V")
	assert root_level.level == logging.DEBUG
