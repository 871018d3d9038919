# ---------------------------------------------------------------------------
# File: builtins.py
# ---------------------------------------------------------------------------
# Description:
#	Builtin "Run modes" menu items (verbose / dry-run toggles, exit).
#
# Notes:
#	- Builtin specs are added before module specs so V/D/X are reserved first.
#	- Labels are refreshed before every render to show ON/OFF state.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release (from default_commands)
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

from scripthub.hub.runmodes import RunModes
from scripthub.menu.groups import RUN_MODES_GROUP
from scripthub.menu.handlers import HandlerTable
from scripthub.menu.registry import CompiledMenu, MenuRegistry
from scripthub.menu.specs import MenuSpec


log = logging.getLogger(__name__)

BUILTIN_SOURCE = "builtin"

KEY_VERBOSE = "V"
KEY_DRY_RUN = "D"
KEY_EXIT = "X"

HANDLER_TOGGLE_VERBOSE = "hub.toggle_verbose"
HANDLER_TOGGLE_DRY_RUN = "hub.toggle_dry_run"
HANDLER_EXIT = "hub.exit"

LABEL_VERBOSE = "Toggle Verbose mode"
LABEL_DRY_RUN = "Toggle Dry-Run mode"
LABEL_EXIT = "Exit"


def builtin_specs() -> list[MenuSpec]:
	return [
		MenuSpec(RUN_MODES_GROUP, LABEL_VERBOSE, HANDLER_TOGGLE_VERBOSE, key=KEY_VERBOSE, source=BUILTIN_SOURCE, wait=2.0),
		MenuSpec(RUN_MODES_GROUP, LABEL_DRY_RUN, HANDLER_TOGGLE_DRY_RUN, key=KEY_DRY_RUN, source=BUILTIN_SOURCE, wait=2.0),
		MenuSpec(RUN_MODES_GROUP, LABEL_EXIT, HANDLER_EXIT, key=KEY_EXIT, source=BUILTIN_SOURCE, wait=1.0),
	]


def add_builtin_specs(registry: MenuRegistry) -> None:
	registry.add_specs(builtin_specs())


def register_builtin_handlers(handlers: HandlerTable, modes: RunModes) -> None:
	def _toggle_verbose() -> None:
		if modes.toggle_verbose():
			log.info("Verbose mode enabled.")
		else:
			log.info("Verbose mode disabled.")

	def _toggle_dry_run() -> None:
		if modes.toggle_dry_run():
			log.warning("Dry-Run mode enabled.")
		else:
			log.warning("Dry-Run mode disabled.")

	def _exit() -> None:
		modes.request_exit()

	handlers.register(HANDLER_TOGGLE_VERBOSE, _toggle_verbose)
	handlers.register(HANDLER_TOGGLE_DRY_RUN, _toggle_dry_run)
	handlers.register(HANDLER_EXIT, _exit)


def _on_off(value: bool) -> str:
	return "ON" if value else "OFF"


def refresh_run_mode_labels(compiled: CompiledMenu, modes: RunModes) -> None:
	"""
	Update the V/D labels to show current ON/OFF state.
	"""
	if compiled.key_exists(KEY_VERBOSE):
		compiled.set_label(KEY_VERBOSE, f"{LABEL_VERBOSE} ({_on_off(modes.verbose)})")
	if compiled.key_exists(KEY_DRY_RUN):
		compiled.set_label(KEY_DRY_RUN, f"{LABEL_DRY_RUN} ({_on_off(modes.dry_run)})")
