# ---------------------------------------------------------------------------
# File: hub.py
# ---------------------------------------------------------------------------
# Description:
#	ScriptHub composition root: owns menu state, handlers, run modes and the
#	interactive loop.
#
# Notes:
#	- Load cycle: reset specs -> builtins -> modules -> build -> ordering ->
#	  unresolved-handler check.
#	- Loop: refresh labels -> render -> prompt -> dispatch -> wait, until the
#	  exit handler sets RunModes.exit_requested.
#	- Dispatch errors (missing handler, handler exceptions) are logged and
#	  the loop continues.
#	- End of input (EOF / Ctrl+C at the prompt) also ends the loop.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release (from App)
# 10/14/2026	Paul G. LeDuc				Verbose toggle drives root log level
# 10/19/2026	Paul G. LeDuc				Explicit base_log_level (start verbose, toggle off)
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from scripthub.core.logging import get_hub_logger, set_log_level
from scripthub.core.telemetry import Telemetry, disabled_telemetry
from scripthub.hub.builtins import add_builtin_specs, refresh_run_mode_labels, register_builtin_handlers
from scripthub.hub.console import HubConsole
from scripthub.hub.modules import ModuleLoader
from scripthub.hub.render import MenuRenderer
from scripthub.hub.runmodes import RunModes, RunModeSnapshot
from scripthub.menu.compiler import BuildReport, apply_ordering, build_from_specs
from scripthub.menu.dispatch import DEFAULT_WAIT_SECONDS, Dispatcher, HandlerNotFoundError
from scripthub.menu.handlers import HandlerTable
from scripthub.menu.registry import MenuEntry, MenuRegistry


log = get_hub_logger()


class ScriptHub:
	"""
	ScriptHub

	Menu-driven launcher for module-provided actions.
	"""

	def __init__(
		self,
		*,
		title: str = "Script Hub",
		module_dir: Path | str | None = None,
		modes: Optional[RunModes] = None,
		io: Optional[HubConsole] = None,
		renderer: Optional[MenuRenderer] = None,
		telemetry: Optional[Telemetry] = None,
		default_wait: float = DEFAULT_WAIT_SECONDS,
		sync_log_level: bool = True,
		base_log_level: Optional[int] = None,
	) -> None:
		self.title = title
		self.module_dir = Path(module_dir) if module_dir is not None else None
		self.telemetry = telemetry or disabled_telemetry()

		# -------------------------------------------------------------------
		# Menu state + handler table (explicit ownership)
		# -------------------------------------------------------------------

		self.registry = MenuRegistry()
		self.handlers = HandlerTable()
		self.modes = modes or RunModes()

		self.io = io or HubConsole()
		self.renderer = renderer or MenuRenderer(console=self.io.console)

		self.dispatcher = Dispatcher(
			registry=self.registry,
			handlers=self.handlers,
			dry_run_provider=self.modes.is_dry_run,
			telemetry=self.telemetry,
			default_wait=default_wait,
		)

		self.loader = ModuleLoader(self.registry, self.handlers)
		self.last_report: Optional[BuildReport] = None

		register_builtin_handlers(self.handlers, self.modes)

		# level restored when verbose is switched off
		self._base_log_level = logging.getLogger().level if base_log_level is None else base_log_level
		if sync_log_level:
			self.modes.on_change = self._on_modes_changed

	# -----------------------------------------------------------------------
	# Load cycle
	# -----------------------------------------------------------------------

	def load(self) -> BuildReport:
		"""
		Rebuild the compiled menu from builtins + modules.
		"""
		self.registry.reset_specs()
		add_builtin_specs(self.registry)

		if self.module_dir is not None:
			self.loader.load_directory(self.module_dir)

		report = build_from_specs(self.registry, telemetry=self.telemetry)
		apply_ordering(self.registry)

		for entry in self.unresolved_handlers():
			log.warning(
				"Menu item %s) %s: handler %r is not defined",
				entry.key,
				entry.label,
				entry.handler_name,
			)

		self.last_report = report
		log.debug("Menu compiled: %d entries, %d skipped", report.compiled, len(report.skipped))
		return report

	def unresolved_handlers(self) -> list[MenuEntry]:
		return self.registry.compiled.unresolved_handlers(self.handlers)

	# -----------------------------------------------------------------------
	# Loop
	# -----------------------------------------------------------------------

	def refresh_run_mode_labels(self) -> None:
		refresh_run_mode_labels(self.registry.compiled, self.modes)

	def render(self) -> None:
		self.refresh_run_mode_labels()
		self.renderer.render(
			self.registry,
			title=self.title,
			run_mode=self.modes.run_mode_label,
			dry_run=self.modes.dry_run,
		)

	def step(self, choice: str) -> None:
		"""
		Dispatch one choice and apply its post-action wait.
		"""
		try:
			self.dispatcher.dispatch(choice)
		except HandlerNotFoundError as ex:
			log.debug("Dispatch aborted: %s", ex)
		except Exception:
			log.exception("Menu action %r failed", choice.strip().upper())

		self.io.wait_after_action(self.dispatcher.wait_for(choice))

	def run(self) -> int:
		"""
		Run the interactive loop until exit is requested.
		"""
		self.modes.reset_exit()

		while not self.modes.exit_requested:
			self.render()

			try:
				choice = self.io.ask_choice()
			except (EOFError, KeyboardInterrupt):
				log.debug("Input closed; leaving menu loop")
				break

			self.step(choice)

		self.io.info("Exiting...")
		return 0

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _on_modes_changed(self, snapshot: RunModeSnapshot) -> None:
		set_log_level(logging.DEBUG if snapshot.verbose else self._base_log_level)
