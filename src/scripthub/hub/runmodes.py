# ---------------------------------------------------------------------------
# File: runmodes.py
# ---------------------------------------------------------------------------
# Description:
#	Run-mode service for the hub (verbose / dry-run / exit request).
#
# Notes:
#	- RunModes owns process-level mode state for one hub instance.
#	- The dispatcher reads dry-run through a provider (RunModes.is_dry_run).
#	- Changes are announced through an optional callback (e.g., log level sync).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release (from StatusService)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


RUN_MODE_DRYRUN = "DRYRUN"
RUN_MODE_COMMIT = "COMMIT"


@dataclass(frozen=True, slots=True)
class RunModeSnapshot:
	"""
	Immutable snapshot of run-mode state.
	"""

	verbose: bool
	dry_run: bool
	exit_requested: bool

	@property
	def label(self) -> str:
		return RUN_MODE_DRYRUN if self.dry_run else RUN_MODE_COMMIT


@dataclass(slots=True)
class RunModes:
	"""
	RunModes

	Owns run-mode state and notifies an optional change callback.
	"""

	verbose: bool = False
	dry_run: bool = False
	exit_requested: bool = False

	on_change: Optional[Callable[[RunModeSnapshot], None]] = None

	# -----------------------------------------------------------------------
	# Wiring
	# -----------------------------------------------------------------------

	def set_on_change(self, cb: Optional[Callable[[RunModeSnapshot], None]]) -> None:
		"""
		Register a callback invoked whenever state changes.
		"""
		self.on_change = cb
		if cb:
			cb(self.snapshot())

	def snapshot(self) -> RunModeSnapshot:
		return RunModeSnapshot(
			verbose=self.verbose,
			dry_run=self.dry_run,
			exit_requested=self.exit_requested,
		)

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	def is_dry_run(self) -> bool:
		return self.dry_run

	@property
	def run_mode_label(self) -> str:
		return RUN_MODE_DRYRUN if self.dry_run else RUN_MODE_COMMIT

	# -----------------------------------------------------------------------
	# Mutators
	# -----------------------------------------------------------------------

	def set_verbose(self, value: bool) -> None:
		self.verbose = bool(value)
		self._notify()

	def set_dry_run(self, value: bool) -> None:
		self.dry_run = bool(value)
		self._notify()

	def toggle_verbose(self) -> bool:
		self.set_verbose(not self.verbose)
		return self.verbose

	def toggle_dry_run(self) -> bool:
		self.set_dry_run(not self.dry_run)
		return self.dry_run

	def request_exit(self) -> None:
		self.exit_requested = True
		self._notify()

	def reset_exit(self) -> None:
		self.exit_requested = False

	def _notify(self) -> None:
		if self.on_change:
			self.on_change(self.snapshot())
