# ---------------------------------------------------------------------------
# File: dispatch.py
# ---------------------------------------------------------------------------
# Description:
#	Menu dispatcher (selected key -> handler execution).
#
# Notes:
#	- Empty/unknown keys and disabled items are soft no-ops (warning logged).
#	- A handler that does not resolve is a programming defect: logged and
#	  raised as HandlerNotFoundError.
#	- Handler return values and exceptions propagate to the caller. The hub
#	  loop decides what to swallow.
#	- Dry-run state is read through a provider callable so the dispatcher
#	  stays decoupled from RunModes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release (from KeyRouter)
# 10/06/2026	Paul G. LeDuc				Add wait_for + telemetry
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from scripthub.core.telemetry import Telemetry
from scripthub.menu.handlers import HandlerTable
from scripthub.menu.registry import MenuEntry, MenuRegistry


log = logging.getLogger(__name__)

DryRunProvider = Callable[[], bool]

DEFAULT_WAIT_SECONDS = 2.0


class DispatchOutcome(enum.Enum):
	INVOKED = "invoked"
	EMPTY = "empty"
	UNKNOWN = "unknown"
	DISABLED = "disabled"


@dataclass(frozen=True, slots=True)
class DispatchResult:
	outcome: DispatchOutcome
	key: str
	entry: Optional[MenuEntry] = None
	value: Any = None

	@property
	def invoked(self) -> bool:
		return self.outcome is DispatchOutcome.INVOKED


class HandlerNotFoundError(LookupError):
	"""
	Raised when a menu entry's handler does not resolve to a callable.
	"""

	def __init__(self, handler: str, key: str) -> None:
		super().__init__(f"Handler not found: {handler} (key {key!r})")
		self.handler = handler
		self.key = key


@dataclass(slots=True)
class Dispatcher:
	"""
	Dispatcher

	- choice -> compiled entry (case-insensitive)
	- entry -> disabled policy -> handler invocation
	"""
	registry: MenuRegistry
	handlers: HandlerTable
	dry_run_provider: Optional[DryRunProvider] = None
	telemetry: Optional[Telemetry] = None
	default_wait: float = DEFAULT_WAIT_SECONDS

	def is_dry_run(self) -> bool:
		return bool(self.dry_run_provider()) if self.dry_run_provider else False

	def dispatch(self, choice: str | None) -> DispatchResult:
		"""
		Dispatch a user-entered key.

		Raises:
			HandlerNotFoundError: the entry's handler does not resolve.
			Exception: anything the handler raises.
		"""
		key = (choice or "").strip()

		if not key:
			log.warning("No selection.")
			return self._done(DispatchResult(DispatchOutcome.EMPTY, key))

		entry = self.registry.compiled.find(key)
		if entry is None:
			log.warning("Invalid option: %s", key)
			return self._done(DispatchResult(DispatchOutcome.UNKNOWN, key))

		if entry.is_disabled(dry_run=self.is_dry_run()):
			log.warning("Option '%s' is disabled in the current mode.", key.upper())
			return self._done(DispatchResult(DispatchOutcome.DISABLED, key, entry))

		handler = self.handlers.resolve(entry.handler)
		if handler is None:
			log.error("Handler not found: %s", entry.handler_name)
			raise HandlerNotFoundError(entry.handler_name, entry.key)

		self._emit(DispatchOutcome.INVOKED, key, entry)
		value = handler()
		return DispatchResult(DispatchOutcome.INVOKED, key, entry, value)

	def wait_for(self, choice: str | None) -> float:
		"""
		Seconds to pause after dispatching `choice` (0 when nothing matched).
		"""
		key = (choice or "").strip()
		if not key:
			return 0.0
		entry = self.registry.compiled.find(key)
		if entry is None:
			return 0.0
		return self.default_wait if entry.wait is None else entry.wait

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _done(self, result: DispatchResult) -> DispatchResult:
		self._emit(result.outcome, result.key, result.entry)
		return result

	def _emit(self, outcome: DispatchOutcome, key: str, entry: Optional[MenuEntry]) -> None:
		if self.telemetry is None:
			return
		attrs: dict[str, Any] = {"key": key, "outcome": outcome.value}
		if entry is not None:
			attrs["handler"] = entry.handler_name
		self.telemetry.event("menu.dispatch", attrs)
