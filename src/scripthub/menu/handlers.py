# ---------------------------------------------------------------------------
# File: handlers.py
# ---------------------------------------------------------------------------
# Description:
#	Handler table (handler name -> callable) for menu dispatch.
#
# Notes:
#	- Menu specs name their handler; modules register the callables once at
#	  load time. Dispatch resolves through this table.
#	- Specs may also carry a callable directly; resolve() passes it through.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial coding / release (from CommandRegistry)
# 10/05/2026	Paul G. LeDuc				Add resolve() for name-or-callable refs
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Iterable, Optional

from scripthub.menu.specs import Handler, HandlerRef


log = logging.getLogger(__name__)


class HandlerTable:
	"""
	HandlerTable

	Stores handlers by name.
	"""

	def __init__(self, handlers: Optional[dict[str, Handler]] = None) -> None:
		self._handlers: dict[str, Handler] = {}
		for name, fn in (handlers or {}).items():
			self.register(name, fn)

	def register(self, name: str, handler: Handler, *, overwrite: bool = True) -> None:
		if not name:
			raise ValueError("Handler name must be a non-empty string")
		if not callable(handler):
			raise TypeError(f"Handler {name!r} is not callable")

		if name in self._handlers:
			if not overwrite:
				raise ValueError(f"Duplicate handler name: {name!r}")
			log.debug("Handler %r redefined", name)

		self._handlers[name] = handler

	def register_many(self, handlers: Iterable[tuple[str, Handler]]) -> None:
		for name, fn in handlers:
			self.register(name, fn)

	def unregister(self, name: str) -> None:
		self._handlers.pop(name, None)

	def has(self, name: str) -> bool:
		return name in self._handlers

	def get(self, name: str) -> Optional[Handler]:
		return self._handlers.get(name)

	def names(self) -> list[str]:
		return list(self._handlers.keys())

	def resolve(self, ref: HandlerRef) -> Optional[Handler]:
		if callable(ref):
			return ref
		return self._handlers.get(ref)

	def __contains__(self, name: object) -> bool:
		return name in self._handlers

	def __len__(self) -> int:
		return len(self._handlers)
