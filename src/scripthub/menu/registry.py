# ---------------------------------------------------------------------------
# File: registry.py
# ---------------------------------------------------------------------------
# Description:
#	Compiled menu model + the MenuRegistry composition object.
#
# Notes:
#	- MenuRegistry owns all menu state (raw specs, groups, compiled entries)
#	  and is passed explicitly to the compiler, dispatcher and renderer.
#	- The compiled model is rebuilt wholesale on every load cycle; dispatch
#	  never mutates it.
#	- CompiledMenu.register() overwrites on a case-insensitive key match
#	  (later wins). The spec pipeline never triggers this because keys are
#	  made unique beforehand; it matters for direct registration only.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Add set_label + unresolved_handlers
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Protocol

from scripthub.menu.flags import MenuFlag, is_disabled
from scripthub.menu.groups import GroupTracker
from scripthub.menu.keys import normalize_key
from scripthub.menu.specs import Handler, HandlerRef, SpecRecord, SpecRegistry, handler_display_name


class HandlerLookup(Protocol):
	"""
	Minimal interface CompiledMenu needs to check handler references.
	"""
	def resolve(self, ref: HandlerRef) -> Optional[Handler]:
		...


@dataclass(frozen=True, slots=True)
class MenuEntry:
	key: str
	group: str
	label: str
	handler: HandlerRef
	flags: MenuFlag = MenuFlag.NONE
	wait: Optional[float] = None
	source: str = ""

	@property
	def handler_name(self) -> str:
		return handler_display_name(self.handler)

	def is_disabled(self, *, dry_run: bool) -> bool:
		return is_disabled(self.flags, dry_run=dry_run)


class CompiledMenu:
	"""
	CompiledMenu

	Ordered entries with parallel views (keys, groups, labels, ...).
	"""

	def __init__(self) -> None:
		self._entries: list[MenuEntry] = []

	# -----------------------------------------------------------------------
	# Mutators
	# -----------------------------------------------------------------------

	def register(self, entry: MenuEntry) -> bool:
		"""
		Add an entry. Returns True if an existing key was overwritten.
		"""
		idx = self.index_of(entry.key)
		if idx is not None:
			self._entries[idx] = entry
			return True
		self._entries.append(entry)
		return False

	def set_label(self, key: str, label: str) -> None:
		if not key:
			raise ValueError("set_label: key required")
		if not label:
			raise ValueError("set_label: label required")

		idx = self.index_of(key)
		if idx is None:
			raise KeyError(f"Menu key not registered: {key!r}")
		self._entries[idx] = replace(self._entries[idx], label=label)

	def replace_all(self, entries: Iterable[MenuEntry]) -> None:
		self._entries = list(entries)

	def reset(self) -> None:
		self._entries.clear()

	# -----------------------------------------------------------------------
	# Lookup
	# -----------------------------------------------------------------------

	def index_of(self, key: str) -> Optional[int]:
		wanted = normalize_key(key)
		for i, entry in enumerate(self._entries):
			if normalize_key(entry.key) == wanted:
				return i
		return None

	def find(self, key: str) -> Optional[MenuEntry]:
		idx = self.index_of(key)
		return None if idx is None else self._entries[idx]

	def key_exists(self, key: str) -> bool:
		return self.index_of(key) is not None

	def in_group(self, group: str) -> list[MenuEntry]:
		return [e for e in self._entries if e.group == group]

	def unresolved_handlers(self, handlers: HandlerLookup) -> list[MenuEntry]:
		return [e for e in self._entries if handlers.resolve(e.handler) is None]

	# -----------------------------------------------------------------------
	# Parallel views
	# -----------------------------------------------------------------------

	@property
	def entries(self) -> list[MenuEntry]:
		return list(self._entries)

	@property
	def keys(self) -> list[str]:
		return [e.key for e in self._entries]

	@property
	def groups(self) -> list[str]:
		return [e.group for e in self._entries]

	@property
	def labels(self) -> list[str]:
		return [e.label for e in self._entries]

	@property
	def handlers(self) -> list[HandlerRef]:
		return [e.handler for e in self._entries]

	@property
	def flags(self) -> list[MenuFlag]:
		return [e.flags for e in self._entries]

	@property
	def waits(self) -> list[Optional[float]]:
		return [e.wait for e in self._entries]

	def __iter__(self) -> Iterator[MenuEntry]:
		return iter(list(self._entries))

	def __len__(self) -> int:
		return len(self._entries)

	def __getitem__(self, index: int) -> MenuEntry:
		return self._entries[index]


class MenuRegistry:
	"""
	MenuRegistry

	Single owner of menu state for one hub instance.
	"""

	def __init__(self) -> None:
		self.specs = SpecRegistry()
		self.groups = GroupTracker()
		self.compiled = CompiledMenu()

	def add_spec(self, record: SpecRecord) -> None:
		self.specs.add(record)

	def add_specs(self, records: Iterable[SpecRecord]) -> None:
		self.specs.add_many(records)

	def reset_specs(self) -> None:
		self.specs.reset()

	def reset_compiled(self) -> None:
		self.groups.reset()
		self.compiled.reset()

	def register_compiled_item(
		self,
		key: str,
		group: str,
		label: str,
		handler: HandlerRef,
		flags: MenuFlag = MenuFlag.NONE,
		wait: Optional[float] = None,
		*,
		source: str = "",
	) -> bool:
		"""
		Register a compiled entry directly (later wins on key collision).
		Returns True if an existing entry was overwritten.
		"""
		self.groups.see(group)
		return self.compiled.register(MenuEntry(
			key=key,
			group=group,
			label=label,
			handler=handler,
			flags=flags,
			wait=wait,
			source=source,
		))
