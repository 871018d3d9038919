# ---------------------------------------------------------------------------
# File: specs.py
# ---------------------------------------------------------------------------
# Description:
#	Raw menu specifications + the registry that collects them.
#
# Notes:
#	- Specs are collected first and validated later (by the compiler), so
#	  builtins and every discovered module can contribute before any
#	  ordering decision is made.
#	- Wire format is pipe-delimited, no escaping ('|' cannot appear in a field):
#		key|group|label|handler|flags					(5)
#		source|key|group|label|handler|flags			(6)
#		source|key|group|label|handler|flags|wait		(7)
#	- Records may also be MenuSpec instances (Python modules).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial coding / release
# 10/05/2026	Paul G. LeDuc				Accept MenuSpec records + source prefixing
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Iterator, Optional, Union, TypeAlias

from scripthub.menu.flags import MenuFlag, parse_flags


log = logging.getLogger(__name__)

Handler: TypeAlias = Callable[[], Any]
HandlerRef: TypeAlias = Union[str, Handler]

_WAIT_RE = re.compile(r"^[0-9]+([.][0-9]+)?$")


class MalformedSpecError(ValueError):
	"""
	A spec with an unsupported field count or a missing required field.
	"""

	def __init__(self, message: str, record: Any = None) -> None:
		super().__init__(message)
		self.record = record


@dataclass(frozen=True, slots=True)
class MenuSpec:
	"""
	MenuSpec

	group:		Section the item renders under (required)
	label:		Display text (required)
	handler:	Handler name (resolved via HandlerTable) or a callable (required)
	key:		Display/selection key; blank means auto-assign
	source:		Contributing module ("builtin" or a module filename)
	flags:		MenuFlag modifiers
	wait:		Seconds to pause after the action (None = hub default)
	"""
	group: str
	label: str
	handler: HandlerRef
	key: str = ""
	source: str = ""
	flags: MenuFlag = MenuFlag.NONE
	wait: Optional[float] = None

	@property
	def handler_name(self) -> str:
		return handler_display_name(self.handler)


SpecRecord: TypeAlias = Union[str, MenuSpec]


def handler_display_name(handler: HandlerRef) -> str:
	if isinstance(handler, str):
		return handler
	return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", repr(handler))


def split_pipe(raw: str) -> list[str]:
	"""
	Split on '|', keeping empty (including trailing) fields.
	"""
	return raw.split("|")


def parse_wait(raw: str | float | int | None) -> Optional[float]:
	"""
	Parse a wait field. Blank means "use the hub default" (None).
	"""
	if raw is None:
		return None
	if isinstance(raw, (int, float)) and not isinstance(raw, bool):
		if raw < 0:
			log.warning("Invalid wait value %r (expected seconds); using default", raw)
			return None
		return float(raw)

	text = str(raw).strip()
	if not text:
		return None
	if not _WAIT_RE.match(text):
		log.warning("Invalid wait value %r (expected seconds); using default", text)
		return None
	return float(text)


def parse_spec(raw: str) -> MenuSpec:
	"""
	Parse a pipe-delimited spec string into a validated MenuSpec.

	Raises:
		MalformedSpecError
	"""
	parts = split_pipe(raw)
	wait = ""

	if len(parts) == 5:
		source = ""
		key, group, label, handler, flags = parts
	elif len(parts) == 6:
		source, key, group, label, handler, flags = parts
	elif len(parts) == 7:
		source, key, group, label, handler, flags, wait = parts
	else:
		raise MalformedSpecError(
			f"Menu spec has invalid field count ({len(parts)}): {raw}",
			record=raw,
		)

	spec = MenuSpec(
		group=group,
		label=label,
		handler=handler,
		key=key,
		source=source,
		flags=parse_flags(flags),
		wait=parse_wait(wait),
	)
	return validate_spec(spec, record=raw)


def validate_spec(spec: MenuSpec, *, record: Any = None) -> MenuSpec:
	shown = record if record is not None else spec
	if not spec.group:
		raise MalformedSpecError(f"Menu spec missing group: {shown}", record=shown)
	if not spec.label:
		raise MalformedSpecError(f"Menu spec missing label: {shown}", record=shown)
	if not spec.handler:
		raise MalformedSpecError(f"Menu spec missing handler: {shown}", record=shown)
	return spec


def coerce_spec(record: SpecRecord) -> MenuSpec:
	"""
	Turn any registry record into a validated MenuSpec.
	"""
	if isinstance(record, MenuSpec):
		return validate_spec(record)
	if isinstance(record, str):
		return parse_spec(record)
	raise MalformedSpecError(f"Unsupported menu spec record: {record!r}", record=record)


def with_source(record: SpecRecord, source: str) -> SpecRecord:
	"""
	Attach a source identifier to a module-provided record.
	"""
	if isinstance(record, MenuSpec):
		return replace(record, source=source)
	return f"{source}|{record}"


class SpecRegistry:
	"""
	SpecRegistry

	Ordered list of raw records. No validation beyond "non-empty".
	"""

	def __init__(self) -> None:
		self._records: list[SpecRecord] = []

	def add(self, record: SpecRecord) -> None:
		if record is None or record == "":
			raise ValueError("Menu spec record must not be empty")
		self._records.append(record)

	def add_many(self, records: Iterable[SpecRecord]) -> None:
		for record in records:
			self.add(record)

	def add_from_source(self, source: str, records: Iterable[SpecRecord]) -> int:
		"""
		Add records contributed by a module, tagging each with its source.
		Returns the number of records added.
		"""
		count = 0
		for record in records:
			self.add(with_source(record, source))
			count += 1
		return count

	def reset(self) -> None:
		self._records.clear()

	def records(self) -> list[SpecRecord]:
		return list(self._records)

	def __iter__(self) -> Iterator[SpecRecord]:
		return iter(list(self._records))

	def __len__(self) -> int:
		return len(self._records)
