# ---------------------------------------------------------------------------
# File: compiler.py
# ---------------------------------------------------------------------------
# Description:
#	Menu compiler: raw specs -> validated, deduplicated, ordered entries.
#
# Notes:
#	- build_from_specs() establishes identity (validation + unique keys) and
#	  emits entries grouped by the final group order.
#	- apply_ordering() is the canonical ordering pass: stable sort by
#	  (group position, key weight, current position). Call it after every build.
#	- "Run modes" is always the last group regardless of registration order.
#	- Malformed specs are logged and skipped; they never abort the build.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Return BuildReport, add telemetry
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from scripthub.core.telemetry import Telemetry, disabled_telemetry
from scripthub.menu.groups import RUN_MODES_GROUP
from scripthub.menu.keys import AssignReason, KeyAllocator, key_weight
from scripthub.menu.registry import MenuEntry, MenuRegistry
from scripthub.menu.specs import MalformedSpecError, coerce_spec


log = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildReport:
	"""
	Outcome of one build pass.

	skipped:		(record, reason) for every rejected spec
	renumbered:		(requested key, assigned key) for every auto-assigned key
	"""
	compiled: int = 0
	skipped: list[tuple[Any, str]] = field(default_factory=list)
	renumbered: list[tuple[str, str]] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not self.skipped


def build_from_specs(registry: MenuRegistry, *, telemetry: Optional[Telemetry] = None) -> BuildReport:
	"""
	Rebuild registry.compiled from registry.specs.
	"""
	tel = telemetry or disabled_telemetry()
	report = BuildReport()

	with tel.timer("menu.build.duration_ms"):
		registry.reset_compiled()

		allocator = KeyAllocator()
		staged: list[MenuEntry] = []

		for record in registry.specs:
			try:
				spec = coerce_spec(record)
			except MalformedSpecError as ex:
				log.error("%s", ex)
				report.skipped.append((record, str(ex)))
				continue

			assignment = allocator.assign(spec.key)
			if assignment.reason is AssignReason.MISSING:
				log.debug("Menu item %r has no key; auto-assigned %s", spec.label, assignment.key)
			elif assignment.reason is AssignReason.COLLISION:
				log.debug(
					"Menu key collision on %r (%s); auto-assigned %s",
					spec.key,
					spec.label,
					assignment.key,
				)
			if assignment.reassigned and assignment.requested:
				report.renumbered.append((assignment.requested, assignment.key))

			registry.groups.see(spec.group)
			staged.append(MenuEntry(
				key=assignment.key,
				group=spec.group,
				label=spec.label,
				handler=spec.handler,
				flags=spec.flags,
				wait=spec.wait,
				source=spec.source,
			))

		for group in ordered_groups(registry.groups.groups):
			for entry in staged:
				if entry.group != group:
					continue
				registry.register_compiled_item(
					entry.key,
					entry.group,
					entry.label,
					entry.handler,
					entry.flags,
					entry.wait,
					source=entry.source,
				)

	report.compiled = len(registry.compiled)

	if report.skipped:
		tel.counter("menu.specs.skipped", len(report.skipped))
	if report.renumbered:
		tel.counter("menu.keys.renumbered", len(report.renumbered))

	return report


def ordered_groups(seen: list[str]) -> list[str]:
	"""
	First-seen order with RUN_MODES_GROUP appended last unconditionally.
	"""
	out = [g for g in seen if g != RUN_MODES_GROUP]
	out.append(RUN_MODES_GROUP)
	return out


def apply_ordering(registry: MenuRegistry) -> None:
	"""
	Sort compiled entries by (group position, key weight), stable.
	"""
	registry.groups.force_last(RUN_MODES_GROUP)

	group_index = {g: i for i, g in enumerate(registry.groups.groups)}
	unknown = len(group_index)

	indexed = list(enumerate(registry.compiled.entries))
	indexed.sort(key=lambda pair: (
		group_index.get(pair[1].group, unknown),
		key_weight(pair[1].key),
		pair[0],
	))

	registry.compiled.replace_all(entry for _, entry in indexed)


def compile_menu(registry: MenuRegistry, *, telemetry: Optional[Telemetry] = None) -> BuildReport:
	"""
	Convenience: build + ordering in one call.
	"""
	report = build_from_specs(registry, telemetry=telemetry)
	apply_ordering(registry)
	return report
