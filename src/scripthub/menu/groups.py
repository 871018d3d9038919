# ---------------------------------------------------------------------------
# File: groups.py
# ---------------------------------------------------------------------------
# Description:
#	Menu group tracking (first-seen order, one pinned-last group).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterator


RUN_MODES_GROUP = "Run modes"


class GroupTracker:
	"""
	GroupTracker

	Ordered unique list of group names.
	"""

	def __init__(self) -> None:
		self._groups: list[str] = []

	def see(self, name: str) -> None:
		if name not in self._groups:
			self._groups.append(name)

	def force_last(self, name: str) -> None:
		"""
		Move a group to the end. No-op when the group was never seen.
		"""
		if name not in self._groups:
			return
		self._groups.remove(name)
		self._groups.append(name)

	def index(self, name: str) -> int:
		return self._groups.index(name)

	def reset(self) -> None:
		self._groups.clear()

	@property
	def groups(self) -> list[str]:
		return list(self._groups)

	def __contains__(self, name: object) -> bool:
		return name in self._groups

	def __iter__(self) -> Iterator[str]:
		return iter(list(self._groups))

	def __len__(self) -> int:
		return len(self._groups)
