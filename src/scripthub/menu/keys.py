# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Menu key normalization (uniqueness + auto-numbering) and sort weights.
#
# Notes:
#	- Keys compare case-insensitively; explicit keys keep their casing.
#	- Auto-assigned keys come from a counter seeded at 1 that only moves
#	  forward and skips keys already reserved, so each assigned key is the
#	  smallest free integer at the time of assignment.
#	- Numeric keys order by integer value and always before non-numeric keys.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Optional


_NUMERIC_RE = re.compile(r"^[0-9]+$")


def normalize_key(key: str) -> str:
	return key.upper()


def is_numeric_key(key: str) -> bool:
	return bool(_NUMERIC_RE.match(key))


def key_weight(key: str) -> tuple[int, int]:
	"""
	Sort weight: (0, n) for numeric keys, (1, 0) for everything else.
	"""
	if is_numeric_key(key):
		return (0, int(key))
	return (1, 0)


class AssignReason(enum.Enum):
	MISSING = "missing"
	COLLISION = "collision"


@dataclass(frozen=True, slots=True)
class KeyAssignment:
	key: str
	requested: str
	reason: Optional[AssignReason] = None

	@property
	def reassigned(self) -> bool:
		return self.reason is not None


@dataclass(slots=True)
class KeyAllocator:
	"""
	KeyAllocator

	Tracks used keys (uppercased) during one build pass.
	"""
	_used: set[str] = field(default_factory=set)
	_next: int = 1

	def is_used(self, key: str) -> bool:
		return normalize_key(key) in self._used

	def reserve(self, key: str) -> None:
		self._used.add(normalize_key(key))

	def next_free(self) -> str:
		while str(self._next) in self._used:
			self._next += 1
		key = str(self._next)
		self._used.add(key)
		self._next += 1
		return key

	def assign(self, requested: str) -> KeyAssignment:
		"""
		Keep a free explicit key; otherwise hand out the next free number.
		"""
		if not requested:
			return KeyAssignment(self.next_free(), requested, AssignReason.MISSING)

		if self.is_used(requested):
			return KeyAssignment(self.next_free(), requested, AssignReason.COLLISION)

		self.reserve(requested)
		return KeyAssignment(requested, requested)
