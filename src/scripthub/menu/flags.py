# ---------------------------------------------------------------------------
# File: flags.py
# ---------------------------------------------------------------------------
# Description:
#	Menu item modifier flags.
#
# Notes:
#	- Wire format is a comma-separated list ("disabled,disabled_if_dryrun").
#	- Unknown tokens are ignored so newer modules still load on older hubs.
#	- Tokens match exactly (lowercase); "DISABLED" is an unknown token.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	Paul G. LeDuc				Initial coding / release
# 10/19/2026	Paul G. LeDuc				Exact-case flag tokens
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
import logging


log = logging.getLogger(__name__)


class MenuFlag(enum.Flag):
	NONE = 0
	DISABLED = enum.auto()
	DISABLED_IF_DRYRUN = enum.auto()


_FLAG_NAMES: dict[str, MenuFlag] = {
	"disabled": MenuFlag.DISABLED,
	"disabled_if_dryrun": MenuFlag.DISABLED_IF_DRYRUN,
}


def parse_flags(raw: str | MenuFlag | None) -> MenuFlag:
	"""
	Parse the comma-set wire form into a MenuFlag.
	"""
	if raw is None:
		return MenuFlag.NONE
	if isinstance(raw, MenuFlag):
		return raw

	out = MenuFlag.NONE
	for token in raw.split(","):
		name = token.strip()
		if not name:
			continue
		flag = _FLAG_NAMES.get(name)
		if flag is None:
			log.debug("Ignoring unknown menu flag %r", name)
			continue
		out |= flag
	return out


def format_flags(flags: MenuFlag) -> str:
	return ",".join(name for name, flag in _FLAG_NAMES.items() if flag in flags)


def is_disabled(flags: MenuFlag, *, dry_run: bool) -> bool:
	"""
	True when an item must not run in the current mode.
	"""
	if MenuFlag.DISABLED in flags:
		return True
	return dry_run and MenuFlag.DISABLED_IF_DRYRUN in flags
