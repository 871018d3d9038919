# ---------------------------------------------------------------------------
# File: help.py
# ---------------------------------------------------------------------------
# Description:
#	Plain-text help generated from ArgSpec lists.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterable, Optional

from scripthub.args.builtins import BUILTIN_ARGS
from scripthub.args.spec import ArgSpec, ArgSpecLike, ArgType, coerce_arg_specs


HELP_SPEC = next(s for s in BUILTIN_ARGS if s.name == "help")


def format_option(spec: ArgSpec) -> str:
	"""
	Render one option as "  -s, --name META    help".
	"""
	if spec.short:
		opt = f"-{spec.short}, --{spec.name}"
	else:
		opt = f"    --{spec.name}"

	if spec.type is ArgType.VALUE:
		opt += " VALUE"
	elif spec.type is ArgType.ENUM:
		opt += " {" + "|".join(spec.choices) + "}"

	return f"  {opt:<20} {spec.help}".rstrip()


def format_help(
	script_name: str,
	*,
	description: str = "",
	script_specs: Iterable[ArgSpecLike] = (),
	builtin_specs: Optional[Iterable[ArgSpec]] = None,
	examples: Iterable[str] = (),
	include_builtins: bool = True,
) -> str:
	lines: list[str] = [
		script_name,
		"Usage:",
		f"\t {script_name} [options] [--] [args...]",
		"",
		"Description:",
		f"\t{description or 'No description available'}",
		"",
		"Script options:",
		format_option(HELP_SPEC),
	]

	lines.extend(format_option(s) for s in coerce_arg_specs(script_specs))

	if include_builtins:
		lines.append("")
		lines.append("Builtin options:")
		for spec in (BUILTIN_ARGS if builtin_specs is None else builtin_specs):
			# --help is already listed with the script options
			if spec.name == "help":
				continue
			lines.append(format_option(spec))

	examples = list(examples)
	if examples:
		lines.append("")
		lines.append("Examples:")
		lines.extend(f"  {ex}" for ex in examples)

	return "\n".join(lines) + "\n"
