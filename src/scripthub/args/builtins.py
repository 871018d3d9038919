# ---------------------------------------------------------------------------
# File: builtins.py
# ---------------------------------------------------------------------------
# Description:
#	Framework builtin options + the two-pass command-line parse.
#
# Notes:
#	- Pass 1 parses BUILTIN_ARGS in BUILTINS mode and stops at the first
#	  unknown option.
#	- Pass 2 parses the remainder against the script's own specs in STRICT mode.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from scripthub.args.parser import ArgParser, ParseMode, ParseResult
from scripthub.args.spec import ArgSpec, ArgSpecLike, coerce_arg_specs, parse_arg_spec


BUILTIN_ARGS: tuple[ArgSpec, ...] = tuple(parse_arg_spec(s) for s in (
	"dryrun||flag|FLAG_DRYRUN|Emulate only; do not perform actions",
	"debug||flag|FLAG_DEBUG|Show debug messages",
	"help||flag|FLAG_HELP|Show command-line help and exit",
	"showargs||flag|FLAG_SHOWARGS|Print parsed arguments and exit",
	"showcfg||flag|FLAG_SHOWCFG|Print configuration values and exit",
	"showstate||flag|FLAG_SHOWSTATE|Print state values and exit",
	"statereset||flag|FLAG_STATERESET|Reset the state file",
	"verbose||flag|FLAG_VERBOSE|Enable verbose output",
	"version||flag|FLAG_VERSION|Print version information and exit",
))


@dataclass(slots=True)
class CommandLine:
	"""
	Combined outcome of the builtins pass and the script pass.
	"""
	builtins: ParseResult
	script: ParseResult
	script_specs: list[ArgSpec] = field(default_factory=list)

	@property
	def values(self) -> dict[str, Any]:
		merged = dict(self.builtins.values)
		merged.update(self.script.values)
		return merged

	@property
	def positional(self) -> list[str]:
		return list(self.script.positional)

	def flag(self, var: str) -> bool:
		return bool(self.builtins.get(var, False))

	def get(self, var: str, default: Any = None) -> Any:
		return self.values.get(var, default)


def parse_command_line(argv: Sequence[str], script_specs: Iterable[ArgSpecLike] = ()) -> CommandLine:
	"""
	Parse framework builtins first, then hand the remainder to the script specs.

	Raises:
		ArgParseError: from the strict script pass.
	"""
	specs = coerce_arg_specs(script_specs)

	builtins = ArgParser(BUILTIN_ARGS, ParseMode.BUILTINS).parse(argv)
	remainder = builtins.positional

	if specs and remainder:
		script = ArgParser(specs, ParseMode.STRICT).parse(remainder)
	else:
		script = ParseResult(
			values={s.var: s.default for s in specs},
			positional=list(remainder),
		)

	return CommandLine(builtins=builtins, script=script, script_specs=specs)
