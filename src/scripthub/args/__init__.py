# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Declarative argument parsing for scripthub.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from .spec import ArgSpec, ArgSpecError, ArgType, parse_arg_spec
from .parser import (
	ArgParseError,
	ArgParser,
	InvalidChoiceError,
	MissingValueError,
	ParseMode,
	ParseResult,
	UnknownOptionError,
)
from .builtins import BUILTIN_ARGS, CommandLine, parse_command_line
from .help import format_help

__all__ = [
	"ArgSpec",
	"ArgSpecError",
	"ArgType",
	"parse_arg_spec",
	"ArgParseError",
	"ArgParser",
	"InvalidChoiceError",
	"MissingValueError",
	"ParseMode",
	"ParseResult",
	"UnknownOptionError",
	"BUILTIN_ARGS",
	"CommandLine",
	"parse_command_line",
	"format_help",
]
