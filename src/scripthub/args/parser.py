# ---------------------------------------------------------------------------
# File: parser.py
# ---------------------------------------------------------------------------
# Description:
#	Declarative argv parser driven by ArgSpec lists.
#
# Notes:
#	- Every parse() starts from type defaults (flag -> False, value/enum -> "").
#	- "--" ends option scanning; the remainder is positional, verbatim.
#	- The first non-option token ends scanning (no interleaving).
#	- ParseMode.STRICT raises on unknown options.
#	  ParseMode.BUILTINS treats an unknown option as the boundary: it and
#	  everything after it become positional for a later, stricter pass.
#	- "--name" matches spec names, "-s" matches spec shorts.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Add parse(into=...) binding target
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, MutableMapping, Optional, Sequence

from scripthub.args.spec import ArgSpec, ArgSpecLike, ArgType, coerce_arg_specs


log = logging.getLogger(__name__)


class ParseMode(enum.Enum):
	STRICT = "strict"
	BUILTINS = "builtins"


class ArgParseError(ValueError):
	"""
	Base class for argv errors. `token` names the offending argv token.
	"""

	def __init__(self, message: str, token: str) -> None:
		super().__init__(message)
		self.token = token


class UnknownOptionError(ArgParseError):
	def __init__(self, token: str) -> None:
		super().__init__(f"Unknown option: {token}", token)


class MissingValueError(ArgParseError):
	def __init__(self, token: str) -> None:
		super().__init__(f"Missing value for {token}", token)


class InvalidChoiceError(ArgParseError):
	def __init__(self, token: str, value: str, choices: Sequence[str]) -> None:
		allowed = ",".join(choices) if choices else "<none>"
		super().__init__(f"Invalid value '{value}' for {token} (allowed: {allowed})", token)
		self.value = value
		self.choices = tuple(choices)


@dataclass(slots=True)
class ParseResult:
	values: dict[str, Any] = field(default_factory=dict)
	positional: list[str] = field(default_factory=list)

	def get(self, var: str, default: Any = None) -> Any:
		return self.values.get(var, default)

	def __getitem__(self, var: str) -> Any:
		return self.values[var]

	def __contains__(self, var: object) -> bool:
		return var in self.values


class ArgParser:
	"""
	ArgParser

	Applies a list of ArgSpec records to argv.
	"""

	def __init__(self, specs: Iterable[ArgSpecLike], mode: ParseMode = ParseMode.STRICT) -> None:
		self.specs: list[ArgSpec] = coerce_arg_specs(specs)
		self.mode = mode

	# -----------------------------------------------------------------------
	# Lookup
	# -----------------------------------------------------------------------

	def defaults(self) -> dict[str, Any]:
		return {s.var: s.default for s in self.specs}

	def find_long(self, name: str) -> Optional[ArgSpec]:
		for spec in self.specs:
			if spec.name == name:
				return spec
		return None

	def find_short(self, short: str) -> Optional[ArgSpec]:
		for spec in self.specs:
			if spec.short and spec.short == short:
				return spec
		return None

	def find(self, token: str) -> Optional[ArgSpec]:
		if token.startswith("--"):
			return self.find_long(token[2:])
		if token.startswith("-"):
			return self.find_short(token[1:])
		return None

	# -----------------------------------------------------------------------
	# Parse
	# -----------------------------------------------------------------------

	def parse(self, argv: Sequence[str], into: Any = None) -> ParseResult:
		"""
		Parse argv.

		`into` may be a mutable mapping or any object; defaults and bound
		values are written to it as well as to the returned ParseResult.

		Raises:
			UnknownOptionError: unknown option in STRICT mode.
			MissingValueError: value/enum option at end of argv.
			InvalidChoiceError: enum value not in the allowed set.
		"""
		result = ParseResult(values=self.defaults())
		for var, value in result.values.items():
			_bind(into, var, value)

		tokens = list(argv)
		i = 0
		while i < len(tokens):
			token = tokens[i]

			if token == "--":
				result.positional.extend(tokens[i + 1:])
				break

			if not _looks_like_option(token):
				result.positional.extend(tokens[i:])
				break

			spec = self.find(token)
			if spec is None:
				if self.mode is ParseMode.BUILTINS:
					log.debug("Unknown option %s; handing off remainder", token)
					result.positional.extend(tokens[i:])
					break
				raise UnknownOptionError(token)

			if spec.type is ArgType.FLAG:
				value: Any = True
				i += 1
			else:
				if i + 1 >= len(tokens):
					raise MissingValueError(token)
				value = tokens[i + 1]
				if spec.type is ArgType.ENUM and value not in spec.choices:
					raise InvalidChoiceError(token, value, spec.choices)
				i += 2

			result.values[spec.var] = value
			_bind(into, spec.var, value)

		return result


def _looks_like_option(token: str) -> bool:
	return token.startswith("-") and token != "-"


def _bind(target: Any, var: str, value: Any) -> None:
	if target is None:
		return
	if isinstance(target, MutableMapping):
		target[var] = value
	else:
		setattr(target, var, value)
