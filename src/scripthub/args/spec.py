# ---------------------------------------------------------------------------
# File: spec.py
# ---------------------------------------------------------------------------
# Description:
#	Declarative option specs for ArgParser.
#
# Notes:
#	- Wire format: name|short|type|var|help|choices
#	- Trailing fields (help, choices) may be omitted.
#	- Enum choices are comma-separated.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Union


class ArgSpecError(ValueError):
	"""
	Raised for an unusable option spec (missing name/type/var, unknown type).
	"""


class ArgType(enum.Enum):
	FLAG = "flag"
	VALUE = "value"
	ENUM = "enum"


@dataclass(frozen=True, slots=True)
class ArgSpec:
	name: str
	type: ArgType
	var: str
	short: str = ""
	help: str = ""
	choices: tuple[str, ...] = ()

	@property
	def takes_value(self) -> bool:
		return self.type is not ArgType.FLAG

	@property
	def default(self) -> bool | str:
		return False if self.type is ArgType.FLAG else ""

	@property
	def long_opt(self) -> str:
		return f"--{self.name}"

	@property
	def short_opt(self) -> str:
		return f"-{self.short}" if self.short else ""


ArgSpecLike = Union[str, ArgSpec]


def parse_arg_spec(raw: str) -> ArgSpec:
	"""
	Parse "name|short|type|var|help|choices" into an ArgSpec.
	"""
	fields = raw.split("|")
	fields += [""] * (6 - len(fields))
	name, short, type_name, var, help_text, choices = (f.strip() for f in fields[:6])

	if not name or not type_name or not var:
		raise ArgSpecError(f"Arg spec missing name/type/var: {raw}")

	try:
		arg_type = ArgType(type_name)
	except ValueError as ex:
		raise ArgSpecError(f"Arg spec has unknown type {type_name!r}: {raw}") from ex

	choice_list = tuple(c.strip() for c in choices.split(",") if c.strip())

	return ArgSpec(
		name=name.lstrip("-"),
		type=arg_type,
		var=var,
		short=short.lstrip("-"),
		help=help_text,
		choices=choice_list,
	)


def coerce_arg_specs(specs: Iterable[ArgSpecLike]) -> list[ArgSpec]:
	return [s if isinstance(s, ArgSpec) else parse_arg_spec(s) for s in specs]
