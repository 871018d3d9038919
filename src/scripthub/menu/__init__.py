# ---------------------------------------------------------------------------
# File: menu/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public menu engine surface for scripthub.
#
# Notes:
#   - Uses lazy exports (PEP 562) so importing a single submodule stays cheap.
#   - Do NOT import from scripthub.menu inside menu modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Specs
	"MenuSpec", "SpecRegistry", "MalformedSpecError", "parse_spec",

	# Model
	"MenuFlag", "MenuEntry", "CompiledMenu", "MenuRegistry", "RUN_MODES_GROUP",

	# Compilation
	"build_from_specs", "apply_ordering", "compile_menu", "BuildReport",

	# Dispatch
	"HandlerTable", "Dispatcher", "DispatchOutcome", "DispatchResult", "HandlerNotFoundError",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"MenuSpec": ("scripthub.menu.specs", "MenuSpec"),
	"SpecRegistry": ("scripthub.menu.specs", "SpecRegistry"),
	"MalformedSpecError": ("scripthub.menu.specs", "MalformedSpecError"),
	"parse_spec": ("scripthub.menu.specs", "parse_spec"),

	"MenuFlag": ("scripthub.menu.flags", "MenuFlag"),
	"MenuEntry": ("scripthub.menu.registry", "MenuEntry"),
	"CompiledMenu": ("scripthub.menu.registry", "CompiledMenu"),
	"MenuRegistry": ("scripthub.menu.registry", "MenuRegistry"),
	"RUN_MODES_GROUP": ("scripthub.menu.groups", "RUN_MODES_GROUP"),

	"build_from_specs": ("scripthub.menu.compiler", "build_from_specs"),
	"apply_ordering": ("scripthub.menu.compiler", "apply_ordering"),
	"compile_menu": ("scripthub.menu.compiler", "compile_menu"),
	"BuildReport": ("scripthub.menu.compiler", "BuildReport"),

	"HandlerTable": ("scripthub.menu.handlers", "HandlerTable"),
	"Dispatcher": ("scripthub.menu.dispatch", "Dispatcher"),
	"DispatchOutcome": ("scripthub.menu.dispatch", "DispatchOutcome"),
	"DispatchResult": ("scripthub.menu.dispatch", "DispatchResult"),
	"HandlerNotFoundError": ("scripthub.menu.dispatch", "HandlerNotFoundError"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from scripthub.menu.specs import MenuSpec, SpecRegistry, MalformedSpecError, parse_spec
	from scripthub.menu.flags import MenuFlag
	from scripthub.menu.registry import MenuEntry, CompiledMenu, MenuRegistry
	from scripthub.menu.groups import RUN_MODES_GROUP
	from scripthub.menu.compiler import build_from_specs, apply_ordering, compile_menu, BuildReport
	from scripthub.menu.handlers import HandlerTable
	from scripthub.menu.dispatch import Dispatcher, DispatchOutcome, DispatchResult, HandlerNotFoundError
