# ---------------------------------------------------------------------------
# File: modules.py
# ---------------------------------------------------------------------------
# Description:
#	Module discovery: load *.py files from a directory and collect their
#	menu specs + handlers.
#
# Notes:
#	- Files are loaded in name order; files starting with "_" are skipped.
#	- A module contributes either a MENU_SPECS list (handler names resolve
#	  against module attributes) or a register(registrar) function.
#	- Records are tagged with the module filename as their source.
#	- Handler names share one namespace; a later module redefines an earlier
#	  module's handler of the same name.
#	- A module that fails to import is logged and skipped.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release
# 10/12/2026	Paul G. LeDuc				Add register(registrar) protocol
# 10/19/2026	Paul G. LeDuc				Reset loaded/failed per scan
# ---------------------------------------------------------------------------

from __future__ import annotations

import importlib.util
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Iterable, Optional

from scripthub.menu.handlers import HandlerTable
from scripthub.menu.registry import MenuRegistry
from scripthub.menu.specs import Handler, MalformedSpecError, SpecRecord, coerce_spec, with_source


log = logging.getLogger(__name__)

MODULE_PACKAGE = "scripthub_modules"


class ModuleRegistrar:
	"""
	Handed to a module's register() function.
	"""

	def __init__(self, source: str, registry: MenuRegistry, handlers: HandlerTable) -> None:
		self.source = source
		self._registry = registry
		self._handlers = handlers
		self.spec_count = 0

	def add_menu(self, specs: Iterable[SpecRecord]) -> None:
		self.spec_count += self._registry.specs.add_from_source(self.source, specs)

	def add_handler(self, name: str, handler: Handler) -> None:
		self._handlers.register(name, handler)


@dataclass(slots=True)
class LoadedModule:
	name: str
	path: Path
	spec_count: int = 0


@dataclass(slots=True)
class ModuleLoader:
	"""
	ModuleLoader

	Loads module files and feeds their contributions into a MenuRegistry
	and a HandlerTable.
	"""
	registry: MenuRegistry
	handlers: HandlerTable
	loaded: list[LoadedModule] = field(default_factory=list)
	failed: list[tuple[Path, str]] = field(default_factory=list)

	def load_directory(self, path: Path | str) -> list[LoadedModule]:
		"""
		Scan `path`. loaded/failed describe this scan only.
		"""
		self.loaded.clear()
		self.failed.clear()

		directory = Path(path)
		if not directory.is_dir():
			log.warning("No module directory: %s", directory)
			return []

		out: list[LoadedModule] = []
		for file in sorted(directory.glob("*.py")):
			if file.name.startswith("_"):
				continue
			loaded = self.load_file(file)
			if loaded is not None:
				out.append(loaded)
		return out

	def load_file(self, path: Path) -> Optional[LoadedModule]:
		try:
			module = _import_file(path)
		except Exception as ex:
			log.error("Failed to load module %s: %s", path.name, ex)
			log.debug("Module load traceback", exc_info=True)
			self.failed.append((path, str(ex)))
			return None

		loaded = LoadedModule(name=path.name, path=path)

		register = getattr(module, "register", None)
		specs = getattr(module, "MENU_SPECS", None)

		if callable(register):
			registrar = ModuleRegistrar(path.name, self.registry, self.handlers)
			try:
				register(registrar)
			except Exception as ex:
				log.error("Module %s register() failed: %s", path.name, ex)
				log.debug("Module register traceback", exc_info=True)
				self.failed.append((path, str(ex)))
				return None
			loaded.spec_count = registrar.spec_count
		elif specs is not None:
			loaded.spec_count = self._add_module_specs(module, path.name, specs)
		else:
			log.debug("Module provided no MENU_SPECS: %s", path.name)

		self.loaded.append(loaded)
		return loaded

	def _add_module_specs(self, module: ModuleType, source: str, specs: Iterable[SpecRecord]) -> int:
		records = [with_source(r, source) for r in specs]
		for record in records:
			self._bind_handler(module, record)
		self.registry.add_specs(records)
		return len(records)

	def _bind_handler(self, module: ModuleType, record: SpecRecord) -> None:
		try:
			spec = coerce_spec(record)
		except MalformedSpecError:
			# reported by the compiler
			return

		if not isinstance(spec.handler, str):
			return

		fn = getattr(module, spec.handler, None)
		if callable(fn):
			self.handlers.register(spec.handler, fn)
		elif spec.handler not in self.handlers:
			log.warning("Module %s: handler %r is not defined", spec.source, spec.handler)


def _import_file(path: Path) -> ModuleType:
	module_name = f"{MODULE_PACKAGE}.{path.stem}"
	spec = importlib.util.spec_from_file_location(module_name, path)
	if spec is None or spec.loader is None:
		raise ImportError(f"Cannot load module from {path}")

	module = importlib.util.module_from_spec(spec)
	sys.modules[module_name] = module
	try:
		spec.loader.exec_module(module)
	except BaseException:
		sys.modules.pop(module_name, None)
		raise
	return module
