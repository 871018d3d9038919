# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Root logger setup for scripthub (stdlib logging + rich console output).
#
# Notes:
#	- Console records go to stderr through rich's RichHandler so they do not
#	  interleave with the menu on stdout.
#	- Handlers installed here are named "scripthub.*". Re-init replaces them
#	  and never duplicates them; foreign handlers are only cleared when
#	  logging.reset_root is set.
#	- Re-init with identical settings is a no-op.
#
#	Settings (dotted key first, legacy flat key second):
#		level		logging.level / log_level			INFO
#		console		logging.console / log_console		True
#		file		logging.file / log_file				None
#		file_mode	logging.file_mode / log_file_mode	"a"
#		reset_root	logging.reset_root / log_reset_root	True
#		fmt			logging.format / log_format			(file format)
#		datefmt		logging.datefmt / log_datefmt		"%Y-%m-%d %H:%M:%S"
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	Paul G. LeDuc				Initial coding / release
# 10/05/2026	Paul G. LeDuc				Add get_hub_logger + set_log_level for verbose toggle
# 10/16/2026	Paul G. LeDuc				LogSettings, RichHandler console, named handlers
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

from scripthub.core.config import as_bool


HUB_LOGGER = "scripthub.hub"

CONSOLE_HANDLER = "scripthub.console"
FILE_HANDLER = "scripthub.file"

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_KEYS: dict[str, tuple[str, str]] = {
	"level": ("logging.level", "log_level"),
	"console": ("logging.console", "log_console"),
	"file": ("logging.file", "log_file"),
	"file_mode": ("logging.file_mode", "log_file_mode"),
	"reset_root": ("logging.reset_root", "log_reset_root"),
	"fmt": ("logging.format", "log_format"),
	"datefmt": ("logging.datefmt", "log_datefmt"),
}


@dataclass(frozen=True, slots=True)
class LogSettings:
	level: int = logging.INFO
	console: bool = True
	file: Optional[str] = None
	file_mode: str = "a"
	reset_root: bool = True
	fmt: str = _DEFAULT_FORMAT
	datefmt: str = _DEFAULT_DATEFMT

	@classmethod
	def from_cfg(cls, cfg: Any | None) -> "LogSettings":
		"""
		Build from anything with get(key, default) (HubSettings, dict) or None.
		"""
		raw = {name: _lookup(cfg, keys) for name, keys in _KEYS.items()}
		defaults = cls()

		log_file = raw["file"]
		mode = str(raw["file_mode"] or "a").strip().lower()

		return cls(
			level=defaults.level if raw["level"] is None else coerce_level(raw["level"]),
			console=defaults.console if raw["console"] is None else as_bool(raw["console"]),
			file=str(log_file) if log_file else None,
			file_mode=mode if mode in ("a", "w") else "a",
			reset_root=defaults.reset_root if raw["reset_root"] is None else as_bool(raw["reset_root"]),
			fmt=str(raw["fmt"] or defaults.fmt),
			datefmt=str(raw["datefmt"] or defaults.datefmt),
		)


_active: Optional[LogSettings] = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_hub_logger(component: str | None = None) -> logging.Logger:
	"""
	get_hub_logger()          -> scripthub.hub
	get_hub_logger("cli")     -> scripthub.hub.cli
	"""
	if component:
		return logging.getLogger(f"{HUB_LOGGER}.{component}")
	return logging.getLogger(HUB_LOGGER)


def init_logging(cfg: Any | None = None) -> LogSettings:
	"""
	Configure the root logger from cfg. Returns the settings in effect.
	"""
	global _active

	settings = LogSettings.from_cfg(cfg)
	if settings == _active:
		return settings

	root = logging.getLogger()
	root.setLevel(settings.level)

	for h in list(root.handlers):
		if settings.reset_root or _is_hub_handler(h):
			root.removeHandler(h)
			if _is_hub_handler(h):
				h.close()

	if settings.console:
		root.addHandler(_console_handler(settings))
	if settings.file:
		root.addHandler(_file_handler(settings))

	_active = settings
	return settings


def set_log_level(level: Any) -> int:
	"""
	Change the root logger level (and its handlers) at runtime.
	Returns the resolved numeric level.
	"""
	resolved = coerce_level(level)
	root = logging.getLogger()
	root.setLevel(resolved)
	for h in root.handlers:
		h.setLevel(resolved)
	return resolved


def coerce_level(level: Any) -> int:
	if isinstance(level, bool):
		return logging.INFO
	if isinstance(level, int):
		return level
	if isinstance(level, str):
		text = level.strip().upper()
		if text.isdigit():
			return int(text)
		resolved = logging.getLevelName(text)
		if isinstance(resolved, int):
			return resolved
	return logging.INFO


def hub_handlers(logger: Optional[logging.Logger] = None) -> list[logging.Handler]:
	"""
	Handlers installed by init_logging() on `logger` (default: root).
	"""
	target = logger or logging.getLogger()
	return [h for h in target.handlers if _is_hub_handler(h)]


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _lookup(cfg: Any | None, keys: tuple[str, ...]) -> Any:
	if cfg is None:
		return None
	for key in keys:
		val = cfg.get(key, None)
		if val is not None:
			return val
	return None


def _is_hub_handler(handler: logging.Handler) -> bool:
	return handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)


def _console_handler(settings: LogSettings) -> logging.Handler:
	handler = RichHandler(
		console=Console(stderr=True),
		show_path=False,
		markup=False,
		rich_tracebacks=False,
		log_time_format=f"[{settings.datefmt}]",
	)
	handler.set_name(CONSOLE_HANDLER)
	handler.setLevel(settings.level)
	handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
	return handler


def _file_handler(settings: LogSettings) -> logging.Handler:
	path = Path(settings.file or "").expanduser()
	path.parent.mkdir(parents=True, exist_ok=True)

	handler = logging.FileHandler(path, mode=settings.file_mode, encoding="utf-8")
	handler.set_name(FILE_HANDLER)
	handler.setLevel(settings.level)
	handler.setFormatter(logging.Formatter(fmt=settings.fmt, datefmt=settings.datefmt))
	return handler


def _reset_logging_for_tests() -> None:
	global _active
	_active = None
