# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	KEY=VALUE config/state files + layered hub settings.
#
# Notes:
#	- Config files are user-editable inputs; state files are hub-managed outputs.
#	  Both share the same plain KEY=VALUE format.
#	- Blank lines and '#' comments are ignored. Values are stored verbatim
#	  (everything after the first '='); no quoting or escape interpretation.
#	- Keys must be identifiers: [A-Za-z_][A-Za-z0-9_]*
#	- HubSettings layering: defaults < config file < environment (SCRIPTHUB_*).
#	  CLI flags are applied by the caller on top.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	Paul G. LeDuc				Initial coding / release
# 10/03/2026	Paul G. LeDuc				Add HubSettings (replaces AppConfig)
# 10/07/2026	Paul G. LeDuc				Atomic rewrite on set/unset, private file mode
# ---------------------------------------------------------------------------

from __future__ import annotations

import os
import re
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional


_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

ENV_PREFIX = "SCRIPTHUB_"


class ConfigError(ValueError):
	"""
	Raised for invalid keys or unreadable config/state files.
	"""


_FALSE_WORDS = ("", "0", "false", "no", "off")


def as_bool(value: Any) -> bool:
	"""
	Read a setting as a boolean. Text values "0", "false", "no", "off" and ""
	are False.
	"""
	if isinstance(value, str):
		return value.strip().lower() not in _FALSE_WORDS
	return bool(value)


def is_ident(key: str) -> bool:
	return bool(_IDENT_RE.match(key or ""))


def _require_ident(key: str) -> None:
	if not is_ident(key):
		raise ConfigError(f"Invalid config key: {key!r}")


class KeyValueFile:
	"""
	KeyValueFile

	A single KEY=VALUE file on disk. A missing file behaves as empty.
	"""

	def __init__(self, path: str | os.PathLike[str]) -> None:
		self.path = Path(path)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} path={str(self.path)!r}>"

	# -----------------------------------------------------------------------
	# Read
	# -----------------------------------------------------------------------

	def exists(self) -> bool:
		return self.path.is_file()

	def items(self) -> list[tuple[str, str]]:
		"""
		Return (key, value) pairs in file order (duplicates preserved).
		"""
		if not self.path.is_file():
			return []

		try:
			text = self.path.read_text(encoding="utf-8")
		except OSError as ex:
			raise ConfigError(f"Cannot read {self.path}: {ex}") from ex

		out: list[tuple[str, str]] = []
		for raw in text.splitlines():
			line = raw.strip()
			if not line or line.startswith("#"):
				continue
			if "=" not in line:
				continue

			key, _, value = line.partition("=")
			key = key.strip()
			if not is_ident(key):
				continue

			out.append((key, value))
		return out

	def load(self) -> dict[str, str]:
		"""
		Load the file into a dict. Later duplicates win.
		"""
		return dict(self.items())

	def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
		_require_ident(key)
		return self.load().get(key, default)

	def has(self, key: str) -> bool:
		_require_ident(key)
		return key in self.load()

	def keys(self) -> list[str]:
		return list(self.load().keys())

	# -----------------------------------------------------------------------
	# Write
	# -----------------------------------------------------------------------

	def set(self, key: str, value: Any) -> None:
		"""
		Upsert KEY=VALUE. Existing KEY= lines are removed and the new
		assignment is appended. Creates the parent directory if needed.
		"""
		_require_ident(key)
		lines = [ln for ln in self._raw_lines() if not self._matches(ln, key)]
		lines.append(f"{key}={'' if value is None else value}")
		self._write(lines)

	def unset(self, key: str) -> None:
		"""
		Remove KEY= lines. The file is deleted if nothing remains.
		"""
		_require_ident(key)
		if not self.path.is_file():
			return

		lines = [ln for ln in self._raw_lines() if not self._matches(ln, key)]
		if not any(ln.strip() for ln in lines):
			self.path.unlink(missing_ok=True)
			return
		self._write(lines)

	def reset(self) -> None:
		"""
		Hard-delete the file.
		"""
		self.path.unlink(missing_ok=True)

	def update(self, values: Mapping[str, Any]) -> None:
		for key, value in values.items():
			self.set(key, value)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _raw_lines(self) -> list[str]:
		if not self.path.is_file():
			return []
		return self.path.read_text(encoding="utf-8").splitlines()

	@staticmethod
	def _matches(line: str, key: str) -> bool:
		return re.match(rf"^\s*{re.escape(key)}\s*=", line) is not None

	def _write(self, lines: list[str]) -> None:
		parent = self.path.parent
		parent.mkdir(parents=True, exist_ok=True)

		fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(parent))
		try:
			with os.fdopen(fd, "w", encoding="utf-8") as fh:
				fh.write("\n".join(lines) + "\n")
			os.chmod(tmp, 0o600)
			os.replace(tmp, self.path)
		except BaseException:
			if os.path.exists(tmp):
				os.unlink(tmp)
			raise


# ---------------------------------------------------------------------------
# Layered settings
# ---------------------------------------------------------------------------

# Dotted setting key -> KEY=VALUE file / environment suffix
SETTING_FILE_KEYS: dict[str, str] = {
	"hub.root": "HUB_ROOT",
	"hub.id": "HUB_ID",
	"hub.title": "HUB_TITLE",
	"hub.wait_default": "WAIT_DEFAULT",
	"state.file": "STATE_FILE",
	"logging.level": "LOG_LEVEL",
	"logging.file": "LOG_FILE",
	"logging.console": "LOG_CONSOLE",
	"telemetry.enabled": "TELEMETRY_ENABLED",
	"telemetry.sink": "TELEMETRY_SINK",
}


def default_settings(home: Path | None = None) -> dict[str, Any]:
	home = home if home is not None else Path.home()
	return {
		"hub.root": str(home / ".local" / "share" / "scripthub" / "hub"),
		"hub.id": "scripthub",
		"hub.title": "Script Hub",
		"hub.wait_default": "2",
		"config.file": str(home / ".config" / "scripthub" / "scripthub.conf"),
		"state.file": str(home / ".local" / "state" / "scripthub" / "scripthub.state"),
		"logging.level": "INFO",
		"logging.console": True,
		"telemetry.enabled": False,
		"telemetry.sink": "null",
	}


@dataclass(slots=True)
class HubSettings:
	"""
	HubSettings

	Read-mostly settings view. Supports get(key, default) so it can be passed
	straight to init_logging()/init_telemetry().
	"""
	options: dict[str, Any] = field(default_factory=dict)
	sources: dict[str, str] = field(default_factory=dict)

	def get(self, key: str, default: Any = None) -> Any:
		return self.options.get(key, default)

	def set(self, key: str, value: Any, *, source: str = "cli") -> None:
		self.options[key] = value
		self.sources[key] = source

	def source_of(self, key: str) -> str:
		return self.sources.get(key, "unset")

	@property
	def config_file(self) -> KeyValueFile:
		return KeyValueFile(self.options["config.file"])

	@property
	def state_file(self) -> KeyValueFile:
		return KeyValueFile(self.options["state.file"])

	@classmethod
	def load(
		cls,
		*,
		config_path: str | os.PathLike[str] | None = None,
		environ: Mapping[str, str] | None = None,
		home: Path | None = None,
	) -> "HubSettings":
		"""
		Build settings from defaults, then the config file, then the environment.
		"""
		env = os.environ if environ is None else environ
		settings = cls()

		for key, value in default_settings(home).items():
			settings.set(key, value, source="default")

		cfg_path = config_path or env.get(f"{ENV_PREFIX}CONFIG_FILE")
		if cfg_path:
			settings.set("config.file", str(cfg_path), source="env" if config_path is None else "cli")

		file_values = settings.config_file.load()
		for key, file_key in SETTING_FILE_KEYS.items():
			if file_key in file_values:
				settings.set(key, file_values[file_key], source="config")

		for key, file_key in SETTING_FILE_KEYS.items():
			env_val = env.get(f"{ENV_PREFIX}{file_key}")
			if env_val is not None:
				settings.set(key, env_val, source="env")

		return settings
