# ---------------------------------------------------------------------------
# File: applet.py
# ---------------------------------------------------------------------------
# Description:
#	Applet definitions: named hub namespaces with their own title and
#	module directory.
#
# Notes:
#	- Applet files are KEY=VALUE files named <name>.app.conf under the hub root.
#	  Keys: TITLE, DESCRIPTION, HUB_ID, MOD_DIR.
#	- A missing applet file is created as a stub.
#	- Title precedence:       CLI --title > applet TITLE > "Script Hub"
#	- Module dir precedence:  CLI --moddir > applet MOD_DIR > HUB_ROOT/HUB_ID
#	- Relative module dirs resolve under HUB_ROOT/HUB_ID and are created.
#	  Absolute module dirs are user-owned: validated, never created.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/11/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Create applet stub for new default dirs
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from scripthub.core.config import ConfigError, KeyValueFile


log = logging.getLogger(__name__)

APPLET_SUFFIX = ".app.conf"
DEFAULT_TITLE = "Script Hub"

_APP_NAME_RE = re.compile(r"^[A-Za-z0-9._-]+$")


class AppletError(RuntimeError):
	"""
	Invalid applet name/file or an unusable module directory.
	"""


@dataclass(slots=True)
class Applet:
	name: str
	path: Path
	hub_id: str
	title: str = ""
	description: str = ""
	mod_dir: str = ""
	created: bool = False


def applet_file(hub_root: Path, name: str) -> Path:
	return Path(hub_root) / f"{name}{APPLET_SUFFIX}"


def applet_base_name(path: Path) -> str:
	name = path.name
	if name.endswith(APPLET_SUFFIX):
		return name[: -len(APPLET_SUFFIX)]
	return path.stem


def infer_title(name: str) -> str:
	"""
	"my-tools_x" -> "My tools x"
	"""
	title = re.sub(r"[-_]", " ", name)
	return title[:1].upper() + title[1:]


def create_applet_stub(path: Path, hub_root: Path, *, title: Optional[str] = None) -> Applet:
	"""
	Write a new applet definition with inferred defaults.
	"""
	base = applet_base_name(path)
	hub_id = base
	app_dir = Path(hub_root) / hub_id

	try:
		app_dir.mkdir(parents=True, exist_ok=True)
	except OSError as ex:
		raise AppletError(f"Failed to create applet directory: {app_dir}") from ex

	title = title or infer_title(base)

	lines = [
		"# Script Hub applet definition",
		"# Declarative KEY=VALUE pairs only.",
		"",
		"# --- Identity ---",
		f"TITLE={title}",
		"DESCRIPTION=",
		"",
		"# Stable hub identifier (used for defaults and paths)",
		f"HUB_ID={hub_id}",
		"",
		"# --- Module directory ---",
		f"MOD_DIR={app_dir}",
	]

	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text("\n".join(lines) + "\n", encoding="utf-8")
	log.info("Applet stub created: %s", path)

	return Applet(
		name=base,
		path=path,
		hub_id=hub_id,
		title=title,
		mod_dir=str(app_dir),
		created=True,
	)


def load_applet(hub_root: Path | str, app: str, *, title: Optional[str] = None) -> Applet:
	"""
	Resolve and read an applet definition, creating a stub when missing.

	Raises:
		AppletError: invalid name or unreadable file.
	"""
	hub_root = Path(hub_root)
	if not app:
		raise AppletError("Applet name required")

	candidate = Path(app)
	if candidate.is_absolute():
		path = candidate
	else:
		if not _APP_NAME_RE.match(app):
			raise AppletError(f"Invalid app name: {app!r}")
		path = applet_file(hub_root, app)

	created = False
	if not path.exists():
		log.warning("Applet definition not found; creating: %s", path)
		create_applet_stub(path, hub_root, title=title)
		created = True

	try:
		values = KeyValueFile(path).load()
	except ConfigError as ex:
		raise AppletError(f"Applet definition not readable: {path}") from ex

	name = applet_base_name(path)
	log.debug("Loaded applet definition: %s", path)

	return Applet(
		name=name,
		path=path,
		hub_id=values.get("HUB_ID") or name,
		title=values.get("TITLE", ""),
		description=values.get("DESCRIPTION", ""),
		mod_dir=values.get("MOD_DIR", ""),
		created=created,
	)


def resolve_title(cli_title: Optional[str], applet: Optional[Applet] = None, default: str = DEFAULT_TITLE) -> str:
	if cli_title:
		return cli_title
	if applet is not None and applet.title:
		return applet.title
	return default


def resolve_module_dir(
	hub_root: Path | str,
	hub_id: str,
	*,
	cli_moddir: Optional[str] = None,
	applet_moddir: Optional[str] = None,
) -> Path:
	"""
	Resolve (and where framework-owned, create) the module directory.

	Raises:
		AppletError: an absolute path that does not exist, or a directory
			that cannot be created.
	"""
	hub_root = Path(hub_root)
	default_dir = hub_root / hub_id

	try:
		hub_root.mkdir(parents=True, exist_ok=True)
	except OSError as ex:
		raise AppletError(f"Failed to create hub root: {hub_root}") from ex

	raw = cli_moddir or applet_moddir or ""
	ensure = True

	if raw:
		candidate = Path(raw).expanduser()
		if candidate.is_absolute():
			mod_dir = candidate
			ensure = False
		else:
			mod_dir = default_dir / candidate
	else:
		mod_dir = default_dir

	if not mod_dir.is_dir():
		if not ensure:
			raise AppletError(f"Module directory does not exist: {mod_dir}")

		try:
			mod_dir.mkdir(parents=True, exist_ok=True)
		except OSError as ex:
			raise AppletError(f"Failed to create module directory: {mod_dir}") from ex
		log.debug("Ensured %s exists.", mod_dir)

		if mod_dir == default_dir:
			stub = applet_file(hub_root, hub_id)
			if not stub.exists():
				log.warning("Applet definition not found; creating: %s", stub)
				create_applet_stub(stub, hub_root)

	log.debug("Using module directory: %s", mod_dir)
	return mod_dir
