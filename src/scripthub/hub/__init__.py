# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Hub composition: run modes, builtins, module discovery, applets,
#	rendering and the interactive loop.
#
# Notes:
#	- ScriptHub is the composition root; everything else is wired by it.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from .runmodes import RunModes
from .applet import Applet, AppletError, load_applet, resolve_module_dir, resolve_title
from .modules import ModuleLoader, ModuleRegistrar
from .console import HubConsole
from .render import MenuRenderer
from .hub import ScriptHub

__all__ = [
	"RunModes",
	"Applet",
	"AppletError",
	"load_applet",
	"resolve_module_dir",
	"resolve_title",
	"ModuleLoader",
	"ModuleRegistrar",
	"HubConsole",
	"MenuRenderer",
	"ScriptHub",
]
