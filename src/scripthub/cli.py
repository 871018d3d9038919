# ---------------------------------------------------------------------------
# File: cli.py
# ---------------------------------------------------------------------------
# Description:
#	Command-line entry point for scripthub.
#
# Notes:
#	- Builtin options are parsed first, then the hub's own options (strict).
#	- Info-only builtins (--help, --version, --showargs, --showcfg,
#	  --showstate) print and exit 0.
#	- --statereset resets the state file and continues (dry-run respected).
#	- Parse errors and applet errors exit 2.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Add --showcfg / --showstate
# 10/19/2026	Paul G. LeDuc				Pass configured base log level to the hub
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence

from rich.console import Console
from rich.table import Table

from scripthub import __version__
from scripthub.args import (
	BUILTIN_ARGS,
	ArgParseError,
	CommandLine,
	format_help,
	parse_arg_spec,
	parse_command_line,
)
from scripthub.core.config import ConfigError, HubSettings
from scripthub.core.logging import coerce_level, get_hub_logger, init_logging
from scripthub.core.telemetry import init_telemetry
from scripthub.hub import (
	AppletError,
	HubConsole,
	RunModes,
	ScriptHub,
	load_applet,
	resolve_module_dir,
	resolve_title,
)
from scripthub.menu.dispatch import DEFAULT_WAIT_SECONDS
from scripthub.menu.specs import parse_wait


SCRIPT_NAME = "scripthub"
SCRIPT_DESC = "Menu-driven launcher for module-provided actions."

HUB_ARGS = [parse_arg_spec(s) for s in (
	"title|t|value|VAL_TITLE|Menu title (overrides applet TITLE)",
	"applet|a|value|VAL_APP|Applet name (under the hub root) or absolute path",
	"moddir|m|value|VAL_MODDIR|Module directory (absolute, or relative to the hub directory)",
)]

EXAMPLES = [
	f"{SCRIPT_NAME} --applet tools",
	f"{SCRIPT_NAME} --dryrun --verbose --title 'My tools'",
	f"{SCRIPT_NAME} --moddir /opt/hub/mods",
]

EXIT_USAGE = 2


log = get_hub_logger("cli")


def main(
	argv: Optional[Sequence[str]] = None,
	*,
	environ: Optional[Mapping[str, str]] = None,
	io: Optional[HubConsole] = None,
) -> int:
	argv = list(sys.argv[1:] if argv is None else argv)
	out = io.console if io is not None else Console()
	err = Console(stderr=True)

	try:
		cmd = parse_command_line(argv, HUB_ARGS)
	except ArgParseError as ex:
		err.print(f"[red]error:[/] {ex}", highlight=False)
		err.print(f"Try '{SCRIPT_NAME} --help'.", highlight=False)
		return EXIT_USAGE

	try:
		settings = HubSettings.load(environ=environ)
	except ConfigError as ex:
		err.print(f"[red]error:[/] {ex}", highlight=False)
		return EXIT_USAGE

	# level the verbose toggle returns to; --debug pins it at DEBUG
	base_log_level = logging.DEBUG if cmd.flag("FLAG_DEBUG") else coerce_level(settings.get("logging.level"))

	if cmd.flag("FLAG_DEBUG") or cmd.flag("FLAG_VERBOSE"):
		settings.set("logging.level", "DEBUG", source="cli")

	init_logging(settings)
	telemetry = init_telemetry(settings, logger=get_hub_logger("telemetry"))

	# -- Info-only builtins

	if cmd.flag("FLAG_HELP"):
		out.print(
			format_help(SCRIPT_NAME, description=SCRIPT_DESC, script_specs=HUB_ARGS, examples=EXAMPLES),
			markup=False,
			highlight=False,
		)
		return 0

	if cmd.flag("FLAG_VERSION"):
		out.print(f"{SCRIPT_NAME} {__version__}", markup=False, highlight=False)
		return 0

	if cmd.flag("FLAG_SHOWARGS"):
		show_arguments(out, cmd)
		return 0

	if cmd.flag("FLAG_SHOWCFG"):
		show_settings(out, settings)
		return 0

	if cmd.flag("FLAG_SHOWSTATE"):
		show_state(out, settings)
		return 0

	# -- Mutating builtins

	if cmd.flag("FLAG_STATERESET"):
		if cmd.flag("FLAG_DRYRUN"):
			log.info("Would have reset state file.")
		else:
			settings.state_file.reset()
			log.info("State file reset as requested.")

	if cmd.positional:
		log.warning("Ignoring extra arguments: %s", " ".join(cmd.positional))

	# -- Identity + module directory

	hub_root = Path(str(settings.get("hub.root"))).expanduser()
	hub_id = str(settings.get("hub.id"))
	cli_title = cmd.get("VAL_TITLE") or None

	try:
		applet = None
		if cmd.get("VAL_APP"):
			applet = load_applet(hub_root, cmd.get("VAL_APP"), title=cli_title)
			hub_id = applet.hub_id

		title = resolve_title(cli_title, applet, default=str(settings.get("hub.title") or "Script Hub"))
		module_dir = resolve_module_dir(
			hub_root,
			hub_id,
			cli_moddir=cmd.get("VAL_MODDIR") or None,
			applet_moddir=applet.mod_dir if applet is not None else None,
		)
	except AppletError as ex:
		log.error("%s", ex)
		return EXIT_USAGE

	log.debug("Using module directory: %s Menu title: %s", module_dir, title)

	default_wait = parse_wait(settings.get("hub.wait_default"))

	hub = ScriptHub(
		title=title,
		module_dir=module_dir,
		modes=RunModes(verbose=cmd.flag("FLAG_VERBOSE"), dry_run=cmd.flag("FLAG_DRYRUN")),
		io=io,
		telemetry=telemetry,
		default_wait=DEFAULT_WAIT_SECONDS if default_wait is None else default_wait,
		base_log_level=base_log_level,
	)
	hub.load()
	return hub.run()


# ---------------------------------------------------------------------------
# Info printers
# ---------------------------------------------------------------------------

def show_arguments(console: Console, cmd: CommandLine) -> None:
	table = Table(title="Arguments / Flags", show_lines=False)
	table.add_column("Option")
	table.add_column("Variable")
	table.add_column("Value")

	for spec in list(BUILTIN_ARGS) + list(cmd.script_specs):
		label = f"--{spec.name} (-{spec.short})" if spec.short else f"--{spec.name}"
		table.add_row(label, spec.var, str(cmd.get(spec.var, "<unset>")))

	console.print(table)
	console.print(f"Positional: {' '.join(cmd.positional) or '<none>'}", markup=False, highlight=False)


def show_settings(console: Console, settings: HubSettings) -> None:
	table = Table(title="Configuration")
	table.add_column("Key")
	table.add_column("Value")
	table.add_column("Source")

	for key in sorted(settings.options):
		table.add_row(key, str(settings.get(key)), settings.source_of(key))

	console.print(table)


def show_state(console: Console, settings: HubSettings) -> None:
	state = settings.state_file
	table = Table(title=f"State ({state.path})")
	table.add_column("Key")
	table.add_column("Value")

	for key, value in state.load().items():
		table.add_row(key, value)

	console.print(table)
