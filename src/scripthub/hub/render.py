# ---------------------------------------------------------------------------
# File: render.py
# ---------------------------------------------------------------------------
# Description:
#	Terminal rendering of a compiled menu (rich).
#
# Notes:
#	- Title bar shows the menu title and the current run mode.
#	- One section per group, in compiled group order.
#	- Items disabled in the current mode are dimmed.
#	- The Exit item is separated from the other run-mode items by a blank line.
#	- Labels are rendered as Text, never parsed as console markup.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.table import Table
from rich.text import Text

from scripthub.menu.groups import RUN_MODES_GROUP
from scripthub.menu.registry import MenuEntry, MenuRegistry


EXIT_KEY = "X"

COLORS = {
	"title": "bold cyan",
	"dryrun": "grey62",
	"commit": "dark_orange3",
	"section": "bold",
	"disabled": "dim",
	"rule": "grey42",
}


@dataclass(slots=True)
class MenuRenderer:
	"""
	MenuRenderer

	Renders a MenuRegistry's compiled entries to a rich Console.
	"""
	console: Console = field(default_factory=Console)
	pad: int = 2
	clear_screen: bool = True

	def render(self, registry: MenuRegistry, *, title: str, run_mode: str, dry_run: bool = False) -> None:
		if self.clear_screen:
			self.console.clear()

		self.render_title_bar(title, run_mode)

		for group in registry.groups:
			entries = registry.compiled.in_group(group)
			if not entries:
				continue
			self.render_group(group, entries, dry_run=dry_run)

	def render_title_bar(self, title: str, run_mode: str) -> None:
		mode_style = COLORS["dryrun"] if run_mode == "DRYRUN" else COLORS["commit"]

		bar = Table.grid(expand=True)
		bar.add_column(justify="left")
		bar.add_column(justify="right")
		bar.add_row(Text(title, style=COLORS["title"]), Text(run_mode, style=mode_style))

		self.console.rule(style=COLORS["rule"])
		self.console.print(bar)
		self.console.rule(style=COLORS["rule"])

	def render_group(self, group: str, entries: list[MenuEntry], *, dry_run: bool) -> None:
		self.console.print(Text(" " * self.pad + group, style=COLORS["section"]))

		indent = " " * (self.pad + 3)
		ends_with_exit = False

		for entry in entries:
			ends_with_exit = False
			if group == RUN_MODES_GROUP and entry.key.upper() == EXIT_KEY:
				self.console.print()
				ends_with_exit = True

			style = COLORS["disabled"] if entry.is_disabled(dry_run=dry_run) else ""
			self.console.print(Text(f"{indent}{entry.key}) {entry.label}", style=style))

		if ends_with_exit:
			self.console.rule(style=COLORS["rule"])
		else:
			self.console.print()
