# ---------------------------------------------------------------------------
# File: console.py
# ---------------------------------------------------------------------------
# Description:
#	Interactive terminal I/O for the hub (choice prompt + post-action wait).
#
# Notes:
#	- prompt_fn and sleep are injectable so the loop can run headless.
#	- Waits count down in whole seconds, then sleep any fractional remainder
#	  (1.5 -> 1s tick + 0.5s). Zero or negative waits return immediately.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/19/2026	Paul G. LeDuc				Honour fractional waits
# ---------------------------------------------------------------------------

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text


PromptFn = Callable[[str], str]
SleepFn = Callable[[float], None]

DEFAULT_PROMPT = "Select option"


@dataclass(slots=True)
class HubConsole:
	console: Console = field(default_factory=Console)
	prompt_fn: Optional[PromptFn] = None
	sleep: SleepFn = time.sleep

	def ask_choice(self, label: str = DEFAULT_PROMPT) -> str:
		"""
		Read one menu choice. EOFError / KeyboardInterrupt propagate.
		"""
		if self.prompt_fn is not None:
			return self.prompt_fn(label)
		return Prompt.ask(label, console=self.console, default="", show_default=False)

	def wait_after_action(self, seconds: float) -> None:
		if seconds <= 0:
			return

		whole = int(seconds)
		rest = seconds - whole

		with self.console.status("[dim]Continuing...[/]", spinner="dots") as status:
			for remaining in range(whole, 0, -1):
				status.update(f"[dim]Continuing in {remaining}s...[/]")
				self.sleep(1.0)
			if rest > 0:
				self.sleep(rest)

	def info(self, message: str) -> None:
		self.console.print(Text(message, style="dim"))
