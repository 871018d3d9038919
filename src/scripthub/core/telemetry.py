# ---------------------------------------------------------------------------
# File: telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Lightweight telemetry for the menu engine.
#
#	Emitted by scripthub:
#		event	menu.dispatch			{key, outcome, handler?}
#		metric	menu.specs.skipped		count per build
#		metric	menu.keys.renumbered	count per build
#		metric	menu.build.duration_ms	timer
#
# Notes:
#	- Every record goes through a single sink method; sinks are picked by
#	  name from telemetry.sink ("null", "log").
#	- A disabled Telemetry never touches its sink.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				MemorySink query helpers for menu tests
# 10/16/2026	Paul G. LeDuc				Single record type + named sink factories
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Protocol

from scripthub.core.config import as_bool


Attrs = dict[str, Any]


class RecordKind(enum.Enum):
	EVENT = "event"
	METRIC = "metric"


@dataclass(frozen=True, slots=True)
class TelemetryRecord:
	kind: RecordKind
	name: str
	value: float = 0.0
	attrs: Attrs = field(default_factory=dict)
	timestamp: float = field(default_factory=time.time)


class TelemetrySink(Protocol):
	def emit(self, record: TelemetryRecord) -> None:
		...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	def emit(self, record: TelemetryRecord) -> None:
		return


class LogSink:
	"""
	Writes records to a logger at DEBUG (visible in verbose mode).
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit(self, record: TelemetryRecord) -> None:
		if record.kind is RecordKind.EVENT:
			self._log.debug("telemetry.event name=%s attrs=%s", record.name, record.attrs)
		else:
			self._log.debug(
				"telemetry.metric name=%s value=%s attrs=%s",
				record.name,
				record.value,
				record.attrs,
			)


class MemorySink:
	"""
	Keeps every record; used by tests.
	"""

	def __init__(self) -> None:
		self.records: list[TelemetryRecord] = []

	def emit(self, record: TelemetryRecord) -> None:
		self.records.append(record)

	@property
	def events(self) -> list[TelemetryRecord]:
		return [r for r in self.records if r.kind is RecordKind.EVENT]

	@property
	def metrics(self) -> list[TelemetryRecord]:
		return [r for r in self.records if r.kind is RecordKind.METRIC]

	def events_named(self, name: str) -> list[TelemetryRecord]:
		return [r for r in self.events if r.name == name]

	def metric_total(self, name: str) -> float:
		return sum(r.value for r in self.metrics if r.name == name)

	def clear(self) -> None:
		self.records.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Stopwatch:
	started: float = field(default_factory=time.perf_counter)
	elapsed_ms: float = 0.0

	def stop(self) -> float:
		self.elapsed_ms = (time.perf_counter() - self.started) * 1000.0
		return self.elapsed_ms


@dataclass(slots=True)
class Telemetry:
	enabled: bool
	sink: TelemetrySink = field(default_factory=NullSink)

	def event(self, name: str, attrs: Optional[Attrs] = None) -> None:
		if self.enabled:
			self.sink.emit(TelemetryRecord(RecordKind.EVENT, name, attrs=dict(attrs or {})))

	def counter(self, name: str, value: float = 1, attrs: Optional[Attrs] = None) -> None:
		if self.enabled:
			self.sink.emit(TelemetryRecord(RecordKind.METRIC, name, float(value), dict(attrs or {})))

	@contextmanager
	def timer(self, name: str, attrs: Optional[Attrs] = None) -> Iterator[Stopwatch]:
		"""
		Report the block's duration in whole milliseconds, also on error.
		"""
		watch = Stopwatch()
		try:
			yield watch
		finally:
			self.counter(name, int(watch.stop()), attrs)


def disabled_telemetry() -> Telemetry:
	return Telemetry(False)


# ---------------------------------------------------------------------------
# Process instance
# ---------------------------------------------------------------------------

SinkFactory = Callable[[Optional[logging.Logger]], TelemetrySink]

SINKS: dict[str, SinkFactory] = {
	"null": lambda logger: NullSink(),
	"log": lambda logger: LogSink(logger or logging.getLogger("scripthub.telemetry")),
}

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Build the process telemetry from telemetry.enabled / telemetry.sink.
	An unknown sink name falls back to "null".
	"""
	global _telemetry

	if not as_bool(cfg.get("telemetry.enabled", False)):
		_telemetry = disabled_telemetry()
		return _telemetry

	sink_name = str(cfg.get("telemetry.sink", "null") or "null").strip().lower()
	factory = SINKS.get(sink_name, SINKS["null"])
	_telemetry = Telemetry(True, factory(logger))
	return _telemetry


def get_telemetry() -> Telemetry:
	global _telemetry
	if _telemetry is None:
		_telemetry = disabled_telemetry()
	return _telemetry
