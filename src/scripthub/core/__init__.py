# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for scripthub (logging, telemetry, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	Paul G. LeDuc				Initial coding / release
# 10/03/2026	Paul G. LeDuc				Export config helpers
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import ConfigError, HubSettings, KeyValueFile
from .logging import LogSettings, get_hub_logger, init_logging, set_log_level
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"ConfigError",
	"HubSettings",
	"KeyValueFile",
	"LogSettings",
	"get_hub_logger",
	"init_logging",
	"set_log_level",
	"init_telemetry",
	"get_telemetry",
]
