# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyezelm (logging, telemetry, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import ProgramConfig
from .logging import init_logging, get_program_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"ProgramConfig",
	"get_program_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]
