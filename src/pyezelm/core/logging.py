# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyezelm (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- Safe to call before any window exists (no Tk dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys (first match wins):
#	- Level:
#		"logging.level", "log_level"	(default: "INFO")
#	- Console handler:
#		"logging.console", "log_console" (default: True)
#	- File handler:
#		"logging.file", "log_file"	(default: None)
#	- File mode:
#		"logging.file_mode", "log_file_mode" (default: "a")
#	- Root reset (clear handlers on re-init):
#		"logging.reset_root", "log_reset_root" (default: True)
#	- Format:
#		"logging.format", "log_format" (default: standard format)
#	- Date format:
#		"logging.datefmt", "log_datefmt" (default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# 01/08/2026	Paul G. LeDuc				Add get_program_logger (pyezelm.* names)
# 02/02/2026	Paul G. LeDuc				Drop unused get_logger
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


LOGGER_BASE = "pyezelm"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_program_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a logger under the pyezelm namespace.

	Examples:
		get_program_logger()            -> pyezelm
		get_program_logger("runtime")   -> pyezelm.runtime
		get_program_logger("ui.host")   -> pyezelm.ui.host
	"""
	if component:
		return logging.getLogger(f"{LOGGER_BASE}.{component}")
	return logging.getLogger(LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pyezelm.

	Reconfiguration only happens when the resolved settings change, so
	repeated calls never stack handlers.

	Args:
		cfg:
			ProgramConfig, a dict, or anything with get(key, default).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_first(cfg, ("logging.level", "log_level"), "INFO"))
	console_enabled = bool(_first(cfg, ("logging.console", "log_console"), True))
	log_file = _first(cfg, ("logging.file", "log_file"), None)
	file_mode = _coerce_file_mode(_first(cfg, ("logging.file_mode", "log_file_mode"), "a"))
	reset_root = bool(_first(cfg, ("logging.reset_root", "log_reset_root"), True))
	fmt = str(_first(cfg, ("logging.format", "log_format"), DEFAULT_FORMAT))
	datefmt = str(_first(cfg, ("logging.datefmt", "log_datefmt"), DEFAULT_DATEFMT))

	log_file = str(log_file) if log_file else None

	signature: tuple[Any, ...] = (
		level,
		console_enabled,
		log_file,
		file_mode,
		reset_root,
		fmt,
		datefmt,
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_root_logger(
		level=level,
		console_enabled=console_enabled,
		log_file=log_file,
		file_mode=file_mode,
		fmt=fmt,
		datefmt=datefmt,
		reset_root=reset_root,
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)

	return default


def _first(cfg: Any | None, keys: tuple[str, ...], default: Any) -> Any:
	"""
	Return the first configured value among keys (None counts as unset).
	"""
	for key in keys:
		value = _cfg_get(cfg, key, None)
		if value is not None:
			return value
	return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# FileHandler modes limited to append/overwrite
	if isinstance(mode, str):
		val = mode.strip().lower()
		if val in ("a", "w"):
			return val
	return "a"


def _configure_root_logger(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		if parent:
			os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
