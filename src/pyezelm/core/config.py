# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Program configuration wrapper for pyezelm.
#
# Notes:
#	- Thin read-only view over a plain options dict.
#	- Keys may be flat ("ui.theme") or nested ({"ui": {"theme": ...}}).
#	  Flat keys win when both are present.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# 01/07/2026	Paul G. LeDuc				Add dotted-key lookup into nested dicts
# 02/02/2026	Paul G. LeDuc				Drop unused merged()
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


_MISSING = object()


@dataclass(frozen=True, slots=True)
class ProgramConfig:
	"""
	Light wrapper for config options.

	Anything that exposes get(key, default) can stand in for this class
	(init_logging and init_telemetry only rely on that method).
	"""
	options: Mapping[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if not self.options:
			return default

		if key in self.options:
			return self.options[key]

		node: Any = self.options
		for part in key.split("."):
			if not isinstance(node, Mapping):
				return default
			node = node.get(part, _MISSING)
			if node is _MISSING:
				return default
		return node

	def get_bool(self, key: str, default: bool = False) -> bool:
		value = self.get(key, default)
		if isinstance(value, str):
			return value.strip().lower() in ("1", "true", "yes", "on")
		return bool(value)

	def get_int(self, key: str, default: int | None = None) -> int | None:
		value = self.get(key, default)
		if value is None:
			return None
		return int(value)
