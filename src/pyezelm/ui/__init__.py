# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pyezelm (Tk rendering + window).
#
# Notes:
#   - Uses lazy exports (PEP 562) so headless code never imports tkinter
#     or ttkthemes by accident.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"TkRenderer",
	"ProgramWindow",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"TkRenderer": ("pyezelm.ui.renderer", "TkRenderer"),
	"ProgramWindow": ("pyezelm.ui.host", "ProgramWindow"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezelm.ui.renderer import TkRenderer
	from pyezelm.ui.host import ProgramWindow
