# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public surface of the composed pyezelm application.
#
# Notes:
#   - Uses lazy exports so importing pyezelm.app.model alone stays cheap.
#   - update is not re-exported: the name collides with the submodule.
#     Import it from pyezelm.app.update.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Page",
	"State",
	"Msg",
	"Counter",
	"InputText",
	"SwitchPage",
	"init",
	"render",
	"build_program",
	"build_default_router",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Page": ("pyezelm.app.model", "Page"),
	"State": ("pyezelm.app.model", "State"),
	"Msg": ("pyezelm.app.model", "Msg"),
	"Counter": ("pyezelm.app.model", "Counter"),
	"InputText": ("pyezelm.app.model", "InputText"),
	"SwitchPage": ("pyezelm.app.model", "SwitchPage"),
	"init": ("pyezelm.app.model", "init"),
	"render": ("pyezelm.app.view", "render"),
	"build_program": ("pyezelm.app.program", "build_program"),
	"build_default_router": ("pyezelm.app.keys", "build_default_router"),
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
	from pyezelm.app.model import Page, State, Msg, Counter, InputText, SwitchPage, init
	from pyezelm.app.view import render
	from pyezelm.app.program import build_program
	from pyezelm.app.keys import build_default_router
