# ---------------------------------------------------------------------------
# File: pages/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Sub-programs embedded by the pyezelm demo application.
#
# Notes:
#   - Import the modules themselves (counter.update, text_input.view);
#     the names inside each module overlap (State, Msg, ...).
# ---------------------------------------------------------------------------

from __future__ import annotations

from . import counter, text_input

__all__ = [
	"counter",
	"text_input",
]
