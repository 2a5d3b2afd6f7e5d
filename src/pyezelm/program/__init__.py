# ---------------------------------------------------------------------------
# File: program/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Composition primitives for pyezelm (tags, senders, slots, runtime).
#
# Notes:
#   - Nothing in this package knows about a concrete page or toolkit.
# ---------------------------------------------------------------------------

from __future__ import annotations

from .messages import Lift, Wrapped, unwrap
from .dispatch import Dispatch, Sender, map_dispatch
from .view import Element, Send, SendWith, Text
from .compose import Slot, SubProgram
from .runtime import Program, Runtime

__all__ = [
	"Lift",
	"Wrapped",
	"unwrap",
	"Dispatch",
	"Sender",
	"map_dispatch",
	"Element",
	"Send",
	"SendWith",
	"Text",
	"Slot",
	"SubProgram",
	"Program",
	"Runtime",
]
