# ---------------------------------------------------------------------------
# File: program.py
# ---------------------------------------------------------------------------
# Description:
#	The composed demo program (Counter + Text Input behind one update loop).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/22/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezelm.app.model import Msg, State, init
from pyezelm.app.update import update
from pyezelm.app.view import render
from pyezelm.program.runtime import Program


def build_program() -> Program[State, Msg]:
	return Program(init=init, update=update, view=render)
