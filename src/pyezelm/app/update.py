# ---------------------------------------------------------------------------
# File: update.py
# ---------------------------------------------------------------------------
# Description:
#	Composite update: routes each message to exactly one slice.
#
# Notes:
#	- One arm per Msg variant; each arm touches exactly one State field.
#	- SwitchPage only moves the selector. Page states survive while hidden.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/21/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace
from typing import assert_never

from pyezelm.app.model import (
	COUNTER_SLOT,
	INPUT_TEXT_SLOT,
	Counter,
	InputText,
	Msg,
	State,
	SwitchPage,
)


def update(msg: Msg, state: State) -> State:
	match msg:
		case Counter(sub_msg):
			return COUNTER_SLOT.update_in(state, sub_msg)
		case InputText(sub_msg):
			return INPUT_TEXT_SLOT.update_in(state, sub_msg)
		case SwitchPage(page):
			return replace(state, page=page)
		case _:
			assert_never(msg)
