# ---------------------------------------------------------------------------
# File: view.py
# ---------------------------------------------------------------------------
# Description:
#	Composite view: page-switch controls + the active page.
#
# Notes:
#	- Page-switch buttons send on the top-level dispatch.
#	- The embedded page only ever sees its own slice and a wrapped sender.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/22/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import assert_never

from pyezelm.app.model import COUNTER_SLOT, INPUT_TEXT_SLOT, Msg, Page, State, SwitchPage
from pyezelm.program.dispatch import Dispatch
from pyezelm.program.view import Element, Send, button, div, row


PAGE_TITLES: dict[Page, str] = {
	Page.COUNTER: "Counter",
	Page.TEXT_INPUT: "Text Input",
}


def _switch_button(page: Page, dispatch: Dispatch[Msg]) -> Element:
	return button(
		f"Show {PAGE_TITLES[page]}",
		Send(dispatch, SwitchPage(page)),
		key=f"show_{page.value}",
	)


def render(state: State, dispatch: Dispatch[Msg]) -> Element:
	match state.page:
		case Page.COUNTER:
			return div(
				row(_switch_button(Page.TEXT_INPUT, dispatch), key="nav"),
				COUNTER_SLOT.view_in(state, dispatch),
				key="page",
			)
		case Page.TEXT_INPUT:
			return div(
				row(_switch_button(Page.COUNTER, dispatch), key="nav"),
				INPUT_TEXT_SLOT.view_in(state, dispatch),
				key="page",
			)
		case _:
			assert_never(state.page)
