# ---------------------------------------------------------------------------
# File: text_input.py
# ---------------------------------------------------------------------------
# Description:
#	Text input page (sub-program).
#
# Notes:
#	- State keeps the text exactly as typed. Upper-casing is a display
#	  concern and only happens in view().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/19/2026	Paul G. LeDuc				Initial coding / release
# 01/20/2026	Paul G. LeDuc				Show uppercase preview label
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union, assert_never

from pyezelm.program.compose import SubProgram
from pyezelm.program.dispatch import Dispatch
from pyezelm.program.view import Element, SendWith, checkbox, div, label, text_input


@dataclass(frozen=True, slots=True)
class State:
	text: str = ""
	is_upper_case: bool = False


@dataclass(frozen=True, slots=True)
class TextChanged:
	text: str


@dataclass(frozen=True, slots=True)
class UppercaseToggled:
	value: bool


Msg = Union[TextChanged, UppercaseToggled]


def init() -> State:
	return State(text="", is_upper_case=False)


def update(msg: Msg, state: State) -> State:
	match msg:
		case TextChanged(text):
			return replace(state, text=text)
		case UppercaseToggled(value):
			return replace(state, is_upper_case=value)
		case _:
			assert_never(msg)


def display_text(state: State) -> str:
	return state.text.upper() if state.is_upper_case else state.text


def _text_changed(value: object) -> TextChanged:
	return TextChanged("" if value is None else str(value))


def _uppercase_toggled(value: object) -> UppercaseToggled:
	return UppercaseToggled(bool(value))


def view(state: State, dispatch: Dispatch[Msg]) -> Element:
	return div(
		text_input(state.text, SendWith(dispatch, _text_changed), placeholder="Type here", key="text"),
		checkbox("Uppercase", state.is_upper_case, SendWith(dispatch, _uppercase_toggled), key="uppercase"),
		label(display_text(state), key="preview"),
		key="text_input",
	)


PROGRAM: SubProgram[State, Msg] = SubProgram("text_input", init, update, view)
