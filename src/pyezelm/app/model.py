# ---------------------------------------------------------------------------
# File: model.py
# ---------------------------------------------------------------------------
# Description:
#	Composite state and message types for the pyezelm demo application.
#
# Notes:
#	- State is the disjoint union of the page states plus the page selector.
#	- Msg has one tag per embedded page (Counter, InputText) and one
#	  top-level-only variant (SwitchPage) no page can produce.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/21/2026	Paul G. LeDuc				Initial coding / release
# 01/22/2026	Paul G. LeDuc				Add slots (COUNTER_SLOT, INPUT_TEXT_SLOT)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pyezelm.pages import counter, text_input
from pyezelm.program.compose import Slot
from pyezelm.program.messages import Wrapped


CounterState = counter.State
InputTextState = text_input.State
CounterMsg = counter.Msg
InputTextMsg = text_input.Msg


class Page(Enum):
	COUNTER = "counter"
	TEXT_INPUT = "text_input"


@dataclass(frozen=True, slots=True)
class State:
	counter: CounterState
	input_text: InputTextState
	page: Page


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Counter(Wrapped[CounterMsg]):
	pass


@dataclass(frozen=True, slots=True)
class InputText(Wrapped[InputTextMsg]):
	pass


@dataclass(frozen=True, slots=True)
class SwitchPage:
	page: Page


Msg = Union[Counter, InputText, SwitchPage]


# ---------------------------------------------------------------------------
# Slots
# ---------------------------------------------------------------------------

COUNTER_SLOT: Slot[CounterState, CounterMsg, Msg] = Slot(counter.PROGRAM, "counter", Counter)
INPUT_TEXT_SLOT: Slot[InputTextState, InputTextMsg, Msg] = Slot(
	text_input.PROGRAM, "input_text", InputText
)

COUNTER_SLOT.check(State)
INPUT_TEXT_SLOT.check(State)


def init() -> State:
	return State(
		counter=counter.init(),
		input_text=text_input.init(),
		page=Page.COUNTER,
	)
