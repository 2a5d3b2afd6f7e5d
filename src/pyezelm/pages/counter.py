# ---------------------------------------------------------------------------
# File: counter.py
# ---------------------------------------------------------------------------
# Description:
#	Counter page (sub-program).
#
# Notes:
#	- Knows nothing about the composite it is embedded in.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/19/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union, assert_never

from pyezelm.program.compose import SubProgram
from pyezelm.program.dispatch import Dispatch
from pyezelm.program.view import Element, Send, button, div, h1, row


@dataclass(frozen=True, slots=True)
class State:
	count: int = 0


@dataclass(frozen=True, slots=True)
class Increment:
	pass


@dataclass(frozen=True, slots=True)
class Decrement:
	pass


Msg = Union[Increment, Decrement]


def init() -> State:
	return State(count=0)


def update(msg: Msg, state: State) -> State:
	match msg:
		case Increment():
			return replace(state, count=state.count + 1)
		case Decrement():
			return replace(state, count=state.count - 1)
		case _:
			assert_never(msg)


def view(state: State, dispatch: Dispatch[Msg]) -> Element:
	return div(
		h1(str(state.count), key="count"),
		row(
			button("Increment", Send(dispatch, Increment()), key="increment"),
			button("Decrement", Send(dispatch, Decrement()), key="decrement"),
		),
		key="counter",
	)


PROGRAM: SubProgram[State, Msg] = SubProgram("counter", init, update, view)
