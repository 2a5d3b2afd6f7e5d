# ---------------------------------------------------------------------------
# File: test_compose.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for SubProgram / Slot, including a composite that embeds the
#	same sub-program twice.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/15/2026	Paul G. LeDuc				Initial tests
# 01/15/2026	Paul G. LeDuc				Add two-counter composite coverage
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Union, assert_never

import pytest

from pyezelm.app.model import COUNTER_SLOT, INPUT_TEXT_SLOT, Counter, State
from pyezelm.pages import counter
from pyezelm.program.compose import Slot
from pyezelm.program.messages import Wrapped
from pyezelm.program.view import ON_CLICK, find, fire


# ---------------------------------------------------------------------------
# Two counters behind one update
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Pair:
	left: counter.State
	right: counter.State


@dataclass(frozen=True, slots=True)
class Left(Wrapped[counter.Msg]):
	pass


@dataclass(frozen=True, slots=True)
class Right(Wrapped[counter.Msg]):
	pass


PairMsg = Union[Left, Right]

LEFT = Slot(counter.PROGRAM, "left", Left)
RIGHT = Slot(counter.PROGRAM, "right", Right)


def pair_update(msg: PairMsg, state: Pair) -> Pair:
	match msg:
		case Left(m):
			return LEFT.update_in(state, m)
		case Right(m):
			return RIGHT.update_in(state, m)
		case _:
			assert_never(msg)


def test_same_sub_program_in_two_slots_routes_by_tag():
	state = Pair(left=counter.init(), right=counter.init())

	state = pair_update(Left(counter.Increment()), state)
	state = pair_update(Left(counter.Increment()), state)
	state = pair_update(Right(counter.Decrement()), state)

	assert state.left.count == 2
	assert state.right.count == -1


def test_same_sub_program_in_two_slots_views_send_to_their_own_tag():
	sent: list[PairMsg] = []
	state = Pair(left=counter.init(), right=counter.init())

	fire(find(LEFT.view_in(state, sent.append), "increment"), ON_CLICK)
	fire(find(RIGHT.view_in(state, sent.append), "increment"), ON_CLICK)

	assert sent == [Left(counter.Increment()), Right(counter.Increment())]


# ---------------------------------------------------------------------------
# Slot behaviour on the application state
# ---------------------------------------------------------------------------

def test_update_in_replaces_only_its_field(busy_state: State):
	new = COUNTER_SLOT.update_in(busy_state, counter.Increment())

	assert new.counter.count == busy_state.counter.count + 1
	assert new.input_text is busy_state.input_text
	assert new.page is busy_state.page
	assert busy_state.counter.count == 7


def test_state_of_reads_slice(busy_state: State):
	assert COUNTER_SLOT.state_of(busy_state) is busy_state.counter
	assert INPUT_TEXT_SLOT.state_of(busy_state) is busy_state.input_text


def test_dispatcher_wraps_with_slot_tag():
	sent: list = []
	COUNTER_SLOT.dispatcher(sent.append)(counter.Decrement())
	assert sent == [Counter(counter.Decrement())]


def test_check_rejects_missing_field():
	bad = Slot(counter.PROGRAM, "nope", Counter)
	with pytest.raises(ValueError):
		bad.check(State)


def test_check_rejects_non_dataclass():
	with pytest.raises(TypeError):
		COUNTER_SLOT.check(dict)
