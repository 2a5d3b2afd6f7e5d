# ---------------------------------------------------------------------------
# File: test_update.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the composite update (routing + slice isolation).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Properties are checked over small hand-picked grids of states and
#	  messages rather than exhaustively.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/21/2026	Paul G. LeDuc				Initial tests
# 01/22/2026	Paul G. LeDuc				Add walkthrough scenarios
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace
from functools import reduce

import pytest

from pyezelm.app.model import Counter, InputText, Page, State, SwitchPage, init
from pyezelm.app.update import update
from pyezelm.pages import counter, text_input


COUNTER_MSGS = [counter.Increment(), counter.Decrement()]
TEXT_MSGS = [
	text_input.TextChanged(""),
	text_input.TextChanged("hi"),
	text_input.UppercaseToggled(True),
	text_input.UppercaseToggled(False),
]
ALL_MSGS = (
	[Counter(m) for m in COUNTER_MSGS]
	+ [InputText(m) for m in TEXT_MSGS]
	+ [SwitchPage(p) for p in Page]
)

STATES = [
	init(),
	State(
		counter=counter.State(count=-3),
		input_text=text_input.State(text="abc", is_upper_case=True),
		page=Page.TEXT_INPUT,
	),
	State(
		counter=counter.State(count=42),
		input_text=text_input.State(text="", is_upper_case=False),
		page=Page.COUNTER,
	),
]


def _run(state: State, *msgs) -> State:
	return reduce(lambda s, m: update(m, s), msgs, state)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("state", STATES)
@pytest.mark.parametrize("msg", COUNTER_MSGS)
def test_counter_messages_leave_input_text_alone(state, msg):
	assert update(Counter(msg), state).input_text == state.input_text


@pytest.mark.parametrize("state", STATES)
@pytest.mark.parametrize("msg", TEXT_MSGS)
def test_input_text_messages_leave_counter_alone(state, msg):
	assert update(InputText(msg), state).counter == state.counter


@pytest.mark.parametrize("state", STATES)
@pytest.mark.parametrize("msg", [m for m in ALL_MSGS if not isinstance(m, SwitchPage)])
def test_only_switch_page_moves_the_selector(state, msg):
	assert update(msg, state).page == state.page


@pytest.mark.parametrize("state", STATES)
@pytest.mark.parametrize("p1", list(Page))
@pytest.mark.parametrize("p2", list(Page))
def test_page_switches_never_reset_sub_states(state, p1, p2):
	after = _run(state, SwitchPage(p1), SwitchPage(p2))

	assert after.counter == state.counter
	assert after.input_text == state.input_text
	assert after.page == p2


@pytest.mark.parametrize("state", STATES)
@pytest.mark.parametrize("msg", COUNTER_MSGS)
def test_lift_then_route_equals_direct_counter_update(state, msg):
	expected = replace(state, counter=counter.update(msg, state.counter))
	assert update(Counter(msg), state) == expected


@pytest.mark.parametrize("state", STATES)
@pytest.mark.parametrize("msg", TEXT_MSGS)
def test_lift_then_route_equals_direct_text_update(state, msg):
	expected = replace(state, input_text=text_input.update(msg, state.input_text))
	assert update(InputText(msg), state) == expected


@pytest.mark.parametrize("state", STATES)
@pytest.mark.parametrize("msg", ALL_MSGS)
def test_update_is_deterministic_and_does_not_mutate(state, msg):
	snapshot = replace(state)

	assert update(msg, state) == update(msg, state)
	assert state == snapshot


def test_untouched_slices_keep_identity():
	state = init()
	after = update(Counter(counter.Increment()), state)
	assert after.input_text is state.input_text

	after = update(SwitchPage(Page.TEXT_INPUT), state)
	assert after.counter is state.counter
	assert after.input_text is state.input_text


def test_unknown_message_is_unreachable():
	with pytest.raises(AssertionError):
		update("not-a-message", init())  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def _scenario_1() -> State:
	return _run(init(), Counter(counter.Increment()), Counter(counter.Increment()))


def test_scenario_increment_twice():
	start = init()
	after = _scenario_1()

	assert after.counter.count == 2
	assert after.input_text == start.input_text
	assert after.page == start.page == Page.COUNTER


def test_scenario_switch_page_then_type():
	after = _run(
		_scenario_1(),
		SwitchPage(Page.TEXT_INPUT),
		InputText(text_input.TextChanged("hi")),
	)

	assert after.page == Page.TEXT_INPUT
	assert after.input_text.text == "hi"
	assert after.counter.count == 2


def test_scenario_toggle_uppercase_keeps_text():
	state = replace(init(), input_text=text_input.State(text="hi", is_upper_case=False))
	after = update(InputText(text_input.UppercaseToggled(True)), state)

	assert after.input_text.is_upper_case is True
	assert after.input_text.text == "hi"


@pytest.mark.parametrize("state", STATES)
def test_scenario_page_round_trip_is_identity(state):
	start = replace(state, page=Page.TEXT_INPUT)
	after = _run(start, SwitchPage(Page.COUNTER), SwitchPage(Page.TEXT_INPUT))
	assert after == start
