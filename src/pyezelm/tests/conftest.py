# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared pytest fixtures for pyezelm.
#
# Notes:
#	- tk_root skips the requesting test when no display is available.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/25/2026	Paul G. LeDuc				Initial fixtures
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezelm.app.model import State, init
from pyezelm.core.telemetry import MemorySink, Telemetry
from pyezelm.pages import counter, text_input


@pytest.fixture
def tk_root():
	tk = pytest.importorskip("tkinter")
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk display not available: {ex}")
	try:
		yield root
	finally:
		root.destroy()


@pytest.fixture
def state() -> State:
	return init()


@pytest.fixture
def busy_state() -> State:
	"""
	A state where every slice differs from its initial value.
	"""
	return State(
		counter=counter.State(count=7),
		input_text=text_input.State(text="hello", is_upper_case=True),
		page=init().page,
	)


@pytest.fixture
def memory_telemetry() -> tuple[Telemetry, MemorySink]:
	sink = MemorySink()
	return Telemetry(enabled=True, sink=sink), sink
