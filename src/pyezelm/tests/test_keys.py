# ---------------------------------------------------------------------------
# File: test_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for KeyMap / KeyRouter (key sequence -> message).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/23/2026	Paul G. LeDuc				Initial tests
# 01/24/2026	Paul G. LeDuc				Add default router coverage
# 02/02/2026	Paul G. LeDuc				Page keymaps must match their slot
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace

import pytest

from pyezelm.app.keys import KeyMap, KeyRouter, build_default_router
from pyezelm.app.model import COUNTER_SLOT, INPUT_TEXT_SLOT, Counter, InputText, Msg, Page, SwitchPage, init
from pyezelm.pages import counter, text_input


# ---------------------------------------------------------------------------
# KeyMap
# ---------------------------------------------------------------------------

def test_keymap_bind_and_resolve():
	km: KeyMap[Msg] = KeyMap()
	km.bind("<Control-Key-1>", SwitchPage(Page.COUNTER))

	assert km.resolve("<Control-Key-1>") == SwitchPage(Page.COUNTER)
	assert km.resolve("<Control-Key-2>") is None
	assert km.keys() == ["<Control-Key-1>"]


def test_keymap_rejects_empty_keyseq():
	km: KeyMap[Msg] = KeyMap()
	with pytest.raises(ValueError):
		km.bind("", SwitchPage(Page.COUNTER))


def test_keymap_overwrite_policy():
	km: KeyMap[Msg] = KeyMap()
	km.bind("<F1>", SwitchPage(Page.COUNTER))
	km.bind("<F1>", SwitchPage(Page.TEXT_INPUT))
	assert km.resolve("<F1>") == SwitchPage(Page.TEXT_INPUT)

	with pytest.raises(ValueError):
		km.bind("<F1>", SwitchPage(Page.COUNTER), overwrite=False)


def test_keymap_unbind_and_clear():
	km: KeyMap[Msg] = KeyMap()
	km.bind("<F1>", SwitchPage(Page.COUNTER))
	km.bind("<F2>", SwitchPage(Page.TEXT_INPUT))

	km.unbind("<F1>")
	km.unbind("<missing>")
	assert km.items() == [("<F2>", SwitchPage(Page.TEXT_INPUT))]

	km.clear()
	assert km.keys() == []


# ---------------------------------------------------------------------------
# KeyRouter
# ---------------------------------------------------------------------------

def test_page_keymap_messages_are_lifted():
	router = KeyRouter()
	km: KeyMap[counter.Msg] = KeyMap()
	km.bind("<Key-plus>", counter.Increment())
	router.register_page_keymap(Page.COUNTER, COUNTER_SLOT, km)

	assert router.resolve("<Key-plus>", init()) == Counter(counter.Increment())


def test_page_keymap_only_applies_on_its_page():
	router = KeyRouter()
	km: KeyMap[counter.Msg] = KeyMap()
	km.bind("<Key-plus>", counter.Increment())
	router.register_page_keymap(Page.COUNTER, COUNTER_SLOT, km)

	assert router.resolve("<Key-plus>", replace(init(), page=Page.TEXT_INPUT)) is None


def test_page_keymap_rejects_messages_of_another_slot():
	router = KeyRouter()
	km: KeyMap[counter.Msg] = KeyMap()
	km.bind("<Key-plus>", counter.Increment())

	with pytest.raises(TypeError):
		router.register_page_keymap(Page.TEXT_INPUT, INPUT_TEXT_SLOT, km)  # type: ignore[arg-type]

	assert router.page_keymaps == {}
	assert router.resolve("<Key-plus>", replace(init(), page=Page.TEXT_INPUT)) is None


def test_page_keymap_is_held_with_its_slot():
	router = build_default_router()
	page_km = router.page_keymaps[Page.COUNTER]

	assert page_km.slot is COUNTER_SLOT
	assert page_km.resolve("<Key-minus>") == COUNTER_SLOT.lift(counter.Decrement())


def test_page_layer_overrides_global():
	router = KeyRouter()
	router.global_keymap.bind("<F5>", SwitchPage(Page.COUNTER))

	km: KeyMap[text_input.Msg] = KeyMap()
	km.bind("<F5>", text_input.TextChanged(""))
	router.register_page_keymap(Page.TEXT_INPUT, INPUT_TEXT_SLOT, km)

	on_text = replace(init(), page=Page.TEXT_INPUT)
	assert router.resolve("<F5>", on_text) == InputText(text_input.TextChanged(""))
	assert router.resolve("<F5>", init()) == SwitchPage(Page.COUNTER)

	router.unregister_page_keymap(Page.TEXT_INPUT)
	assert router.resolve("<F5>", on_text) == SwitchPage(Page.COUNTER)


def test_route_dispatches_and_reports():
	sent: list[Msg] = []
	router = build_default_router()

	assert router.route("<Control-Key-2>", init(), sent.append) is True
	assert router.route("<Key-x>", init(), sent.append) is False
	assert sent == [SwitchPage(Page.TEXT_INPUT)]


def test_default_router_bindings():
	router = build_default_router()
	on_counter = init()
	on_text = replace(init(), page=Page.TEXT_INPUT)

	assert router.resolve("<Control-Key-1>", on_text) == SwitchPage(Page.COUNTER)
	assert router.resolve("<Control-Key-2>", on_counter) == SwitchPage(Page.TEXT_INPUT)
	assert router.resolve("<Key-plus>", on_counter) == Counter(counter.Increment())
	assert router.resolve("<Key-minus>", on_counter) == Counter(counter.Decrement())
	assert router.resolve("<Key-plus>", on_text) is None


def test_keyseqs_lists_every_layer_once():
	router = build_default_router()
	router.global_keymap.bind("<Key-plus>", SwitchPage(Page.COUNTER))

	seqs = router.keyseqs()

	assert sorted(seqs) == sorted(["<Control-Key-1>", "<Control-Key-2>", "<Key-plus>", "<Key-minus>"])
