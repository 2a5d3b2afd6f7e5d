# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#   Keyboard bindings for pyezelm (key sequence -> message).
#
# Notes:
#   - Pure mapping; UI-toolkit-agnostic. ui.host binds the sequences on Tk.
#   - KeyRouter resolves in two layers:
#		1) Active page keymap (sub-messages, lifted by that page's tag)
#		2) Global keymap (composite messages, e.g. SwitchPage)
#   - The active page comes from the state passed in; the router holds none.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/23/2026	Paul G. LeDuc				Initial coding / release
# 01/23/2026	Paul G. LeDuc				Add KeyRouter (page layer + global layer)
# 01/24/2026	Paul G. LeDuc				Add default bindings
# 02/02/2026	Paul G. LeDuc				Register page keymaps against their Slot
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

from pyezelm.app.model import COUNTER_SLOT, Msg, Page, State, SwitchPage
from pyezelm.pages import counter
from pyezelm.program.compose import Slot


MsgT = TypeVar("MsgT")
SubMsgT = TypeVar("SubMsgT")


@dataclass
class KeyMap(Generic[MsgT]):
	"""
	KeyMap

	Stores bindings of key sequences (e.g., "<Control-Key-1>") to message values.
	"""
	_bindings: dict[str, MsgT] = field(default_factory=dict)

	def bind(self, keyseq: str, msg: MsgT, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")

		if not overwrite and keyseq in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[keyseq] = msg

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq, None)

	def resolve(self, keyseq: str) -> Optional[MsgT]:
		return self._bindings.get(keyseq)

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def items(self) -> list[tuple[str, MsgT]]:
		return list(self._bindings.items())

	def clear(self) -> None:
		self._bindings.clear()


@dataclass(frozen=True, slots=True)
class PageKeyMap(Generic[SubMsgT]):
	"""
	A page's keymap plus the slot whose tag lifts its messages.

	The keymap and the slot share one sub-message type, so a keymap can only
	be registered against the slot that owns its messages.
	"""
	keymap: KeyMap[SubMsgT]
	slot: Slot[Any, SubMsgT, Msg]

	def check(self) -> None:
		"""
		Run every bound message through the slot's update once.

		Raises:
			TypeError: a bound message belongs to another sub-program.
		"""
		program = self.slot.program
		for keyseq, sub_msg in self.keymap.items():
			try:
				program.update(sub_msg, program.init())
			except AssertionError as ex:
				raise TypeError(
					f"{keyseq!r} is bound to {sub_msg!r}, which {program.name!r} does not handle"
				) from ex

	def resolve(self, keyseq: str) -> Optional[Msg]:
		sub_msg = self.keymap.resolve(keyseq)
		if sub_msg is None:
			return None
		return self.slot.lift(sub_msg)


@dataclass(slots=True)
class KeyRouter:
	"""
	KeyRouter

	keyseq -> Msg, using the page layer first and the global layer second.
	"""
	global_keymap: KeyMap[Msg] = field(default_factory=KeyMap)
	page_keymaps: dict[Page, PageKeyMap[Any]] = field(default_factory=dict)

	def register_page_keymap(
		self,
		page: Page,
		slot: Slot[Any, SubMsgT, Msg],
		keymap: KeyMap[SubMsgT],
	) -> None:
		page_km = PageKeyMap(keymap, slot)
		page_km.check()
		self.page_keymaps[page] = page_km

	def unregister_page_keymap(self, page: Page) -> None:
		self.page_keymaps.pop(page, None)

	def resolve(self, keyseq: str, state: State) -> Optional[Msg]:
		page_km = self.page_keymaps.get(state.page)
		if page_km is not None:
			msg = page_km.resolve(keyseq)
			if msg is not None:
				return msg

		return self.global_keymap.resolve(keyseq)

	def route(self, keyseq: str, state: State, dispatch: Callable[[Msg], None]) -> bool:
		"""
		Dispatch the message bound to keyseq, if any.

		Returns:
			True if a message was dispatched, else False.
		"""
		msg = self.resolve(keyseq, state)
		if msg is None:
			return False

		dispatch(msg)
		return True

	def keyseqs(self) -> list[str]:
		"""
		Every key sequence bound in any layer (for toolkit binding).
		"""
		seen: dict[str, None] = dict.fromkeys(self.global_keymap.keys())
		for page_km in self.page_keymaps.values():
			seen.update(dict.fromkeys(page_km.keymap.keys()))
		return list(seen)


def build_default_router() -> KeyRouter:
	router = KeyRouter()

	router.global_keymap.bind("<Control-Key-1>", SwitchPage(Page.COUNTER))
	router.global_keymap.bind("<Control-Key-2>", SwitchPage(Page.TEXT_INPUT))

	counter_km: KeyMap[counter.Msg] = KeyMap()
	counter_km.bind("<Key-plus>", counter.Increment())
	counter_km.bind("<Key-minus>", counter.Decrement())
	router.register_page_keymap(Page.COUNTER, COUNTER_SLOT, counter_km)

	return router
