# ---------------------------------------------------------------------------
# File: compose.py
# ---------------------------------------------------------------------------
# Description:
#	Sub-program descriptors and the slots that embed them in a composite.
#
# Notes:
#	- SubProgram is the leaf (init, update, view) triple for one concern.
#	- Slot says where a sub-program's state lives in the composite state
#	  (a dataclass field) and which tag carries its messages (a lift).
#	- Composite update/render stay explicit `match` statements; slots only
#	  do the reading, splicing and dispatch wrapping for each arm.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/15/2026	Paul G. LeDuc				Add Slot.dispatcher + field validation
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, Callable, Generic, TypeVar

from pyezelm.program.dispatch import Sender, map_dispatch
from pyezelm.program.messages import Lift
from pyezelm.program.view import Element


StateT = TypeVar("StateT")
SubStateT = TypeVar("SubStateT")
SubMsgT = TypeVar("SubMsgT")
MsgT = TypeVar("MsgT")


@dataclass(frozen=True, slots=True)
class SubProgram(Generic[SubStateT, SubMsgT]):
	"""
	SubProgram

	- name:		Friendly label (logging / debugging).
	- init:		Returns the initial sub-state.
	- update:	(msg, state) -> state. Pure and total over the sub-message type.
	- view:		(state, dispatch) -> Element. Only talks back through dispatch.
	"""
	name: str
	init: Callable[[], SubStateT]
	update: Callable[[SubMsgT, SubStateT], SubStateT]
	view: Callable[[SubStateT, Callable[[SubMsgT], None]], Element]


@dataclass(frozen=True, slots=True)
class Slot(Generic[SubStateT, SubMsgT, MsgT]):
	"""
	Slot

	Binds a SubProgram to one field of a composite dataclass state and to
	the tag that lifts its messages into the composite message type.
	"""
	program: SubProgram[SubStateT, SubMsgT]
	field: str
	lift: Lift[SubMsgT, MsgT]

	def state_of(self, state: Any) -> SubStateT:
		return getattr(state, self.field)

	def update_in(self, state: StateT, msg: SubMsgT) -> StateT:
		"""
		Run the sub-update against this slot's slice and splice the result
		into a copy of the composite state. Other fields keep their identity.
		"""
		sub_state = self.program.update(msg, self.state_of(state))
		return replace(state, **{self.field: sub_state})  # type: ignore[type-var]

	def dispatcher(self, dispatch: Callable[[MsgT], None]) -> Sender[SubMsgT, MsgT]:
		return map_dispatch(dispatch, self.lift)

	def view_in(self, state: Any, dispatch: Callable[[MsgT], None]) -> Element:
		return self.program.view(self.state_of(state), self.dispatcher(dispatch))

	def check(self, state_type: type) -> None:
		"""
		Fail fast when wiring a slot to a state class without that field.
		"""
		if not is_dataclass(state_type):
			raise TypeError(f"{state_type.__name__} is not a dataclass")
		names = {f.name for f in fields(state_type)}
		if self.field not in names:
			raise ValueError(
				f"Slot {self.program.name!r} targets missing field {self.field!r} "
				f"on {state_type.__name__}"
			)
