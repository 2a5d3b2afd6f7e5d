# ---------------------------------------------------------------------------
# File: dispatch.py
# ---------------------------------------------------------------------------
# Description:
#	Dispatch wrapping (sub-scoped message senders).
#
# Notes:
#	- A sub-program is only ever handed a Sender built from its own lift.
#	  Whatever it calls the sender with ends up inside its own tag, so it
#	  cannot reach another slot or a top-level-only message.
#	- Senders are frozen values: two senders built from the same parent and
#	  lift compare equal. Rendering twice yields value-equal view trees.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from pyezelm.program.messages import Lift


MsgT = TypeVar("MsgT")
SubMsgT = TypeVar("SubMsgT")

Dispatch = Callable[[MsgT], None]


@dataclass(frozen=True, slots=True)
class Sender(Generic[SubMsgT, MsgT]):
	"""
	Sender

	Capability object: parent dispatch pre-composed with a lift.
	"""
	parent: Callable[[MsgT], None]
	lift: Lift[SubMsgT, MsgT]

	def __call__(self, msg: SubMsgT) -> None:
		self.parent(self.lift(msg))

	def __repr__(self) -> str:
		lift_name = getattr(self.lift, "__name__", repr(self.lift))
		return f"<Sender lift={lift_name}>"


def map_dispatch(
	dispatch: Callable[[MsgT], None],
	lift: Lift[SubMsgT, MsgT],
) -> Sender[SubMsgT, MsgT]:
	"""
	Derive a sub-program dispatch: m -> dispatch(lift(m)).
	"""
	return Sender(dispatch, lift)
