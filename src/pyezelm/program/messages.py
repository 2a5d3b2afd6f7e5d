# ---------------------------------------------------------------------------
# File: messages.py
# ---------------------------------------------------------------------------
# Description:
#	Message tagging for composed programs.
#
# Notes:
#	- A composite message type is a union of frozen dataclasses.
#	- Each embedded sub-program gets one Wrapped subclass (its tag).
#	  The subclass itself is the lift function: Counter(Increment()).
#	- Tags are per slot, not per sub-message type. Two slots embedding the
#	  same sub-program still declare two distinct Wrapped subclasses.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/11/2026	Paul G. LeDuc				Add Lift protocol + unwrap
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar


SubMsgT = TypeVar("SubMsgT")
SubMsgT_contra = TypeVar("SubMsgT_contra", contravariant=True)
MsgT_co = TypeVar("MsgT_co", covariant=True)


class Lift(Protocol[SubMsgT_contra, MsgT_co]):
	"""
	Injection of a sub-message into the composite message type.
	"""
	def __call__(self, msg: SubMsgT_contra, /) -> MsgT_co:
		...


@dataclass(frozen=True, slots=True)
class Wrapped(Generic[SubMsgT]):
	"""
	Wrapped

	Base for composite-message variants that carry one sub-message.

	Subclass once per slot:

		@dataclass(frozen=True, slots=True)
		class Counter(Wrapped[counter.Msg]):
			pass
	"""
	msg: SubMsgT


def unwrap(wrapped: Wrapped[SubMsgT]) -> SubMsgT:
	"""
	Recover the sub-message carried by a tag (inverse of lift).
	"""
	return wrapped.msg
