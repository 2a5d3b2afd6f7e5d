# ---------------------------------------------------------------------------
# File: runtime.py
# ---------------------------------------------------------------------------
# Description:
#	Program + Runtime: the single synchronous update loop.
#
# Notes:
#	- One queue, one message at a time. update runs to completion, then
#	  exactly one render happens before the next message is taken.
#	- A dispatch made while a message is in flight (e.g. a renderer firing
#	  a handler during widget sync) is queued, never run re-entrantly.
#	- State is replaced per message, never mutated.
#	- If update or view raises, the queue is dropped and the exception
#	  propagates; state and view stay at the last good pair.
#	- If on_render raises, state and view already hold the new pair and
#	  the exception propagates.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial coding / release
# 01/17/2026	Paul G. LeDuc				Add telemetry + trace logging
# 01/18/2026	Paul G. LeDuc				Queue dispatches made during processing
# 02/02/2026	Paul G. LeDuc				Commit state only after its view is built
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from pyezelm.core.logging import get_program_logger
from pyezelm.core.telemetry import METRIC_UPDATE_MS, Telemetry, get_telemetry
from pyezelm.program.view import Element


StateT = TypeVar("StateT")
MsgT = TypeVar("MsgT")

RenderCallback = Callable[[Element], None]


@dataclass(frozen=True, slots=True)
class Program(Generic[StateT, MsgT]):
	"""
	A top-level program: how to start, how to step, how to draw.
	"""
	init: Callable[[], StateT]
	update: Callable[[MsgT, StateT], StateT]
	view: Callable[[StateT, Callable[[MsgT], None]], Element]


class Runtime(Generic[StateT, MsgT]):
	"""
	Runtime

	Drives a Program. The renderer (on_render) receives each fresh view tree;
	UI events come back through Runtime.dispatch.
	"""

	def __init__(
		self,
		program: Program[StateT, MsgT],
		on_render: Optional[RenderCallback] = None,
		*,
		telemetry: Optional[Telemetry] = None,
		trace: bool = False,
	) -> None:
		self.program = program
		self.on_render = on_render
		self.trace = trace

		self._telemetry = telemetry or get_telemetry()
		self._log = get_program_logger("runtime")

		self._state: Optional[StateT] = None
		self._started = False
		self._processing = False
		self._queue: deque[MsgT] = deque()

		self.view: Optional[Element] = None

	# -----------------------------------------------------------------------
	# State
	# -----------------------------------------------------------------------

	@property
	def started(self) -> bool:
		return self._started

	@property
	def state(self) -> StateT:
		if not self._started:
			raise RuntimeError("Runtime not started")
		return self._state  # type: ignore[return-value]

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def start(self) -> None:
		"""
		Seed state from program.init() and render once. Idempotent.
		"""
		if self._started:
			return

		initial = self.program.init()
		self._started = True
		self._log.debug("runtime started state=%r", initial)
		try:
			self._commit(initial)
		except Exception:
			self._started = False
			raise

	def dispatch(self, msg: MsgT) -> None:
		"""
		Queue a message and drain the queue unless already draining.
		"""
		if not self._started:
			raise RuntimeError("dispatch() called before start()")

		self._queue.append(msg)
		if self._processing:
			return

		self._processing = True
		try:
			while self._queue:
				self._step(self._queue.popleft())
		except Exception:
			self._queue.clear()
			raise
		finally:
			self._processing = False

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _step(self, msg: MsgT) -> None:
		self._log.debug("dispatch %r", msg)
		self._telemetry.dispatched(msg)

		with self._telemetry.timer(METRIC_UPDATE_MS):
			new_state = self.program.update(msg, self._state)  # type: ignore[arg-type]

		if self.trace:
			self._log.info("trace msg=%r state=%r", msg, new_state)

		self._commit(new_state)

	def _commit(self, new_state: StateT) -> None:
		# state and view change together, only once the tree is built
		tree = self.program.view(new_state, self.dispatch)  # type: ignore[arg-type]
		self._state = new_state
		self.view = tree
		self._telemetry.rendered()

		if self.on_render is not None:
			self.on_render(tree)
