# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight telemetry for pyezelm programs.
#
#   The runtime reports three things through this facade:
#     - program.dispatch   event, one per processed message
#     - program.update_ms  timer, one per update call
#     - program.renders    counter, one per render
#
#   Backends are "sinks"; the facade never knows which one is attached.
#
# Notes:
#   - Disabled telemetry is a no-op and safe to call anywhere.
#   - MemorySink exists for tests.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial coding / release
# 01/09/2026	Paul G. LeDuc				Add message_name + dispatched/rendered helpers
# 02/02/2026	Paul G. LeDuc				Skip timer metric when the block raised
# ---------------------------------------------------------------------------

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import logging


EVENT_DISPATCH = "program.dispatch"
METRIC_UPDATE_MS = "program.update_ms"
METRIC_RENDERS = "program.renders"


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any] = field(default_factory=dict)


class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics to a logger at DEBUG (dispatch is chatty).
	"""

	def __init__(self, logger: logging.Logger, level: int = logging.DEBUG) -> None:
		self._log = logger
		self._level = level

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.log(self._level, "telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.log(
			self._level,
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory sink; keeps everything for inspection in tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def metrics_named(self, name: str) -> list[TelemetryMetric]:
		return [m for m in self.metrics if m.name == name]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

def message_name(msg: Any) -> str:
	"""
	Dotted variant path of a (possibly wrapped) message.

	InputText(TextChanged("hi")) -> "InputText.TextChanged"
	"""
	parts = [type(msg).__name__]
	inner = getattr(msg, "msg", None)
	while inner is not None:
		parts.append(type(inner).__name__)
		inner = getattr(inner, "msg", None)
	return ".".join(parts)


class Telemetry:
	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=attrs or {}))

	def counter(self, name: str, value: int = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=float(value), attrs=attrs or {}))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})

	# -----------------------------------------------------------------------
	# Program-level helpers
	# -----------------------------------------------------------------------

	def dispatched(self, msg: Any) -> None:
		self.event(EVENT_DISPATCH, {"msg": message_name(msg)})

	def rendered(self) -> None:
		self.counter(METRIC_RENDERS)


class _TelemetryTimer:
	"""
	Context manager reporting elapsed milliseconds as a metric.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start: float = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		# failed blocks are not timed
		if exc_type is not None or not self._telemetry.enabled:
			return
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry._sink.emit_metric(
			TelemetryMetric(name=self._name, value=elapsed_ms, attrs=self._attrs)
		)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: logging.Logger | None = None) -> Telemetry:
	"""
	Initialize the process-wide telemetry instance.

	cfg keys:
		telemetry.enabled	bool (default False)
		telemetry.sink		"null" | "log" (default "null")
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry.enabled", False))
	sink_name = cfg.get("telemetry.sink", "null")

	if enabled and sink_name == "log":
		sink: TelemetrySink = LogSink(logger or logging.getLogger("pyezelm.telemetry"))
	else:
		sink = NullSink()

	_telemetry = Telemetry(enabled=enabled, sink=sink)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global instance; disabled until init_telemetry() runs.
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
