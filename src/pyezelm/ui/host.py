# ---------------------------------------------------------------------------
# File: host.py
# ---------------------------------------------------------------------------
# Description:
#   ProgramWindow: themed Tk root that hosts a pyezelm Runtime.
#
# Notes:
#   - Owns the Runtime and the TkRenderer; every render goes into root_frame.
#   - Key sequences from a KeyRouter are bound on the window and routed
#     against the current state. The router never caches the page.
#   - cfg keys: ui.title, ui.width, ui.height, ui.theme, program.trace.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/28/2026	Paul G. LeDuc				Initial coding / release
# 01/28/2026	Paul G. LeDuc				Use ThemedTk (ui.theme)
# 01/29/2026	Paul G. LeDuc				Bind KeyRouter sequences
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

from tkinter import ttk

from ttkthemes import ThemedTk

from pyezelm.app.keys import KeyRouter
from pyezelm.core.config import ProgramConfig
from pyezelm.core.logging import get_program_logger
from pyezelm.core.telemetry import Telemetry
from pyezelm.program.runtime import Program, Runtime
from pyezelm.ui.renderer import TkRenderer


DEFAULT_THEME = "arc"


class ProgramWindow(ThemedTk):
	"""
	ProgramWindow

	Main window for a pyezelm program.
	"""

	def __init__(
		self,
		program: Program[Any, Any],
		*,
		router: Optional[KeyRouter] = None,
		cfg: ProgramConfig | dict[str, Any] | None = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		config = cfg if isinstance(cfg, ProgramConfig) else ProgramConfig(cfg)

		super().__init__(theme=config.get("ui.theme", DEFAULT_THEME))

		self.cfg = config

		self._log = get_program_logger("ui.host")

		self.title_text = str(self.cfg.get("ui.title", "pyezelm"))
		self.title(self.title_text)

		# Ensure Tk has computed screen dimensions
		self.update_idletasks()
		self._apply_geometry(self.cfg.get_int("ui.width"), self.cfg.get_int("ui.height"))

		self.root_frame = ttk.Frame(self, padding=8)
		self.root_frame.pack(fill="both", expand=True)

		self.renderer = TkRenderer(self.root_frame)
		self.runtime = Runtime(
			program,
			on_render=self.renderer.render,
			telemetry=telemetry,
			trace=self.cfg.get_bool("program.trace", False),
		)

		self.router = router
		if router is not None:
			self._bind_keys(router)

	# -----------------------------------------------------------------------
	# Keys
	# -----------------------------------------------------------------------

	def _bind_keys(self, router: KeyRouter) -> None:
		for keyseq in router.keyseqs():
			self.bind(keyseq, lambda event, k=keyseq: self.on_keyseq(k))

	def on_keyseq(self, keyseq: str) -> Optional[str]:
		"""
		Route a key sequence; returns "break" when it was handled.
		"""
		if self.router is None or not self.runtime.started:
			return None

		handled = self.router.route(keyseq, self.runtime.state, self.runtime.dispatch)
		if handled:
			self._log.debug("key %s handled", keyseq)
			return "break"
		return None

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		# Default to a small window, not full screen
		req_w = width if width is not None else min(480, screen_w)
		req_h = height if height is not None else min(320, screen_h)

		win_w = max(1, min(req_w, screen_w))
		win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def start(self) -> None:
		"""
		Start the program (first render) without entering the Tk loop.
		"""
		self.runtime.start()

	def run(self) -> None:
		self.start()
		self._log.info("entering Tk main loop")
		self.mainloop()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"

