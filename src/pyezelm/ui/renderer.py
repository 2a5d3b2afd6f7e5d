# ---------------------------------------------------------------------------
# File: renderer.py
# ---------------------------------------------------------------------------
# Description:
#   Tk renderer: materializes pyezelm view trees into ttk widgets.
#
# Notes:
#   - Widgets are keyed by tree position. A node keeps its widget across
#     renders as long as the tag at that position is unchanged; otherwise
#     the old widget (and its subtree) is destroyed and a new one built.
#   - Handlers are looked up at event time, so widgets always call the
#     handler from the latest render.
#   - Writing values into Tk variables during a sync triggers Tk traces.
#     Those are ignored (_syncing) so a render never dispatches.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/25/2026	Paul G. LeDuc				Initial coding / release
# 01/26/2026	Paul G. LeDuc				Reuse widgets by position + tag
# 01/27/2026	Paul G. LeDuc				Ignore Tk variable traces while syncing
# 02/02/2026	Paul G. LeDuc				Drop unused widget_at / clear
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from pyezelm.core.logging import get_program_logger
from pyezelm.program.view import ON_CHANGE, ON_CLICK, ON_TOGGLE, Element, Node, Text


Path = tuple[int, ...]

# Container tags and the pack side used for their children
_CONTAINERS: dict[str, str] = {
	"div": "top",
	"row": "left",
}


@dataclass
class Mounted:
	"""
	A widget materialized for one tree position.
	"""
	tag: str
	widget: tk.Widget
	var: Optional[tk.Variable] = None
	handlers: dict[str, Any] = field(default_factory=dict)


class TkRenderer:
	"""
	TkRenderer

	render(tree) brings the widgets under `container` in line with tree.
	"""

	def __init__(self, container: tk.Misc) -> None:
		self.container = container
		self.mounted: dict[Path, Mounted] = {}
		self._syncing = False
		self._log = get_program_logger("ui.renderer")

	# -----------------------------------------------------------------------
	# Public API
	# -----------------------------------------------------------------------

	def render(self, tree: Element) -> None:
		self._syncing = True
		try:
			seen: set[Path] = set()
			widget = self._sync(tree, self.container, (0,), seen)
			widget.pack(fill="both", expand=True)
			self._prune(seen)
		finally:
			self._syncing = False

	# -----------------------------------------------------------------------
	# Sync
	# -----------------------------------------------------------------------

	def _sync(self, node: Node, parent: tk.Misc, path: Path, seen: set[Path]) -> tk.Widget:
		if isinstance(node, Text):
			node = Element("label", props=(("text", node.value),))

		seen.add(path)

		item = self.mounted.get(path)
		if item is not None and item.tag != node.tag:
			self._destroy(path)
			item = None

		if item is None:
			item = self._create(node, parent, path)
			self.mounted[path] = item

		self._apply_props(item, node)

		side = _CONTAINERS.get(node.tag)
		if side is not None:
			children = [
				self._sync(child, item.widget, path + (i,), seen)
				for i, child in enumerate(node.children)
			]
			# Re-pack in order; a replaced child would otherwise land last.
			for child in children:
				child.pack_forget()
			for child in children:
				child.pack(side=side, padx=4, pady=4, anchor="w")

		return item.widget

	def _create(self, node: Element, parent: tk.Misc, path: Path) -> Mounted:
		tag = node.tag

		if tag in _CONTAINERS:
			return Mounted(tag, ttk.Frame(parent))

		if tag == "h1":
			return Mounted(tag, ttk.Label(parent, font=("TkDefaultFont", 16, "bold")))

		if tag == "label":
			return Mounted(tag, ttk.Label(parent))

		if tag == "button":
			widget = ttk.Button(parent, command=lambda: self._fire(path, ON_CLICK))
			return Mounted(tag, widget)

		if tag == "input":
			var = tk.StringVar(master=parent)
			widget = ttk.Entry(parent, textvariable=var)
			var.trace_add("write", lambda *_: self._fire(path, ON_CHANGE, var.get()))
			return Mounted(tag, widget, var)

		if tag == "checkbox":
			bvar = tk.BooleanVar(master=parent)
			widget = ttk.Checkbutton(
				parent,
				variable=bvar,
				command=lambda: self._fire(path, ON_TOGGLE, bvar.get()),
			)
			return Mounted(tag, widget, bvar)

		raise ValueError(f"Unsupported view tag: {tag!r}")

	def _apply_props(self, item: Mounted, node: Element) -> None:
		item.handlers = {
			name: value
			for name, value in node.props
			if name in (ON_CLICK, ON_CHANGE, ON_TOGGLE)
		}

		if item.tag in ("h1", "label", "button", "checkbox"):
			item.widget.configure(text=str(node.prop("text", "")))

		if item.tag == "input" and item.var is not None:
			value = str(node.prop("value", ""))
			if item.var.get() != value:
				item.var.set(value)

		if item.tag == "checkbox" and item.var is not None:
			checked = bool(node.prop("checked", False))
			if bool(item.var.get()) != checked:
				item.var.set(checked)

	# -----------------------------------------------------------------------
	# Events
	# -----------------------------------------------------------------------

	def _fire(self, path: Path, event: str, payload: Any = None) -> None:
		if self._syncing:
			return

		item = self.mounted.get(path)
		if item is None:
			return

		handler = item.handlers.get(event)
		if handler is None:
			self._log.debug("no %s handler at %s", event, path)
			return

		handler(payload)

	# -----------------------------------------------------------------------
	# Teardown
	# -----------------------------------------------------------------------

	def _destroy(self, path: Path) -> None:
		item = self.mounted.pop(path, None)
		if item is None:
			return

		for other in [p for p in self.mounted if p[: len(path)] == path]:
			del self.mounted[other]

		item.widget.destroy()

	def _prune(self, seen: set[Path]) -> None:
		# Shortest first: destroying a parent drops its descendants too.
		for path in sorted(set(self.mounted) - seen, key=len):
			if path in self.mounted:
				self._destroy(path)
