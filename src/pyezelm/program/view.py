# ---------------------------------------------------------------------------
# File: view.py
# ---------------------------------------------------------------------------
# Description:
#	View tree values produced by view/render functions.
#
# Notes:
#	- Toolkit-agnostic. pyezelm.ui.renderer turns these into Tk widgets;
#	  tests inspect them directly.
#	- Everything here is a frozen value, handlers included. Event handlers
#	  are Send / SendWith records (dispatch + message), never closures, so
#	  render(state, dispatch) == render(state, dispatch).
#	- Building a tree never calls dispatch. Only fire() (or a renderer
#	  reacting to a real UI event) does.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Handlers as values (Send / SendWith)
# 01/14/2026	Paul G. LeDuc				Add walk/find/fire helpers
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, Union


MsgT = TypeVar("MsgT")

Props = tuple[tuple[str, Any], ...]

# Event prop names understood by renderers
ON_CLICK = "on_click"
ON_CHANGE = "on_change"
ON_TOGGLE = "on_toggle"


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Send(Generic[MsgT]):
	"""
	Dispatch a fixed message; the event payload is ignored.
	"""
	dispatch: Callable[[MsgT], None]
	msg: MsgT

	def __call__(self, payload: Any = None) -> None:
		self.dispatch(self.msg)


@dataclass(frozen=True, slots=True)
class SendWith(Generic[MsgT]):
	"""
	Build a message from the event payload, then dispatch it.

	SendWith(dispatch, TextChanged)("hi") -> dispatch(TextChanged("hi"))
	"""
	dispatch: Callable[[MsgT], None]
	to_msg: Callable[[Any], MsgT]

	def __call__(self, payload: Any = None) -> None:
		self.dispatch(self.to_msg(payload))


Handler = Union[Send[Any], SendWith[Any]]


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Text:
	value: str


@dataclass(frozen=True, slots=True)
class Element:
	"""
	Element

	- tag:		Widget kind ("div", "row", "h1", "label", "button", "input", "checkbox").
	- props:	Ordered (name, value) pairs; handlers live here too.
	- children:	Nested nodes.
	- key:		Optional stable name for lookup in tests and renderers.
	"""
	tag: str
	props: Props = ()
	children: tuple["Node", ...] = ()
	key: Optional[str] = None

	def prop(self, name: str, default: Any = None) -> Any:
		for k, v in self.props:
			if k == name:
				return v
		return default


Node = Union[Element, Text]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def div(*children: Node, key: Optional[str] = None) -> Element:
	return Element("div", children=tuple(children), key=key)


def row(*children: Node, key: Optional[str] = None) -> Element:
	return Element("row", children=tuple(children), key=key)


def h1(text: str, *, key: Optional[str] = None) -> Element:
	return Element("h1", props=(("text", text),), key=key)


def label(text: str, *, key: Optional[str] = None) -> Element:
	return Element("label", props=(("text", text),), key=key)


def button(text: str, on_click: Handler, *, key: Optional[str] = None) -> Element:
	return Element("button", props=(("text", text), (ON_CLICK, on_click)), key=key)


def text_input(
	value: str,
	on_change: Handler,
	*,
	placeholder: str = "",
	key: Optional[str] = None,
) -> Element:
	return Element(
		"input",
		props=(("value", value), ("placeholder", placeholder), (ON_CHANGE, on_change)),
		key=key,
	)


def checkbox(text: str, checked: bool, on_toggle: Handler, *, key: Optional[str] = None) -> Element:
	return Element(
		"checkbox",
		props=(("text", text), ("checked", checked), (ON_TOGGLE, on_toggle)),
		key=key,
	)


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------

def walk(node: Node) -> Iterator[Node]:
	"""
	Depth-first, pre-order traversal.
	"""
	yield node
	if isinstance(node, Element):
		for child in node.children:
			yield from walk(child)


def find(node: Node, key: str) -> Optional[Element]:
	for item in walk(node):
		if isinstance(item, Element) and item.key == key:
			return item
	return None


def text_of(node: Node) -> str:
	if isinstance(node, Text):
		return node.value
	return str(node.prop("text", ""))


def fire(element: Element, event: str, payload: Any = None) -> None:
	"""
	Deliver a UI event to an element's handler (what a renderer does on input).
	"""
	handler = element.prop(event)
	if handler is None:
		raise KeyError(f"Element {element.tag!r} key={element.key!r} has no {event!r} handler")
	handler(payload)
