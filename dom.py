"""
Minimal in-process DOM used to assemble the page and drive its controllers.

Only what the page needs: class lists, inline style, attributes, children,
simple selectors (".cls", "tag", "tag.cls", comma-separated), event
listeners and HTML serialization.
"""
from dataclasses import dataclass
from typing import Callable

from markupsafe import escape

_VOID_TAGS = {"img", "br", "hr", "meta", "link", "input"}


@dataclass
class Event:
    type: str
    key:  str | None = None
    x:    float = 0.0   # clientX (first touch point for touch events)
    y:    float = 0.0   # clientY


def _parse_selector(selector: str) -> tuple[str | None, str | None]:
    selector = selector.strip()
    if "." in selector:
        tag, cls = selector.split(".", 1)
        return (tag or None), cls
    return selector or None, None


class Node:
    def __init__(self, tag: str = "div", class_name: str = "", text: str = "",
                 attrs: dict | None = None):
        self.tag        = tag
        self.classes:   list[str] = class_name.split()
        self.text       = text
        self.inner_html: str | None = None   # raw markup, emitted unescaped
        self.attrs:     dict[str, str] = dict(attrs or {})
        self.style:     dict[str, str] = {}
        self.children:  list["Node"] = []
        self.parent:    "Node | None" = None
        self._listeners: dict[str, list[Callable[[Event], None]]] = {}

    def __repr__(self) -> str:
        return f"<Node {self.tag}.{'.'.join(self.classes)}>"

    # ── Classes / attributes ─────────────────────────────────────────────────
    @property
    def class_name(self) -> str:
        return " ".join(self.classes)

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.classes = value.split()

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    # ── Tree ─────────────────────────────────────────────────────────────────
    def append_child(self, child: "Node") -> "Node":
        child.parent = self
        self.children.append(child)
        return child

    def iter_descendants(self):
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def matches(self, selector: str) -> bool:
        tag, cls = _parse_selector(selector)
        if tag and tag != self.tag:
            return False
        if cls and not self.has_class(cls):
            return False
        return bool(tag or cls)

    def query_selector_all(self, selectors: str) -> list["Node"]:
        parts = [s for s in selectors.split(",") if s.strip()]
        return [n for n in self.iter_descendants() if any(n.matches(s) for s in parts)]

    def query_selector(self, selectors: str) -> "Node | None":
        found = self.query_selector_all(selectors)
        return found[0] if found else None

    # ── Events ───────────────────────────────────────────────────────────────
    def add_event_listener(self, event_type: str, listener: Callable[[Event], None]) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def listener_count(self, event_type: str | None = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, []))
        return sum(len(v) for v in self._listeners.values())

    def dispatch(self, event: Event) -> None:
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)

    # ── Serialization ────────────────────────────────────────────────────────
    def _open_tag(self) -> str:
        attrs = dict(self.attrs)
        if self.classes:
            attrs["class"] = self.class_name
        if self.style:
            attrs["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        rendered = "".join(f' {k}="{escape(v)}"' for k, v in attrs.items())
        return f"<{self.tag}{rendered}>"

    def inner_to_html(self) -> str:
        if self.inner_html is not None:
            return self.inner_html
        return str(escape(self.text)) + "".join(c.to_html() for c in self.children)

    def to_html(self) -> str:
        if self.tag in _VOID_TAGS:
            return self._open_tag()
        return f"{self._open_tag()}{self.inner_to_html()}</{self.tag}>"


class Document:
    """Root of the page; also the target of global (keyboard) listeners."""

    def __init__(self):
        self.body = Node("body")
        self._listeners: dict[str, list[Callable[[Event], None]]] = {}

    def create_element(self, tag: str, class_name: str = "", text: str = "") -> Node:
        return Node(tag, class_name=class_name, text=text)

    def query_selector_all(self, selectors: str) -> list[Node]:
        return self.body.query_selector_all(selectors)

    def query_selector(self, selectors: str) -> Node | None:
        return self.body.query_selector(selectors)

    def add_event_listener(self, event_type: str, listener: Callable[[Event], None]) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch(self, event: Event) -> None:
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)
