"""
Scroll-reveal for content cards.

Each watched element starts hidden (opacity 0) in the "pending" state.  The
first time at least `threshold` of it is visible it gets the reveal class,
its inline opacity is dropped and its watch is released; later visibility
changes are ignored.
"""
from dom import Document, Node

REVEAL_THRESHOLD = 0.1
REVEAL_CLASS     = "animate-in"

PENDING  = "pending"
REVEALED = "revealed"


class RevealWatch:
    def __init__(self, element: Node):
        self.element = element
        self.state   = PENDING


class RevealObserver:
    def __init__(self, threshold: float = REVEAL_THRESHOLD, reveal_class: str = REVEAL_CLASS):
        self.threshold    = threshold
        self.reveal_class = reveal_class
        self._watches: dict[int, RevealWatch] = {}

    @property
    def pending(self) -> int:
        return len(self._watches)

    def observe(self, element: Node) -> None:
        element.style["opacity"] = "0"
        self._watches[id(element)] = RevealWatch(element)

    def observe_all(self, document: Document, selectors: str) -> int:
        elements = document.query_selector_all(selectors)
        for el in elements:
            self.observe(el)
        return len(elements)

    def notify(self, element: Node, ratio: float) -> bool:
        """Report how much of `element` is in the viewport (0.0 to 1.0).

        Returns True only for the call that reveals the element.
        """
        watch = self._watches.get(id(element))
        if watch is None or ratio <= 0 or ratio < self.threshold:
            return False

        element.style.pop("opacity", None)
        element.add_class(self.reveal_class)
        watch.state = REVEALED
        del self._watches[id(element)]
        return True

    def reveal_all(self) -> int:
        """Reveal every pending element at once (the whole page is in view)."""
        return sum(self.notify(w.element, 1.0) for w in list(self._watches.values()))
