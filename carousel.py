"""
Hero carousel controller.

One Carousel owns the active index and the auto-advance timer.  The timer comes from
any scheduler exposing set_interval(seconds, callback) and returning a handle
with cancel(); without one the carousel never advances on its own.  Every input
(dot click, arrow key, touch swipe, mouse drag, timer tick) resolves to a
target index and goes through go_to(), which also restarts the timer, so a
manual move always buys a full period before the next automatic one.
"""
from dom import Document, Event, Node

AUTO_ADVANCE_SECONDS = 10.0
SWIPE_THRESHOLD_PX   = 50
ACTIVE_CLASS         = "active"


def swipe_step(dx: float, dy: float | None = None, threshold: float = SWIPE_THRESHOLD_PX) -> int:
    """
    Map a gesture to a navigation step: +1 (next), -1 (previous) or 0 (ignore).
    Pass dy for touch gestures; a swipe must then be more horizontal than vertical.
    """
    if abs(dx) <= threshold:
        return 0
    if dy is not None and abs(dx) <= abs(dy):
        return 0
    return 1 if dx < 0 else -1


class Carousel:
    def __init__(self, slides: list[Node], dots: Node | None, scheduler=None,
                 period: float = AUTO_ADVANCE_SECONDS,
                 swipe_threshold: float = SWIPE_THRESHOLD_PX,
                 dot_href: str | None = None):
        self.slides          = list(slides)
        self.dots            = dots
        self.scheduler       = scheduler
        self.period          = period
        self.swipe_threshold = swipe_threshold
        self.dot_href        = dot_href   # e.g. "/?slide={n}"; dots become links
        self.current         = 0
        self.mounted         = False
        self._timer          = None
        self._touch_start    = (0.0, 0.0)
        self._mouse_start_x  = 0.0
        self._dragging       = False

    @property
    def inert(self) -> bool:
        return not self.slides or self.dots is None

    # ── Setup ────────────────────────────────────────────────────────────────
    def mount(self, document: Document, hero: Node | None = None) -> bool:
        """Create the dots, attach listeners and start the timer.

        Does nothing and returns False when there are no slides or no dot row.
        """
        if self.inert:
            return False

        for i, slide in enumerate(self.slides):
            if i == 0:
                slide.add_class(ACTIVE_CLASS)
            else:
                slide.remove_class(ACTIVE_CLASS)

            if self.dot_href:
                dot = document.create_element("a", class_name="hero-dot")
                dot.set_attribute("href", self.dot_href.format(n=i + 1))
            else:
                dot = document.create_element("button", class_name="hero-dot")
                dot.set_attribute("type", "button")
            if i == 0:
                dot.add_class(ACTIVE_CLASS)
            dot.set_attribute("aria-label", f"Slide {i + 1}")
            dot.add_event_listener("click", lambda e, i=i: self.go_to(i))
            self.dots.append_child(dot)

        if hero is not None:
            hero.add_event_listener("touchstart", self._on_touch_start)
            hero.add_event_listener("touchend", self._on_touch_end)
            hero.add_event_listener("mousedown", self._on_mouse_down)
            hero.add_event_listener("mouseup", self._on_mouse_up)
            hero.add_event_listener("mouseleave", self._on_mouse_leave)

        document.add_event_listener("keydown", self._on_key)

        self.current = 0
        self.mounted = True
        self._restart_timer()
        return True

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ── Transitions ──────────────────────────────────────────────────────────
    def go_to(self, index: int) -> None:
        if self.inert:
            return
        dot_nodes = self.dots.children
        self.slides[self.current].remove_class(ACTIVE_CLASS)
        if self.current < len(dot_nodes):
            dot_nodes[self.current].remove_class(ACTIVE_CLASS)

        self.current = index % len(self.slides)

        self.slides[self.current].add_class(ACTIVE_CLASS)
        if self.current < len(dot_nodes):
            dot_nodes[self.current].add_class(ACTIVE_CLASS)
        self._restart_timer()

    def next(self) -> None:
        self.go_to((self.current + 1) % len(self.slides))

    def prev(self) -> None:
        self.go_to((self.current - 1 + len(self.slides)) % len(self.slides))

    def step(self, direction: int) -> None:
        if direction > 0:
            self.next()
        elif direction < 0:
            self.prev()

    def _restart_timer(self) -> None:
        self.stop()
        if self.scheduler is not None:
            self._timer = self.scheduler.set_interval(self.period, self.next)

    # ── Input handlers ───────────────────────────────────────────────────────
    def _on_key(self, event: Event) -> None:
        if event.key == "ArrowRight":
            self.next()
        elif event.key == "ArrowLeft":
            self.prev()

    def _on_touch_start(self, event: Event) -> None:
        self._touch_start = (event.x, event.y)

    def _on_touch_end(self, event: Event) -> None:
        dx = event.x - self._touch_start[0]
        dy = event.y - self._touch_start[1]
        self.step(swipe_step(dx, dy, self.swipe_threshold))

    def _on_mouse_down(self, event: Event) -> None:
        self._mouse_start_x = event.x
        self._dragging      = True

    def _on_mouse_up(self, event: Event) -> None:
        if not self._dragging:
            return
        self._dragging = False
        self.step(swipe_step(event.x - self._mouse_start_x, threshold=self.swipe_threshold))

    def _on_mouse_leave(self, event: Event) -> None:
        self._dragging = False
