"""
Page assembly: builds the single-page document from the asset catalog and
wires the carousel, the scroll reveal and the disclaimer banner onto it.
"""
from dataclasses import dataclass

from asset_catalog import PersonImage, ScenePrompt
from carousel import Carousel
from dom import Document, Node
from reveal import RevealObserver

HERO_SIZE = "1792x1024"   # only landscape scenes go in the hero carousel


@dataclass
class PageState:
    carousel:   Carousel
    observer:   RevealObserver
    disclaimer: Node | None


def build_document(people: list[PersonImage], scenes: list[ScenePrompt], site: dict) -> Document:
    doc  = Document()
    body = doc.body

    # ── Hero ─────────────────────────────────────────────────────────────────
    hero = body.append_child(Node("section", "hero"))
    for scene in scenes:
        if scene.size != HERO_SIZE:
            continue
        slide = hero.append_child(Node("div", "hero-slide"))
        slide.append_child(Node("img", attrs={"src": f"/images/scenes/{scene.filename}", "alt": scene.name}))
    hero.append_child(Node("h1", "hero-title", text=site.get("title", "")))
    hero.append_child(Node("p", "hero-tagline", text=site.get("tagline", "")))
    hero.append_child(Node("div", "hero-dots"))

    # ── Nominees ─────────────────────────────────────────────────────────────
    nominees = body.append_child(Node("section", "nominees-section"))
    nominees.append_child(Node("h2", text="This Year's Nominees"))
    for person in people:
        card = nominees.append_child(Node("article", "category"))
        card.append_child(Node("img", attrs={"src": f"/images/people/{person.filename}", "alt": person.name}))
        card.append_child(Node("h3", text=person.name))
        card.append_child(Node("p", "credit", text=person.attribution))

    # ── Gallery ──────────────────────────────────────────────────────────────
    gallery = body.append_child(Node("section", "gallery"))
    for scene in scenes:
        film = gallery.append_child(Node("figure", "featured-film"))
        film.append_child(Node("img", attrs={"src": f"/images/scenes/{scene.filename}", "alt": scene.name}))
        film.append_child(Node("figcaption", text=scene.name))

    footer = body.append_child(Node("footer", "site-footer"))
    footer.append_child(Node("p", text=site.get("footer_budget", "")))
    if site.get("footer_attributions_url"):
        footer.append_child(Node("a", text="Photo credits",
                                 attrs={"href": site["footer_attributions_url"]}))
    return doc


def append_disclaimer(doc: Document, html: str) -> Node | None:
    """Append the scrolling disclaimer after the nominees, if that section exists."""
    nominees = doc.query_selector(".nominees-section")
    if nominees is None:
        return None
    crawl = Node("div", "crawl")
    crawl.inner_html = html
    return nominees.append_child(crawl)


def init_page(doc: Document, site: dict, scheduler=None, dot_href: str | None = None) -> PageState:
    carousel = Carousel(
        doc.query_selector_all(".hero-slide"),
        doc.query_selector(".hero-dots"),
        scheduler=scheduler,
        period=site.get("carousel_period_seconds", 10),
        swipe_threshold=site.get("swipe_threshold_px", 50),
        dot_href=dot_href,
    )
    carousel.mount(doc, hero=doc.query_selector(".hero"))

    observer = RevealObserver(threshold=site.get("reveal_threshold", 0.1))
    observer.observe_all(doc, site.get("reveal_selectors", ""))

    disclaimer = append_disclaimer(doc, site.get("disclaimer_html", ""))
    return PageState(carousel=carousel, observer=observer, disclaimer=disclaimer)


def render_snapshot(people: list[PersonImage], scenes: list[ScenePrompt], site: dict,
                    slide: int = 1) -> Document:
    """
    Build the page as the server delivers it: no client runtime, so every card
    is revealed up front and the dots are links that pick the slide (1-based)
    through the carousel's own transition.
    """
    doc   = build_document(people, scenes, site)
    state = init_page(doc, site, dot_href=site.get("slide_href"))
    state.carousel.go_to(slide - 1)
    state.observer.reveal_all()
    return doc
