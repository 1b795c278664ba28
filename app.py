import os
import traceback
from datetime import datetime

from flask import Flask, request, render_template, Response, send_from_directory
from markupsafe import Markup

from asset_catalog import PEOPLE_IMAGES, SCENE_PROMPTS
from page import render_snapshot
from site_config import SITE_CONFIG, CONSOLE_BANNER

ROOT       = os.path.dirname(os.path.abspath(__file__))
IMAGES_DIR = os.path.join(ROOT, "public", "images")
ERROR_LOG  = "last_error.log"

app = Flask(__name__)


# ── Inject site config into every template automatically ──────────────────────
@app.context_processor
def inject_globals():
    return {"site": SITE_CONFIG}


# ── Helpers ───────────────────────────────────────────────────────────────────

def _log_error(context: str, exc: BaseException) -> None:
    """Write the last error with timestamp to last_error.log."""
    with open(ERROR_LOG, "w", encoding="utf-8") as f:
        f.write(f"[{datetime.now().isoformat(timespec='seconds')}] {context}\n\n")
        if exc.__traceback__:
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=f)
        else:
            f.write(f"{type(exc).__name__}: {exc}\n")


def render_page_body(slide: int = 1) -> str:
    """Assemble the page and return the <body> contents as served."""
    doc = render_snapshot(PEOPLE_IMAGES, SCENE_PROMPTS, SITE_CONFIG, slide=slide)
    return doc.body.inner_to_html()


# ── Routes ────────────────────────────────────────────────────────────────────

@app.route("/robots.txt")
def robots_txt():
    return Response("User-agent: *\nDisallow: /\n", mimetype="text/plain")


@app.route("/")
def index():
    slide = request.args.get("slide", default=1, type=int)
    return render_template("index.html", body=Markup(render_page_body(slide)))


@app.route("/images/<path:filename>")
def images(filename):
    return send_from_directory(IMAGES_DIR, filename)


@app.errorhandler(500)
def internal_error(e):
    _log_error(f"path={request.path}", getattr(e, "original_exception", None) or e)
    return render_template("error.html", message="Something went wrong."), 500


if __name__ == "__main__":
    for line in CONSOLE_BANNER:
        print(line)
    print("Starting on http://localhost:5000")
    app.run(debug=True, port=5000)
