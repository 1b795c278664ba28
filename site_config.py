"""
Centralized site configuration.
Edit this file to update page copy and the behaviour of the hero carousel
and scroll reveal.
"""

SITE_CONFIG = {
    "title":   "The Low Ratings Academy Awards",
    "tagline": "Virtually Unwatchable",
    # Footer: displayed at the bottom of the page
    "footer_budget": "Total production budget: $11.99",
    "footer_attributions_url": "/images/ATTRIBUTIONS.txt",

    # Hero carousel
    "carousel_period_seconds": 10,
    "swipe_threshold_px":      50,
    "slide_href":              "/?slide={n}",

    # Scroll reveal: cards hidden until 10% visible
    "reveal_selectors": ".staff-card, .category, .featured-film, .truth-post, .entertainment-card",
    "reveal_threshold": 0.1,

    # Scrolling disclaimer appended after the nominees section (raw HTML)
    "disclaimer_html": (
        '<span class="crawl-inner">DISCLAIMER: All grievances are real and sourced directly '
        'from Truth Social. The President of the United States shared a post claiming Joe '
        'Biden was "executed in 2020" and replaced by "clones doubles &amp; robotic engineered '
        'soulless mindless entities." He shared this with 10 million followers without '
        'comment. He is the President. &nbsp;&nbsp;&nbsp;&#127942;&nbsp;&nbsp;&nbsp;</span>'
    ),
}

# Printed when the development server starts
CONSOLE_BANNER = [
    " THE LOW RATINGS ACADEMY AWARDS ",
    ' "Virtually Unwatchable" ',
    " Total production budget: $11.99 ",
]
