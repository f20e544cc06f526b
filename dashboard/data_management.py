"""
Theme Preference Storage
========================

The theme flag is the only state kept between visits. It lives on the
browser side, in the page's query string (``?theme=light``), so every
visitor keeps their own preference and a bookmark restores it.
"""
import logging

import config

logger = logging.getLogger(__name__)

THEMES = ("dark", "light")
THEME_PARAM = "theme"


def load_theme_preference(params):
    """Returns the client's theme, falling back to the default when missing or unknown."""
    theme = params.get(THEME_PARAM)
    if theme is None:
        return config.DEFAULT_THEME

    if theme not in THEMES:
        logger.warning("Ignoring unknown theme preference %r", theme)
        return config.DEFAULT_THEME
    return theme


def save_theme_preference(params, theme):
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme}")
    params[THEME_PARAM] = theme
