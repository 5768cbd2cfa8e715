"""Terminal front end: rendering, key mapping and the Textual app."""

from .app import FormView, MailFormApp
from .render import render
from .theme import DEFAULT_THEME, Theme

__all__ = ["DEFAULT_THEME", "FormView", "MailFormApp", "Theme", "render"]
