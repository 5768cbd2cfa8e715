"""Immutable styling for the form view."""

from dataclasses import dataclass

from rich.style import Style

from mailform.utils.config_manager import UIConfig


@dataclass(frozen=True)
class Theme:
    label: Style
    hint: Style
    placeholder: Style
    error: Style
    cursor: Style
    width: int = 50
    blink_interval: float = 0.53

    @classmethod
    def from_config(cls, ui: UIConfig) -> "Theme":
        """Build the theme once at startup from the UI settings."""
        return cls(
            label=Style(color=ui.label_color),
            hint=Style(color=ui.hint_color),
            placeholder=Style(color=ui.placeholder_color),
            error=Style(color=ui.error_color),
            cursor=Style(reverse=True),
            width=ui.width,
            blink_interval=ui.blink_interval,
        )


DEFAULT_THEME = Theme.from_config(UIConfig())
