"""Text decoration: ANSI styling through rich, or plain text."""

from __future__ import annotations

from typing import Literal

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from snaptest.config.settings import get_settings


class Decorator:
    """Applies styles to text. The base class leaves text untouched."""

    def style(self, text: str, *styles: str) -> str:
        return text

    def bold(self, text: str) -> str:
        return self.style(text, "bold")

    def dim(self, text: str) -> str:
        return self.style(text, "dim")

    def reverse(self, text: str) -> str:
        return self.style(text, "reverse")

    def colorize(self, text: str, color: str) -> str:
        return self.style(text, color)


class PlainDecorator(Decorator):
    """No styling at all."""


class RichDecorator(Decorator):
    """Renders styles as ANSI escape sequences using rich styles."""

    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD) -> None:
        self.color_system = color_system

    def style(self, text: str, *styles: str) -> str:
        if not text or not styles:
            return text
        return Style.parse(" ".join(styles)).render(text, color_system=self.color_system)


def get_decorator(
    color: Literal["auto", "always", "never"] | None = None,
    console: Console | None = None,
) -> Decorator:
    """
    Pick a decorator for the current environment.

    ``auto`` colors only when rich detects a terminal that can show color
    (honoring ``NO_COLOR``); anything else degrades to plain text.
    """
    color = color or get_settings().color
    if color == "never":
        return PlainDecorator()
    if color == "always":
        return RichDecorator()

    console = console or Console(stderr=True)
    if console.is_terminal and not console.no_color and console.color_system is not None:
        return RichDecorator()
    return PlainDecorator()
