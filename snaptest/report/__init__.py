"""Human-readable rendering of snapshot test runs."""

from snaptest.report.decorate import Decorator, PlainDecorator, RichDecorator, get_decorator
from snaptest.report.renderer import Report, render, render_success

__all__ = [
    "Decorator",
    "PlainDecorator",
    "RichDecorator",
    "Report",
    "get_decorator",
    "render",
    "render_success",
]
