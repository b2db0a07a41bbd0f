"""Failure and success report rendering."""

from __future__ import annotations

from pathlib import Path

from snaptest.models.schemas import Changed, Equal, Failure, Success, TestDescriptor
from snaptest.report.decorate import Decorator, PlainDecorator, get_decorator


def _location(test: TestDescriptor, deco: Decorator) -> str:
    """``(dir/basename)`` with the directory dimmed."""
    path = Path(test.file)
    parent = path.parent.as_posix()
    if parent in ("", "."):
        return f"{deco.dim('(')}{path.name}{deco.dim(')')}"
    return f"{deco.dim(f'({parent}/')}{path.name}{deco.dim(')')}"


def _header(test: TestDescriptor, marker: str, deco: Decorator) -> str:
    return f"  {marker} {deco.dim(f'{test.path}::')}{test.name} {_location(test, deco)}"


def render_line(line: Equal | Changed, deco: Decorator) -> str:
    if isinstance(line, Equal):
        return f"    {deco.dim(line.text)}"
    return (
        f"  {deco.colorize('-', 'green')} {deco.colorize(line.left, 'green')}\n"
        f"  {deco.colorize('+', 'red')} {deco.colorize(line.right, 'red')}"
    )


def render(
    test: TestDescriptor,
    lines: list[Equal | Changed],
    decorator: Decorator | None = None,
) -> str:
    """Render the failure block for a mismatched snapshot."""
    deco = decorator or PlainDecorator()
    out = [
        _header(test, deco.style("  FAILED  ", "reverse", "bold", "red"), deco),
        "",
        f"  {deco.colorize('- Snapshot', 'green')}",
        f"  {deco.colorize('+ Received', 'red')}",
        "",
        "    {} {}() -> {} {{".format(
            deco.colorize("fn", "magenta"),
            deco.colorize(test.name, "blue"),
            deco.colorize(test.ret, "magenta"),
        ),
        "",
    ]
    out.extend(render_line(line, deco) for line in lines)
    out.extend(["", "    }"])
    return "\n".join(out)


def render_success(test: TestDescriptor, decorator: Decorator | None = None) -> str:
    """Render the one-line block for a passing run."""
    deco = decorator or PlainDecorator()
    return _header(test, deco.style("  PASSED  ", "reverse", "bold", "green"), deco)


class Report:
    """A test paired with the outcome of running it."""

    def __init__(
        self,
        test: TestDescriptor,
        outcome: Success | Failure,
        decorator: Decorator | None = None,
    ) -> None:
        self.test = test
        self.outcome = outcome
        self.decorator = decorator

    def render(self) -> str:
        deco = self.decorator or get_decorator()
        if self.outcome.was_successful():
            return render_success(self.test, deco)
        return render(self.test, self.outcome.diff(), deco)

    def __str__(self) -> str:
        return f"\n\n\n{self.render()}\n\n"

    def __repr__(self) -> str:
        return f"Report(test={self.test.uuid!r}, outcome={self.outcome!r})"
