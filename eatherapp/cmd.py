"""A page-driven command-line loop."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, TextIO

SEPARATOR = "-------------------------------\n"


@dataclass
class Context:
    """State shared between the loop and the pages' input handlers."""

    page: int
    db: Any
    con: Any
    stdin: TextIO
    stdout: TextIO
    error: str = ""
    last_data: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Page:
    """One screen: a drawing function and an input handler.

    ``draw(data, out)`` renders the last fetched data; ``input(ctx)`` reads
    the user's choice, updates ``ctx`` and returns False to stop the loop.
    """

    id: int
    draw: Callable[[dict, TextIO], None]
    input: Callable[[Context], bool]


class CMD:
    """Runs pages one step at a time."""

    def __init__(
        self,
        starting_page: int,
        pages: Sequence[Page],
        db: Any,
        con: Any,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.pages = list(pages)
        self.ctx = Context(
            page=starting_page,
            db=db,
            con=con,
            stdin=stdin if stdin is not None else sys.stdin,
            stdout=stdout if stdout is not None else sys.stdout,
        )

    def step(self) -> bool:
        """Draw the current page and handle its input; False means quit."""
        page = self.pages[self.ctx.page]
        out = self.ctx.stdout
        out.write(SEPARATOR)
        page.draw(self.ctx.last_data, out)
        out.write(f"{self.ctx.error}\n")
        return page.input(self.ctx)