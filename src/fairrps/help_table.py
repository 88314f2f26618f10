from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from tabulate import tabulate

from fairrps.protocol import MoveSet, determine_winner

logger = logging.getLogger(__name__)

PAGE_SIZE = 10
COMMANDS_HINT = "Commands: [n]ext, [p]revious, [e]xit"


class InvalidPaginationCommand(ValueError):
    pass


@dataclass
class HelpTable:
    moves: MoveSet
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")

    @property
    def page_count(self) -> int:
        return math.ceil(len(self.moves) / self.page_size)

    def columns(self, page: int) -> range:
        if not 1 <= page <= self.page_count:
            raise ValueError(f"page must be in 1..{self.page_count}")
        start = (page - 1) * self.page_size
        return range(start, min(start + self.page_size, len(self.moves)))

    def render(self, page: int) -> str:
        n = len(self.moves)
        cols = self.columns(page)
        headers = ["User \\ PC"] + [_cell_label(self.moves.label(j)) for j in cols]
        rows = [
            [_cell_label(self.moves.label(i))] + [determine_winner(i, j, n) for j in cols]
            for i in range(n)
        ]
        title = f"Help Table - Columns Page {page}/{self.page_count}"
        # Labels are shown verbatim: "007" must not become 7.
        table = tabulate(
            rows,
            headers=headers,
            tablefmt="rounded_grid",
            stralign="center",
            disable_numparse=True,
        )
        return title + "\n" + table

    def apply_command(self, page: int, command: str) -> int | None:
        """Return the page to show next, or None when the table is closed."""
        cmd = command.strip().lower()
        if cmd == "n":
            return min(page + 1, self.page_count)
        if cmd == "p":
            return max(page - 1, 1)
        if cmd == "e":
            return None
        raise InvalidPaginationCommand(f"unknown command {command!r}")

    def display(self, read_line: Callable[[], str], write: Callable[[str], None] = print) -> None:
        page = 1
        while True:
            write(self.render(page))
            write("\n" + COMMANDS_HINT)
            try:
                command = read_line()
            except EOFError:
                return
            try:
                next_page = self.apply_command(page, command)
            except InvalidPaginationCommand:
                logger.debug("ignored help table command %r", command)
                write("Invalid command. Use [n]ext, [p]revious, or [e]xit.")
                continue
            if next_page is None:
                return
            page = next_page


def _cell_label(label: str) -> str:
    # tabulate strips cell padding, so quote labels whose edges are whitespace.
    if not label or label != label.strip():
        return f'"{label}"'
    return label
