"""Full-screen terminal dashboard that shows a greeting until 'q' is pressed."""

from __future__ import annotations

import argparse
import curses
import sys
from typing import Any

_QUIT_KEY = ord("q")
_COLOR_PAIR = 1


def greeting() -> str:
    """The text shown on the dashboard."""
    return "Hello Ratatui! (press 'q' to quit)"


def _attribute() -> int:
    """White on black when the terminal supports colour, plain otherwise."""
    try:
        if curses.has_colors():
            curses.start_color()
            curses.init_pair(_COLOR_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
            return curses.color_pair(_COLOR_PAIR)
    except curses.error:
        pass
    return curses.A_NORMAL


def _draw(screen: Any, attribute: int) -> None:
    height, width = screen.getmaxyx()
    screen.bkgd(" ", attribute)
    screen.erase()
    # The bottom-right cell cannot be written without an error, so stop one short.
    visible = greeting()[: max(width - 1, 0)]
    if height > 0 and visible:
        screen.addstr(0, 0, visible, attribute)
    screen.refresh()


def run(screen: Any) -> None:
    """Redraw the greeting after every key until 'q' is pressed."""
    attribute = _attribute()
    while True:
        _draw(screen, attribute)
        if screen.getch() == _QUIT_KEY:
            return


def main(argv: list[str] | None = None) -> int:
    """Command entry point: take over the terminal and restore it on exit."""
    parser = argparse.ArgumentParser(
        prog="todolists-dashboard", description="Terminal dashboard for the to-do list."
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    sys.exit(main())