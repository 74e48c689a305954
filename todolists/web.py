"""Web front end for the in-memory to-do list: a menu layout and three pages."""

from __future__ import annotations

import argparse
import logging
import sys

from flask import Flask

logger = logging.getLogger(__name__)

_HOME_PATH = "/"
_TODO_LIST_PATH = "/todo-list"
_ABOUT_AS_PATH = "/about-as"

_MENU_ITEMS = (
    (_HOME_PATH, "Home"),
    (_TODO_LIST_PATH, "Todo list"),
    (_ABOUT_AS_PATH, "About as"),
)


def _section(heading: str) -> str:
    return f"<div><h3>{heading}</h3></div>"


def main_menu() -> str:
    """The navigation bar shown above every page."""
    links = "".join(
        f'<div><a href="{path}"><p>{label}</p></a></div>' for path, label in _MENU_ITEMS
    )
    return (
        '<div class="flex justify-between aling-center p-5 text-white bg-blue-500">'
        '<div><h4 class="text-lg text-white font-bold">TODO LIST MEMORY / WEB</h4></div>'
        f'<div><nav class="flex justify-center aling-center gap-4 ">{links}</nav></div>'
        "</div>"
    )


def page_home() -> str:
    """Content of the home page."""
    return "<h2>PAGE HOME</h2>" + _section("Section header")


def page_todo_list() -> str:
    """Content of the to-do list page."""
    return "<h2>PAGE TODO LIST</h2><h3>Section Header TL</h3>" + _section("Section Body TL")


def page_about_as() -> str:
    """Content of the about page."""
    return (
        "<h2>PAGE ABOUT AS</h2>"
        + _section("Section Header About As")
        + _section("Section Body Abouts As")
    )


def _layout(content: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html><head><meta charset="utf-8"><title>TODO LIST MEMORY / WEB</title></head>'
        f"<body>{main_menu()}{content}</body></html>"
    )


def create_app() -> Flask:
    """Build the application with the menu layout wrapped around each page."""
    app = Flask(__name__)

    @app.get(_HOME_PATH)
    def home() -> str:
        return _layout(page_home())

    @app.get(_TODO_LIST_PATH)
    def todo_list() -> str:
        return _layout(page_todo_list())

    @app.get(_ABOUT_AS_PATH)
    def about_as() -> str:
        return _layout(page_about_as())

    return app


def main(argv: list[str] | None = None) -> int:
    """Command entry point: serve the web front end."""
    parser = argparse.ArgumentParser(
        prog="todolists-web", description="Serve the to-do list web front end."
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    logger.info("starting app")
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())