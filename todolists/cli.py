"""Interactive, menu-driven to-do list kept in memory, in English or Spanish."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from todolists.tasks import InvalidTaskIndex, TaskList

# xterm 256-colour palette indices
_BLACK = 0
_RED = 1
_BLUE = 4
_DARK_GRAY = 8
_DARK_GREEN = 22
_DARK_RED1 = 52
_DARK_SEA_GREEN4A = 65
_GREEN_YELLOW = 154
_ORANGE3 = 172

_BOOKMARK_TABS = "\U0001F4D1"
_FLAG_US = "\U0001F1FA\U0001F1F8"
_FLAG_ES = "\U0001F1EA\U0001F1F8"
_GREEN_CIRCLE = "\U0001F7E2"
_RED_CIRCLE = "\U0001F534"
_OPEN_BOOK = "\U0001F4D6"
_BLUE_BOOK = "\U0001F4D8"
_ORANGE_BOOK = "\U0001F4D9"
_CLOSED_BOOK = "\U0001F4D5"
_GREEN_BOOK = "\U0001F4D7"
_ARROW_LEFT = "\u2B05\uFE0F"

_LANGUAGE_MENU_KEYS = ("1", "2", "3", "4", "5", "0")
_LANGUAGE_MENU_EMOJIS = (
    _OPEN_BOOK,
    _BLUE_BOOK,
    _ORANGE_BOOK,
    _CLOSED_BOOK,
    _GREEN_BOOK,
    _ARROW_LEFT,
)


def colorize(
    text: str,
    fg: int | None = None,
    bg: int | None = None,
    bold: bool = False,
    italic: bool = False,
) -> str:
    """Wrap ``text`` in ANSI escapes for 256-colour foreground/background and style."""
    codes = []
    if fg is not None:
        codes.append(f"38;5;{fg}")
    if bg is not None:
        codes.append(f"48;5;{bg}")
    if bold:
        codes.append("1")
    if italic:
        codes.append("3")
    if not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


@dataclass(frozen=True)
class _Texts:
    title: str
    selected: str
    select_option: str
    entered: str
    invalid: str
    menu: tuple[str, ...]
    action_selected: str
    list_empty: str
    list_done: str
    add_prompt: str
    add_done: str
    edit_index_prompt: str
    edit_selected: str
    edit_new_prompt: str
    edit_done: str
    delete_prompt: str
    delete_invalid: str
    delete_done: str
    check: str


class Language(Enum):
    """The languages the task menu can be shown in."""

    ENGLISH = _Texts(
        title="TODO LIST MEMORY - ENGLISH",
        selected="... english language selected ",
        select_option="Select an option",
        entered="seleted option ...",
        invalid="Invalid option",
        menu=("List tasks", "Add task", "Edit task", "Delete task", "Check task", "Back"),
        action_selected="selected option ...",
        list_empty="... there are no tasks in the list",
        list_done="... listed tasks",
        add_prompt="Enter task: ",
        add_done="... task add successfully",
        edit_index_prompt="Enter the index of the task to edit: ",
        edit_selected="The task selected is: {}",
        edit_new_prompt="Enter the new task",
        edit_done="... task edited successfully",
        delete_prompt="Enter task index to delete: ",
        delete_invalid="... invalid task index",
        delete_done="... task deleted successfully",
        check="Check task english",
    )
    SPANISH = _Texts(
        title="TODO LIST MEMORY - SPANISH",
        selected="... lenguaje español seleccionado ",
        select_option="Seleccione una opcion",
        entered="opcion seleccionada ...",
        invalid="opcion invalida",
        menu=(
            "Listar tareas",
            "Agregar tarea",
            "Editar tarea",
            "Eliminar tarea",
            "Chequear tarea",
            "Atras",
        ),
        action_selected="opcion seleccionada ...",
        list_empty="... no hay tareas en la lista",
        list_done="... tareas listadas",
        add_prompt="Agregue la tarea: ",
        add_done="... tarea agregada satisfactoriamente",
        edit_index_prompt="Agregue el index de la tarea a editar: ",
        edit_selected="La tarea seleccionada es: {}",
        edit_new_prompt="Agregue la nueva tarea: ",
        edit_done="... taarea editada satisfactoriamente ...",
        delete_prompt="Agregue el index de la tarea a eliminar: ",
        delete_invalid="... index de tarea invalida",
        delete_done="... tarea eliminada satisfactoriamente",
        check="Chequear tarea español",
    )

    @property
    def texts(self) -> _Texts:
        """The messages shown in this language."""
        return self.value


def about_text() -> str:
    """The description shown by the "About as" option."""
    return "\n".join(
        [
            "Name: CLI Todo List Memory",
            "Todo list basic in english and spanish, with list, Add, Edit and Delete",
            "Type: Command Line Interface",
            "Storage: Memory",
        ]
    )


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def say(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)

    def ask(self, prompt: str = "") -> str:
        """Show ``prompt`` and read one line; an empty string at end of input."""
        if prompt:
            self._out.write(prompt)
        self._out.flush()
        return self._in.readline().rstrip("\r\n")

    def choose(self) -> str:
        """Read a menu choice; raise EOFError when input is exhausted."""
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


def _parse_index(text: str) -> int:
    value = text.strip()
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"invalid task index: {value!r}")
    return int(value)


def _list_tasks(console: _Console, texts: _Texts, tasks: TaskList) -> None:
    console.say(colorize(texts.action_selected, _DARK_GREEN, _BLACK))
    if not tasks:
        console.say(colorize(texts.list_empty, _DARK_RED1, _BLACK))
        return
    for task in tasks:
        console.say(f" - {task}")
    console.say(colorize(texts.list_done, _DARK_GRAY, _BLACK))


def _add_task(console: _Console, texts: _Texts, tasks: TaskList) -> None:
    console.say(colorize(texts.action_selected, _DARK_GREEN, _BLACK))
    tasks.add(console.ask(texts.add_prompt).strip())
    console.say(colorize(texts.add_done, _DARK_GREEN, _BLACK))


def _edit_task(console: _Console, texts: _Texts, tasks: TaskList) -> None:
    console.say(colorize(texts.action_selected, _DARK_GREEN, _BLACK))
    index = _parse_index(console.ask(texts.edit_index_prompt))
    console.say(texts.edit_selected.format(index))
    console.say(texts.edit_new_prompt)
    tasks.edit(index, console.ask())
    console.say(colorize(texts.edit_done, _DARK_GREEN, _BLACK))


def _delete_task(console: _Console, texts: _Texts, tasks: TaskList) -> None:
    console.say(colorize(texts.action_selected, _DARK_GREEN, _BLACK))
    index = _parse_index(console.ask(texts.delete_prompt))
    try:
        tasks.delete(index)
    except InvalidTaskIndex:
        console.say(colorize(texts.delete_invalid, _DARK_RED1, _BLACK), end="")
    else:
        console.say(colorize(texts.delete_done, _DARK_GREEN, _BLACK))


def _check_task(console: _Console, texts: _Texts, tasks: TaskList) -> None:
    console.say(texts.check)


_ACTIONS: dict[str, Callable[[_Console, _Texts, TaskList], None]] = {
    "1": _list_tasks,
    "2": _add_task,
    "3": _edit_task,
    "4": _delete_task,
    "5": _check_task,
}


def _language_session(console: _Console, language: Language) -> None:
    texts = language.texts
    tasks = TaskList()
    console.say(colorize(texts.entered, _DARK_GREEN, _BLACK))
    console.say(colorize(texts.selected, _DARK_GRAY, _BLACK, italic=True))
    while True:
        console.say(f"{_BOOKMARK_TABS} {colorize(texts.title, _ORANGE3, _BLACK, bold=True)}")
        for key, label, emoji in zip(_LANGUAGE_MENU_KEYS, texts.menu, _LANGUAGE_MENU_EMOJIS):
            console.say(f"{key}: {label} {emoji}")
        console.say(colorize(texts.select_option, _BLUE, _BLACK))
        choice = console.choose()
        if choice == "0":
            return
        action = _ACTIONS.get(choice)
        if action is None:
            console.say(texts.invalid)
        else:
            action(console, texts, tasks)


def _about(console: _Console) -> None:
    console.say(colorize("... about as selected ", _DARK_GRAY, _BLACK, italic=True))
    console.say(f"{_GREEN_CIRCLE} {colorize('ABOUT AS', _DARK_SEA_GREEN4A, _BLACK)}")
    console.say(about_text())


def _main_header(console: _Console) -> None:
    console.say(
        f"{_BOOKMARK_TABS} {colorize('TODO LIST MEMORY', _GREEN_YELLOW, _BLACK, bold=True)}"
    )
    console.say(f"1: English {_FLAG_US}")
    console.say(f"2: Spanish {_FLAG_ES}")
    console.say(f"3: About as {_GREEN_CIRCLE}")
    console.say(f"0: Exit {_RED_CIRCLE}")
    console.say(colorize("Select an option", _BLUE, _BLACK, bold=True))


_LANGUAGES = {"1": Language.ENGLISH, "2": Language.SPANISH}


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the menu loop until the user exits or input ends.

    Raises ValueError for an index that is not a number, and InvalidTaskIndex
    when editing a task that does not exist.
    """
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    _main_header(console)
    try:
        while True:
            choice = console.choose()
            if choice in _LANGUAGES:
                _language_session(console, _LANGUAGES[choice])
                _main_header(console)
            elif choice == "3":
                _about(console)
            elif choice == "0":
                return
            else:
                console.say(colorize("Invalid option", _RED, _BLACK))
    except EOFError:
        return
    finally:
        console._out.flush()


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="todolists", description="Interactive to-do list kept in memory."
    )
    parser.parse_args(argv)
    try:
        run()
    except (ValueError, InvalidTaskIndex) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())