# todolists

A to-do list that lives in memory, with three ways in:

- `todolists-cli`: an interactive terminal menu in English and Spanish,
- `todolists-dashboard`: a full-screen terminal view,
- `todolists-web`: a small web front end with a navigation menu and three pages.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

The dashboard uses the standard `curses` module, so it needs a platform
where Python ships `curses`.

## The terminal menu

```
todolists-cli
```

The main menu offers:

```
1: English
2: Spanish
3: About as
0: Exit
```

"About as" prints a short description of the program. Choosing a language
opens the task menu in that language, with a fresh, empty task list:

```
1: List tasks
2: Add task
3: Edit task
4: Delete task
5: Check task
0: Back
```

In Spanish the same entries read "Listar tareas", "Agregar tarea",
"Editar tarea", "Eliminar tarea", "Chequear tarea" and "Atras".

- Tasks are addressed by their index, counting from 0.
- Deleting an index that does not exist prints "... invalid task index" and
  the menu carries on.
- Editing an index that does not exist, or typing something other than a
  whole number where an index is asked for, ends the program with an
  `error:` message and exit status 1.
- "Check task" only prints a message; tasks have no done state.
- Any other choice is answered with "Invalid option" (or "opcion invalida"
  in Spanish) and the menu is shown again.
- "Back" returns to the main menu; the tasks of that session are dropped.
- The program also ends when its input runs out.

Output uses ANSI colour escapes and emoji.

## The dashboard

```
todolists-dashboard
```

Takes over the terminal and shows a greeting in white on black. Press `q`
to quit; the terminal is restored on exit.

## The web front end

```
todolists-web [--host HOST] [--port PORT]
```

Serves on `127.0.0.1:8080` by default. Every page carries the same top menu:

- `/`: home
- `/todo-list`: the to-do list page
- `/about-as`: about the application

The application can also be built in code with
`todolists.web.create_app()`, which returns a Flask application. The page
bodies are available as strings from `main_menu()`, `page_home()`,
`page_todo_list()` and `page_about_as()`.

## Using the task list from Python

```python
from todolists.tasks import TaskList, InvalidTaskIndex

tasks = TaskList()
tasks.add("buy milk")
tasks.add("write report")
tasks.edit(1, "write the quarterly report")

for task in tasks:
    print(task)

removed = tasks.delete(0)    # returns "buy milk"

try:
    tasks.delete(5)
except InvalidTaskIndex:     # a subclass of IndexError
    print("no such task")

print(len(tasks))            # 1
```

## What it does not do

- Nothing is saved: tasks last only while a language session of the
  terminal menu is open.
- The dashboard shows a greeting only; it does not list or change tasks.
- The web pages show the menu and section headings only; the web front end
  does not list, add, edit or delete tasks.