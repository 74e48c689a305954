"""An in-memory to-do list with a terminal menu, a terminal dashboard and a web front end."""

__version__ = "0.1.0"

__all__ = ["cli", "dashboard", "tasks", "web"]