[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todolists"
version = "0.1.0"
description = "A to-do list kept in memory, with a bilingual terminal menu, a terminal dashboard and a web front end."
requires-python = ">=3.10"
keywords = ["todo", "tasks", "cli", "terminal", "curses", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Spanish",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
todolists-cli = "todolists.cli:main"
todolists-dashboard = "todolists.dashboard:main"
todolists-web = "todolists.web:main"

[tool.hatch.build.targets.wheel]
packages = ["todolists"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
