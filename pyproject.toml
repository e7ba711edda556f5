[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pidgypost"
version = "0.1.0"
description = "A terminal chat client layout with a contact list beside a chat pane"
requires-python = ">=3.10"
keywords = ["chat", "terminal", "tui", "messaging", "contacts"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pidgypost = "pidgypost.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pidgypost"]

[tool.pytest.ini_options]
addopts = "-ra"
