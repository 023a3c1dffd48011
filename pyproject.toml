[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stageeditor"
version = "0.1.0"
description = "A small 2D stage editor: click sprites in a resource palette to place them on a map, then drag or delete them."
requires-python = ">=3.10"
keywords = ["stage", "level", "editor", "2d", "sprites", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stageeditor = "stageeditor.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["stageeditor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
