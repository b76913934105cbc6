[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "blockcaster"
version = "0.1.0"
description = "Game logic for a grid-based first-person block game: maps, player movement, block editing, menus and software image blitting"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "grid", "map-editor", "first-person", "framebuffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["blockcaster*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
