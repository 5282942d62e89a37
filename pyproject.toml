[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamecore"
version = "0.1.0"
description = "A small embeddable Lisp interpreter with a REPL, plus colour utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "repl", "scripting", "color"]
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
    "Programming Language :: Lisp",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ebisp-repl = "gamecore.ebisp.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["gamecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
