[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ng39"
version = "0.1.0"
description = "Small building blocks for command-line tools: strings, integer parsing, paths, buffers, string lists, processes and terminal messages"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strbuf",
    "strlist",
    "strtox",
    "terminal",
    "messages",
    "path",
    "utf-8",
    "east-asian-width",
    "line-wrap",
    "subprocess",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ng39"]

[tool.hatch.build.targets.sdist]
include = ["ng39", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
