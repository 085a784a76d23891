[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lingmoaddons"
version = "1.4.0"
description = "Toolkit-independent view models for convergent applications: year lists, sound pickers, example list and table models, action collections, command bar and shortcut editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["models", "calendar", "shortcuts", "actions", "command bar", "user interface"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lingmoaddons"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
