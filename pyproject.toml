[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoeui"
version = "1.7"
description = "Core of a small modeless text editor: UTF-8 handling, texts and views with undo, incremental search and path completion"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "utf-8", "undo", "incremental-search", "completion"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoeui-chart = "aoeui.chart:main"

[tool.hatch.build.targets.wheel]
packages = ["aoeui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
