[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plantly"
version = "2.0.0"
description = "Keep track of your houseplants, their species and their health in a small SQLite database."
requires-python = ">=3.10"
dependencies = []
keywords = ["plants", "gardening", "sqlite", "plant-care", "inventory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plantly = "plantly.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["plantly"]

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
strict = true
