[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiegandac"
version = "0.1.0"
description = "Wiegand keypad access control: input buffering, code checking, key-value storage and a small web server"
requires-python = ">=3.10"
dependencies = []
keywords = ["wiegand", "access control", "keypad", "ring buffer", "home automation"]
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
    "Topic :: Home Automation",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wiegandac = "wiegandac.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["wiegandac"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
