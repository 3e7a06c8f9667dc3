[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprlang"
version = "0.1.0"
description = "Runtime value semantics and string-literal unescaping for a small expression language"
requires-python = ">=3.10"
dependencies = []
keywords = ["expression", "interpreter", "runtime", "comparison", "unescape"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exprlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
