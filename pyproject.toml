[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyts"
version = "0.1.0"
description = "Lexers, parsers and a type checker for two tiny TypeScript-like languages"
requires-python = ">=3.10"
dependencies = []
keywords = ["typescript", "type checker", "parser", "lexer", "type system"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinyts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
