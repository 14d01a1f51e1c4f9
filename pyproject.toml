[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "intsets"
version = "0.1.0"
description = "Sets of integers backed by an AVL tree or a bounded sorted list, with union, intersection and a small command-line front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["set", "avl", "sorted-list", "union", "intersection", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
intsets = "intsets.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["intsets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
