[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures: max-heap, linear and circular queues, binary trees, binary search trees and expression trees, each with an interactive menu."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "heap",
    "heapsort",
    "queue",
    "circular-queue",
    "binary-tree",
    "binary-search-tree",
    "expression-tree",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Environment :: Console",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
structkit-heap = "structkit.heap:main"
structkit-queue = "structkit.linear_queue:main"
structkit-circular-queue = "structkit.circular_queue:main"
structkit-exptree = "structkit.exptree:main"
structkit-tree = "structkit.binary_tree:main"
structkit-bst = "structkit.bst:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
