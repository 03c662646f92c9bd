[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and sorting and searching algorithms in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "sorting",
    "binary search",
    "avl tree",
    "binary search tree",
    "hash table",
    "deque",
    "queue",
    "stack",
    "heap",
    "linked list",
]
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-sort-bench = "dsalgo.sorting:main"
dsalgo-hashtable-demo = "dsalgo.hashtable:main"
dsalgo-bst-demo = "dsalgo.bst:main"
dsalgo-avl-demo = "dsalgo.avl:main"
dsalgo-heap-demo = "dsalgo.queues:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgo"]

[tool.hatch.build.targets.sdist]
include = ["dsalgo", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
