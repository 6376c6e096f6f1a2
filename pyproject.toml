[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitree"
version = "0.1.0"
description = "Linked binary trees with parent pointers: construction, metrics, traversals, rotations, BST helpers and text drawing."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "bst", "tree traversal", "rotation", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
