[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arborlab"
version = "0.1.0"
description = "Search trees, stacks and linked lists, with small programs that exercise them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "splay tree",
    "b-tree",
    "red-black tree",
    "stack",
    "linked list",
    "towers of hanoi",
    "data structures",
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
arborlab-palindrome = "arborlab.palindrome:main"
arborlab-hanoi = "arborlab.hanoi:main"
arborlab-stanislaus = "arborlab.stanislaus:main"
arborlab-browser = "arborlab.browser:main"
arborlab-rotate = "arborlab.rotation:main"
arborlab-students = "arborlab.student:main"

[tool.hatch.build.targets.wheel]
packages = ["arborlab"]

[tool.pytest.ini_options]
addopts = "-ra"
