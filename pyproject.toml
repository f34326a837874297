[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedlists"
version = "0.1.0"
description = "Singly, doubly and circular linked lists with the classic list exercises."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "doubly linked list", "circular linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkedlists-demo = "linkedlists.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedlists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
