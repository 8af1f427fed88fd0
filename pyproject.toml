[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdemo"
version = "0.1.0"
description = "Small interactive demonstrations of sorting algorithms, a singly linked list and a stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "linked list", "stack", "data structures", "algorithms", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
dsdemo-sort = "dsdemo.sorting:main"
dsdemo-linked-list = "dsdemo.linked_list:main"
dsdemo-stack = "dsdemo.stack:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdemo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
