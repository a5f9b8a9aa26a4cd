[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recordkit"
version = "0.1.0"
description = "Student-record linked lists, a record stack, and small file-copy, user-lookup and file-watch commands"
requires-python = ">=3.10"
dependencies = [
    "watchdog",
]
keywords = [
    "linked-list",
    "circular-list",
    "doubly-linked-list",
    "stack",
    "data-structures",
    "copy",
    "passwd",
    "file-watch",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
recordkit-single = "recordkit.single_list:main"
recordkit-circular = "recordkit.circular_list:main"
recordkit-double = "recordkit.double_list:main"
recordkit-stack = "recordkit.stack:main"
recordkit-cp = "recordkit.mycp:main"
recordkit-getpwnam = "recordkit.users:main"
recordkit-watch = "recordkit.watch:main"

[tool.hatch.build.targets.wheel]
packages = ["recordkit"]

[tool.hatch.build.targets.sdist]
include = [
    "recordkit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
