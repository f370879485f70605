[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coroflow"
version = "0.11.1"
description = "Lazy coroutine tasks and synchronisation primitives (event, latch, mutex, semaphore, when_all) that need no event loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["coroutine", "task", "event", "latch", "mutex", "semaphore", "when_all"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coroflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
