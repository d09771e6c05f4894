[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lldpatterns"
version = "0.1.0"
description = "Runnable examples of object-oriented principles, SOLID and classic design patterns, each shown in a poor and a better form."
requires-python = ">=3.10"
dependencies = []
keywords = ["design-patterns", "solid", "oop", "low-level-design", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lldpatterns = "lldpatterns.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lldpatterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
