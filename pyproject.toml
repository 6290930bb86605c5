[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smug"
version = "0.1.0"
description = "Interactive memory scanner for running Linux processes"
requires-python = ">=3.10"
dependencies = []
keywords = ["memory", "scanner", "debugger", "procfs", "reverse-engineering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smug = "smug.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smug"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
