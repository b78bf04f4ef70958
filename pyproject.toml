[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fungi"
version = "0.1.0"
description = "Lexical path helpers, filesystem queries, user and XDG directories, byte sizes and strftime formatting for POSIX"
requires-python = ">=3.10"
keywords = ["path", "filesystem", "xdg", "user", "sudo", "bytes", "strftime", "glob"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Filesystems",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fungi"]

[tool.pytest.ini_options]
addopts = "-ra"
