[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libft"
version = "1.0.0"
description = "ASCII character tests, byte-buffer helpers, C-style string utilities, a singly linked list and file-descriptor output helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "memory", "linked-list", "utilities", "ascii"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
