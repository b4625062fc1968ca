[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sglrights"
version = "0.1.0"
description = "HTTP service for managing esports event listings, users and event rights sales backed by SQLite"
requires-python = ">=3.10"
keywords = ["events", "rights", "sales", "sqlite", "flask", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sglrights = "sglrights.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sglrights"]

[tool.pytest.ini_options]
addopts = "-ra"
