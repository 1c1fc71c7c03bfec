[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hnyapi"
version = "0.1.0"
description = "A small client for the Honeycomb REST API: boards, columns, datasets, queries, triggers, SLOs and more."
requires-python = ">=3.11"
dependencies = [
    "requests",
]
keywords = ["honeycomb", "observability", "api", "client", "triggers", "slo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["hnyapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
