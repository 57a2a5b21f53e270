[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcarith"
version = "0.1.0"
description = "Find arithmetic expressions in a text file, calculate them and write the results in their place."
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["arithmetic", "calculator", "text", "filter", "expressions", "gettext"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
calcarith = "calcarith.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calcarith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
