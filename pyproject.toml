[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lefthook"
version = "1.11.13"
description = "Building blocks for a Git hooks manager: version checks, command running, log settings, styled logging and self-update."
requires-python = ">=3.10"
dependencies = [
    "tqdm",
]
keywords = ["git", "hooks", "git-hooks", "logging", "self-update", "version-control"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lefthook"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
