[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustlings"
version = "5.5.1"
description = "Library for loading, compiling, running and checking small Rust exercises, with worked solutions in Python."
requires-python = ">=3.11"
dependencies = [
    "rich",
]
keywords = [
    "rust",
    "exercises",
    "learning",
    "education",
    "rustc",
    "clippy",
    "rust-analyzer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rustlings-guess = "rustlings.solutions.guessing_game:main"

[tool.hatch.build.targets.wheel]
packages = ["rustlings"]

[tool.hatch.build.targets.sdist]
include = [
    "rustlings",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
