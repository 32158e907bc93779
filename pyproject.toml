[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swapcheck"
version = "1.0.0"
description = "Checker for two-stack sorting solutions: replays push, swap and rotate instructions and reports OK, KO or Error."
requires-python = ">=3.10"
dependencies = []
keywords = ["push-swap", "sorting", "stacks", "checker", "puzzle", "printf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swapcheck = "swapcheck.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["swapcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
