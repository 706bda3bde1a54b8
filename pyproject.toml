[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynwm"
version = "0.1.0"
description = "Display-independent state of a dynamic tiling window manager and a dynamic menu, with a file-testing filter"
requires-python = ">=3.10"
dependencies = []
keywords = ["window manager", "tiling", "menu", "launcher", "stest", "file filter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dynwm-stest = "dynwm.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["dynwm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
