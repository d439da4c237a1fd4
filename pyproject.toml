[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dodgedrop"
version = "1.0.0"
description = "A small arcade game: dodge the blocks falling from the sky for as long as you can."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "dodge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dodgedrop = "dodgedrop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dodgedrop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
