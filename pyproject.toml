[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alieninvasion"
version = "1.0.0"
description = "A small arcade shooter: steer your ship, rotate it, and clear the descending alien grid before it reaches you."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
alieninvasion = "alieninvasion.app:main"

[tool.hatch.build.targets.wheel]
packages = ["alieninvasion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
