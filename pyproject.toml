[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "endgame"
version = "0.1.0"
description = "A top-down arcade shooter: fight zombie waves across three maps and face the boss guarding the server."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "zombies"]
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
endgame = "endgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["endgame"]

[tool.pytest.ini_options]
addopts = "-ra"
