[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pypong"
version = "0.1.0"
description = "A two-player Pong game played on one keyboard"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["pong", "game", "arcade", "pygame", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pypong = "pypong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pypong"]

[tool.pytest.ini_options]
addopts = "-ra"
