[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asteroids"
version = "0.1.0"
description = "A vector-graphics Asteroids arcade game on pygame with its own small 2D physics engine"
requires-python = ">=3.10"
keywords = ["asteroids", "arcade", "game", "physics", "vector", "geometry", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
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
asteroids = "asteroids.app:main"

[tool.hatch.build.targets.wheel]
packages = ["asteroids"]

[tool.pytest.ini_options]
addopts = "-ra"
