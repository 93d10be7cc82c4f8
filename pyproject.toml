[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamelabs"
version = "0.1.0"
description = "Small pygame programs: a boids flocking simulation, a Cathedral board with a minimax opponent, and a sprite movement lab"
requires-python = ">=3.10"
keywords = ["boids", "flocking", "swarming", "cathedral", "board game", "minimax", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gamelabs-flock = "gamelabs.flock_app:main"
gamelabs-cathedral = "gamelabs.cathedral_app:main"
gamelabs-lab = "gamelabs.lab_app:main"

[tool.hatch.build.targets.wheel]
packages = ["gamelabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
