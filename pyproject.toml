[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scbotkit"
version = "0.1.0"
description = "Building blocks for game bots: fuzzy inference, a genetic algorithm and semicolon-separated table logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy logic", "genetic algorithm", "bot", "ai", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scbotkit-tables-demo = "scbotkit.tables:main"

[tool.hatch.build.targets.wheel]
packages = ["scbotkit"]

[tool.pytest.ini_options]
addopts = "-ra"
