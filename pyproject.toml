[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ibmsim"
version = "0.1.0"
description = "An interactive console calculator drawn as an old IBM terminal, with arithmetic, logic, trigonometry, GCD/LCM, permutation and probability units plus a few experimental tools."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "simulator", "console", "arithmetic", "permutations", "snake"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ibmsim = "ibmsim.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["ibmsim"]

[tool.pytest.ini_options]
addopts = "-ra"
