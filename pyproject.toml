[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "parkourcraft"
version = "0.1.0"
description = "Block-world parkour game logic: stages, blocks, player physics and collisions"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "parkour", "voxel", "blocks", "collision", "aabb", "obj"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["parkourcraft*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
