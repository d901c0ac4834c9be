[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digitclassifier"
version = "0.1.0"
description = "Nearest-neighbour classifier for labelled sample vectors, by mean absolute difference or cosine similarity"
requires-python = ">=3.10"
dependencies = []
keywords = ["classification", "nearest-neighbour", "cosine", "digits"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
classifier = "digitclassifier.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["digitclassifier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
