[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hensei"
version = "1.0.0"
description = "Audio descriptor labelling and tone-series preprocessing for chord and phrase mining"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "descriptors", "segmentation", "midi", "time series", "data mining"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hensei = "hensei.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hensei"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
