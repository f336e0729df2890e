[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brainvis"
version = "0.1.0"
description = "Data model for brain connectivity visual analytics: ROIs, scanned datasets, styles, thresholds and interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = ["brain", "connectivity", "roi", "matrix", "visualization", "neuroimaging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brainvis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
