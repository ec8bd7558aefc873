[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferskit"
version = "0.1.0"
description = "Radar simulation building blocks: DSP filters, waveform storage, timing prototypes, XML document handling and scenario utilities."
requires-python = ">=3.10"
dependencies = [
    "lxml",
]
keywords = ["radar", "simulation", "signal processing", "dsp", "fir", "iir", "clutter", "antenna", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ferskit-cluttergen = "ferskit.clutter:main"
ferskit-csv2antenna = "ferskit.csv2antenna:main"

[tool.hatch.build.targets.wheel]
packages = ["ferskit"]

[tool.pytest.ini_options]
addopts = "-ra"
