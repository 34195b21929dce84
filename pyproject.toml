[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dspkit"
version = "0.1.0"
description = "Fast math approximations, pitch tables, envelope generators and WAV file I/O for audio DSP"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "audio", "envelope", "wav", "fast-math", "pitch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dspkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
