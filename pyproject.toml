[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linobase"
version = "0.1.0"
description = "Building blocks for a differential-drive robot base: a PID controller, a motor model, quadrature encoder decoding, time types and little-endian message codecs."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "pid", "encoder", "quadrature", "motor", "serialization", "messages"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["linobase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
