[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tracesampling"
version = "0.1.0"
description = "Deterministic trace-sampling helpers: multiplicative hashing of 64-bit IDs and rate-to-threshold conversion."
requires-python = ">=3.10"
dependencies = []
keywords = ["tracing", "sampling", "hashing", "observability"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tracesampling"]

[tool.pytest.ini_options]
addopts = "-ra"
