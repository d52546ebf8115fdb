[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gateway-samples"
version = "0.1.0"
description = "Sample in-memory record services for exercising an API gateway: user, student and teacher providers over an indexed store."
requires-python = ">=3.10"
dependencies = []
keywords = ["gateway", "samples", "rpc", "provider", "in-memory", "store"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gateway_samples"]

[tool.pytest.ini_options]
addopts = "-ra"
