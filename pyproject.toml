[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typedheaders"
version = "0.3.8"
description = "Typed HTTP headers: parse and format common HTTP header values as Python objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "headers", "typed", "hsts", "etag", "http-date", "prefer"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["typedheaders"]

[tool.pytest.ini_options]
addopts = "-ra"
