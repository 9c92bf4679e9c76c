[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "1.0.0"
description = "Small console programs and their library code: solid bodies, rational numbers, HTTP URLs, a stack, a car model and text tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "geometry",
    "rational",
    "url",
    "stack",
    "state-machine",
    "text-processing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-bodies = "labkit.body_handler:main"
labkit-url = "labkit.http_url:main"
labkit-stack = "labkit.stack:main"
labkit-car = "labkit.car_handler:main"
labkit-findtext = "labkit.findtext:main"
labkit-flipbyte = "labkit.flipbyte:main"
labkit-wordcount = "labkit.word_count:main"
labkit-trim = "labkit.trim_blanks:main"
labkit-vector = "labkit.vector_ops:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
