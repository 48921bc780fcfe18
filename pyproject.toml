[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfweave"
version = "0.1.0"
description = "Building blocks for PDF documents: page trees, resources, outlines, layers, shadings, patterns, XMP metadata and cross-reference tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "document", "page-tree", "outline", "xref", "shading", "xmp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdfweave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
