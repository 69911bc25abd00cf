[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "gestion_notes"
version = "0.0.1"
description = "Interactive console manager for classes, subjects, students and grades kept in CSV session directories"
requires-python = ">=3.10"
dependencies = []
keywords = ["grades", "students", "school", "csv", "education", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gestion-notes = "gestion_notes.app:main"

[tool.setuptools.packages.find]
include = ["gestion_notes*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
