"""Keep classes, subjects, students, grades and class-subject links in CSV session directories."""

__version__ = "0.0.1"