"""File-backed task list manager with priority ordering."""

__version__ = "0.1.0"
