"""TaskForge task-tracking service."""

__version__ = "0.1.0"
