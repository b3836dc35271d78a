"""Common utility functions for the cardbg package."""

from cardbg.utils.file import ensure_directory_exists

__all__ = ["ensure_directory_exists"]
