"""Process execution helpers."""

from .process import ProcessError, is_available, run

__all__ = ["ProcessError", "is_available", "run"]
