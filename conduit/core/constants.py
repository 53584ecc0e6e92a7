"""Shared constants and enums used across the package."""

from enum import StrEnum


class RunStatus(StrEnum):
    """Overall outcome of a pipeline run."""

    COMPLETED = "COMPLETED"
    HALTED = "HALTED"
    FAILED = "FAILED"


DEFAULT_BUBBLE_ERRORS = True
DEFAULT_CONTINUE_ON_ERROR = False
