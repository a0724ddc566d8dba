"""
Domain exceptions raised by the document store and services.

Route handlers translate these into HTTP errors.
"""


class JobPortalError(Exception):
    """Base class for all JobPortal errors."""


class StorageCorruptedError(JobPortalError):
    """A stored collection blob is not a valid JSON list."""

    def __init__(self, key: str):
        super().__init__(f"Stored data for '{key}' is corrupted")
        self.key = key


class AlreadyAppliedError(JobPortalError):
    def __init__(self, message: str = "Already applied to this job"):
        super().__init__(message)
