# -*- coding: utf-8 -*-
"""
Error taxonomy for Prompt Studio.

Every error carries a human-readable message that the UI shows as-is
in the error banner.
"""


class StudioError(Exception):
    """Base class for errors surfaced in the error banner."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(StudioError):
    """Writing (or reading) the saved project failed at the OS level."""


class NotFoundError(StudioError):
    """No saved project exists at the storage key."""


class CorruptDataError(StudioError):
    """Saved data exists but does not parse into a Project."""


class ServiceError(StudioError):
    """A Gemini call failed: transport, auth or malformed response."""
