# tasks_api/core/errors.py


def not_found_message(resource: str) -> str:
    return f"{resource} not found"


def missing_parameter_message(parameter: str) -> str:
    return f"{parameter} is required"


class TaskApiError(Exception):
    """Base error carrying a user-visible message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TaskApiError):
    """The targeted id has no record."""


class ValidationFailure(TaskApiError):
    """Caller input is malformed or missing a required field."""
