"""
Error types raised by the admin core.

Authorization failures are not errors here: the access guard answers them
with a redirect.
"""


class BigHitsError(Exception):
    """Base class carrying a message fit to show to the admin."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ValidationError(BigHitsError):
    """A required field is missing or a numeric constraint is violated."""


class DataSourceError(BigHitsError):
    """A data source rejected a fetch, save, update or delete."""


class MutationInProgress(DataSourceError):
    """A mutation for the same record has not settled yet."""
