class TrackerError(Exception):
    """Base class for errors raised by the tracker services."""


class InvalidArgument(TrackerError):
    """A required argument (usually the user id) is missing or empty."""


class StorageError(TrackerError):
    """A read or write against the database failed."""


class MalformedState(TrackerError):
    """A persisted value could not be parsed."""
