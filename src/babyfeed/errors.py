"""Application errors raised by tracker services and adapters."""


class TrackerError(Exception):
    """Base class for expected tracker failures."""


class ProfileRequiredError(TrackerError):
    """Raised when an operation needs a baby profile and none exists."""


class ValidationError(TrackerError):
    """Raised for rejected user input or malformed stored values."""


class ActiveSessionError(TrackerError):
    """Raised when the feed timer is in the wrong state for an operation."""


class MedicineNotFoundError(TrackerError):
    """Raised for an unknown medicine id."""


class MedicinePausedError(TrackerError):
    """Raised when logging a dose for a paused medicine."""


class StorageError(TrackerError):
    """Raised when the record store cannot be read."""
