class EarthcalError(Exception):
    """Base error."""

class UnknownCalendarError(EarthcalError, KeyError):
    """Raised when a calendar name is not registered."""

class UnknownTimezoneError(EarthcalError, KeyError):
    """Raised when a timezone name is not registered."""

class DuplicateNameError(EarthcalError, KeyError):
    """Raised when registering a name that already exists without overwrite=True."""

class ParameterError(EarthcalError, ValueError):
    """Raised when calendar building parameters are inconsistent."""
