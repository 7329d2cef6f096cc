class HoursError(Exception):
    """Base class for failures while producing an hours calendar."""


class FetchError(HoursError):
    """Raised when the hours provider request fails or returns bad data."""


class LocationNotFoundError(FetchError):
    """Raised when the requested location is missing from the hours grid."""


class EmptyDataError(HoursError):
    """Raised when the provider returned no week records."""
