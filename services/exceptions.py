"""Exceptions raised by the sanitization service."""


class SanitizationError(ValueError):
    """Base class for input that cannot be sanitized."""


class InvalidCoordinateError(SanitizationError):
    """Raised when a coordinate is NaN or infinite."""

    MESSAGE = "Invalid coordinate values detected."

    def __init__(self, latitude: float, longitude: float):
        super().__init__(self.MESSAGE)
        self.latitude = latitude
        self.longitude = longitude
