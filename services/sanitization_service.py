"""Sanitization service for untrusted coordinate, string and integer input."""
import logging
import math
from typing import Optional, Tuple
from app.config import Settings, settings
from models.schemas import CoordinatePair
from services.exceptions import InvalidCoordinateError
from utils.logger import setup_logger
from utils.validators import CharacterFilter

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

logger = setup_logger(__name__)


class InputSanitizationService:
    """
    Validate and normalize raw input before it reaches storage or downstream APIs.

    The service keeps no state of its own. Corrections are reported through the
    logger as audit events: WARNING for rejected, truncated or clamped input,
    INFO for coordinate corrections larger than the configured threshold.
    """

    def __init__(self, audit_logger: Optional[logging.Logger] = None, config: Optional[Settings] = None):
        """
        Args:
            audit_logger: Logger receiving audit events (defaults to this module's logger)
            config: Settings to read limits from (defaults to the global settings)
        """
        self.logger = audit_logger or logger
        self.config = config if config is not None else settings
        self.character_filter = CharacterFilter(self.config.disallowed_characters)

    def sanitize_coordinates(self, latitude: float, longitude: float) -> CoordinatePair:
        """
        Clamp, wrap and round a latitude/longitude pair.

        Args:
            latitude: Raw latitude in decimal degrees
            longitude: Raw longitude in decimal degrees

        Returns:
            CoordinatePair with latitude in [-90, 90] and longitude in [-180, 180)

        Raises:
            InvalidCoordinateError: If either value is NaN or infinite
        """
        latitude, lat_overflow = self._to_float(latitude, MAX_LATITUDE)
        longitude, lon_overflow = self._to_float(longitude, MAX_LONGITUDE)

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            self.logger.warning(
                f"Invalid float values detected: latitude={latitude}, longitude={longitude}",
                extra={"audit": {"field": "coordinates", "original": (latitude, longitude)}}
            )
            raise InvalidCoordinateError(latitude, longitude)

        precision = self.config.coordinate_precision
        sanitized_lat = round(min(max(latitude, MIN_LATITUDE), MAX_LATITUDE), precision)
        sanitized_lon = round(min(max(longitude, MIN_LONGITUDE), MAX_LONGITUDE), precision)

        # +180 and -180 are the same meridian; -180 is canonical
        if sanitized_lon == MAX_LONGITUDE:
            sanitized_lon = MIN_LONGITUDE

        threshold = self.config.coordinate_audit_threshold
        if (
            lat_overflow
            or lon_overflow
            or abs(sanitized_lat - latitude) > threshold
            or abs(sanitized_lon - longitude) > threshold
        ):
            self.logger.info(
                f"Coordinates sanitized: ({latitude}, {longitude}) -> ({sanitized_lat}, {sanitized_lon})",
                extra={"audit": {
                    "field": "coordinates",
                    "original": (latitude, longitude),
                    "sanitized": (sanitized_lat, sanitized_lon),
                    "overflow": lat_overflow or lon_overflow,
                }}
            )

        return CoordinatePair(latitude=sanitized_lat, longitude=sanitized_lon)

    @staticmethod
    def _to_float(value: float, limit: float) -> Tuple[float, bool]:
        """
        Convert a coordinate to float.

        Integers too large for a float are replaced by the signed limit.

        Returns:
            Tuple of (value, overflowed)
        """
        try:
            return float(value), False
        except OverflowError:
            return (limit if value > 0 else -limit), True

    def sanitize_string(self, value: Optional[str], max_length: Optional[int] = None) -> str:
        """
        Strip control and disallowed characters, trim and truncate a string.

        Args:
            value: Raw string, may be None
            max_length: Maximum length of the result (defaults to settings.string_max_length)

        Returns:
            Sanitized string, empty if nothing survives
        """
        if not value:
            return ""

        if max_length is None:
            max_length = self.config.string_max_length
        max_length = max(max_length, 0)

        sanitized = self.character_filter.filter(value).strip()

        if len(sanitized) > max_length:
            self.logger.warning(
                f"String input truncated to {max_length} characters.",
                extra={"audit": {
                    "field": "string",
                    "original_length": len(sanitized),
                    "max_length": max_length,
                }}
            )
            sanitized = sanitized[:max_length]

        return sanitized

    def sanitize_integer(
        self,
        value: int,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None
    ) -> int:
        """
        Clamp an integer to an inclusive range.

        Args:
            value: Raw integer
            min_value: Lower bound, unbounded if None
            max_value: Upper bound, unbounded if None

        Returns:
            value, or the bound it exceeded
        """
        clamped = value
        if min_value is not None and value < min_value:
            clamped = min_value
        elif max_value is not None and value > max_value:
            clamped = max_value

        if clamped != value:
            self.logger.warning(
                f"Integer value clamped: {value} -> {clamped}",
                extra={"audit": {
                    "field": "integer",
                    "original": value,
                    "sanitized": clamped,
                    "min": min_value,
                    "max": max_value,
                }}
            )

        return clamped
