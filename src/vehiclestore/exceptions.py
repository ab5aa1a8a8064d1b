"""Exceptions raised by the vehicle store, its HTTP layer and its client."""

from __future__ import annotations


class VehicleError(Exception):
    """Base exception for all vehicle store errors."""

    default_message = "vehicle error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class VehicleAlreadyExistsError(VehicleError):
    """Raised when a vehicle id is already taken."""

    default_message = "vehicle already exists"


class VehicleNotFoundError(VehicleError):
    """Raised when a lookup, aggregate or mutation matches no vehicle."""

    default_message = "vehicle not found"


class VehicleSeedError(VehicleError):
    """Raised when a seed file cannot be read or parsed."""

    default_message = "invalid seed file"


# ── Bad input ────────────────────────────────────────────────────────────────


class VehicleInvalidError(VehicleError):
    """Base for errors caused by invalid arguments or records."""

    default_message = "invalid vehicle data"


class VehicleIncompleteError(VehicleInvalidError):
    default_message = "vehicle is incomplete"


class VehicleBatchEmptyError(VehicleInvalidError):
    default_message = "vehicle batch is empty"


class VehicleColorEmptyError(VehicleInvalidError):
    default_message = "color is empty"


class VehicleYearEmptyError(VehicleInvalidError):
    default_message = "year is empty"


class VehicleBrandEmptyError(VehicleInvalidError):
    default_message = "brand is empty"


class VehicleFuelTypeEmptyError(VehicleInvalidError):
    default_message = "fuel type is empty"


class VehicleTransmissionEmptyError(VehicleInvalidError):
    default_message = "transmission type is empty"


class VehicleIdInvalidError(VehicleInvalidError):
    default_message = "id is invalid"


class VehicleSpeedInvalidError(VehicleInvalidError):
    default_message = "speed is invalid"


class VehicleLengthInvalidError(VehicleInvalidError):
    default_message = "length is invalid"


class VehicleWidthInvalidError(VehicleInvalidError):
    default_message = "width is invalid"


class VehicleWeightInvalidError(VehicleInvalidError):
    default_message = "weight is invalid"


class VehicleYearEndInvalidError(VehicleInvalidError):
    default_message = "end year must be greater than or equal to start year"


class VehicleMinWeightGreaterThanMaxWeightError(VehicleInvalidError):
    default_message = "min weight is greater than max weight"


class VehicleMinLengthGreaterThanMaxLengthError(VehicleInvalidError):
    default_message = "min length is greater than max length"


class VehicleMinWidthGreaterThanMaxWidthError(VehicleInvalidError):
    default_message = "min width is greater than max width"


# ── Client side ──────────────────────────────────────────────────────────────


class VehicleClientError(VehicleError):
    """Base exception for errors raised by the HTTP client."""

    default_message = "vehicle client error"


class VehicleConnectionError(VehicleClientError):
    """Raised when the client cannot connect to the API."""


class VehicleTimeoutError(VehicleClientError):
    """Raised when a request to the API times out."""


class VehicleAPIError(VehicleClientError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")
        self.message = message


class VehicleValidationError(VehicleClientError):
    """Raised when API response data fails model validation."""
