"""Vehicle record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

TEXT_FIELDS = ("brand", "model", "registration", "color", "fuel_type", "transmission")
NUMERIC_FIELDS = ("year", "passengers", "max_speed", "weight", "height", "length", "width")


class Vehicle(BaseModel):
    """A single vehicle as stored and served.

    Every attribute has an empty default so partially filled records can be
    built and then rejected by the store with a proper error.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: int = 0
    brand: str = ""
    model: str = ""
    registration: str = ""
    color: str = ""
    year: int = 0
    passengers: int = 0
    max_speed: float = 0.0
    fuel_type: str = ""
    transmission: str = ""
    weight: float = 0.0
    height: float = 0.0
    length: float = 0.0
    width: float = 0.0

    @property
    def is_complete(self) -> bool:
        """True when the id and every attribute hold a non-default value."""
        if self.id <= 0:
            return False
        if any(not getattr(self, name) for name in TEXT_FIELDS):
            return False
        return all(getattr(self, name) > 0 for name in NUMERIC_FIELDS)
