"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Attraction:
    """Canonical attraction record unified across backend schema variants.

    ``None`` means the backend did not provide the field. ``raw`` keeps the
    backend item exactly as received and is excluded from equality.
    """

    name: Any = None
    city_name: Any = None
    country_name: Any = None
    description: Any = None
    entry_fee: Any = None
    guided_tours_available: Any = None
    is_protected_area: Any = None
    style: Any = None
    year_built: Any = None
    latitude: Any = None
    longitude: Any = None
    image_urls: tuple[str, ...] | None = None
    raw: Any = field(default=None, compare=False, repr=False)

    def as_dict(self) -> dict[str, Any]:
        """Return the present fields keyed by their canonical camelCase names."""
        values = {
            "name": self.name,
            "cityName": self.city_name,
            "countryName": self.country_name,
            "description": self.description,
            "entryFee": self.entry_fee,
            "guidedToursAvailable": self.guided_tours_available,
            "isProtectedArea": self.is_protected_area,
            "style": self.style,
            "yearBuilt": self.year_built,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "imageUrls": list(self.image_urls) if self.image_urls is not None else None,
        }
        return {key: value for key, value in values.items() if value is not None}


__all__ = ["Attraction"]
