"""Normalize heterogeneous backend records into canonical attractions."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from attraction_webhook.core.models import Attraction

# Canonical field -> ordered source keys. The first key holding a non-None value wins.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "attractionName", "locationName"),
    "cityName": ("cityName", "city", "cityname"),
    "countryName": ("countryName", "country"),
    "description": ("description", "details", "desc"),
    "entryFee": ("entryFee", "entry_fee", "price", "fee"),
    "guidedToursAvailable": ("guidedToursAvailable", "guideToursAvailable", "guidedTours"),
    "isProtectedArea": ("isProtectedArea", "protectedArea", "protected"),
    "style": ("style", "architecturalStyle", "architectureStyle"),
    "yearBuilt": ("yearBuilt", "constructionYear", "builtYear"),
    "latitude": ("latitude", "lat"),
    "longitude": ("longitude", "lng", "lon"),
    "imageUrls": ("imageUrls", "images", "imageUrl", "pictures"),
}

_ATTRIBUTES: dict[str, str] = {
    "name": "name",
    "cityName": "city_name",
    "countryName": "country_name",
    "description": "description",
    "entryFee": "entry_fee",
    "guidedToursAvailable": "guided_tours_available",
    "isProtectedArea": "is_protected_area",
    "style": "style",
    "yearBuilt": "year_built",
    "latitude": "latitude",
    "longitude": "longitude",
    "imageUrls": "image_urls",
}


def first_present(record: Mapping[str, Any], keys: Iterable[str]) -> Any:
    """Return the value of the first key that is present and not ``None``.

    Falsy values such as ``0``, ``False`` or ``""`` count as present.
    """
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _coerce_image_urls(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(url for url in value if isinstance(url, str))
    return None


def normalize_attraction(raw: Any) -> Attraction:
    """Build the canonical attraction for one backend item.

    Missing or non-mapping input is treated as an empty record. The input is
    kept verbatim on ``raw``. Already-normalized attractions are rebuilt from
    their canonical fields, which makes the operation idempotent.
    """
    if isinstance(raw, Attraction):
        record: Mapping[str, Any] = raw.as_dict()
        original = raw.raw
    else:
        record = raw if isinstance(raw, Mapping) else {}
        original = raw

    values = {
        _ATTRIBUTES[field]: first_present(record, aliases)
        for field, aliases in FIELD_ALIASES.items()
    }
    values["image_urls"] = _coerce_image_urls(values["image_urls"])
    return Attraction(**values, raw=original)


__all__ = ["FIELD_ALIASES", "first_present", "normalize_attraction"]
