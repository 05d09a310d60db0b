"""Render canonical attractions into chatbot-ready text."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from attraction_webhook.core.intents import Formatter
from attraction_webhook.services.normalizer import normalize_attraction

UNKNOWN = "Unknown"
_FALSE_STRINGS = {"false", "no", "0", "n", "non", ""}


def _or_unknown(value: Any) -> Any:
    return UNKNOWN if value is None else value


def _yes_no(value: Any) -> str:
    if isinstance(value, str):
        return "No" if value.strip().lower() in _FALSE_STRINGS else "Yes"
    return "Yes" if value else "No"


def terse_formatter(icon: str, item: Any) -> str:
    """``<icon> <name>`` followed by `` (<city>)`` when the city is known."""
    attraction = normalize_attraction(item)
    city = f" ({attraction.city_name})" if attraction.city_name else ""
    return f"{icon} {_or_unknown(attraction.name)}{city}"


def city_list_formatter(icon: str, item: Any) -> str:
    """``<icon> <name> (<city>)`` with independent ``Unknown`` fallbacks."""
    attraction = normalize_attraction(item)
    return f"{icon} {_or_unknown(attraction.name)} ({_or_unknown(attraction.city_name)})"


def full_formatter(icon: str, item: Any) -> str:
    """Multi-line detail card; absent fields are omitted entirely."""
    a = normalize_attraction(item)
    lines = [f"{icon} {_or_unknown(a.name)}"]
    if a.city_name is not None:
        lines.append(f"🏙️ City: {a.city_name}")
    if a.country_name is not None:
        lines.append(f"🌍 Country: {a.country_name}")
    if a.description is not None:
        lines.append(f"📝 Description: {a.description}")
    if a.entry_fee is not None:
        lines.append(f"💰 Entry fee: {a.entry_fee}")
    if a.guided_tours_available is not None:
        lines.append(f"🧭 Guided tours: {_yes_no(a.guided_tours_available)}")
    if a.is_protected_area is not None:
        lines.append(f"🛡️ Protected area: {_yes_no(a.is_protected_area)}")
    if a.style is not None:
        lines.append(f"🎨 Style: {a.style}")
    if a.year_built is not None:
        lines.append(f"📅 Year built: {a.year_built}")
    if a.latitude is not None and a.longitude is not None:
        lines.append(f"📌 Coordinates: {a.latitude}, {a.longitude}")
    if a.image_urls:
        lines.append(f"🖼️ Images: {', '.join(a.image_urls)}")
    return "\n".join(lines)


def build_reply(
    intro: str,
    icon: str,
    items: Sequence[Any],
    formatter: Optional[Formatter] = None,
    max_items: Optional[int] = None,
) -> str:
    """Format ``items`` and join them under ``intro`` as one text block.

    When ``max_items`` is positive, extra items are summarized in a trailing
    "... and N more attractions!" line.
    """
    fmt = formatter or terse_formatter
    shown = list(items)
    hidden = 0
    if max_items and max_items > 0 and len(shown) > max_items:
        hidden = len(shown) - max_items
        shown = shown[:max_items]
    body = "\n\n".join(fmt(icon, item) for item in shown)
    more = f"\n\n... and {hidden} more attractions!" if hidden else ""
    return f"{intro}\n{body}{more}"


__all__ = [
    "UNKNOWN",
    "build_reply",
    "city_list_formatter",
    "full_formatter",
    "terse_formatter",
]
