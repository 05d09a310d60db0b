"""Tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from attraction_webhook.core.models import Attraction

# pylint: disable=missing-function-docstring


def test_as_dict_uses_canonical_keys_and_skips_absent_fields() -> None:
    attraction = Attraction(
        name="Koutoubia",
        city_name="Marrakech",
        guided_tours_available=False,
        image_urls=("k.jpg",),
        raw={"name": "Koutoubia"},
    )
    assert attraction.as_dict() == {
        "name": "Koutoubia",
        "cityName": "Marrakech",
        "guidedToursAvailable": False,
        "imageUrls": ["k.jpg"],
    }


def test_raw_is_ignored_for_equality() -> None:
    assert Attraction(name="A", raw={"a": 1}) == Attraction(name="A", raw={"b": 2})


def test_attraction_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Attraction(name="A").name = "B"  # type: ignore[misc]
