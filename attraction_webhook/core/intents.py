"""Intent types and configuration records for the attractions webhook."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

Formatter = Callable[[str, Any], str]


class IntentType(str, Enum):
    """Dialogflow intent display names handled by the webhook."""

    ASK_ALL_ATTRACTIONS = "Ask_All_Attractions"
    ASK_NATURAL_ATTRACTIONS = "Ask_Natural_Attractions"
    ASK_HISTORICAL_ATTRACTIONS = "Ask_Historical_Attractions"
    ASK_CULTURAL_ATTRACTIONS = "Ask_Cultural_Attractions"
    ASK_ARTIFICIAL_ATTRACTIONS = "Ask_Artificial_Attractions"
    ASK_ATTRACTION_BY_NAME = "Ask_Attraction_ByName"
    ASK_ATTRACTIONS_BY_CITY = "Ask_Attractions_ByCity"


@dataclass(frozen=True, slots=True)
class RequiredParam:
    """Parameter that must be supplied before the backend is queried."""

    keys: tuple[str, ...]
    prompt: str


@dataclass(frozen=True, slots=True)
class IntentConfig:
    """Static description of how one intent is answered."""

    path: str
    icon: str
    intro: str
    empty: str
    formatter: Optional[Formatter] = None
    required_param: Optional[RequiredParam] = None


__all__ = ["Formatter", "IntentConfig", "IntentType", "RequiredParam"]
