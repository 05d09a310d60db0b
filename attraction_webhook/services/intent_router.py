"""Intent table and the router that turns an intent into reply text."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import quote

from attraction_webhook.core.config import config
from attraction_webhook.core.intents import IntentConfig, IntentType, RequiredParam
from attraction_webhook.core.logging import get_logger
from attraction_webhook.core.ports import AttractionsPort
from attraction_webhook.services.formatters import (
    build_reply,
    city_list_formatter,
    full_formatter,
)
from attraction_webhook.services.normalizer import normalize_attraction

logger = get_logger(__name__)

NAME_PROMPT = "Please tell me the name of the attraction."
CITY_PROMPT = "Please tell me the name of the city."

INTENT_CONFIG: Mapping[str, IntentConfig] = MappingProxyType(
    {
        IntentType.ASK_ALL_ATTRACTIONS.value: IntentConfig(
            path="/getAll/Attraction",
            icon="🌟",
            intro="Discover the best attractions around! Here are some of the top spots:",
            empty="Sorry, I couldn't find any attractions for you.",
        ),
        IntentType.ASK_NATURAL_ATTRACTIONS.value: IntentConfig(
            path="/NaturalAttractions",
            icon="🌿",
            intro="Here are some natural attractions worth exploring:",
            empty="Sorry, I couldn't find any natural attractions.",
        ),
        IntentType.ASK_HISTORICAL_ATTRACTIONS.value: IntentConfig(
            path="/HistoricalAttractions",
            icon="🏛️",
            intro="Here are some historical attractions full of stories:",
            empty="Sorry, I couldn't find any historical attractions.",
        ),
        IntentType.ASK_CULTURAL_ATTRACTIONS.value: IntentConfig(
            path="/CulturalAttractions",
            icon="🎭",
            intro="Here are some cultural attractions to enjoy:",
            empty="Sorry, I couldn't find any cultural attractions.",
        ),
        IntentType.ASK_ARTIFICIAL_ATTRACTIONS.value: IntentConfig(
            path="/ArtificialAttractions",
            icon="🏗️",
            intro="Here are some man-made attractions to visit:",
            empty="Sorry, I couldn't find any artificial attractions.",
        ),
        IntentType.ASK_ATTRACTION_BY_NAME.value: IntentConfig(
            path="/getLocationByName/",
            icon="📍",
            intro="Here is what I found about this attraction:",
            empty="Sorry, I couldn't find an attraction with that name.",
            formatter=full_formatter,
            required_param=RequiredParam(keys=("name",), prompt=NAME_PROMPT),
        ),
        IntentType.ASK_ATTRACTIONS_BY_CITY.value: IntentConfig(
            path="/getLocationByCity/",
            icon="🏙️",
            intro="Here are the attractions I found in this city:",
            empty="Sorry, I couldn't find any attractions in that city.",
            formatter=city_list_formatter,
            required_param=RequiredParam(keys=("cityName", "city", "geo-city"), prompt=CITY_PROMPT),
        ),
    }
)


def resolve_param(parameters: Mapping[str, Any], keys: tuple[str, ...]) -> Optional[str]:
    """Return the first non-blank parameter among ``keys``.

    Dialogflow sends ``""`` for unfilled parameters and lists for ``is_list``
    parameters; the first element is used for the latter.
    """
    for key in keys:
        value = parameters.get(key)
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def is_empty_result(data: Any) -> bool:
    """Return True for ``None`` or a zero-length list."""
    return data is None or (isinstance(data, list) and len(data) == 0)


class IntentRouter:
    """Resolve intents to backend paths and render replies."""

    def __init__(
        self,
        attractions: AttractionsPort,
        intents: Mapping[str, IntentConfig] | None = None,
        max_items: Optional[int] = None,
    ) -> None:
        self._attractions = attractions
        self._intents = intents if intents is not None else INTENT_CONFIG
        self._max_items = max_items

    def get_config(self, intent_name: Optional[str]) -> Optional[IntentConfig]:
        """Return the configuration registered for ``intent_name``, if any."""
        if not intent_name:
            return None
        return self._intents.get(intent_name)

    def intents(self) -> Mapping[str, IntentConfig]:
        """Return a read-only view of the intent table."""
        return MappingProxyType(dict(self._intents))

    async def handle_intent(
        self, intent_name: Optional[str], parameters: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        """Return the reply text for ``intent_name`` or ``None`` when unknown.

        Backend failures propagate as ``AttractionsApiError``.
        """
        intent = self.get_config(intent_name)
        if intent is None:
            logger.info("No configuration for intent: %s", intent_name)
            return None

        path = intent.path
        if intent.required_param is not None:
            value = resolve_param(parameters or {}, intent.required_param.keys)
            if value is None:
                logger.info(
                    "Intent %s is missing parameter %s",
                    intent_name,
                    intent.required_param.keys[0],
                )
                return intent.required_param.prompt
            path = f"{intent.path}{quote(value, safe='')}"

        data = await self._attractions.fetch(path)
        if is_empty_result(data):
            logger.info("Empty result for intent %s at %s", intent_name, path)
            return intent.empty

        items = data if isinstance(data, list) else [data]
        attractions = [normalize_attraction(item) for item in items]
        max_items = self._max_items if self._max_items is not None else config.MAX_REPLY_ITEMS
        return build_reply(
            intent.intro,
            intent.icon,
            attractions,
            formatter=intent.formatter,
            max_items=max_items,
        )


__all__ = [
    "CITY_PROMPT",
    "INTENT_CONFIG",
    "IntentRouter",
    "NAME_PROMPT",
    "is_empty_result",
    "resolve_param",
]
