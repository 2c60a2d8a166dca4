"""Centralized UI component vocabulary.

This module is the single source of truth for the component types a
descriptor may contain. Rendering clients download it from /components to
know which props and style keys each type understands.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Optional, TypedDict


class ComponentDefinition(TypedDict, total=False):
    """Full definition for a UI component."""

    id: str
    name: str
    category: str
    container: bool
    aliases: List[str]
    props: Dict[str, Any]
    style: List[str]


_CARD_STYLE = [
    "imageHeight", "borderRadius", "showDiscount", "showRating", "showFavorite",
    "titleSize", "priceSize", "priceColor", "elevation", "contentPadding",
]

COMPONENT_DEFINITIONS: Dict[str, ComponentDefinition] = {
    "header": {
        "id": "text.header",
        "name": "header",
        "category": "text",
        "aliases": ["title", "heading"],
        "props": {
            "title": {"type": "string", "required": True},
            "subtitle": {"type": "string", "required": False},
            "alignment": {"type": "string", "required": False, "enum": ["left", "center", "right"]},
            "showIcon": {"type": "boolean", "required": False},
            "icon": {"type": "string", "required": False},
        },
        "style": [
            "padding", "fontSize", "fontWeight", "color", "backgroundColor", "borderRadius",
            "subtitleSize", "subtitleColor", "subtitleSpacing", "iconSize", "letterSpacing",
        ],
    },
    "spacer": {
        "id": "layout.spacer",
        "name": "spacer",
        "category": "layout",
        "props": {"height": {"type": "number", "required": True}},
        "style": [],
    },
    "banner": {
        "id": "promo.banner",
        "name": "banner",
        "category": "promo",
        "aliases": ["hero"],
        "props": {
            "title": {"type": "string", "required": True},
            "subtitle": {"type": "string", "required": False},
            "buttonText": {"type": "string", "required": False},
            "height": {"type": "number", "required": True},
            "alignment": {"type": "string", "required": False},
        },
        "style": [
            "backgroundColor", "borderRadius", "margin", "gradient",
            "titleSize", "subtitleSize", "contentPadding",
        ],
    },
    "animated_banner": {
        "id": "promo.animated_banner",
        "name": "animated_banner",
        "category": "promo",
        "props": {
            "title": {"type": "string", "required": True},
            "subtitle": {"type": "string", "required": False},
            "buttonText": {"type": "string", "required": False},
            "height": {"type": "number", "required": True},
            "duration": {"type": "number", "required": False},
        },
        "style": ["backgroundColor", "borderRadius", "margin", "gradient", "titleSize", "subtitleSize"],
    },
    "search_bar": {
        "id": "input.search_bar",
        "name": "search_bar",
        "category": "input",
        "aliases": ["search"],
        "props": {
            "placeholder": {"type": "string", "required": False},
            "showFilter": {"type": "boolean", "required": False},
        },
        "style": ["margin", "backgroundColor", "borderRadius"],
    },
    "story_circle": {
        "id": "media.story_circle",
        "name": "story_circle",
        "category": "media",
        "aliases": ["stories"],
        "props": {"stories": {"type": "array", "required": True}},
        "style": ["padding"],
    },
    "category_chips": {
        "id": "input.category_chips",
        "name": "category_chips",
        "category": "input",
        "aliases": ["chips"],
        "props": {
            "categories": {"type": "array", "required": True},
            "selectedId": {"type": "string", "required": False},
        },
        "style": ["padding", "selectedColor"],
    },
    "horizontal_list": {
        "id": "collection.horizontal_list",
        "name": "horizontal_list",
        "category": "collection",
        "props": {
            "items": {"type": "array", "required": True},
            "height": {"type": "number", "required": True},
            "itemWidth": {"type": "number", "required": True},
        },
        "style": ["padding", "spacing"],
    },
    "product_grid": {
        "id": "collection.product_grid",
        "name": "product_grid",
        "category": "collection",
        "aliases": ["grid"],
        "props": {
            "products": {"type": "array", "required": True},
            "columns": {"type": "number", "required": True},
            "spacing": {"type": "number", "required": False},
            "aspectRatio": {"type": "number", "required": False},
        },
        "style": _CARD_STYLE,
    },
    "product_carousel": {
        "id": "collection.product_carousel",
        "name": "product_carousel",
        "category": "collection",
        "aliases": ["carousel"],
        "props": {
            "products": {"type": "array", "required": True},
            "height": {"type": "number", "required": True},
            "cardWidth": {"type": "number", "required": True},
        },
        "style": ["padding", "spacing"] + _CARD_STYLE,
    },
    "countdown_timer": {
        "id": "promo.countdown_timer",
        "name": "countdown_timer",
        "category": "promo",
        "aliases": ["countdown"],
        "props": {
            "label": {"type": "string", "required": True},
            "end_time": {"type": "string", "required": True},
            "showIcon": {"type": "boolean", "required": False},
        },
        "style": ["backgroundColor", "padding", "borderRadius", "fontSize", "gradient"],
    },
    "promo_badge": {
        "id": "promo.promo_badge",
        "name": "promo_badge",
        "category": "promo",
        "aliases": ["badge"],
        "props": {"text": {"type": "string", "required": True}},
        "style": ["backgroundColor", "paddingX", "paddingY", "borderRadius", "fontSize"],
    },
    "container": {
        "id": "layout.container",
        "name": "container",
        "category": "layout",
        "container": True,
        "aliases": ["box"],
        "props": {},
        "style": ["backgroundColor", "padding", "margin", "borderRadius", "borderColor", "borderWidth"],
    },
    "row": {
        "id": "layout.row",
        "name": "row",
        "category": "layout",
        "container": True,
        "props": {"alignment": {"type": "string", "required": False}},
        "style": ["padding"],
    },
    "rating": {
        "id": "display.rating",
        "name": "rating",
        "category": "display",
        "aliases": ["stars"],
        "props": {
            "rating": {"type": "number", "required": True},
            "maxStars": {"type": "number", "required": False},
            "showValue": {"type": "boolean", "required": False},
        },
        "style": ["size", "color"],
    },
    "button": {
        "id": "input.button",
        "name": "button",
        "category": "input",
        "props": {
            "label": {"type": "string", "required": True},
            "variant": {"type": "string", "required": False, "enum": ["primary", "secondary", "outline"]},
            "fullWidth": {"type": "boolean", "required": False},
            "icon": {"type": "string", "required": False},
        },
        "style": ["backgroundColor", "paddingY", "borderRadius", "margin"],
    },
    "avatar": {
        "id": "display.avatar",
        "name": "avatar",
        "category": "display",
        "props": {"name": {"type": "string", "required": True}},
        "style": ["size"],
    },
    "image": {
        "id": "media.image",
        "name": "image",
        "category": "media",
        "props": {"url": {"type": "string", "required": True}},
        "style": ["width", "height", "borderRadius", "fit"],
    },
    "testimonial_card": {
        "id": "display.testimonial_card",
        "name": "testimonial_card",
        "category": "display",
        "aliases": ["review"],
        "props": {
            "name": {"type": "string", "required": True},
            "subtitle": {"type": "string", "required": False},
            "text": {"type": "string", "required": True},
            "rating": {"type": "number", "required": False},
        },
        "style": ["margin"],
    },
}


def _build_alias_index() -> Dict[str, str]:
    aliases: Dict[str, str] = {}
    for canonical, definition in COMPONENT_DEFINITIONS.items():
        aliases[canonical.lower()] = canonical
        for alias in definition.get("aliases", []):
            aliases[alias.lower()] = canonical
    return aliases


_COMPONENT_ALIAS_INDEX = _build_alias_index()


def get_available_components() -> List[str]:
    return sorted(COMPONENT_DEFINITIONS.keys())


def normalize_component_type(component_type: str, fallback: str = "") -> str:
    if not component_type:
        return fallback
    normalized = component_type.strip()
    if not normalized:
        return fallback
    return _COMPONENT_ALIAS_INDEX.get(normalized.lower(), fallback)


def get_component_definition(component_name: str) -> Optional[ComponentDefinition]:
    canonical = normalize_component_type(component_name)
    if not canonical:
        return None
    return COMPONENT_DEFINITIONS.get(canonical)


def is_known_component(component_type: str) -> bool:
    return component_type in COMPONENT_DEFINITIONS


def is_container_component(component_type: str) -> bool:
    definition = COMPONENT_DEFINITIONS.get(component_type, {})
    return bool(definition.get("container", False))


def export_component_catalog() -> Dict[str, Any]:
    return {
        "components": deepcopy(COMPONENT_DEFINITIONS),
        "aliases": deepcopy(_COMPONENT_ALIAS_INDEX),
        "containers": sorted(name for name in COMPONENT_DEFINITIONS if is_container_component(name)),
    }
