"""
Navigation resolver: (route, mode) -> bottom navigation and screen chrome.

The tables below are static; only ``is_active`` depends on the request.
"""
from typing import Dict, List, NamedTuple, Tuple, Union

from sdui_service.models.schemas.core import HOME_ROUTE, Mode, NavigationState, NavItem
from sdui_service.services.mode_resolver import coerce_mode


class NavEntry(NamedTuple):
    id: str
    label: str
    icon: str
    route: str


CANONICAL_NAV: Dict[str, NavEntry] = {
    "home": NavEntry("nav-home", "Home", "home", "/"),
    "search": NavEntry("nav-search", "Search", "search", "/search"),
    "cart": NavEntry("nav-cart", "Cart", "cart", "/cart"),
    "favorites": NavEntry("nav-favorites", "Favorites", "favorite", "/favorites"),
    "profile": NavEntry("nav-profile", "Profile", "person", "/profile"),
}

DEFAULT_NAV_SET: Tuple[str, ...] = ("home", "search", "cart", "profile")

NAV_SETS: Dict[Mode, Tuple[str, ...]] = {
    Mode.LATE_NIGHT: ("home", "profile"),
    Mode.FLASH_SALE: ("home", "cart"),
    Mode.EVENING: ("home", "favorites", "profile"),
    Mode.NIGHT: ("home", "search", "favorites", "profile"),
}

LABEL_OVERRIDES: Dict[Mode, Dict[str, str]] = {
    Mode.FLASH_SALE: {"home": "Deals"},
    Mode.EVENING: {"home": "Discover", "favorites": "Saved", "profile": "You"},
    Mode.NIGHT: {"search": "Explore"},
}

SCREEN_TITLES: Dict[str, str] = {
    "/": "",
    "/search": "Search",
    "/cart": "Cart",
    "/favorites": "Favorites",
    "/profile": "Profile",
    "/product": "Product Details",
}


def normalize_route(route: str) -> str:
    """Canonical form of a requested screen route ("" and "home" are root)."""
    route = (route or "").strip()
    if len(route) > 1:
        route = route.rstrip("/") or HOME_ROUTE
    if route in ("", "home", HOME_ROUTE):
        return HOME_ROUTE
    return route


def navigation_for(route: str, mode: Union[Mode, str]) -> NavigationState:
    """
    Build the navigation state for a screen.

    Args:
        route: Requested screen route (normalized here)
        mode: Presentation mode; unknown modes use the default tab set

    Returns:
        NavigationState with the mode's tab subset, relabelled, and the
        current route's tab marked active
    """
    current = normalize_route(route)
    mode = coerce_mode(mode)
    overrides = LABEL_OVERRIDES.get(mode, {})

    items: List[NavItem] = []
    for key in NAV_SETS.get(mode, DEFAULT_NAV_SET):
        entry = CANONICAL_NAV[key]
        items.append(
            NavItem(
                id=entry.id,
                label=overrides.get(key, entry.label),
                icon=entry.icon,
                route=entry.route,
                is_active=entry.route == current,
            )
        )

    return NavigationState(
        bottom_nav=items,
        top_actions=[],
        show_back_button=current != HOME_ROUTE,
        title=SCREEN_TITLES.get(current, ""),
    )
