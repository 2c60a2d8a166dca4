"""
Component template library.

One builder per component type. Builders are pure: every input is an
explicit parameter, default styling is derived from the ThemeTokens they are
handed, and caller overrides are merged on top. Prop values are passed
through untouched; the rendering client is the final judge of them.
"""
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sdui_service.models.schemas.component_catalog import is_known_component
from sdui_service.models.schemas.core import ComponentNode, ThemeTokens
from sdui_service.models.schemas.product import ProductCard
from sdui_service.utils.logging import get_logger

logger = get_logger(__name__)

Style = Optional[Dict[str, Any]]


# ============================================================================
# NODE ASSEMBLY
# ============================================================================

def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset optional props"""
    return {key: value for key, value in values.items() if value is not None}


def _styled(defaults: Dict[str, Any], overrides: Style) -> Dict[str, Any]:
    merged = dict(defaults)
    if overrides:
        merged.update(overrides)
    return merged


def _node(
    component_type: str,
    node_id: str,
    props: Optional[Dict[str, Any]] = None,
    style: Optional[Dict[str, Any]] = None,
    children: Optional[Iterable[ComponentNode]] = None,
    action: Optional[Dict[str, Any]] = None,
) -> ComponentNode:
    if not is_known_component(component_type):
        logger.warning(
            "templates.component.unknown_type",
            extra={"component_type": component_type, "node_id": node_id}
        )
    return ComponentNode(
        id=node_id,
        type=component_type,
        props=_compact(props or {}),
        style=dict(style or {}),
        children=list(children) if children is not None else None,
        action=action,
    )


def _gradient(colors: Optional[Sequence[str]]) -> Optional[Dict[str, List[str]]]:
    return {"colors": list(colors)} if colors else None


def _surface(theme: ThemeTokens) -> str:
    return "#1A1A1A" if theme.is_dark_mode else "#FFFFFF"


def _price_color(theme: ThemeTokens) -> str:
    return theme.accent_color if theme.is_dark_mode else theme.primary_color


def navigate_action(route: str) -> Dict[str, str]:
    return {"type": "navigate", "route": route}


# ============================================================================
# TEXT & LAYOUT
# ============================================================================

def header(
    node_id: str,
    title: str,
    *,
    theme: ThemeTokens,
    subtitle: Optional[str] = None,
    alignment: Optional[str] = None,
    icon: Optional[str] = None,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "padding": theme.spacing["md"],
        "fontSize": theme.font_sizes["headline"],
        "color": theme.primary_color,
    }
    return _node(
        "header",
        node_id,
        props={
            "title": title,
            "subtitle": subtitle,
            "alignment": alignment,
            "showIcon": True if icon else None,
            "icon": icon,
        },
        style=_styled(defaults, style),
    )


def spacer(node_id: str, height: float) -> ComponentNode:
    return _node("spacer", node_id, props={"height": height})


def container(
    node_id: str,
    children: Sequence[ComponentNode],
    *,
    theme: ThemeTokens,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "padding": theme.spacing["md"],
        "margin": theme.spacing["md"],
        "borderRadius": theme.border_radius,
    }
    return _node("container", node_id, style=_styled(defaults, style), children=children)


def row(
    node_id: str,
    children: Sequence[ComponentNode],
    *,
    theme: ThemeTokens,
    alignment: str = "spaceEvenly",
    style: Style = None,
) -> ComponentNode:
    defaults = {"padding": theme.spacing["lg"]}
    return _node(
        "row",
        node_id,
        props={"alignment": alignment},
        style=_styled(defaults, style),
        children=children,
    )


# ============================================================================
# PROMOTION
# ============================================================================

def _banner(
    component_type: str,
    node_id: str,
    title: str,
    theme: ThemeTokens,
    props: Dict[str, Any],
    gradient: Optional[Sequence[str]],
    action: Optional[Dict[str, Any]],
    style: Style,
) -> ComponentNode:
    defaults = _compact({
        "backgroundColor": theme.accent_color,
        "borderRadius": theme.border_radius,
        "margin": theme.spacing["md"],
        "gradient": _gradient(gradient),
    })
    return _node(
        component_type,
        node_id,
        props={"title": title, **props},
        style=_styled(defaults, style),
        action=action,
    )


def banner(
    node_id: str,
    title: str,
    *,
    theme: ThemeTokens,
    subtitle: Optional[str] = None,
    button_text: Optional[str] = None,
    height: float = 200.0,
    alignment: Optional[str] = None,
    gradient: Optional[Sequence[str]] = None,
    action: Optional[Dict[str, Any]] = None,
    style: Style = None,
) -> ComponentNode:
    props = {
        "subtitle": subtitle,
        "buttonText": button_text,
        "height": height,
        "alignment": alignment,
    }
    return _banner("banner", node_id, title, theme, props, gradient, action, style)


def animated_banner(
    node_id: str,
    title: str,
    *,
    theme: ThemeTokens,
    subtitle: Optional[str] = None,
    button_text: Optional[str] = None,
    height: float = 300.0,
    duration: int = 1000,
    gradient: Optional[Sequence[str]] = None,
    action: Optional[Dict[str, Any]] = None,
    style: Style = None,
) -> ComponentNode:
    props = {
        "subtitle": subtitle,
        "buttonText": button_text,
        "height": height,
        "duration": duration,
    }
    return _banner("animated_banner", node_id, title, theme, props, gradient, action, style)


def countdown_timer(
    node_id: str,
    label: str,
    end_time: str,
    *,
    theme: ThemeTokens,
    show_icon: bool = True,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "backgroundColor": theme.primary_color,
        "padding": theme.spacing["md"],
        "borderRadius": 0.0,
        "fontSize": theme.font_sizes["title"],
        "gradient": _gradient([theme.primary_color, theme.accent_color]),
    }
    return _node(
        "countdown_timer",
        node_id,
        props={"label": label, "end_time": end_time, "showIcon": show_icon},
        style=_styled(defaults, style),
    )


def promo_badge(
    node_id: str,
    text: str,
    *,
    theme: ThemeTokens,
    style: Style = None,
) -> ComponentNode:
    # pill shape
    defaults = {
        "backgroundColor": theme.primary_color,
        "paddingX": theme.spacing["xl"],
        "paddingY": theme.spacing["md"],
        "borderRadius": 20.0,
        "fontSize": theme.font_sizes["caption"] + 1,
    }
    return _node("promo_badge", node_id, props={"text": text}, style=_styled(defaults, style))


# ============================================================================
# DISCOVERY
# ============================================================================

def search_bar(
    node_id: str,
    *,
    theme: ThemeTokens,
    placeholder: str = "Search products...",
    show_filter: bool = True,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "margin": theme.spacing["md"],
        "backgroundColor": _surface(theme),
        "borderRadius": theme.border_radius,
    }
    return _node(
        "search_bar",
        node_id,
        props={"placeholder": placeholder, "showFilter": show_filter},
        style=_styled(defaults, style),
    )


def story_circle(
    node_id: str,
    stories: Sequence[Dict[str, Any]],
    *,
    theme: ThemeTokens,
    style: Style = None,
) -> ComponentNode:
    defaults = {"padding": theme.spacing["md"]}
    return _node(
        "story_circle",
        node_id,
        props={"stories": [dict(story) for story in stories]},
        style=_styled(defaults, style),
    )


def category_chips(
    node_id: str,
    categories: Sequence[Dict[str, Any]],
    *,
    theme: ThemeTokens,
    selected_id: Optional[str] = None,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "padding": theme.spacing["md"],
        "selectedColor": theme.primary_color,
    }
    return _node(
        "category_chips",
        node_id,
        props={
            "categories": [dict(category) for category in categories],
            "selectedId": selected_id,
        },
        style=_styled(defaults, style),
    )


def horizontal_list(
    node_id: str,
    items: Sequence[Dict[str, Any]],
    *,
    theme: ThemeTokens,
    height: float,
    item_width: float,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "padding": theme.spacing["md"],
        "spacing": theme.spacing["sm"],
    }
    return _node(
        "horizontal_list",
        node_id,
        props={
            "height": height,
            "itemWidth": item_width,
            "items": [dict(item) for item in items],
        },
        style=_styled(defaults, style),
    )


# ============================================================================
# PRODUCT COLLECTIONS
# ============================================================================

def _card_style(theme: ThemeTokens) -> Dict[str, Any]:
    """Default styling shared by product cards in grids and carousels"""
    return {
        "imageHeight": 200.0,
        "borderRadius": theme.border_radius,
        "showDiscount": True,
        "showRating": True,
        "showFavorite": True,
        "titleSize": theme.font_sizes["body"],
        "priceSize": theme.font_sizes["body"] + 2,
        "priceColor": _price_color(theme),
        "elevation": 2.0,
        "contentPadding": 12.0,
    }


def product_grid(
    node_id: str,
    products: Sequence[ProductCard],
    *,
    theme: ThemeTokens,
    columns: int = 2,
    spacing: Optional[float] = None,
    aspect_ratio: float = 0.75,
    style: Style = None,
) -> ComponentNode:
    return _node(
        "product_grid",
        node_id,
        props={
            "columns": columns,
            "spacing": spacing if spacing is not None else theme.spacing["md"],
            "aspectRatio": aspect_ratio,
            "products": [product.to_props() for product in products],
        },
        style=_styled(_card_style(theme), style),
    )


def product_carousel(
    node_id: str,
    products: Sequence[ProductCard],
    *,
    theme: ThemeTokens,
    height: float = 320.0,
    card_width: float = 200.0,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "padding": theme.spacing["md"],
        "spacing": theme.spacing["md"] - theme.spacing["xs"],
        **_card_style(theme),
    }
    return _node(
        "product_carousel",
        node_id,
        props={
            "products": [product.to_props() for product in products],
            "height": height,
            "cardWidth": card_width,
        },
        style=_styled(defaults, style),
    )


# ============================================================================
# DETAIL WIDGETS
# ============================================================================

def image(
    node_id: str,
    url: str,
    *,
    width: float,
    height: float,
    fit: str = "cover",
    style: Style = None,
) -> ComponentNode:
    defaults = {"width": width, "height": height, "borderRadius": 0.0, "fit": fit}
    return _node("image", node_id, props={"url": url}, style=_styled(defaults, style))


def rating(
    node_id: str,
    value: float,
    *,
    theme: ThemeTokens,
    max_stars: int = 5,
    show_value: bool = True,
    style: Style = None,
) -> ComponentNode:
    defaults = {"size": theme.font_sizes["title"], "color": "#FFD700"}
    return _node(
        "rating",
        node_id,
        props={"rating": value, "maxStars": max_stars, "showValue": show_value},
        style=_styled(defaults, style),
    )


def button(
    node_id: str,
    label: str,
    *,
    theme: ThemeTokens,
    variant: str = "primary",
    full_width: bool = True,
    icon: Optional[str] = None,
    action: Optional[Dict[str, Any]] = None,
    style: Style = None,
) -> ComponentNode:
    defaults = {
        "backgroundColor": theme.primary_color,
        "borderRadius": theme.border_radius,
        "margin": theme.spacing["md"],
    }
    return _node(
        "button",
        node_id,
        props={"label": label, "variant": variant, "fullWidth": full_width, "icon": icon},
        style=_styled(defaults, style),
        action=action,
    )


def avatar(node_id: str, name: str, *, size: float = 100.0, style: Style = None) -> ComponentNode:
    return _node("avatar", node_id, props={"name": name}, style=_styled({"size": size}, style))


def testimonial_card(
    node_id: str,
    name: str,
    text: str,
    *,
    theme: ThemeTokens,
    subtitle: Optional[str] = None,
    rating: Optional[float] = None,
    style: Style = None,
) -> ComponentNode:
    defaults = {"margin": theme.spacing["md"]}
    return _node(
        "testimonial_card",
        node_id,
        props={"name": name, "subtitle": subtitle, "text": text, "rating": rating},
        style=_styled(defaults, style),
    )
