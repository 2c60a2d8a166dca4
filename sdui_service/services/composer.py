"""
Screen composer: (route, mode, params) -> ScreenDescriptor.

Routes dispatch to one routine per screen; the home screen further
dispatches on Mode to one arrangement per presentation mode. Every routine
is pure given its inputs: the clock reading and the catalog product are
resolved by the caller and passed in.
"""
from datetime import datetime
from typing import Callable, List, Mapping, NamedTuple, Optional, Union

from sdui_service.config import settings
from sdui_service.data.sample_products import (
    AFTERNOON_CATEGORY_TILES,
    MORNING_CATEGORIES,
    MORNING_STORIES,
    listings_for,
    product_image_placeholder,
)
from sdui_service.models.schemas.core import (
    HOME_ROUTE,
    ComponentNode,
    LayoutType,
    Metadata,
    Mode,
    ScreenDescriptor,
    ThemeTokens,
)
from sdui_service.models.schemas.product import Product
from sdui_service.services import templates as t
from sdui_service.services.mode_resolver import coerce_mode
from sdui_service.services.navigation import navigation_for, normalize_route
from sdui_service.services.theme_palette import theme_for
from sdui_service.utils.datetime_utils import (
    format_duration,
    local_now,
    to_clock_string,
    to_iso_string,
)
from sdui_service.utils.logging import get_logger

logger = get_logger(__name__)

FLASH_SALE_END_HOUR = 14
FLASH_SALE_WINDOW_SECONDS = 2 * 60 * 60

CONFIRM_GREEN = "#4CAF50"

HomeRoutine = Callable[[ThemeTokens, datetime], List[ComponentNode]]


class ScreenBody(NamedTuple):
    screen_id: str
    layout_type: LayoutType
    components: List[ComponentNode]


def flash_sale_remaining(now: datetime) -> str:
    """
    Time left in the lunch-hour flash sale as ``H:MM:SS``.

    Outside the sale window (e.g. when the mode is pinned by configuration)
    the full two-hour window is shown.
    """
    end = now.replace(hour=FLASH_SALE_END_HOUR, minute=0, second=0, microsecond=0)
    remaining = int((end - now).total_seconds())
    if remaining <= 0 or remaining > FLASH_SALE_WINDOW_SECONDS:
        remaining = FLASH_SALE_WINDOW_SECONDS
    return format_duration(remaining)


# ============================================================================
# HOME ARRANGEMENTS
# ============================================================================

def _late_night_home(theme: ThemeTokens, now: datetime) -> List[ComponentNode]:
    """Calming message and a single column of products"""
    return [
        t.header(
            "night-message", "Still browsing?",
            theme=theme,
            subtitle="Here's what you might like",
            alignment="center",
            icon="star",
            style={
                "padding": 24.0,
                "color": "#FFFFFF",
                "backgroundColor": "#1A1A1A",
                "borderRadius": 12.0,
            },
        ),
        t.spacer("spacer", 20.0),
        t.product_grid(
            "minimal-products", listings_for(Mode.LATE_NIGHT),
            theme=theme,
            columns=1,
            spacing=20.0,
            aspect_ratio=1.5,
            style={
                "borderRadius": 12.0,
                "showDiscount": False,
                "showRating": False,
                "titleSize": 18.0,
                "priceSize": 20.0,
                "priceColor": "#FFFFFF",
                "elevation": 1.0,
            },
        ),
    ]


def _morning_home(theme: ThemeTokens, now: datetime) -> List[ComponentNode]:
    return [
        t.header(
            "morning-greeting", "Good Morning, People! ☀️",
            theme=theme,
            subtitle="Start your day with great finds",
            alignment="left",
            style={"padding": 20.0},
        ),
        t.search_bar(
            "search",
            theme=theme,
            placeholder="What are you looking for?",
            style={"borderRadius": 12.0},
        ),
        t.story_circle("morning-stories", MORNING_STORIES, theme=theme),
        t.banner(
            "morning-deals", "Early Bird Specials",
            theme=theme,
            subtitle="Extra 15% off before 9 AM",
            button_text="Shop Now",
            height=180.0,
            gradient=[theme.primary_color, theme.accent_color],
            action=t.navigate_action("/deals"),
            style={"backgroundColor": theme.primary_color},
        ),
        t.category_chips("categories", MORNING_CATEGORIES, theme=theme, selected_id="1"),
        t.product_carousel(
            "featured-products", listings_for(Mode.MORNING),
            theme=theme,
            height=320.0,
            card_width=200.0,
            style={"borderRadius": 12.0, "imageHeight": 180.0},
        ),
        t.testimonial_card(
            "review", "Sarah M.",
            "Love shopping here in the morning! The early bird deals are amazing "
            "and delivery is always on time.",
            theme=theme,
            subtitle="Verified Buyer",
            rating=5.0,
        ),
    ]


def _day_home(theme: ThemeTokens, now: datetime) -> List[ComponentNode]:
    return [
        t.header(
            "header", "Welcome Back",
            theme=theme,
            subtitle="What are you shopping for today?",
            alignment="left",
        ),
        t.banner(
            "promo-banner", "New Arrivals",
            theme=theme,
            subtitle="Fresh styles just in",
            height=200.0,
            alignment="centerLeft",
            style={"borderRadius": 16.0},
        ),
        t.product_grid("products", listings_for(Mode.DAY), theme=theme, columns=2),
    ]


def _flash_sale_home(theme: ThemeTokens, now: datetime) -> List[ComponentNode]:
    """Countdown, promo badges, dense grid and a low-stock notice"""
    urgency_text = t.header(
        "urgency-text", "⚠️ Limited Stock!",
        theme=theme,
        subtitle="Items selling fast. Don't miss out!",
        alignment="center",
        style={
            "fontSize": 16.0,
            "color": "#856404",
            "padding": 0.0,
            "subtitleSize": 13.0,
        },
    )
    return [
        t.countdown_timer(
            "flash-countdown", "⚡ FLASH SALE ENDS IN", flash_sale_remaining(now),
            theme=theme,
            style={"padding": 14.0},
        ),
        t.row(
            "promo-row",
            [
                t.promo_badge("badge1", "UP TO 70% OFF", theme=theme),
                t.promo_badge(
                    "badge2", "FREE SHIPPING",
                    theme=theme,
                    style={"backgroundColor": CONFIRM_GREEN},
                ),
            ],
            theme=theme,
        ),
        t.product_grid(
            "flash-products", listings_for(Mode.FLASH_SALE),
            theme=theme,
            columns=2,
            aspect_ratio=0.68,
            style={
                "imageHeight": 130.0,
                "showRating": False,
                "showFavorite": False,
                "titleSize": 13.0,
                "elevation": 1.0,
                "contentPadding": 8.0,
            },
        ),
        t.container(
            "urgency", [urgency_text],
            theme=theme,
            style={
                "backgroundColor": "#FFF3CD",
                "padding": 16.0,
                "borderColor": "#FFB800",
                "borderWidth": 2.0,
            },
        ),
    ]


def _afternoon_home(theme: ThemeTokens, now: datetime) -> List[ComponentNode]:
    return [
        t.header(
            "afternoon-header", "Discover Something New",
            theme=theme,
            subtitle="Curated picks just for you",
            alignment="left",
            style={"padding": 18.0},
        ),
        t.horizontal_list(
            "categories-horizontal", AFTERNOON_CATEGORY_TILES,
            theme=theme,
            height=140.0,
            item_width=130.0,
            style={"spacing": 12.0},
        ),
        t.banner(
            "afternoon-banner", "Midday Break Deals",
            theme=theme,
            subtitle="Take a break, save big",
            button_text="Browse Deals",
            height=200.0,
            alignment="center",
            style={"backgroundColor": theme.primary_color, "borderRadius": 14.0},
        ),
        t.product_grid(
            "afternoon-products", listings_for(Mode.AFTERNOON),
            theme=theme,
            columns=2,
            spacing=14.0,
            style={"titleSize": 17.0, "priceSize": 19.0},
        ),
    ]


def _evening_home(theme: ThemeTokens, now: datetime) -> List[ComponentNode]:
    listings = listings_for(Mode.EVENING)
    return [
        t.header(
            "evening-header", "Evening Selections",
            theme=theme,
            subtitle="Curated with care for tonight",
            alignment="center",
            icon="star",
            style={
                "padding": 20.0,
                "subtitleSize": 18.0,
                "subtitleColor": theme.accent_color,
                "subtitleSpacing": 10.0,
                "iconSize": 32.0,
                "letterSpacing": 0.5,
            },
        ),
        t.animated_banner(
            "evening-banner", "Sunset Collection",
            theme=theme,
            subtitle="Premium pieces for your evening",
            button_text="Explore",
            height=300.0,
            duration=1000,
            gradient=[theme.primary_color, theme.accent_color],
            style={
                "backgroundColor": theme.primary_color,
                "borderRadius": 18.0,
                "margin": 20.0,
                "titleSize": 32.0,
                "subtitleSize": 18.0,
            },
        ),
        t.product_carousel(
            "featured-carousel", listings,
            theme=theme,
            height=350.0,
            card_width=240.0,
            style={
                "padding": 20.0,
                "spacing": 16.0,
                "imageHeight": 220.0,
                "showDiscount": False,
                "titleSize": 19.0,
                "priceSize": 22.0,
                "elevation": 4.0,
                "contentPadding": 14.0,
            },
        ),
        t.product_grid(
            "evening-grid", listings,
            theme=theme,
            columns=2,
            aspect_ratio=0.8,
            style={
                "imageHeight": 220.0,
                "showDiscount": False,
                "titleSize": 18.0,
                "priceSize": 20.0,
                "elevation": 3.0,
                "contentPadding": 14.0,
            },
        ),
    ]


def _night_home(theme: ThemeTokens, now: datetime) -> List[ComponentNode]:
    """Boutique hero and large single-column cards"""
    return [
        t.banner(
            "night-hero", "Midnight Collection",
            theme=theme,
            subtitle="Curated elegance for the night",
            height=400.0,
            alignment="centerLeft",
            style={
                "backgroundColor": "#1A1A2E",
                "margin": 24.0,
                "titleSize": 40.0,
                "subtitleSize": 20.0,
                "contentPadding": 32.0,
            },
        ),
        t.spacer("spacer", 32.0),
        t.product_grid(
            "night-products", listings_for(Mode.NIGHT),
            theme=theme,
            columns=1,
            spacing=24.0,
            aspect_ratio=1.2,
            style={
                "imageHeight": 300.0,
                "showDiscount": False,
                "showRating": False,
                "titleSize": 24.0,
                "priceSize": 28.0,
                "contentPadding": 16.0,
            },
        ),
    ]


HOME_ROUTINES: Mapping[Mode, HomeRoutine] = {
    Mode.LATE_NIGHT: _late_night_home,
    Mode.MORNING: _morning_home,
    Mode.DAY: _day_home,
    Mode.FLASH_SALE: _flash_sale_home,
    Mode.AFTERNOON: _afternoon_home,
    Mode.EVENING: _evening_home,
    Mode.NIGHT: _night_home,
}


# ============================================================================
# COMPOSER
# ============================================================================

class ScreenComposer:
    """
    Assembles complete screen descriptors.

    Args:
        clock: Zero-argument callable used when ``compose`` gets no ``now``
        version: UI schema version stamped into metadata
        generated_by: Generator name stamped into metadata
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = local_now,
        version: Optional[str] = None,
        generated_by: Optional[str] = None,
    ):
        self.clock = clock
        self.version = version or settings.ui_schema_version
        self.generated_by = generated_by or settings.generated_by
        self._screens = {
            HOME_ROUTE: self._home,
            "/product": self._product,
            "/cart": self._cart,
            "/profile": self._profile,
            "/search": self._search,
            "/favorites": self._favorites,
        }

    def compose(
        self,
        route: str,
        mode: Union[Mode, str],
        params: Optional[Mapping[str, str]] = None,
        *,
        now: Optional[datetime] = None,
        user_id: Optional[str] = None,
        product: Optional[Product] = None,
    ) -> ScreenDescriptor:
        """
        Build the descriptor for one screen.

        Args:
            route: Requested screen route; unknown routes render home
            mode: Presentation mode; unknown values render as day
            params: Screen parameters (``id`` for the product screen)
            now: Local time the descriptor is generated for
            user_id: Requesting user, carried for logging only
            product: Catalog entry for the product screen

        Returns:
            ScreenDescriptor
        """
        mode = coerce_mode(mode)
        now = now or self.clock()
        params = dict(params or {})
        theme = theme_for(mode)

        current = normalize_route(route)
        build = self._screens.get(current)
        if build is None:
            logger.debug(
                "composer.route.fallback",
                extra={"route": route, "fallback": HOME_ROUTE, "user_id": user_id}
            )
            current, build = HOME_ROUTE, self._home

        body = build(mode, theme, params, now, product)

        return ScreenDescriptor(
            screen_id=body.screen_id,
            layout_type=body.layout_type,
            theme=theme,
            components=body.components,
            navigation=navigation_for(current, mode),
            metadata=self._metadata(mode, now),
        )

    def _metadata(self, mode: Mode, now: datetime) -> Metadata:
        return Metadata(
            mode=mode,
            timestamp=to_iso_string(now),
            server_time=to_clock_string(now),
            version=self.version,
            generated_by=self.generated_by,
        )

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def _home(self, mode, theme, params, now, product) -> ScreenBody:
        routine = HOME_ROUTINES.get(mode, _day_home)
        logger.debug(
            "composer.home.dispatched",
            extra={"mode": mode.value, "routine": routine.__name__}
        )
        return ScreenBody("home", LayoutType.SCROLL, routine(theme, now))

    def _product(self, mode, theme, params, now, product) -> ScreenBody:
        if product is None:
            product = Product.not_found(params.get("id", ""))

        details: List[ComponentNode] = [
            t.header(
                "title", product.name,
                theme=theme,
                subtitle=product.description or None,
                style={"fontSize": 28.0, "padding": 0.0},
            ),
            t.rating("rating", 4.8, theme=theme, style={"size": 20.0}),
            t.header(
                "price", f"${product.price:.2f}",
                theme=theme,
                style={
                    "fontSize": 36.0,
                    "fontWeight": "bold",
                    "color": "#2C3E50",
                    "padding": 8.0,
                },
            ),
        ]
        if product.discount:
            details.append(
                t.promo_badge("discount-badge", f"{product.discount}% OFF", theme=theme)
            )
        details.append(
            t.button(
                "buy-button", "Add to Cart",
                theme=theme,
                icon="cart",
                style={
                    "backgroundColor": CONFIRM_GREEN,
                    "paddingY": 18.0,
                    "borderRadius": 12.0,
                    "margin": 16.0,
                },
            )
        )

        components = [
            t.image(
                "product-images",
                product.image_url or product_image_placeholder(product.id),
                width=400.0,
                height=500.0,
            ),
            t.container(
                "product-info", details,
                theme=theme,
                style={
                    "padding": 24.0,
                    "margin": 0.0,
                    "borderRadius": 0.0,
                    "backgroundColor": "#FFFFFF",
                },
            ),
        ]
        return ScreenBody("product", LayoutType.SCROLL, components)

    def _cart(self, mode, theme, params, now, product) -> ScreenBody:
        components = [
            t.header("cart-header", "Shopping Cart", theme=theme, subtitle="3 items"),
            t.button(
                "checkout-button", "Proceed to Checkout - $589.97",
                theme=theme,
                style={"backgroundColor": CONFIRM_GREEN, "margin": 16.0},
            ),
        ]
        return ScreenBody("cart", LayoutType.SCROLL, components)

    def _search(self, mode, theme, params, now, product) -> ScreenBody:
        components = [
            t.search_bar("search-input", theme=theme, placeholder="Search products..."),
        ]
        return ScreenBody("search", LayoutType.SCROLL, components)

    def _favorites(self, mode, theme, params, now, product) -> ScreenBody:
        components = [
            t.product_grid("favorites-grid", listings_for(Mode.DAY), theme=theme, columns=2),
        ]
        return ScreenBody("favorites", LayoutType.GRID, components)

    def _profile(self, mode, theme, params, now, product) -> ScreenBody:
        return ScreenBody("profile", LayoutType.SCROLL, [t.avatar("avatar", "John Doe", size=100.0)])
