"""
Tests for screen composition
"""
from datetime import datetime, timezone

import pytest

from sdui_service.data.sample_products import CATALOG_PRODUCTS
from sdui_service.models.schemas.core import LayoutType, Mode, ScreenDescriptor
from sdui_service.services.composer import HOME_ROUTINES, ScreenComposer, flash_sale_remaining
from sdui_service.services.theme_palette import theme_for

ROUTES = ["/", "/product", "/cart", "/profile", "/search", "/favorites", "/unknown-route"]

HOME_COMPONENT_IDS = {
    Mode.LATE_NIGHT: ["night-message", "spacer", "minimal-products"],
    Mode.MORNING: [
        "morning-greeting", "search", "morning-stories", "morning-deals",
        "categories", "featured-products", "review",
    ],
    Mode.DAY: ["header", "promo-banner", "products"],
    Mode.FLASH_SALE: ["flash-countdown", "promo-row", "flash-products", "urgency"],
    Mode.AFTERNOON: [
        "afternoon-header", "categories-horizontal", "afternoon-banner", "afternoon-products",
    ],
    Mode.EVENING: ["evening-header", "evening-banner", "featured-carousel", "evening-grid"],
    Mode.NIGHT: ["night-hero", "spacer", "night-products"],
}


def find(descriptor: ScreenDescriptor, node_id: str):
    for component in descriptor.components:
        for node in component.walk():
            if node.id == node_id:
                return node
    raise AssertionError(f"no node {node_id!r}")


def depth(node) -> int:
    return 1 + max((depth(child) for child in node.children or []), default=0)


def product(product_id: str):
    return next(p for p in CATALOG_PRODUCTS if p.id == product_id)


class TestHomeScreen:

    def test_home_routines_cover_every_mode(self):
        assert set(HOME_ROUTINES) == set(Mode)

    @pytest.mark.parametrize("mode", list(Mode))
    def test_arrangement_per_mode(self, composer, mode):
        descriptor = composer.compose("/", mode)
        assert descriptor.screen_id == "home"
        assert descriptor.layout_type == LayoutType.SCROLL
        assert [c.id for c in descriptor.components] == HOME_COMPONENT_IDS[mode]
        assert descriptor.theme == theme_for(mode)
        assert descriptor.metadata.mode == mode
        assert descriptor.navigation.active_item.route == "/"
        assert descriptor.navigation.show_back_button is False

    def test_flash_sale_navigation(self, composer):
        nav = composer.compose("/", Mode.FLASH_SALE).navigation
        assert [item.label for item in nav.bottom_nav] == ["Deals", "Cart"]
        assert [item.is_active for item in nav.bottom_nav] == [True, False]

    def test_unknown_route_renders_home(self, composer):
        assert composer.compose("/unknown-route", Mode.DAY) == composer.compose("/", Mode.DAY)

    @pytest.mark.parametrize("route", ["", "home", "/"])
    def test_home_aliases(self, composer, route):
        assert composer.compose(route, Mode.NIGHT).to_json() == composer.compose("/", Mode.NIGHT).to_json()

    def test_unknown_mode_renders_day(self, composer):
        descriptor = composer.compose("/", "weekend")
        assert descriptor.metadata.mode == Mode.DAY
        assert descriptor.components == composer.compose("/", Mode.DAY).components

    def test_late_night_styling(self, composer):
        descriptor = composer.compose("/", Mode.LATE_NIGHT)
        header = find(descriptor, "night-message")
        assert header.props["title"] == "Still browsing?"
        assert header.style["backgroundColor"] == "#1A1A1A"
        grid = find(descriptor, "minimal-products")
        assert grid.props["columns"] == 1
        assert grid.style["showRating"] is False
        assert len(grid.props["products"]) == 3

    def test_morning_banner_navigates_to_deals(self, composer):
        banner = find(composer.compose("/", Mode.MORNING), "morning-deals")
        assert banner.action == {"type": "navigate", "route": "/deals"}
        assert banner.style["gradient"] == {"colors": ["#FF9800", "#FFC107"]}
        assert banner.style["backgroundColor"] == "#FF9800"

    def test_day_grid_uses_theme_defaults(self, composer):
        grid = find(composer.compose("/", Mode.DAY), "products")
        assert grid.props["spacing"] == 16.0
        assert grid.props["aspectRatio"] == 0.75
        assert grid.style["priceColor"] == "#2C3E50"
        assert grid.style["priceSize"] == 18.0

    def test_flash_sale_badges(self, composer):
        row = find(composer.compose("/", Mode.FLASH_SALE), "promo-row")
        assert [child.props["text"] for child in row.children] == ["UP TO 70% OFF", "FREE SHIPPING"]
        assert row.children[1].style["backgroundColor"] == "#4CAF50"

    def test_evening_banner_is_animated(self, composer):
        banner = find(composer.compose("/", Mode.EVENING), "evening-banner")
        assert banner.type == "animated_banner"
        assert banner.props["duration"] == 1000

    def test_night_prices_in_gold(self, composer):
        grid = find(composer.compose("/", Mode.NIGHT), "night-products")
        assert grid.style["priceColor"] == "#FFD700"


class TestFlashSaleCountdown:

    def test_countdown_in_descriptor(self, composer):
        timer = find(composer.compose("/", Mode.FLASH_SALE), "flash-countdown")
        assert timer.props["end_time"] == "1:12:23"

    @pytest.mark.parametrize("hour, minute, second, expected", [
        (12, 47, 37, "1:12:23"),
        (13, 59, 59, "0:00:01"),
        (12, 0, 0, "2:00:00"),
        (14, 0, 0, "2:00:00"),
        (9, 30, 0, "2:00:00"),
        (23, 0, 0, "2:00:00"),
    ])
    def test_remaining(self, hour, minute, second, expected):
        now = datetime(2025, 6, 2, hour, minute, second, tzinfo=timezone.utc)
        assert flash_sale_remaining(now) == expected


class TestSecondaryScreens:

    def test_profile_in_evening(self, composer):
        descriptor = composer.compose("/profile", Mode.EVENING)
        assert descriptor.screen_id == "profile"
        assert descriptor.navigation.title == "Profile"
        assert descriptor.navigation.show_back_button is True
        assert descriptor.navigation.active_item.label == "You"
        assert find(descriptor, "avatar").style == {"size": 100.0}

    def test_cart(self, composer):
        descriptor = composer.compose("/cart", Mode.DAY)
        assert descriptor.screen_id == "cart"
        assert find(descriptor, "cart-header").props["subtitle"] == "3 items"
        assert find(descriptor, "checkout-button").props["label"] == "Proceed to Checkout - $589.97"

    def test_search(self, composer):
        descriptor = composer.compose("/search", Mode.MORNING)
        assert find(descriptor, "search-input").props["placeholder"] == "Search products..."
        assert descriptor.navigation.title == "Search"

    def test_favorites_is_a_grid(self, composer):
        descriptor = composer.compose("/favorites", Mode.NIGHT)
        assert descriptor.layout_type == LayoutType.GRID
        assert len(find(descriptor, "favorites-grid").props["products"]) == 4

    def test_secondary_screens_use_mode_palette(self, composer):
        assert composer.compose("/cart", Mode.AFTERNOON).theme == theme_for(Mode.AFTERNOON)

    def test_editing_one_descriptor_theme_leaves_next_request_intact(self, composer):
        first = composer.compose("/", Mode.DAY)
        first.theme.font_sizes["headline"] = 1.0
        del first.theme.spacing["xl"]
        later = composer.compose("/cart", Mode.DAY)
        assert later.theme is not first.theme
        assert later.theme.font_sizes["headline"] == 32.0
        assert later.theme.spacing["xl"] == 32.0


class TestProductScreen:

    def test_catalog_product(self, composer):
        descriptor = composer.compose("/product", Mode.DAY, {"id": "prod_3"}, product=product("prod_3"))
        assert descriptor.screen_id == "product"
        assert descriptor.navigation.title == "Product Details"
        assert descriptor.navigation.active_item is None
        assert find(descriptor, "title").props["title"] == "Designer Sunglasses"
        assert find(descriptor, "price").props["title"] == "$159.99"
        assert find(descriptor, "discount-badge").props["text"] == "15% OFF"
        assert find(descriptor, "product-images").props["url"].startswith("https://images.unsplash.com/")

    def test_info_container_order(self, composer):
        descriptor = composer.compose("/product", Mode.DAY, product=product("prod_1"))
        info = find(descriptor, "product-info")
        assert [child.id for child in info.children] == ["title", "rating", "price", "buy-button"]
        assert find(descriptor, "rating").props["rating"] == 4.8

    def test_missing_product_uses_sentinel(self, composer):
        descriptor = composer.compose("/product", Mode.DAY, {"id": "prod_404"})
        assert find(descriptor, "title").props["title"] == "Unknown Product"
        assert find(descriptor, "price").props["title"] == "$99.99"
        assert find(descriptor, "product-images").props["url"].endswith("text=Product+prod_404")


class TestDescriptorInvariants:

    @pytest.mark.parametrize("mode", list(Mode))
    @pytest.mark.parametrize("route", ROUTES)
    def test_ids_unique_and_depth_bounded(self, composer, route, mode):
        descriptor = composer.compose(route, mode, {"id": "prod_8"})
        ids = descriptor.component_ids()
        assert len(ids) == len(set(ids))
        assert all(depth(component) <= 3 for component in descriptor.components)

    @pytest.mark.parametrize("mode", list(Mode))
    @pytest.mark.parametrize("route", ROUTES)
    def test_json_round_trip(self, composer, route, mode):
        descriptor = composer.compose(route, mode)
        assert ScreenDescriptor.model_validate_json(descriptor.to_json()) == descriptor

    def test_deterministic_output(self, fixed_now):
        first = ScreenComposer(clock=lambda: fixed_now).compose("/", Mode.MORNING)
        second = ScreenComposer(clock=lambda: fixed_now).compose("/", Mode.MORNING)
        assert first.to_json() == second.to_json()

    def test_explicit_now_overrides_clock(self, composer):
        later = datetime(2025, 6, 2, 21, 5, 0, tzinfo=timezone.utc)
        metadata = composer.compose("/", Mode.NIGHT, now=later).metadata
        assert metadata.timestamp == "2025-06-02T21:05:00Z"
        assert metadata.server_time == "9:05 PM"

    def test_metadata(self, composer):
        metadata = composer.compose("/", Mode.FLASH_SALE).metadata
        assert metadata.timestamp == "2025-06-02T12:47:37Z"
        assert metadata.server_time == "12:47 PM"
        assert metadata.version == "2.0.0"
        assert metadata.generated_by == "SDUI Engine"

    def test_wire_format_omits_absent_fields(self, composer):
        wire = composer.compose("/", Mode.FLASH_SALE).to_wire()
        countdown, row = wire["components"][0], wire["components"][1]
        assert "children" not in countdown
        assert "action" not in countdown
        assert len(row["children"]) == 2
        assert wire["metadata"]["mode"] == "flash_sale"
        assert wire["navigation"]["bottom_nav"][0]["is_active"] is True

    def test_user_id_does_not_change_output(self, composer):
        anonymous = composer.compose("/", Mode.DAY)
        known = composer.compose("/", Mode.DAY, user_id="user-42")
        assert anonymous == known

    def test_duplicate_ids_rejected(self, composer):
        descriptor = composer.compose("/", Mode.DAY)
        payload = descriptor.to_wire()
        payload["components"].append(payload["components"][0])
        with pytest.raises(ValueError, match="Duplicate component IDs"):
            ScreenDescriptor.model_validate(payload)
